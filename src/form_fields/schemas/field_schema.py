"""
Field schema models.

A schema describes exactly one form field. The `type` key selects one model
from a closed set (`FIELD_TYPES`); each model only carries the keys that make
sense for that kind of field, so e.g. `multiple` exists on selects only.

Unrecognized keys are kept verbatim and exposed as `extra_attributes` so the
host can forward them onto the concrete input/select/textarea element.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from form_fields.errors import (
    EmptySchemaError,
    InvalidFieldSchema,
    MissingRequiredField,
    UnsupportedFieldType,
)


class FieldBase(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    # Recognized schema keys. Whichever variant receives them, they are never
    # forwarded as element attributes.
    RESERVED_EXTRA_KEYS: ClassVar[FrozenSet[str]] = frozenset(
        {
            "type",
            "name",
            "label",
            "key",
            "value",
            "defaultValue",
            "availableValues",
            "available_values",
            "multiple",
            "includeBlank",
            "include_blank",
        }
    )

    type: str
    name: str = Field(..., min_length=1, description="Field name; also the default key")
    label: Union[str, bool, None] = None
    key: Optional[str] = Field(default=None, description="Identifier base; defaults to `name`")
    value: Any = None

    @model_validator(mode="before")
    @classmethod
    def _accept_default_value_alias(cls, data: Any) -> Any:
        """
        Older schemas name the selection `defaultValue`.

        Merge rule: `value` wins when both are present; `defaultValue` is used
        only when `value` is missing. The alias is never kept as an extra.
        """
        if not isinstance(data, dict) or "defaultValue" not in data:
            return data
        out = dict(data)
        legacy = out.pop("defaultValue")
        if "value" not in out:
            out["value"] = legacy
        return out

    @property
    def base_key(self) -> str:
        return self.key or self.name

    @property
    def label_text(self) -> str:
        # `False`, `None`, `""` and non-string labels all render empty.
        if isinstance(self.label, str):
            return self.label
        return ""

    @property
    def extra_attributes(self) -> Dict[str, Any]:
        extra = self.model_extra or {}
        return {k: v for k, v in extra.items() if k not in self.RESERVED_EXTRA_KEYS}


class TextField(FieldBase):
    type: Literal["text"] = "text"


class TextareaField(FieldBase):
    type: Literal["textarea"] = "textarea"


class ChoiceFieldBase(FieldBase):
    available_values: List[Any] = Field(..., alias="availableValues", min_length=1)

    def allows_multiple(self) -> bool:
        return False


class SelectField(ChoiceFieldBase):
    type: Literal["select"] = "select"
    multiple: bool = False
    include_blank: Union[bool, str, None] = Field(default=None, alias="includeBlank")

    def allows_multiple(self) -> bool:
        return bool(self.multiple)


class RadioField(ChoiceFieldBase):
    type: Literal["radio"] = "radio"

    def allows_multiple(self) -> bool:
        return False


class CheckboxField(ChoiceFieldBase):
    type: Literal["checkbox"] = "checkbox"

    def allows_multiple(self) -> bool:
        return True


FieldSchema = Union[TextField, TextareaField, SelectField, RadioField, CheckboxField]

FIELD_TYPES: Dict[str, Type[FieldBase]] = {
    "text": TextField,
    "textarea": TextareaField,
    "select": SelectField,
    "radio": RadioField,
    "checkbox": CheckboxField,
}

CHOICE_FIELD_TYPES: FrozenSet[str] = frozenset({"select", "radio", "checkbox"})


def _raw_name(raw: Mapping[str, Any]) -> Optional[str]:
    name = raw.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return None


def parse_field_schema(raw: Union[Mapping[str, Any], FieldBase]) -> FieldSchema:
    """
    Validate a raw schema mapping into its typed model.

    Raises:
        MissingRequiredField: `name` or `type` is absent.
        UnsupportedFieldType: `type` is not one of `FIELD_TYPES`.
        EmptySchemaError: a select/radio/checkbox has no `availableValues`.
        InvalidFieldSchema: any other validation failure.
    """
    if isinstance(raw, FieldBase):
        registered = FIELD_TYPES.get(raw.type)
        if registered is not None and isinstance(raw, registered):
            return raw  # type: ignore[return-value]
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        raise InvalidFieldSchema(f"Schema must be a mapping, got {type(raw).__name__}")

    name = _raw_name(raw)
    if name is None:
        raise MissingRequiredField("name")

    field_type = raw.get("type")
    if field_type is None or field_type == "":
        raise MissingRequiredField("type", field_name=name)
    model_cls = FIELD_TYPES.get(field_type) if isinstance(field_type, str) else None
    if model_cls is None:
        raise UnsupportedFieldType(field_type, field_name=name)

    if field_type in CHOICE_FIELD_TYPES:
        available = raw.get("availableValues")
        if available is None:
            available = raw.get("available_values")
        if available is None or (isinstance(available, (list, tuple)) and not available):
            raise EmptySchemaError(
                f"`availableValues` is required and must be non-empty for {field_type} fields",
                field_name=name,
            )

    try:
        return model_cls.model_validate(dict(raw))  # type: ignore[return-value]
    except ValidationError as exc:
        raise InvalidFieldSchema(
            f"Schema for `{name}` did not validate",
            field_name=name,
            details=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc


__all__ = [
    "FieldBase",
    "TextField",
    "TextareaField",
    "ChoiceFieldBase",
    "SelectField",
    "RadioField",
    "CheckboxField",
    "FieldSchema",
    "FIELD_TYPES",
    "CHOICE_FIELD_TYPES",
    "parse_field_schema",
]
