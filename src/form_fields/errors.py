"""
Error taxonomy for schema-driven field rendering.

Every error carries a stable machine `code` so the HTTP layer can map it to a
response envelope without string matching on messages.
"""

from __future__ import annotations

from typing import Any, Optional


class FieldSchemaError(ValueError):
    code = "field_schema_error"

    def __init__(self, message: str, *, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field_name = field_name

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.field_name:
            out["field"] = self.field_name
        return out


class InvalidChoiceShape(FieldSchemaError):
    """A choice entry is neither a bare scalar nor a 2/3-element sequence."""

    code = "invalid_choice_shape"

    def __init__(self, index: int, entry: Any, *, field_name: Optional[str] = None) -> None:
        if isinstance(entry, (list, tuple)):
            shape = f"sequence of length {len(entry)}"
        else:
            shape = type(entry).__name__
        super().__init__(
            f"availableValues[{index}] must be a scalar or a (value, text[, selected]) sequence, got {shape}",
            field_name=field_name,
        )
        self.index = index
        self.entry = entry


class EmptySchemaError(FieldSchemaError):
    code = "empty_schema"


class UnsupportedFieldType(FieldSchemaError):
    code = "unsupported_field_type"

    def __init__(self, field_type: Any, *, field_name: Optional[str] = None) -> None:
        super().__init__(f"Unsupported field type: {field_type!r}", field_name=field_name)
        self.field_type = field_type


class MissingRequiredField(FieldSchemaError):
    code = "missing_required_field"

    def __init__(self, missing: str, *, field_name: Optional[str] = None) -> None:
        super().__init__(f"Schema is missing required field `{missing}`", field_name=field_name)
        self.missing = missing


class InvalidFieldSchema(FieldSchemaError):
    code = "invalid_field_schema"

    def __init__(self, message: str, *, field_name: Optional[str] = None, details: Any = None) -> None:
        super().__init__(message, field_name=field_name)
        self.details = details or []

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        if self.details:
            out["details"] = self.details
        return out


__all__ = [
    "FieldSchemaError",
    "InvalidChoiceShape",
    "EmptySchemaError",
    "UnsupportedFieldType",
    "MissingRequiredField",
    "InvalidFieldSchema",
]
