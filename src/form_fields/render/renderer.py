"""
Field renderer: schema in, abstract element tree out.

Each supported field type maps to one assembler. Rendering is a pure function
of the schema; nothing is cached and the input is never modified, so two calls
with equal schemas produce equal trees.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from form_fields import keys
from form_fields.errors import UnsupportedFieldType
from form_fields.options.choices import normalize_choices
from form_fields.options.selection import resolve_choices
from form_fields.render.tags import (
    choice_item_tags,
    fieldset_tag,
    input_tag,
    label_tag,
    legend_tag,
    make_select,
    textarea_tag,
)
from form_fields.schemas.elements import Element
from form_fields.schemas.field_schema import (
    ChoiceFieldBase,
    FieldBase,
    SelectField,
    TextareaField,
    TextField,
    parse_field_schema,
)

logger = logging.getLogger(__name__)


def _render_text(schema: TextField) -> Element:
    key = keys.base_key(schema)
    el = input_tag("text", schema.name, schema.value, key=key, extra=schema.extra_attributes)
    return label_tag(schema.label_text, keys.label_key(key), el)


def _render_textarea(schema: TextareaField) -> Element:
    key = keys.base_key(schema)
    el = textarea_tag(schema.name, schema.value, key=key, extra=schema.extra_attributes)
    return label_tag(schema.label_text, keys.label_key(key), el)


def _render_select(schema: SelectField) -> Element:
    key = keys.base_key(schema)
    select = make_select(
        schema.name,
        schema.available_values,
        schema.value,
        key=key,
        multiple=schema.allows_multiple(),
        include_blank=schema.include_blank,
        extra=schema.extra_attributes,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "rendered select key=%s options=%d selected=%r",
            key,
            len(select.children),
            select.attrs.get("value"),
        )
    return label_tag(schema.label_text, keys.label_key(key), select)


def _render_choice_group(schema: ChoiceFieldBase) -> Element:
    # Blank injection only applies to selects.
    key = keys.base_key(schema)
    choices = normalize_choices(schema.available_values, field_name=schema.name)
    resolved = resolve_choices(choices, schema.value, schema.allows_multiple())

    extra = schema.extra_attributes
    items: List[Element] = []
    for choice in resolved:
        items.extend(choice_item_tags(schema.type, schema.name, choice, key=key, extra=extra))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "rendered %s group key=%s choices=%d checked=%r",
            schema.type,
            key,
            len(resolved),
            [c.value for c in resolved if c.selected],
        )
    return fieldset_tag(key, legend_tag(schema.label_text, keys.legend_key(key)), items)


_RENDERERS: Dict[str, Callable[[Any], Element]] = {
    "text": _render_text,
    "textarea": _render_textarea,
    "select": _render_select,
    "radio": _render_choice_group,
    "checkbox": _render_choice_group,
}


def render_field(schema: Union[Mapping[str, Any], FieldBase], *, strict: bool = False) -> Optional[Element]:
    """
    Render one field schema into its element tree.

    Returns the root `Label` (text, textarea, select) or `Fieldset` (radio,
    checkbox). An unrecognized `type` is not an error: the field is skipped
    and `None` is returned, unless `strict=True`, in which case
    `UnsupportedFieldType` is raised.

    Raises:
        MissingRequiredField, EmptySchemaError, InvalidChoiceShape,
        InvalidFieldSchema: the schema cannot be rendered.
    """
    try:
        parsed = parse_field_schema(schema)
        renderer = _RENDERERS.get(parsed.type)
        if renderer is None:
            raise UnsupportedFieldType(parsed.type, field_name=parsed.name)
    except UnsupportedFieldType as exc:
        if strict:
            raise
        logger.warning("skipping field %r: %s", exc.field_name, exc.message)
        return None

    return renderer(parsed)


def render_fields(schemas: List[Union[Mapping[str, Any], FieldBase]], *, strict: bool = False) -> List[Optional[Element]]:
    """Render several schemas; positions of skipped fields hold `None`."""
    return [render_field(s, strict=strict) for s in schemas]


__all__ = ["render_field", "render_fields"]
