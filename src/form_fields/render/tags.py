"""
Element builders.

Small constructors for each node kind, plus `make_options` / `make_select`
which run the choice pipeline for a select. `render_field` composes these;
they are public so hosts can assemble custom layouts from the same pieces.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from form_fields import keys
from form_fields.options.choices import inject_blank, normalize_choices
from form_fields.options.selection import ResolvedChoice, resolve_choices, resolve_selection, selection_attr
from form_fields.schemas.elements import Element, ElementKind


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _extra(extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    # The tree owns its attribute values; nothing is shared with the schema.
    return copy.deepcopy(dict(extra or {}))


def label_tag(label: Any, key: str, child: Optional[Element] = None) -> Element:
    return Element(
        kind=ElementKind.LABEL,
        key=key,
        text=_text(label),
        children=[child] if child is not None else [],
    )


def input_tag(
    input_type: str,
    name: str,
    value: Any,
    *,
    key: Optional[str] = None,
    extra: Optional[Mapping[str, Any]] = None,
    **attrs: Any,
) -> Element:
    return Element(
        kind=ElementKind.INPUT,
        key=key or name,
        attrs={"type": input_type, "name": name, "value": copy.deepcopy(value), **attrs},
        extra_attributes=_extra(extra),
    )


def textarea_tag(
    name: str,
    value: Any,
    *,
    key: Optional[str] = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> Element:
    # No `type` attribute on textareas.
    return Element(
        kind=ElementKind.TEXTAREA,
        key=key or name,
        attrs={"name": name, "value": copy.deepcopy(value)},
        extra_attributes=_extra(extra),
    )


def option_tag(text: Any, value: Any, key: str, selected: bool = False) -> Element:
    attrs: Dict[str, Any] = {"value": copy.deepcopy(value)}
    if selected:
        attrs["selected"] = True
    return Element(kind=ElementKind.OPTION, key=key, attrs=attrs, text=_text(text))


def make_options(resolved: Sequence[ResolvedChoice], key: str) -> List[Element]:
    return [option_tag(c.text, c.value, keys.option_key(key, c.index), c.selected) for c in resolved]


def select_tag(
    name: str,
    options: Sequence[Element],
    selected: Any,
    *,
    key: Optional[str] = None,
    multiple: bool = False,
    extra: Optional[Mapping[str, Any]] = None,
) -> Element:
    return Element(
        kind=ElementKind.SELECT,
        key=key or name,
        attrs={"name": name, "value": copy.deepcopy(selected), "multiple": bool(multiple)},
        extra_attributes=_extra(extra),
        children=list(options),
    )


def make_select(
    name: str,
    available_values: Sequence[Any],
    value: Any = None,
    *,
    key: Optional[str] = None,
    multiple: bool = False,
    include_blank: Union[bool, str, None] = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> Element:
    """
    Build a full `Select` with its `Option` children.

    The input sequence is never modified; the blank choice (if any) is added
    to a fresh list.
    """
    base = key or name
    choices = inject_blank(normalize_choices(available_values, field_name=name), include_blank)
    selection = resolve_selection(choices, value, multiple)
    resolved = resolve_choices(choices, value, multiple)
    return select_tag(
        name,
        make_options(resolved, base),
        selection_attr(selection, resolved, multiple),
        key=base,
        multiple=multiple,
        extra=extra,
    )


def legend_tag(label: Any, key: str) -> Element:
    return Element(kind=ElementKind.LEGEND, key=key, text=_text(label))


def choice_item_tags(
    field_type: str,
    name: str,
    choice: ResolvedChoice,
    *,
    key: str,
    extra: Optional[Mapping[str, Any]] = None,
) -> List[Element]:
    """One radio/checkbox `Input` followed by the `Label` bound to it."""
    input_id = keys.choice_input_id(field_type, name, choice.index)
    attrs: Dict[str, Any] = {"id": input_id}
    if choice.selected:
        attrs["checked"] = True
    item = input_tag(
        field_type,
        name,
        choice.value,
        key=keys.choice_item_key(key, field_type, choice.index),
        extra=extra,
        **attrs,
    )
    label = Element(
        kind=ElementKind.LABEL,
        key=keys.choice_label_key(name, choice.index),
        attrs={"for": input_id},
        text=_text(choice.text),
    )
    return [item, label]


def fieldset_tag(key: str, legend: Element, items: Sequence[Element]) -> Element:
    return Element(kind=ElementKind.FIELDSET, key=key, children=[legend, *items])


__all__ = [
    "label_tag",
    "input_tag",
    "textarea_tag",
    "option_tag",
    "make_options",
    "select_tag",
    "make_select",
    "legend_tag",
    "choice_item_tags",
    "fieldset_tag",
]
