"""
HTML builder for the abstract element tree.

This is one possible host: it turns nodes into markup, applies
`extra_attributes` on top of the node's own attributes, and expresses the
select/textarea `value` the way HTML does (selected options, text content).
"""

from __future__ import annotations

from html import escape
from typing import Any, Dict, List

from form_fields.schemas.elements import Element, ElementKind

_BOOLEAN_ATTRS = {"checked", "selected", "multiple", "disabled", "required", "readonly"}
_VOID_KINDS = {ElementKind.INPUT}


def _attr_name(name: str) -> str:
    # `htmlFor` / `className` style keys coming from JSX-flavored schemas.
    if name == "htmlFor":
        return "for"
    if name == "className":
        return "class"
    return name


def _attr_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def attributes(attrs: Dict[str, Any]) -> str:
    parts: List[str] = []
    for raw_name, value in attrs.items():
        name = _attr_name(str(raw_name))
        if value is None:
            continue
        if name in _BOOLEAN_ATTRS:
            if value:
                parts.append(name)
            continue
        parts.append(f'{escape(name, quote=True)}="{escape(_attr_value(value), quote=True)}"')
    return " ".join(parts)


def _open(tag: str, attrs: Dict[str, Any]) -> str:
    rendered = attributes(attrs)
    return f"<{tag} {rendered}>" if rendered else f"<{tag}>"


def _merged_attrs(el: Element, *, drop: tuple = ()) -> Dict[str, Any]:
    merged = {k: v for k, v in el.attrs.items() if k not in drop}
    merged.update(el.extra_attributes)
    return merged


def to_html(el: Element) -> str:
    tag = el.kind.value

    if el.kind in _VOID_KINDS:
        return _open(tag, _merged_attrs(el))

    if el.kind == ElementKind.TEXTAREA:
        content = el.attrs.get("value")
        body = escape("" if content is None else str(content))
        return f"{_open(tag, _merged_attrs(el, drop=('value',)))}{body}</{tag}>"

    if el.kind == ElementKind.SELECT:
        # Selection lives on the options themselves.
        inner = "".join(to_html(child) for child in el.children)
        return f"{_open(tag, _merged_attrs(el, drop=('value',)))}{inner}</{tag}>"

    if el.kind == ElementKind.OPTION and el.attrs.get("value") is None:
        # Blank option: submit an empty string rather than its display text.
        attrs = _merged_attrs(el)
        attrs["value"] = ""
        return f"{_open(tag, attrs)}{escape(el.text or '')}</{tag}>"

    text = escape(el.text or "")
    inner = "".join(to_html(child) for child in el.children)
    return f"{_open(tag, _merged_attrs(el))}{text}{inner}</{tag}>"


__all__ = ["attributes", "to_html"]
