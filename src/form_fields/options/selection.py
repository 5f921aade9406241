"""
Selection resolution.

Two signals compete for "which choices are selected":

- the field-level explicit `value` (scalar or sequence), and
- inline markers on individual choices (`(value, text, True)`).

An explicit value, when present, fully replaces the inline markers. Without
either signal nothing is selected; there is no implicit first-choice default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from form_fields.options.choices import NormalizedChoice


@dataclass(frozen=True)
class ResolvedChoice:
    value: Any
    text: Any
    index: int
    selected: bool = False


def has_explicit_value(value: Any) -> bool:
    """`0`, `False` and `""` count as explicit; only `None` and empty sequences do not."""
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(v is not None for v in value)
    return True


def _as_sequence(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return [value]


def same_value(a: Any, b: Any) -> bool:
    # No cross-type equality: 1, 1.0 and True are three different values.
    return type(a) is type(b) and a == b


def contains_value(values: Sequence[Any], candidate: Any) -> bool:
    return any(same_value(v, candidate) for v in values)


def inline_selection(choices: Sequence[NormalizedChoice]) -> List[Any]:
    return [c.value for c in choices if c.inline_selected]


def resolve_selection(
    choices: Sequence[NormalizedChoice],
    value: Any = None,
    multiple: bool = False,
) -> List[Any]:
    """
    Compute the authoritative, ordered list of selected values.

    Args:
        choices: Normalized choices, after any blank injection.
        value: The schema's explicit value (scalar, sequence or None).
        multiple: When False the result holds at most one value.

    Returns:
        Inline-marked values in choice order, or the explicit value(s) in the
        order given, truncated to the first element when not `multiple`.
    """
    if has_explicit_value(value):
        selection = _as_sequence(value)
    else:
        selection = inline_selection(choices)
    if not multiple:
        selection = selection[:1]
    return selection


def resolve_choices(
    choices: Sequence[NormalizedChoice],
    value: Any = None,
    multiple: bool = False,
) -> List[ResolvedChoice]:
    selection = resolve_selection(choices, value, multiple)
    return [
        ResolvedChoice(
            value=c.value,
            text=c.text,
            index=i,
            selected=c.value is not None and contains_value(selection, c.value),
        )
        for i, c in enumerate(choices)
    ]


def selection_attr(selection: Sequence[Any], resolved: Sequence[ResolvedChoice], multiple: bool) -> Any:
    """
    Shape of the select's `value` attribute: a list when multiple, else a scalar or None.

    Only values that selected an option are kept, in selection order, so the
    attribute always agrees with the options' `selected` flags.
    """
    chosen = [c.value for c in resolved if c.selected]
    matched = [v for v in selection if contains_value(chosen, v)]
    if multiple:
        return matched
    return matched[0] if matched else None


__all__ = [
    "ResolvedChoice",
    "has_explicit_value",
    "same_value",
    "contains_value",
    "inline_selection",
    "resolve_selection",
    "resolve_choices",
    "selection_attr",
]
