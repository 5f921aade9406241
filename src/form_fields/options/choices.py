"""
Choice normalization for select/radio/checkbox fields.

`availableValues` entries arrive in three shapes:

    "One"                   bare scalar: value and text are the same
    (1, "One")              value and display text
    (1, "One", True)        value, text and an inline "selected" marker

Each entry is classified once into a `Choice` variant and then flattened to a
`NormalizedChoice`, the only representation the rest of the pipeline sees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from form_fields.errors import EmptySchemaError, InvalidChoiceShape

_SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class NormalizedChoice:
    value: Any
    text: Any
    inline_selected: bool = False


@dataclass(frozen=True)
class BareChoice:
    value: Any

    def normalize(self) -> NormalizedChoice:
        return NormalizedChoice(self.value, self.value, False)


@dataclass(frozen=True)
class LabeledChoice:
    value: Any
    text: Any

    def normalize(self) -> NormalizedChoice:
        return NormalizedChoice(self.value, self.text, False)


@dataclass(frozen=True)
class MarkedChoice:
    value: Any
    text: Any
    selected: bool

    def normalize(self) -> NormalizedChoice:
        return NormalizedChoice(self.value, self.text, bool(self.selected))


Choice = Union[BareChoice, LabeledChoice, MarkedChoice]


def classify_choice(entry: Any, index: int = 0, *, field_name: Optional[str] = None) -> Choice:
    if isinstance(entry, _SCALAR_TYPES):
        return BareChoice(entry)
    if isinstance(entry, (list, tuple)):
        if len(entry) == 2:
            return LabeledChoice(entry[0], entry[1])
        if len(entry) == 3:
            return MarkedChoice(entry[0], entry[1], bool(entry[2]))
    raise InvalidChoiceShape(index, entry, field_name=field_name)


def normalize_choices(
    available_values: Optional[Sequence[Any]],
    *,
    field_name: Optional[str] = None,
) -> List[NormalizedChoice]:
    """
    Turn raw `availableValues` into `NormalizedChoice` entries, same order and length.

    Raises:
        EmptySchemaError: no entries.
        InvalidChoiceShape: an entry is not a scalar or a 2/3-element sequence.
    """
    if not available_values:
        raise EmptySchemaError("`availableValues` must be a non-empty sequence", field_name=field_name)
    return [
        classify_choice(entry, i, field_name=field_name).normalize()
        for i, entry in enumerate(available_values)
    ]


def blank_choice(include_blank: Union[bool, str, None]) -> Optional[NormalizedChoice]:
    if include_blank is True:
        return NormalizedChoice(None, "", False)
    if isinstance(include_blank, str) and include_blank:
        return NormalizedChoice(None, include_blank, False)
    return None


def inject_blank(
    choices: Sequence[NormalizedChoice],
    include_blank: Union[bool, str, None],
) -> List[NormalizedChoice]:
    """
    Prepend the synthetic empty choice when `include_blank` asks for one.

    `True` gives empty display text, a non-empty string is used as the text.
    The blank choice takes index 0 and never carries an inline marker.
    """
    blank = blank_choice(include_blank)
    if blank is None:
        return list(choices)
    return [blank, *choices]


__all__ = [
    "NormalizedChoice",
    "BareChoice",
    "LabeledChoice",
    "MarkedChoice",
    "Choice",
    "classify_choice",
    "normalize_choices",
    "blank_choice",
    "inject_blank",
]
