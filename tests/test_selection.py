import pytest

from form_fields.options.choices import inject_blank, normalize_choices
from form_fields.options.selection import (
    has_explicit_value,
    resolve_choices,
    resolve_selection,
    same_value,
    selection_attr,
)


def _selected(resolved):
    return [c.value for c in resolved if c.selected]


def test_no_signal_selects_nothing():
    choices = normalize_choices(["One", "Two", "Three"])
    assert resolve_selection(choices) == []
    assert _selected(resolve_choices(choices)) == []


def test_inline_marker_selects():
    choices = normalize_choices([[1, "One"], [2, "Two", True], [3, "Three"]])
    assert resolve_selection(choices) == [2]


def test_explicit_value_overrides_inline_marker():
    choices = normalize_choices([[1, "One"], [2, "Two", True], [3, "Three"]])
    assert resolve_selection(choices, 3) == [3]
    assert _selected(resolve_choices(choices, 3)) == [3]


def test_multiple_explicit_value_drops_inline_markers():
    choices = normalize_choices([[1, "One", True], [2, "Two", True], [3, "Three"]])
    resolved = resolve_choices(choices, [2, 3], multiple=True)
    assert _selected(resolved) == [2, 3]


def test_multiple_keeps_explicit_order_in_selection():
    choices = normalize_choices(["One", "Two", "Three"])
    assert resolve_selection(choices, ["Two", "One"], multiple=True) == ["Two", "One"]
    # Rendered order still follows the choices.
    assert _selected(resolve_choices(choices, ["Two", "One"], multiple=True)) == ["One", "Two"]


def test_single_mode_truncates_to_first():
    choices = normalize_choices([[1, "One", True], [2, "Two", True]])
    assert resolve_selection(choices) == [1]
    assert resolve_selection(choices, [2, 1]) == [2]


@pytest.mark.parametrize("value", [0, False, ""])
def test_falsy_scalars_are_explicit(value):
    choices = normalize_choices([value, "other"])
    assert has_explicit_value(value)
    assert _selected(resolve_choices(choices, value)) == [value]


@pytest.mark.parametrize("value", [None, [], (), [None]])
def test_absent_values_fall_back_to_inline(value):
    choices = normalize_choices([["a", "A", True], ["b", "B"]])
    assert not has_explicit_value(value)
    assert resolve_selection(choices, value) == ["a"]


def test_comparison_does_not_coerce_types():
    assert not same_value(1, True)
    assert not same_value(1, 1.0)
    assert not same_value("1", 1)
    choices = normalize_choices([1, "1", True])
    assert [c.index for c in resolve_choices(choices, "1") if c.selected] == [1]


def test_blank_choice_is_never_selected():
    choices = inject_blank(normalize_choices(["One"]), "Pick one")
    resolved = resolve_choices(choices, [None, "One"], multiple=True)
    assert resolved[0].index == 0
    assert resolved[0].selected is False
    assert resolved[1].selected is True


def test_selection_attr_shapes():
    choices = normalize_choices([1, 2, 3])

    def attr(value, multiple):
        selection = resolve_selection(choices, value, multiple)
        return selection_attr(selection, resolve_choices(choices, value, multiple), multiple)

    assert attr(None, False) is None
    assert attr(2, False) == 2
    assert attr([3, 1], True) == [3, 1]
    assert attr(None, True) == []


def test_selection_attr_only_keeps_values_that_match_an_option():
    choices = normalize_choices(["a", "b"])
    selection = resolve_selection(choices, ["zz", "b"])
    assert selection == ["zz"]
    assert selection_attr(selection, resolve_choices(choices, ["zz", "b"]), False) is None

    selection = resolve_selection(choices, ["zz", "b"], multiple=True)
    assert selection_attr(selection, resolve_choices(choices, ["zz", "b"], multiple=True), True) == ["b"]
