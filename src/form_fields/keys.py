"""
Deterministic identifiers for every node of one rendered field.

Keys derive from the field's base key (`key`, else `name`) plus the node's
kind and its post-injection index, so they are stable across renders and
unique within a field.
"""

from __future__ import annotations

from typing import Any


def base_key(schema: Any) -> str:
    return getattr(schema, "key", None) or schema.name


def label_key(key: str) -> str:
    return f"{key}_label"


def legend_key(key: str) -> str:
    return f"{key}_legend"


def option_key(key: str, index: int) -> str:
    return f"{key}_select_option_{index}"


def choice_item_key(key: str, field_type: str, index: int) -> str:
    return f"{key}_{field_type}_{index}"


def choice_label_key(name: str, index: int) -> str:
    # Uses the field name, not the base key.
    return f"{name}_label_{index}"


def choice_input_id(field_type: str, name: str, index: int) -> str:
    return f"{field_type}_{name}_{index}"


__all__ = [
    "base_key",
    "label_key",
    "legend_key",
    "option_key",
    "choice_item_key",
    "choice_label_key",
    "choice_input_id",
]
