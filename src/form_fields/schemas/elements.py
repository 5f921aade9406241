"""
Abstract element tree returned by the field renderer.

The tree is host-agnostic: a host UI builder (see `form_fields.render.markup`
for an HTML one) turns each node into a concrete element and applies
`extra_attributes` verbatim on top of `attrs`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ElementKind(str, Enum):
    LABEL = "label"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    OPTION = "option"
    FIELDSET = "fieldset"
    LEGEND = "legend"


class Element(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: ElementKind
    key: str = Field(..., description="Identifier, unique within one rendered field")
    attrs: Dict[str, Any] = Field(default_factory=dict)
    extra_attributes: Dict[str, Any] = Field(
        default_factory=dict,
        alias="extraAttributes",
        description="Schema keys forwarded as-is to the concrete element",
    )
    text: Optional[str] = None
    children: List["Element"] = Field(default_factory=list)

    def iter(self) -> Iterator["Element"]:
        """Depth-first walk, self included."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, kind: ElementKind) -> List["Element"]:
        return [el for el in self.iter() if el.kind == kind]

    def find(self, kind: ElementKind) -> Optional["Element"]:
        for el in self.iter():
            if el.kind == kind:
                return el
        return None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


Element.model_rebuild()


__all__ = ["ElementKind", "Element"]
