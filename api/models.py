from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderBatchRequest(BaseModel):
    """
    Body for `POST /v1/api/fields/render`.

    Individual schemas stay plain dicts here; they are validated one by one by
    the renderer so errors can point at the failing index.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    fields: List[Dict[str, Any]] = Field(..., min_length=1, description="Field schemas, rendered in order")
    strict: Optional[bool] = Field(default=None, description="Fail on unknown field types instead of skipping")
    output_format: str = Field(default="tree", alias="format", pattern="^(tree|html)$")
