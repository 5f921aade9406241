from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_422_UNPROCESSABLE_ENTITY

from api.models import RenderBatchRequest
from form_fields.config import load_settings
from form_fields.errors import FieldSchemaError, InvalidFieldSchema, MissingRequiredField
from form_fields.render import render_field, to_html
from form_fields.schemas import FIELD_TYPES, Element

logger = logging.getLogger("api.field")

router = APIRouter(prefix="/v1/api", tags=["field"])


def _request_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def _http_status_for_error(exc: FieldSchemaError) -> int:
    """
    - Schema shape problems (missing name/type, wrong value types) => 422
    - Everything else (bad choices, empty choices, strict unknown type) => 400
    """
    if isinstance(exc, (MissingRequiredField, InvalidFieldSchema)):
        return HTTP_422_UNPROCESSABLE_ENTITY
    return HTTP_400_BAD_REQUEST


def _error_response(exc: FieldSchemaError, *, index: Optional[int] = None) -> JSONResponse:
    request_id = _request_id("field")
    logger.info("%s %s field=%r index=%s", request_id, exc.code, exc.field_name, index)
    content: Dict[str, Any] = {"ok": False, **exc.to_dict(), "requestId": request_id}
    if index is not None:
        content["index"] = index
    return JSONResponse(status_code=_http_status_for_error(exc), content=content)


def _serialize(element: Optional[Element], output_format: str) -> Any:
    if element is None:
        return None
    if output_format == "html":
        return to_html(element)
    return element.to_dict()


@router.get("/field/capabilities")
def capabilities() -> Dict[str, Any]:
    return {
        "ok": True,
        "fieldTypes": list(FIELD_TYPES),
        "selectionKey": "value",
        "selectionAliases": ["defaultValue"],
        "implicitSelection": False,
        "strictTypes": load_settings().strict_types,
    }


@router.post("/field/render")
def render(
    payload: Dict[str, Any] = Body(...),
    output_format: str = Query(default="tree", alias="format", pattern="^(tree|html)$"),
    strict: Optional[bool] = Query(default=None),
) -> Any:
    """
    Render a single field schema.

    An unknown field `type` yields `{"ok": true, "skipped": true}` with no
    element, unless strict mode is on (query `strict=true` or
    `FORM_FIELDS_STRICT_TYPES=true`).
    """
    strict_types = load_settings().strict_types if strict is None else strict
    try:
        element = render_field(payload, strict=strict_types)
    except FieldSchemaError as exc:
        return _error_response(exc)

    key = "html" if output_format == "html" else "element"
    return {"ok": True, key: _serialize(element, output_format), "skipped": element is None}


@router.post("/fields/render")
def render_batch(payload: Dict[str, Any] = Body(...)) -> Any:
    settings = load_settings()
    try:
        parsed = RenderBatchRequest.model_validate(payload)
    except ValidationError as exc:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "ok": False,
                "error": "validation_error",
                "message": "Request body did not match expected schema.",
                "requestId": _request_id("val"),
                "details": exc.errors(include_url=False, include_context=False, include_input=False),
            },
        )

    if len(parsed.fields) > settings.max_batch:
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={
                "ok": False,
                "error": "batch_too_large",
                "message": f"At most {settings.max_batch} fields per request.",
                "requestId": _request_id("batch"),
            },
        )

    strict_types = settings.strict_types if parsed.strict is None else parsed.strict
    rendered: List[Any] = []
    skipped: List[int] = []
    for i, schema in enumerate(parsed.fields):
        try:
            element = render_field(schema, strict=strict_types)
        except FieldSchemaError as exc:
            return _error_response(exc, index=i)
        if element is None:
            skipped.append(i)
        rendered.append(_serialize(element, parsed.output_format))

    key = "html" if parsed.output_format == "html" else "elements"
    return {"ok": True, key: rendered, "skipped": skipped}
