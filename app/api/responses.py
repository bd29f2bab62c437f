"""SellScope — Response Envelopes.

Success: ``{"success": true, "data": ..., "pagination"?: {...}}``
Error:   ``{"success": false, "error": {"code", "message", "details"?}}``
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.errors import APIError
from app.models.api_models import Pagination


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def success_response(data: Any, pagination: Optional[Pagination] = None) -> dict:
    body = {"success": True, "data": _dump(data)}
    if pagination is not None:
        body["pagination"] = _dump(pagination)
    return body


def error_response(error: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"success": False, "error": error.to_dict()},
    )
