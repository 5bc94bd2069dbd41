"""
Standard response envelopes. Keys are snake_case here; CaseConverterMiddleware
camelCases them on the way out.
"""
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from schemas.common import Paginated


def ok(data: Any = None, message: str = "", status_code: int = 200) -> JSONResponse:
    content: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def created(data: Any, message: str) -> JSONResponse:
    return ok(data, message, status_code=201)


def paginated(page: Paginated, message: str) -> JSONResponse:
    content = {
        "success": True,
        "message": message,
        "data": page.data,
        "meta": page.meta,
    }
    return JSONResponse(status_code=200, content=jsonable_encoder(content))


def listing(result: Any, message: str) -> JSONResponse:
    """Envelope for list endpoints: paginated when the result carries meta."""
    if isinstance(result, Paginated):
        return paginated(result, message)
    return ok(result, message)


def error(
    message: str,
    description: Optional[str] = None,
    status_code: int = 500,
    data: Any = None,
) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "message": message}
    if description:
        content["description"] = description
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))
