"""
Uniform response envelope.

Every endpoint answers with the same JSON shape::

    {"success": true, "data": ..., "meta": {"requestId": ..., "timestamp": ...,
                                            "pagination": {...}}}
    {"success": false, "error": {"code": ..., "message": ...},
     "meta": {"requestId": ..., "timestamp": ...}}

``meta.requestId`` is the caller's correlation id when one was sent in
the correlation header, otherwise a fresh UUID.  The exception handlers
registered by ``register_exception_handlers`` make sure errors raised
anywhere in a request (including routing errors and uncaught faults)
still leave in this envelope.
"""

import logging
import math
import uuid
from typing import Any, Dict, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.entity import utcnow
from .config import settings
from .query import Page, PageParams

logger = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"
UNAUTHORIZED = "UNAUTHORIZED"
VALIDATION = "VALIDATION"
INTERNAL_ERROR = "INTERNAL_ERROR"

_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: VALIDATION,
    status.HTTP_401_UNAUTHORIZED: UNAUTHORIZED,
    status.HTTP_404_NOT_FOUND: NOT_FOUND,
    status.HTTP_422_UNPROCESSABLE_ENTITY: VALIDATION,
}


def error_code_for_status(status_code: int) -> str:
    """Map an HTTP status to the error taxonomy."""
    if status_code in _STATUS_CODES:
        return _STATUS_CODES[status_code]
    if 400 <= status_code < 500:
        return VALIDATION
    return INTERNAL_ERROR


def get_correlation_id(headers: Mapping[str, str]) -> str:
    """Return the inbound correlation id, or mint a new one."""
    return headers.get(settings.correlation_header) or str(uuid.uuid4())


def _timestamp() -> str:
    return utcnow().isoformat().replace("+00:00", "Z")


def pagination_meta(total: int, page: int, limit: int) -> Dict[str, int]:
    return {
        "total": total,
        "page": page,
        "limit": limit,
        "pages": math.ceil(total / limit),
    }


def success_response(
    data: Any,
    request_id: Optional[str] = None,
    pagination: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    meta: Dict[str, Any] = {
        "requestId": request_id or str(uuid.uuid4()),
        "timestamp": _timestamp(),
    }
    if pagination is not None:
        meta["pagination"] = pagination
    return {
        "success": True,
        "data": jsonable_encoder(data, by_alias=True),
        "meta": meta,
    }


def error_response(code: str, message: str, request_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "success": False,
        "error": {"code": code, "message": message},
        "meta": {
            "requestId": request_id or str(uuid.uuid4()),
            "timestamp": _timestamp(),
        },
    }


def envelope(
    data: Any,
    request_id: str,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    return JSONResponse(success_response(data, request_id), status_code=status_code)


def page_envelope(page: Page, paging: PageParams, request_id: str) -> JSONResponse:
    return JSONResponse(
        success_response(
            page.items,
            request_id,
            pagination=pagination_meta(page.total, paging.page, paging.limit),
        )
    )


def error_envelope(status_code: int, message: str, request_id: str) -> JSONResponse:
    return JSONResponse(
        error_response(error_code_for_status(status_code), message, request_id),
        status_code=status_code,
    )


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Wrap every error leaving the application into the error envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        request_id = get_correlation_id(request.headers)
        response = error_envelope(exc.status_code, str(exc.detail), request_id)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        request_id = get_correlation_id(request.headers)
        message = _validation_message(exc)
        logger.warning("Rejected request %s %s: %s", request.method, request.url.path, message)
        return error_envelope(status.HTTP_400_BAD_REQUEST, message, request_id)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = get_correlation_id(request.headers)
        logger.exception("Unhandled error in %s %s (request %s)", request.method, request.url.path, request_id)
        return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", request_id)
