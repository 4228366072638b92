"""JSON error envelope and exception handlers for the HTTP API."""

from __future__ import annotations

import logging
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from chesscore.errors import FormatError, InvariantError, PreconditionError, RangeError

logger = logging.getLogger(__name__)


def error_envelope(
    *,
    code: str,
    message: str,
    err_type: str,
    request_id: str,
    field_errors: list[dict[str, str]] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "type": err_type,
            "request_id": request_id,
        }
    }
    if field_errors:
        payload["error"]["field_errors"] = field_errors
    return payload


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    status_code = http_exc.status_code
    payload = error_envelope(
        code=_status_to_code(status_code),
        message=http_exc.detail if isinstance(http_exc.detail, str) else str(http_exc.detail),
        err_type="client_error" if 400 <= status_code < 500 else "server_error",
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status_code, content=payload)


async def bad_input_handler(request: Request, exc: Exception) -> JSONResponse:
    # FormatError / RangeError: the caller sent malformed text or indices.
    payload = error_envelope(
        code="bad_request",
        message=str(exc),
        err_type="client_error",
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)


async def invalid_position_handler(request: Request, exc: Exception) -> JSONResponse:
    # The text parsed, but the position breaks the generator contract (no king).
    logger.warning("invalid position", extra={"request_id": _request_id(request), "reason": str(exc)})
    payload = error_envelope(
        code="unprocessable_entity",
        message=str(exc),
        err_type="client_error",
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=payload)


async def request_validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    rve = cast(RequestValidationError, exc)
    errors = []
    for err in rve.errors():
        loc = ".".join(str(p) for p in err.get("loc", []) if p is not None)
        errors.append(
            {
                "field": loc,
                "code": err.get("type", "value_error"),
                "message": err.get("msg", "invalid value"),
            }
        )
    payload = error_envelope(
        code="unprocessable_entity",
        message="Validation error",
        err_type="client_error",
        request_id=_request_id(request),
        field_errors=errors or None,
    )
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=payload)


async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", extra={"request_id": _request_id(request)})
    payload = error_envelope(
        code="internal_error",
        message="Internal Server Error",
        err_type="server_error",
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def install_error_handlers(app) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(FormatError, bad_input_handler)
    app.add_exception_handler(RangeError, bad_input_handler)
    app.add_exception_handler(InvariantError, invalid_position_handler)
    app.add_exception_handler(PreconditionError, invalid_position_handler)
    app.add_exception_handler(Exception, exception_handler)


def _status_to_code(status_code: int) -> str:
    if status_code == status.HTTP_400_BAD_REQUEST:
        return "bad_request"
    if status_code == status.HTTP_404_NOT_FOUND:
        return "not_found"
    if status_code == status.HTTP_422_UNPROCESSABLE_ENTITY:
        return "unprocessable_entity"
    if 500 <= status_code < 600:
        return "internal_error"
    return "error"
