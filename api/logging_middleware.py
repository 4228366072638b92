"""Per-request correlation id and access logging."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"
MAX_REQUEST_ID_LENGTH = 128


def _incoming_request_id(request: Request) -> str | None:
    value = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if not value or len(value) > MAX_REQUEST_ID_LENGTH or not value.isprintable():
        return None
    return value


class RequestIDLoggingMiddleware(BaseHTTPMiddleware):
    """Stamp every request with an id and write one access record per call.

    A well-formed ``x-request-id`` sent by the client is kept so that callers
    can correlate their own logs; otherwise a fresh uuid4 hex is issued.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        request_id = _incoming_request_id(request) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter_ns()

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "%s %s failed",
                request.method,
                request.url.path,
                extra={"request_id": request_id},
            )
            raise

        elapsed_ms = (time.perf_counter_ns() - started) / 1_000_000
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={"request_id": request_id, "status_code": response.status_code},
        )
        return response
