# Correlation-ID middleware: reuse X-Correlation-ID from the request or mint one,
# bind it to the structlog context and echo it on the response.
import time
import uuid
from typing import Callable

import structlog.contextvars
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from biztime.errors import error_response
from biztime.logging_config import get_logger

logger = get_logger(__name__)

HEADER_CORRELATION_ID = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind correlation_id per request and log one line per handled request.

    Exceptions no registered handler took (bugs, runtime failures) are turned
    into the 500 envelope here, so they carry the header like every other response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(HEADER_CORRELATION_ID, "").strip() or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("unhandled_error", path=request.url.path, error=str(exc), exc_info=True)
            response = error_response(str(exc) or exc.__class__.__name__, status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info(
            "request_handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        response.headers[HEADER_CORRELATION_ID] = correlation_id
        return response
