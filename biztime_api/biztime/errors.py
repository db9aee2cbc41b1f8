"""Application errors and the global exception handlers that render them.

Every failure leaves the API as the same envelope:
    {"error": {"message": "...", "status": 404}}

AppError is raised deliberately by services (lookup misses and the like);
storage failures map to 500 here. Any other exception is caught by
CorrelationIdMiddleware, which renders the same 500 envelope and keeps the
correlation header on it.
"""
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.logging_config import get_logger
from biztime.schemas.common import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


class AppError(Exception):
    """Business error carrying a message and an HTTP status code."""

    def __init__(self, message: str, status: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status = status
        super().__init__(message)


class NotFoundError(AppError):
    """Lookup miss (404)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=status.HTTP_404_NOT_FOUND)


def error_body(message: str, status_code: int) -> Dict[str, Any]:
    return ErrorResponse(error=ErrorDetail(message=message, status=status_code)).model_dump()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, status_code))


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register the envelope-producing handlers on the app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        logger.info("app_error", path=request.url.path, status=exc.status, message=exc.message)
        return error_response(exc.message, exc.status)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched routes land here as 404 "Not Found".
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("validation_error", path=request.url.path, errors=exc.errors())
        return error_response(_validation_message(exc), status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(SQLAlchemyError)
    async def db_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("db_error", path=request.url.path, error=str(exc))
        message = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
        return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
