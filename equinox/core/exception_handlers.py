"""Global exception handlers.

All errors leave the API as ``{"type": ..., "message": ...}`` JSON.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from equinox.core.exceptions import AppException, DatabaseUnavailableError

logger = logging.getLogger("equinox.exception")


def _error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"type": error_type, "message": message},
    )


def _request_extra(request: Request, status_code: int, **kwargs: Any) -> dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        **kwargs,
    }


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "AppException: %s - %s",
        exc.error_type,
        exc.message,
        extra=_request_extra(request, exc.status_code, error_type=exc.error_type),
    )
    return _error_response(exc.status_code, exc.error_type, exc.message)


def database_exception_handler(request: Request, exc: OperationalError) -> JSONResponse:
    """Connection-level database failures become 503 instead of 500."""
    error = DatabaseUnavailableError()
    logger.error(
        "Database unavailable: %s %s - %s",
        request.method,
        request.url.path,
        exc.orig if exc.orig is not None else exc,
        extra=_request_extra(request, error.status_code, error_type=error.error_type),
    )
    return _error_response(error.status_code, error.error_type, error.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, "http_error", str(exc.detail))


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten Pydantic errors into ``field: message`` pairs joined by ``; ``."""
    messages = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        422, "validation_error", format_validation_errors(list(exc.errors()))
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra=_request_extra(request, 500),
        exc_info=exc,
    )
    return _error_response(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(OperationalError, database_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
