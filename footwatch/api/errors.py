"""
API error handling.

Maps the domain exception hierarchy onto HTTP statuses with a stable
error body. Internal details and stack traces never reach the client.

Dependencies: fastapi, sqlalchemy, footwatch.core.exceptions
System role: Uniform error responses for every router
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from footwatch.core.exceptions import FootwatchError
from footwatch.models.common import ErrorResponse
from footwatch.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[str, int] = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "unauthenticated": status.HTTP_401_UNAUTHORIZED,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, kind: str, message: str, details: dict | None = None) -> JSONResponse:
    """Build the JSON error body shared by every handler."""
    body = ErrorResponse(error=kind, message=message, details=details or None)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def handle_footwatch_error(request: Request, exc: FootwatchError) -> JSONResponse:
    """Domain errors: status from the error kind."""
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(
            "Unhandled domain failure",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return error_response(status_code, "internal", "Internal server error")

    logger.warning(
        exc.message,
        extra={"path": request.url.path, "error_kind": exc.kind, "status_code": status_code},
    )
    return error_response(status_code, exc.kind, exc.message, exc.details)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Pydantic request validation: 400 with per-field errors."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body") or "body",
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    logger.warning("Invalid request", extra={"path": request.url.path, "error_count": len(errors)})
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "validation",
        "Invalid payload",
        {"errors": errors},
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures: 500 without internals."""
    log_exception_with_context(logger, "Database operation failed", exc, path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal", "Internal server error")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: 500 without internals."""
    log_exception_with_context(logger, "Unexpected failure", exc, path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on the application."""
    app.add_exception_handler(FootwatchError, handle_footwatch_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
