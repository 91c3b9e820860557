"""
FastAPI middleware for observability.

Correlation ID propagation and per-request access logging.

Dependencies: fastapi, starlette, footwatch.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from footwatch.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Probes hit these constantly; they are logged at DEBUG
QUIET_PATH_SUFFIXES = ("/health", "/health/db")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log its outcome.

        Query strings and bodies are not logged; both can carry device
        payloads.
        """
        started = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO
        logger.log(
            level,
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Binds a correlation ID to the request context.

    An incoming ``X-Correlation-ID`` is reused, otherwise one is generated.
    The ID is echoed on the response.
    """

    async def dispatch(self, request: Request, call_next):
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            correlation_id = get_correlation_id()
            response: Response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            reset_correlation_id(token)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
