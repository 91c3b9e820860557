"""
Structured logging helpers.

Every value passed as log context goes through ``safe_log_value``. The
device secret and bearer tokens are masked, and pressure grids and
payloads are reduced to their size, so neither reaches a log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

REDACTED = "***"

# Context keys whose values are never written out
SENSITIVE_KEYS = frozenset({"authorization", "secret", "ingest_secret", "password", "token"})


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a log context value as a bounded string.

    Args:
        value: Any context value
        max_length: Truncate longer renderings to this many characters

    Returns:
        str: ``list(N items)`` / ``dict(N keys)`` for containers, the
            string form otherwise
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        rendered = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        rendered = f"dict({len(value)} keys)"
    else:
        try:
            rendered = value if isinstance(value, str) else str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(rendered) > max_length:
        return rendered[:max_length] + f"... (truncated, {len(rendered)} total)"
    return rendered


def safe_context(context: dict[str, Any]) -> dict[str, str]:
    """Apply masking and ``safe_log_value`` to every context entry."""
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else safe_log_value(value)
        for key, value in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log ``message`` with sanitized ``extra`` context.

    Usage:
        log_with_context(logger, logging.INFO, "Device sample ingested",
                         session_id=str(session_id), grid="3x3")
    """
    logger.log(level, message, extra=safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log ``exc`` with its traceback at ERROR plus sanitized context."""
    extra = safe_context(context)
    extra["error_type"] = type(exc).__name__
    logger.error(message, exc_info=exc, extra=extra)
