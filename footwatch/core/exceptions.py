"""
Exception hierarchy for the Footwatch service.

Provides layered exception structure for domain-specific errors.
Every exception carries a stable machine-readable ``kind`` that the API
layer maps onto an HTTP status.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FootwatchError(Exception):
    """Base exception for all Footwatch application errors."""

    kind = "internal"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(FootwatchError):
    """Raised when input validation fails."""

    kind = "validation"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class GridShapeError(ValidationError):
    """Raised when a pressure grid does not match its declared dimensions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, field="pressure", details=details)


class UnauthenticatedError(FootwatchError):
    """Raised when a request carries no valid credential."""

    kind = "unauthenticated"


class ForbiddenError(FootwatchError):
    """Raised when an authenticated caller may not touch a resource."""

    kind = "forbidden"


class NotFoundError(FootwatchError):
    """Raised by stores when a record does not exist."""

    kind = "not_found"

    def __init__(
        self,
        resource: str,
        resource_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Resource type name (session, report, ...)
            resource_id: ID of the missing record
            details: Additional context
        """
        details = details or {}
        details[f"{resource}_id"] = resource_id
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource.capitalize()} not found: {resource_id}", details)


class SessionNotFoundError(NotFoundError):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("session", str(session_id), details)


class ConflictError(FootwatchError):
    """Raised when a write conflicts with the current state of a record."""

    kind = "conflict"


class SessionTerminalError(ConflictError):
    """Raised when a write targets a session that has already ended."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_id"] = str(session_id)
        details["status"] = "ended"
        super().__init__(f"Session {session_id} has ended and can no longer change", details)


class ConcurrentModificationError(ConflictError):
    """Raised when an optimistic-concurrency check loses against another writer."""

    def __init__(
        self,
        session_id: str,
        expected_version: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["session_id"] = str(session_id)
        details["expected_version"] = expected_version
        super().__init__(f"Session {session_id} was modified concurrently", details)


class UpstreamDegradedError(FootwatchError):
    """Raised when the external prediction model is unreachable or erroring.

    Never surfaced to callers; the prediction pipeline substitutes the
    fallback outcome.
    """

    kind = "upstream_degraded"
