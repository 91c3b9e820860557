"""
Store interfaces.

Narrow persistence contracts the application services depend on. The
SQLAlchemy CRUD classes implement them; tests may supply any object with
the same shape. Lookups raise NotFoundError rather than returning a
backend-specific sentinel.

Dependencies: footwatch.core
System role: Persistence ports for the monitoring services
"""

from datetime import datetime
from typing import Any, Protocol, Sequence
from uuid import UUID

from footwatch.core.grid import Grid
from footwatch.core.outcomes import PredictionOutcome
from footwatch.core.pagination import Page, PageRequest
from footwatch.core.session_state import SessionStatus


class SessionStore(Protocol):
    """Persistence for monitoring sessions."""

    async def create_session(self, owner_id: str, note: str | None) -> Any: ...

    async def get(self, id: UUID, refresh: bool = False) -> Any:
        """Return the session or raise SessionNotFoundError."""
        ...

    async def list_for_owner(self, owner_id: str, page: PageRequest) -> Page[Any]: ...

    async def update_if_version(
        self,
        id: UUID,
        expected_version: int,
        **values: Any,
    ) -> Any | None:
        """Apply ``values`` only if the row still has ``expected_version`` and is not ended."""
        ...

    async def count(self, *, status: SessionStatus | None = None, started_since: datetime | None = None) -> int: ...

    async def commit(self) -> None: ...


class SampleStore(Protocol):
    """Append-only persistence for pressure samples."""

    async def append(
        self,
        session_id: UUID,
        grid: Grid,
        foot: str,
        stats: dict[str, float] | None,
        captured_at: datetime | None,
    ) -> Any:
        """Insert one sample; raise SessionNotFoundError or SessionTerminalError."""
        ...

    async def list_for_session(self, session_id: UUID, page: PageRequest) -> Page[Any]: ...

    async def latest_grids(self, session_id: UUID, count: int) -> Sequence[list[list[float]]]: ...

    async def commit(self) -> None: ...


class ReportStore(Protocol):
    """Insert-only persistence for reports."""

    async def create_report(
        self,
        user_id: str,
        session_id: UUID | None,
        outcome: PredictionOutcome,
        recommendation: str,
    ) -> Any: ...

    async def list_for_user(self, user_id: str, page: PageRequest) -> Page[Any]: ...

    async def count(self, *, exclude_condition: str | None = None) -> int: ...

    async def commit(self) -> None: ...


__all__ = ["SessionStore", "SampleStore", "ReportStore"]
