"""
Session CRUD operations.

Provides create/read/list operations for SessionModel and the
version-checked update that makes ``ended`` terminal under concurrency.

Dependencies: sqlalchemy, footwatch.boundary.db.models
System role: Session persistence operations
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from footwatch.boundary.db.base import utc_now
from footwatch.boundary.db.models.session_model import SessionModel
from footwatch.boundary.db.CRUD.base_crud import BaseCRUD
from footwatch.core.exceptions import SessionNotFoundError
from footwatch.core.pagination import Page, PageRequest
from footwatch.core.session_state import SessionStatus


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Implements the SessionStore interface.
    """

    resource = "session"

    def __init__(self, db: AsyncSession) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel, db)

    async def create_session(self, owner_id: str, note: str | None = None) -> SessionModel:
        """
        Create a session in its initial state.

        Args:
            owner_id: Owning user reference
            note: Optional free text

        Returns:
            SessionModel: status=active, ended_at=None, version=1
        """
        now = utc_now()
        return await self.create(
            owner_id=owner_id,
            note=note,
            status=SessionStatus.ACTIVE,
            started_at=now,
            ended_at=None,
            version=1,
            updated_at=now,
        )

    async def list_for_owner(self, owner_id: str, page: PageRequest) -> Page[SessionModel]:
        """
        List one owner's sessions, most recently started first.

        Args:
            owner_id: Owning user reference
            page: Clamped limit/offset

        Returns:
            Page of SessionModels
        """
        return await self.page_where(
            SessionModel.owner_id == owner_id,
            order_by=(SessionModel.started_at.desc(), SessionModel.id.desc()),
            page=page,
        )

    async def update_if_version(
        self,
        id: UUID,
        expected_version: int,
        **values: Any,
    ) -> SessionModel | None:
        """
        Conditionally update a session.

        The UPDATE matches only while the row still carries
        ``expected_version`` and is not ended, so of two concurrent
        transitions to ``ended`` at most one succeeds.

        Args:
            id: Session UUID
            expected_version: Version the caller read
            **values: Columns to set

        Returns:
            Updated SessionModel, or None if the condition did not match
        """
        stmt = (
            update(SessionModel)
            .where(
                SessionModel.id == id,
                SessionModel.version == expected_version,
                SessionModel.status != SessionStatus.ENDED,
            )
            .values(version=SessionModel.version + 1, updated_at=utc_now(), **values)
            .returning(SessionModel)
            .execution_options(synchronize_session="fetch", populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count(
        self,
        *,
        status: SessionStatus | None = None,
        started_since: datetime | None = None,
    ) -> int:
        """
        Count sessions across all owners.

        Args:
            status: Only sessions in this state
            started_since: Only sessions started at or after this instant

        Returns:
            int: Matching session count
        """
        criteria = []
        if status is not None:
            criteria.append(SessionModel.status == status)
        if started_since is not None:
            criteria.append(SessionModel.started_at >= started_since)
        return await self.count_where(*criteria)

    def _not_found(self, id: UUID) -> SessionNotFoundError:
        return SessionNotFoundError(str(id))
