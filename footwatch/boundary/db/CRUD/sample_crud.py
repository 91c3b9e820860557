"""
Sample CRUD operations.

Append-only persistence for SampleModel. Referential integrity and the
ended-session rule are enforced here, because the device gateway does
not bind samples to an owner.

Dependencies: sqlalchemy, footwatch.boundary.db.models
System role: Telemetry persistence operations
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from footwatch.boundary.db.base import utc_now
from footwatch.boundary.db.models.sample_model import SampleModel
from footwatch.boundary.db.models.session_model import SessionModel
from footwatch.boundary.db.CRUD.base_crud import BaseCRUD
from footwatch.core.exceptions import SessionNotFoundError, SessionTerminalError
from footwatch.core.grid import Foot, Grid
from footwatch.core.pagination import Page, PageRequest
from footwatch.core.session_state import SessionStatus


class SampleCRUD(BaseCRUD[SampleModel]):
    """
    CRUD operations for SampleModel.

    Implements the SampleStore interface. There is no update
    or delete method.
    """

    resource = "sample"

    def __init__(self, db: AsyncSession) -> None:
        """Initialize SampleCRUD with SampleModel."""
        super().__init__(SampleModel, db)

    async def append(
        self,
        session_id: UUID,
        grid: Grid,
        foot: str = Foot.BOTH.value,
        stats: dict[str, float] | None = None,
        captured_at: datetime | None = None,
    ) -> SampleModel:
        """
        Append one sample to a session.

        Args:
            session_id: Target session UUID
            grid: Shape-checked pressure grid
            foot: left/right/both
            stats: Optional numeric summary
            captured_at: Capture time; server time when None

        Returns:
            SampleModel: Inserted row

        Raises:
            SessionNotFoundError: If the session does not exist
            SessionTerminalError: If the session has ended
        """
        stmt = select(SessionModel.status).where(SessionModel.id == session_id)
        result = await self.db.execute(stmt)
        status = result.scalar_one_or_none()
        if status is None:
            raise SessionNotFoundError(str(session_id))
        if status == SessionStatus.ENDED:
            raise SessionTerminalError(str(session_id))

        return await self.create(
            session_id=session_id,
            foot=Foot(foot),
            grid_width=grid.width,
            grid_height=grid.height,
            pressure=grid.to_rows(),
            stats=stats,
            captured_at=captured_at or utc_now(),
        )

    async def list_for_session(self, session_id: UUID, page: PageRequest) -> Page[SampleModel]:
        """
        List a session's samples, most recently captured first.

        Args:
            session_id: Session UUID
            page: Clamped limit/offset (sample bounds)

        Returns:
            Page of SampleModels
        """
        return await self.page_where(
            SampleModel.session_id == session_id,
            order_by=(SampleModel.captured_at.desc(), SampleModel.id.desc()),
            page=page,
        )

    async def latest_grids(self, session_id: UUID, count: int) -> Sequence[list[list[float]]]:
        """
        Pressure grids of the most recent samples, oldest first.

        Args:
            session_id: Session UUID
            count: Maximum number of samples

        Returns:
            Sequence of row-major grids in capture order
        """
        stmt = (
            select(SampleModel.pressure)
            .where(SampleModel.session_id == session_id)
            .order_by(SampleModel.captured_at.desc(), SampleModel.id.desc())
            .limit(count)
        )
        result = await self.db.execute(stmt)
        return list(reversed(result.scalars().all()))
