"""
Sample service orchestrator.

User-authenticated, session-scoped sample append and listing.

Dependencies: footwatch.application.services.session_service, footwatch.boundary.stores
System role: Session-scoped telemetry use cases
"""

import logging
from uuid import UUID

from footwatch.application.services.session_service import SessionService
from footwatch.boundary.identity import CallerIdentity
from footwatch.boundary.stores import SampleStore
from footwatch.core.pagination import Page, clamp_sample_page
from footwatch.models.sample import SampleCreateRequest

logger = logging.getLogger(__name__)


class SampleService:
    """Sample service orchestrator."""

    def __init__(self, session_service: SessionService, samples: SampleStore) -> None:
        """
        Initialize sample service.

        Args:
            session_service: Session manager (ownership checks)
            samples: Sample store
        """
        self.session_service = session_service
        self.samples = samples

    async def add_sample(
        self,
        session_id: UUID,
        caller: CallerIdentity,
        request: SampleCreateRequest,
    ):
        """
        Append a sample to one of the caller's sessions.

        Args:
            session_id: Session UUID
            caller: Authenticated user
            request: Validated sample payload

        Returns:
            SampleModel: Stored sample

        Raises:
            SessionNotFoundError: If session not found
            ForbiddenError: If caller does not own the session
            GridShapeError: If pressure disagrees with the grid dimensions
            SessionTerminalError: If the session has ended
        """
        await self.session_service.get_session(session_id, caller)
        grid = request.to_grid()
        sample = await self.samples.append(
            session_id=session_id,
            grid=grid,
            foot=request.foot.value,
            stats=request.stats,
            captured_at=request.captured_at,
        )
        await self.samples.commit()
        logger.info(
            "Sample stored",
            extra={"session_id": str(session_id), "grid": f"{grid.width}x{grid.height}"},
        )
        return sample

    async def list_samples(
        self,
        session_id: UUID,
        caller: CallerIdentity,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Page:
        """
        List a session's samples, newest capture first.

        Args:
            session_id: Session UUID
            caller: Authenticated user
            limit: Page size, clamped to [1, 500]
            offset: Offset, clamped to >= 0

        Returns:
            Page of SampleModels
        """
        await self.session_service.get_session(session_id, caller)
        return await self.samples.list_for_session(session_id, clamp_sample_page(limit, offset))
