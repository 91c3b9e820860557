"""
Session service orchestrator.

The session manager: owns the monitoring-session state machine and is the
only writer of ``status`` and ``ended_at``.

Dependencies: footwatch.boundary.stores, footwatch.core
System role: Session lifecycle use case orchestration
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from footwatch.boundary.db.base import utc_now
from footwatch.boundary.identity import CallerIdentity
from footwatch.boundary.stores import SessionStore
from footwatch.core.exceptions import (
    ConcurrentModificationError,
    ConflictError,
    ForbiddenError,
    SessionTerminalError,
    ValidationError,
)
from footwatch.core.pagination import Page, clamp_page
from footwatch.core.session_state import SessionStatus, can_transition, is_terminal

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        sessions: SessionStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize session service.

        Args:
            sessions: Session store
            clock: Server clock used to stamp ended_at
        """
        self.sessions = sessions
        self.clock = clock

    async def create_session(self, caller: CallerIdentity, note: str | None = None):
        """
        Create a new monitoring session owned by the caller.

        Args:
            caller: Authenticated user
            note: Optional free text

        Returns:
            SessionModel: status=active, ended_at=None
        """
        session = await self.sessions.create_session(owner_id=caller.user_id, note=note)
        await self.sessions.commit()
        logger.info(
            "Session created",
            extra={"session_id": str(session.id), "owner_id": caller.user_id},
        )
        return session

    async def get_session(self, session_id: UUID, caller: CallerIdentity):
        """
        Get session by ID.

        Args:
            session_id: Session UUID
            caller: Authenticated user

        Returns:
            SessionModel

        Raises:
            SessionNotFoundError: If session not found
            ForbiddenError: If caller is neither owner nor admin
        """
        session = await self.sessions.get(session_id)
        if not caller.can_access(session.owner_id):
            raise ForbiddenError(
                "Not allowed to access this session",
                {"session_id": str(session_id)},
            )
        return session

    async def list_sessions(
        self,
        caller: CallerIdentity,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Page:
        """
        List the caller's own sessions, most recent first.

        Args:
            caller: Authenticated user
            limit: Page size, clamped to [1, 100]
            offset: Offset, clamped to >= 0

        Returns:
            Page of SessionModels
        """
        return await self.sessions.list_for_owner(caller.user_id, clamp_page(limit, offset))

    async def transition(
        self,
        session_id: UUID,
        caller: CallerIdentity,
        status: SessionStatus | None = None,
        note: str | None = None,
        expected_version: int | None = None,
    ):
        """
        Transition and/or patch a session.

        Transition to ended stamps ended_at with the server clock. A session
        that has ended rejects every further write. The store update is
        conditional on the version read here, so a concurrent writer that
        got there first turns this call into a conflict.

        Args:
            session_id: Session UUID
            caller: Authenticated user
            status: Target status, None to leave unchanged
            note: Replacement note, None to leave unchanged
            expected_version: Version the client last saw

        Returns:
            SessionModel: Updated (or unchanged, for a same-state no-op) session

        Raises:
            ValidationError: If neither status nor note is given
            SessionNotFoundError: If session not found
            ForbiddenError: If caller is neither owner nor admin
            SessionTerminalError: If the session has ended
            ConcurrentModificationError: If the version check fails
        """
        if status is None and note is None:
            raise ValidationError("At least one of status or note must be provided")

        session = await self.get_session(session_id, caller)
        if is_terminal(session.status):
            raise SessionTerminalError(str(session_id))
        if expected_version is not None and expected_version != session.version:
            raise ConcurrentModificationError(str(session_id), expected_version)

        values: dict = {}
        if status is not None and status != session.status:
            if not can_transition(session.status, status):
                raise ConflictError(
                    f"Cannot move session from {session.status.value} to {status.value}",
                    {"session_id": str(session_id)},
                )
            values["status"] = status
            if status is SessionStatus.ENDED:
                values["ended_at"] = self.clock()
        if note is not None:
            values["note"] = note

        if not values:
            return session

        read_version = session.version
        updated = await self.sessions.update_if_version(session.id, read_version, **values)
        if updated is None:
            current = await self.sessions.get(session.id, refresh=True)
            if is_terminal(current.status):
                raise SessionTerminalError(str(session_id))
            raise ConcurrentModificationError(str(session_id), read_version)

        await self.sessions.commit()
        logger.info(
            "Session updated",
            extra={
                "session_id": str(session_id),
                "status": updated.status.value,
                "version": updated.version,
            },
        )
        return updated
