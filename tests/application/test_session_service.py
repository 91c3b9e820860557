"""
Test suite for SessionService.

Covers ownership, the state machine, server-stamped end times and the
optimistic-concurrency path.

System role: Verification of the session manager use cases
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from footwatch.application.services.session_service import SessionService
from footwatch.boundary.db.CRUD.session_crud import SessionCRUD
from footwatch.core.exceptions import (
    ConcurrentModificationError,
    ForbiddenError,
    SessionNotFoundError,
    SessionTerminalError,
    ValidationError,
)
from footwatch.core.session_state import SessionStatus

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    """Provide SessionService over the test database with a fixed clock."""
    return SessionService(SessionCRUD(test_async_db), clock=lambda: FIXED_NOW)


class TestCreateAndRead:
    """Test suite for create/get/list."""

    async def test_create_session_owned_by_caller(self, session_service, patient) -> None:
        """Test a created session belongs to the caller and is active."""
        # Act
        session = await session_service.create_session(patient, note="left heel sore")

        # Assert
        assert session.owner_id == "alice"
        assert session.status is SessionStatus.ACTIVE
        assert session.ended_at is None

    async def test_get_session_of_other_user_is_forbidden(
        self, session_service, patient, other_patient
    ) -> None:
        """Test ownership is enforced on reads."""
        session = await session_service.create_session(patient)

        with pytest.raises(ForbiddenError):
            await session_service.get_session(session.id, other_patient)

    async def test_admin_can_read_any_session(self, session_service, patient, admin) -> None:
        """Test administrators bypass ownership."""
        session = await session_service.create_session(patient)

        result = await session_service.get_session(session.id, admin)

        assert result.id == session.id

    async def test_get_unknown_session(self, session_service, patient) -> None:
        """Test a missing session raises not found."""
        with pytest.raises(SessionNotFoundError):
            await session_service.get_session(uuid.uuid4(), patient)

    async def test_list_sessions_clamps_paging(self, session_service, patient, other_patient) -> None:
        """Test listing is owner-scoped with clamped paging."""
        await session_service.create_session(patient)
        await session_service.create_session(other_patient)

        page = await session_service.list_sessions(patient, limit=1000, offset=-5)

        assert page.limit == 100
        assert page.offset == 0
        assert page.total == 1


class TestTransition:
    """Test suite for SessionService.transition()."""

    async def test_end_stamps_server_time(self, session_service, patient) -> None:
        """Test ending stamps ended_at from the server clock."""
        # Arrange
        session = await session_service.create_session(patient)

        # Act
        ended = await session_service.transition(session.id, patient, status=SessionStatus.ENDED)

        # Assert
        assert ended.status is SessionStatus.ENDED
        assert ended.ended_at == FIXED_NOW
        assert ended.version == 2

    async def test_pause_and_resume(self, session_service, patient) -> None:
        """Test active -> paused -> active."""
        session = await session_service.create_session(patient)

        paused = await session_service.transition(session.id, patient, status=SessionStatus.PAUSED)
        assert paused.status is SessionStatus.PAUSED

        resumed = await session_service.transition(session.id, patient, status=SessionStatus.ACTIVE)
        assert resumed.status is SessionStatus.ACTIVE
        assert resumed.ended_at is None
        assert resumed.version == 3

    async def test_same_state_is_noop(self, session_service, patient) -> None:
        """Test requesting the current state changes nothing."""
        session = await session_service.create_session(patient)

        result = await session_service.transition(session.id, patient, status=SessionStatus.ACTIVE)

        assert result.status is SessionStatus.ACTIVE
        assert result.version == 1

    async def test_ended_session_rejects_every_patch(self, session_service, patient) -> None:
        """Test ended is terminal for status and note changes alike."""
        session = await session_service.create_session(patient)
        await session_service.transition(session.id, patient, status=SessionStatus.ENDED)

        with pytest.raises(SessionTerminalError):
            await session_service.transition(session.id, patient, status=SessionStatus.ACTIVE)
        with pytest.raises(SessionTerminalError):
            await session_service.transition(session.id, patient, note="too late")

    async def test_empty_patch_is_rejected(self, session_service, patient) -> None:
        """Test a patch with nothing to change is a validation error."""
        session = await session_service.create_session(patient)

        with pytest.raises(ValidationError):
            await session_service.transition(session.id, patient)

    async def test_stale_client_version_conflicts(self, session_service, patient) -> None:
        """Test a client version behind the stored one is rejected."""
        session = await session_service.create_session(patient)
        await session_service.transition(session.id, patient, note="v2")

        with pytest.raises(ConcurrentModificationError):
            await session_service.transition(
                session.id, patient, status=SessionStatus.PAUSED, expected_version=1
            )

    async def test_other_user_cannot_transition(self, session_service, patient, other_patient) -> None:
        """Test ownership is enforced on writes."""
        session = await session_service.create_session(patient)

        with pytest.raises(ForbiddenError):
            await session_service.transition(session.id, other_patient, status=SessionStatus.ENDED)


class TestTransitionRace:
    """Test suite for losing the conditional update to another writer."""

    @pytest.fixture
    def store(self) -> AsyncMock:
        return AsyncMock()

    @staticmethod
    def _session(status: SessionStatus, version: int = 1) -> SimpleNamespace:
        return SimpleNamespace(
            id=uuid.uuid4(), owner_id="alice", status=status, version=version, ended_at=None
        )

    async def test_lost_race_to_end_reports_terminal(self, store, patient) -> None:
        """Test a concurrent end turns the losing transition into a terminal conflict."""
        # Arrange
        before = self._session(SessionStatus.ACTIVE)
        after = SimpleNamespace(**{**vars(before), "status": SessionStatus.ENDED, "version": 2})
        store.get.side_effect = [before, after]
        store.update_if_version.return_value = None
        service = SessionService(store, clock=lambda: FIXED_NOW)

        # Act / Assert
        with pytest.raises(SessionTerminalError):
            await service.transition(before.id, patient, status=SessionStatus.ENDED)
        store.commit.assert_not_awaited()

    async def test_lost_race_to_other_write_reports_concurrent_modification(self, store, patient) -> None:
        """Test a concurrent non-terminal write is reported as a version conflict."""
        before = self._session(SessionStatus.ACTIVE)
        after = SimpleNamespace(**{**vars(before), "status": SessionStatus.PAUSED, "version": 2})
        store.get.side_effect = [before, after]
        store.update_if_version.return_value = None
        service = SessionService(store, clock=lambda: FIXED_NOW)

        with pytest.raises(ConcurrentModificationError):
            await service.transition(before.id, patient, note="hello")
