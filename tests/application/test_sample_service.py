"""
Test suite for SampleService.

System role: Verification of user-path sample ingestion
"""

import uuid

import pytest

from footwatch.application.services.sample_service import SampleService
from footwatch.application.services.session_service import SessionService
from footwatch.boundary.db.CRUD.sample_crud import SampleCRUD
from footwatch.boundary.db.CRUD.session_crud import SessionCRUD
from footwatch.core.exceptions import (
    ForbiddenError,
    GridShapeError,
    SessionNotFoundError,
    SessionTerminalError,
)
from footwatch.core.grid import Foot
from footwatch.core.session_state import SessionStatus
from footwatch.models.sample import SampleCreateRequest


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    return SessionService(SessionCRUD(test_async_db))


@pytest.fixture
def sample_service(test_async_db, session_service) -> SampleService:
    return SampleService(session_service, SampleCRUD(test_async_db))


class TestAddSample:
    """Test suite for SampleService.add_sample()."""

    async def test_add_sample_defaults_foot_to_both(self, session_service, sample_service, patient) -> None:
        """Test an omitted foot is stored as both."""
        # Arrange
        session = await session_service.create_session(patient)
        request = SampleCreateRequest(pressure=[[1.0, 2.0], [3.0, 4.0]])

        # Act
        sample = await sample_service.add_sample(session.id, patient, request)

        # Assert
        assert sample.foot is Foot.BOTH
        assert (sample.grid_width, sample.grid_height) == (2, 2)

    async def test_shape_mismatch_is_rejected(self, session_service, sample_service, patient) -> None:
        """Test declared dimensions must match the pressure data."""
        session = await session_service.create_session(patient)
        request = SampleCreateRequest(grid_width=3, grid_height=1, pressure=[[1.0, 2.0]])

        with pytest.raises(GridShapeError):
            await sample_service.add_sample(session.id, patient, request)

    async def test_ended_session_rejects_samples(self, session_service, sample_service, patient) -> None:
        """Test no sample lands after the session ends."""
        session = await session_service.create_session(patient)
        await session_service.transition(session.id, patient, status=SessionStatus.ENDED)

        with pytest.raises(SessionTerminalError):
            await sample_service.add_sample(
                session.id, patient, SampleCreateRequest(pressure=[[1.0]])
            )

    async def test_unknown_session(self, sample_service, patient) -> None:
        """Test an unknown session is not found."""
        with pytest.raises(SessionNotFoundError):
            await sample_service.add_sample(
                uuid.uuid4(), patient, SampleCreateRequest(pressure=[[1.0]])
            )

    async def test_other_user_cannot_add(self, session_service, sample_service, patient, other_patient) -> None:
        """Test ownership is enforced."""
        session = await session_service.create_session(patient)

        with pytest.raises(ForbiddenError):
            await sample_service.add_sample(
                session.id, other_patient, SampleCreateRequest(pressure=[[1.0]])
            )


class TestListSamples:
    """Test suite for SampleService.list_samples()."""

    async def test_list_samples_uses_sample_bounds(self, session_service, sample_service, patient) -> None:
        """Test sample paging defaults to 100 and caps at 500."""
        session = await session_service.create_session(patient)
        await sample_service.add_sample(session.id, patient, SampleCreateRequest(pressure=[[1.0]]))

        default_page = await sample_service.list_samples(session.id, patient)
        capped_page = await sample_service.list_samples(session.id, patient, limit=9999)

        assert default_page.limit == 100
        assert capped_page.limit == 500
        assert default_page.total == 1
