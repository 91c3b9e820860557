"""
Test suite for SampleCRUD database operations.

System role: Verification of append-only telemetry persistence
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from footwatch.boundary.db.CRUD.sample_crud import SampleCRUD
from footwatch.boundary.db.CRUD.session_crud import SessionCRUD
from footwatch.core.exceptions import SessionNotFoundError, SessionTerminalError
from footwatch.core.grid import Foot, Grid
from footwatch.core.pagination import PageRequest
from footwatch.core.session_state import SessionStatus


@pytest.fixture
def session_crud(test_async_db) -> SessionCRUD:
    return SessionCRUD(test_async_db)


@pytest.fixture
def sample_crud(test_async_db) -> SampleCRUD:
    return SampleCRUD(test_async_db)


@pytest.fixture
def grid() -> Grid:
    return Grid.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


class TestSampleCRUDAppend:
    """Test suite for SampleCRUD.append()."""

    async def test_append_stores_grid(
        self,
        session_crud: SessionCRUD,
        sample_crud: SampleCRUD,
        grid: Grid,
    ) -> None:
        """Test the stored row carries the grid shape and rows."""
        # Arrange
        session = await session_crud.create_session(owner_id="alice")

        # Act
        sample = await sample_crud.append(session.id, grid, foot="left", stats={"peak": 6.0})

        # Assert
        assert sample.session_id == session.id
        assert sample.foot is Foot.LEFT
        assert (sample.grid_width, sample.grid_height) == (3, 2)
        assert sample.pressure == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        assert sample.stats == {"peak": 6.0}
        assert sample.captured_at is not None

    async def test_append_unknown_session_raises(self, sample_crud: SampleCRUD, grid: Grid) -> None:
        """Test referential integrity is checked before insert."""
        with pytest.raises(SessionNotFoundError):
            await sample_crud.append(uuid.uuid4(), grid)

    async def test_append_to_ended_session_raises(
        self,
        session_crud: SessionCRUD,
        sample_crud: SampleCRUD,
        grid: Grid,
    ) -> None:
        """Test an ended session accepts no more samples."""
        session = await session_crud.create_session(owner_id="alice")
        await session_crud.update_if_version(session.id, 1, status=SessionStatus.ENDED)

        with pytest.raises(SessionTerminalError):
            await sample_crud.append(session.id, grid)

        page = await sample_crud.list_for_session(session.id, PageRequest(limit=10, offset=0))
        assert page.total == 0


class TestSampleCRUDRead:
    """Test suite for listing and history reads."""

    async def test_list_newest_capture_first_and_latest_grids_oldest_first(
        self,
        session_crud: SessionCRUD,
        sample_crud: SampleCRUD,
    ) -> None:
        """Test listing order and the history window used for predictions."""
        # Arrange
        session = await session_crud.create_session(owner_id="alice")
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for i in range(3):
            await sample_crud.append(
                session.id,
                Grid.from_rows([[float(i)]]),
                captured_at=base + timedelta(seconds=i),
            )

        # Act
        page = await sample_crud.list_for_session(session.id, PageRequest(limit=10, offset=0))
        history = await sample_crud.latest_grids(session.id, 2)

        # Assert
        assert [s.pressure for s in page.items] == [[[2.0]], [[1.0]], [[0.0]]]
        assert list(history) == [[[1.0]], [[2.0]]]
