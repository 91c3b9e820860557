"""
Test suite for ReportService and AnalyticsService.

System role: Verification of report listing, submission and admin counts
"""

from datetime import datetime, timezone

import pytest

from footwatch.application.services.analytics_service import AnalyticsService
from footwatch.application.services.report_service import ReportService
from footwatch.application.services.session_service import SessionService
from footwatch.boundary.db.CRUD.report_crud import ReportCRUD
from footwatch.boundary.db.CRUD.session_crud import SessionCRUD
from footwatch.core.exceptions import ForbiddenError
from footwatch.core.outcomes import ReportSource
from footwatch.core.session_state import SessionStatus
from footwatch.models.report import ReportSubmitRequest


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    return SessionService(SessionCRUD(test_async_db))


@pytest.fixture
def report_service(test_async_db, session_service) -> ReportService:
    return ReportService(session_service, ReportCRUD(test_async_db))


class TestSubmitReport:
    """Test suite for ReportService.submit_report()."""

    async def test_submitted_report_defaults(self, report_service, patient) -> None:
        """Test confidence rounding, manual version and derived recommendation."""
        # Act
        report = await report_service.submit_report(
            patient, ReportSubmitRequest(condition="normal", confidence=72.6)
        )

        # Assert
        assert report.confidence == 73
        assert report.model_version == "manual"
        assert report.recommendation == "Maintain routine checks."
        assert report.source is ReportSource.SUBMITTED

    async def test_explicit_fields_are_kept(self, report_service, patient) -> None:
        """Test client-supplied version and recommendation are stored."""
        report = await report_service.submit_report(
            patient,
            ReportSubmitRequest(
                condition="ulcer_risk",
                confidence=90.0,
                model_version="clinic-7",
                recommendation="Offload the forefoot.",
            ),
        )

        assert report.model_version == "clinic-7"
        assert report.recommendation == "Offload the forefoot."

    async def test_foreign_session_is_forbidden(
        self, report_service, session_service, patient, other_patient
    ) -> None:
        """Test a report cannot be attached to another user's session."""
        session = await session_service.create_session(patient)

        with pytest.raises(ForbiddenError):
            await report_service.submit_report(
                other_patient,
                ReportSubmitRequest(session_id=session.id, condition="normal", confidence=10.0),
            )


class TestListReports:
    """Test suite for ReportService.list_reports()."""

    async def test_lists_only_own_reports(self, report_service, patient, other_patient) -> None:
        """Test owner scoping."""
        await report_service.submit_report(patient, ReportSubmitRequest(condition="normal", confidence=1.0))
        await report_service.submit_report(other_patient, ReportSubmitRequest(condition="normal", confidence=1.0))

        page = await report_service.list_reports(patient)

        assert page.total == 1
        assert page.items[0].user_id == "alice"


class TestAnalytics:
    """Test suite for AnalyticsService.summary()."""

    async def test_summary_counts(self, test_async_db, session_service, report_service, patient, admin) -> None:
        """Test the five dashboard counts."""
        # Arrange
        first = await session_service.create_session(patient)
        await session_service.create_session(patient)
        await session_service.transition(first.id, patient, status=SessionStatus.ENDED)
        await report_service.submit_report(patient, ReportSubmitRequest(condition="normal", confidence=5.0))
        await report_service.submit_report(patient, ReportSubmitRequest(condition="ulcer_risk", confidence=5.0))
        service = AnalyticsService(
            SessionCRUD(test_async_db),
            ReportCRUD(test_async_db),
            clock=lambda: datetime.now(timezone.utc),
        )

        # Act
        summary = await service.summary(admin)

        # Assert
        assert summary == {
            "total_sessions": 2,
            "active_sessions": 1,
            "sessions_today": 2,
            "total_reports": 2,
            "flagged_reports": 1,
        }

    async def test_summary_requires_admin(self, test_async_db, patient) -> None:
        """Test non-admins are forbidden."""
        service = AnalyticsService(SessionCRUD(test_async_db), ReportCRUD(test_async_db))

        with pytest.raises(ForbiddenError):
            await service.summary(patient)
