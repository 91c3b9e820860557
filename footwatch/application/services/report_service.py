"""
Report service orchestrator.

Owner-scoped report listing and direct submission of precomputed reports.

Dependencies: footwatch.boundary.stores, footwatch.core.outcomes
System role: Report query and submission use cases
"""

import logging

from footwatch.application.services.session_service import SessionService
from footwatch.boundary.identity import CallerIdentity
from footwatch.boundary.stores import ReportStore
from footwatch.core.outcomes import PredictionOutcome, ReportSource, normalize_confidence, recommend
from footwatch.core.pagination import Page, clamp_page
from footwatch.models.report import ReportSubmitRequest

logger = logging.getLogger(__name__)

SUBMITTED_MODEL_VERSION = "manual"


class ReportService:
    """Report service orchestrator."""

    def __init__(self, session_service: SessionService, reports: ReportStore) -> None:
        self.session_service = session_service
        self.reports = reports

    async def list_reports(
        self,
        caller: CallerIdentity,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Page:
        """
        List the caller's own reports, newest first.

        Args:
            caller: Authenticated user
            limit: Page size, clamped to [1, 100]
            offset: Offset, clamped to >= 0

        Returns:
            Page of ReportModels
        """
        return await self.reports.list_for_user(caller.user_id, clamp_page(limit, offset))

    async def submit_report(self, caller: CallerIdentity, request: ReportSubmitRequest):
        """
        Store a report computed elsewhere.

        Confidence goes through the same scale rule as model answers, so
        0.87 and 87 both store 87. A missing recommendation is derived
        from the condition.

        Args:
            caller: Authenticated user, owner of the report
            request: Validated report payload

        Returns:
            ReportModel: Stored report

        Raises:
            SessionNotFoundError: If session_id is unknown
            ForbiddenError: If caller does not own the session
        """
        if request.session_id is not None:
            await self.session_service.get_session(request.session_id, caller)

        outcome = PredictionOutcome(
            condition=request.condition,
            confidence=normalize_confidence(request.confidence),
            model_version=request.model_version or SUBMITTED_MODEL_VERSION,
            source=ReportSource.SUBMITTED,
        )
        report = await self.reports.create_report(
            user_id=caller.user_id,
            session_id=request.session_id,
            outcome=outcome,
            recommendation=request.recommendation or recommend(outcome.condition),
        )
        await self.reports.commit()
        logger.info("Report submitted", extra={"report_id": str(report.id)})
        return report
