"""
Report CRUD operations.

Insert-only persistence for ReportModel.

Dependencies: sqlalchemy, footwatch.boundary.db.models
System role: Report persistence operations
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from footwatch.boundary.db.models.report_model import ReportModel
from footwatch.boundary.db.CRUD.base_crud import BaseCRUD
from footwatch.core.outcomes import PredictionOutcome
from footwatch.core.pagination import Page, PageRequest


class ReportCRUD(BaseCRUD[ReportModel]):
    """
    CRUD operations for ReportModel.

    Implements the ReportStore interface. Reports are immutable.
    """

    resource = "report"

    def __init__(self, db: AsyncSession) -> None:
        """Initialize ReportCRUD with ReportModel."""
        super().__init__(ReportModel, db)

    async def create_report(
        self,
        user_id: str,
        session_id: UUID | None,
        outcome: PredictionOutcome,
        recommendation: str,
    ) -> ReportModel:
        """
        Insert one report.

        Args:
            user_id: Owning user
            session_id: Optional covered session
            outcome: Condition, confidence, model version and source
            recommendation: Recommendation text

        Returns:
            ReportModel: Inserted row
        """
        return await self.create(
            user_id=user_id,
            session_id=session_id,
            condition=outcome.condition,
            confidence=outcome.confidence,
            model_version=outcome.model_version,
            recommendation=recommendation,
            source=outcome.source,
        )

    async def list_for_user(self, user_id: str, page: PageRequest) -> Page[ReportModel]:
        """
        List one user's reports, newest first.

        Args:
            user_id: Owning user
            page: Clamped limit/offset

        Returns:
            Page of ReportModels
        """
        return await self.page_where(
            ReportModel.user_id == user_id,
            order_by=(ReportModel.created_at.desc(), ReportModel.id.desc()),
            page=page,
        )

    async def count(self, *, exclude_condition: str | None = None) -> int:
        """
        Count reports across all users.

        Args:
            exclude_condition: Skip reports with this condition

        Returns:
            int: Matching report count
        """
        criteria = []
        if exclude_condition is not None:
            criteria.append(ReportModel.condition != exclude_condition)
        return await self.count_where(*criteria)
