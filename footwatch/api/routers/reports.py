"""
Report endpoints.

Routes:
- GET /reports - List the caller's reports
- POST /reports/submit - Store a report computed elsewhere

Dependencies: footwatch.application.services.report_service
System role: Report HTTP API
"""

from fastapi import APIRouter, Depends, status

from footwatch.api.deps import get_current_user, get_report_service
from footwatch.application.services import ReportService
from footwatch.boundary.identity import CallerIdentity
from footwatch.models.common import PaginatedResponse
from footwatch.models.report import ReportResponse, ReportSubmitRequest

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=PaginatedResponse[ReportResponse])
async def list_reports(
    limit: int | None = None,
    offset: int | None = None,
    caller: CallerIdentity = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
) -> PaginatedResponse[ReportResponse]:
    """
    List the caller's reports, newest first.

    Args:
        limit: Page size (default 20, clamped to 1-100)
        offset: Number of reports to skip (clamped to >= 0)
    """
    page = await report_service.list_reports(caller, limit=limit, offset=offset)
    return PaginatedResponse[ReportResponse].from_page(page, ReportResponse)


@router.post("/submit", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def submit_report(
    request: ReportSubmitRequest,
    caller: CallerIdentity = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Store a report whose outcome was computed outside this service."""
    report = await report_service.submit_report(caller, request)
    return ReportResponse.model_validate(report)
