"""
Administrative endpoints.

Routes:
- GET /admin/analytics - Cross-user summary counts

Dependencies: footwatch.application.services.analytics_service
System role: Admin HTTP API
"""

from fastapi import APIRouter, Depends

from footwatch.api.deps import get_analytics_service, get_current_user
from footwatch.application.services import AnalyticsService
from footwatch.boundary.identity import CallerIdentity
from footwatch.models.report import AnalyticsResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/analytics", response_model=AnalyticsResponse)
async def analytics(
    caller: CallerIdentity = Depends(get_current_user),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsResponse:
    """Session and report totals; 403 for anyone but an administrator."""
    return AnalyticsResponse(**await analytics_service.summary(caller))
