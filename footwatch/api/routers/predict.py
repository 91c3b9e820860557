"""
Prediction endpoint.

Routes:
- POST /predict - Run the model (or the fallback) and store a report

Dependencies: footwatch.application.services.prediction_service
System role: Prediction HTTP API
"""

from fastapi import APIRouter, Depends, status

from footwatch.api.deps import get_current_user, get_prediction_service
from footwatch.application.services import PredictionService
from footwatch.boundary.identity import CallerIdentity
from footwatch.models.report import PredictRequest, ReportResponse

router = APIRouter(tags=["predict"])


@router.post("/predict", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def predict(
    request: PredictRequest,
    caller: CallerIdentity = Depends(get_current_user),
    prediction_service: PredictionService = Depends(get_prediction_service),
) -> ReportResponse:
    """
    Produce exactly one report for the caller.

    A slow or failing model never fails the request: the stored report
    then carries the fallback outcome.

    Args:
        request: PredictRequest with metadata and optional pressure/session
        caller: Authenticated user
        prediction_service: Injected PredictionService

    Returns:
        ReportResponse: The stored report
    """
    report = await prediction_service.predict(caller, request)
    return ReportResponse.model_validate(report)
