"""
Device ingestion endpoint.

Routes:
- POST /sensor/ingest - Store one sample pushed by monitoring hardware

The body is read raw so the device secret is checked before any parsing.

Dependencies: footwatch.application.services.ingestion_service
System role: Device telemetry HTTP API
"""

from fastapi import APIRouter, Depends, Header, Request, status

from footwatch.api.deps import get_ingestion_service
from footwatch.application.services import IngestionService
from footwatch.models.sample import SampleResponse

router = APIRouter(prefix="/sensor", tags=["sensor"])


@router.post("/ingest", response_model=SampleResponse, status_code=status.HTTP_201_CREATED)
async def ingest_sample(
    request: Request,
    authorization: str | None = Header(default=None),
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> SampleResponse:
    """
    Accept a device sample authenticated by the shared bearer secret.

    Raises:
        401: Missing or wrong device secret
        400: Body is not a valid sample
        404: Unknown session
        409: Session ended
    """
    sample = await ingestion_service.ingest(authorization, await request.body())
    return SampleResponse.model_validate(sample)
