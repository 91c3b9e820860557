"""
Session API endpoints.

Routes:
- POST /sessions - Create new session
- GET /sessions - List the caller's sessions
- GET /sessions/{id} - Get one session
- PATCH /sessions/{id} - Transition or annotate a session
- POST /sessions/{id}/samples - Append a pressure sample
- GET /sessions/{id}/samples - List a session's samples

Dependencies: footwatch.application.services, footwatch.models
System role: Session management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from footwatch.api.deps import get_current_user, get_sample_service, get_session_service
from footwatch.application.services import SampleService, SessionService
from footwatch.boundary.identity import CallerIdentity
from footwatch.models.common import PaginatedResponse
from footwatch.models.sample import SampleCreateRequest, SampleResponse
from footwatch.models.session import CreateSessionRequest, SessionPatchRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest,
    caller: CallerIdentity = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Start a new monitoring session for the caller.

    Args:
        request: CreateSessionRequest with optional note
        caller: Authenticated user
        session_service: Injected SessionService

    Returns:
        SessionResponse: Created session (status=active)
    """
    session = await session_service.create_session(caller, note=request.note)
    return SessionResponse.model_validate(session)


@router.get("", response_model=PaginatedResponse[SessionResponse])
async def list_sessions(
    limit: int | None = None,
    offset: int | None = None,
    caller: CallerIdentity = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> PaginatedResponse[SessionResponse]:
    """
    List the caller's sessions, most recent first.

    Args:
        limit: Page size (default 20, clamped to 1-100)
        offset: Number of sessions to skip (clamped to >= 0)

    Returns:
        PaginatedResponse[SessionResponse]
    """
    page = await session_service.list_sessions(caller, limit=limit, offset=offset)
    return PaginatedResponse[SessionResponse].from_page(page, SessionResponse)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: UUID,
    caller: CallerIdentity = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Get one session the caller owns (admins may read any)."""
    session = await session_service.get_session(session_id, caller)
    return SessionResponse.model_validate(session)


@router.patch("/{session_id}", response_model=SessionResponse)
async def patch_session(
    session_id: UUID,
    request: SessionPatchRequest,
    caller: CallerIdentity = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Transition and/or annotate a session.

    Raises:
        400: Neither status nor note given
        404: Session not found
        409: Session ended, illegal transition or stale version
    """
    session = await session_service.transition(
        session_id,
        caller,
        status=request.status,
        note=request.note,
        expected_version=request.version,
    )
    return SessionResponse.model_validate(session)


@router.post(
    "/{session_id}/samples",
    response_model=SampleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_sample(
    session_id: UUID,
    request: SampleCreateRequest,
    caller: CallerIdentity = Depends(get_current_user),
    sample_service: SampleService = Depends(get_sample_service),
) -> SampleResponse:
    """
    Append a pressure sample to one of the caller's sessions.

    Raises:
        400: Grid shape mismatch
        404: Session not found
        409: Session ended
    """
    sample = await sample_service.add_sample(session_id, caller, request)
    return SampleResponse.model_validate(sample)


@router.get("/{session_id}/samples", response_model=PaginatedResponse[SampleResponse])
async def list_samples(
    session_id: UUID,
    limit: int | None = None,
    offset: int | None = None,
    caller: CallerIdentity = Depends(get_current_user),
    sample_service: SampleService = Depends(get_sample_service),
) -> PaginatedResponse[SampleResponse]:
    """List a session's samples, newest capture first (default 100, max 500)."""
    page = await sample_service.list_samples(session_id, caller, limit=limit, offset=offset)
    return PaginatedResponse[SampleResponse].from_page(page, SampleResponse)
