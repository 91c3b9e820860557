"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from footwatch.core.session_state import SessionStatus


class CreateSessionRequest(BaseModel):
    """Request schema for creating a new session."""

    note: str | None = Field(default=None, max_length=1000, description="Optional free text")


class SessionPatchRequest(BaseModel):
    """Request schema for transitioning or patching a session."""

    status: SessionStatus | None = Field(default=None, description="Target lifecycle state")
    note: str | None = Field(default=None, max_length=1000)
    ended_at: datetime | None = Field(
        default=None,
        description="Accepted for compatibility and ignored; the server stamps the end time",
    )
    version: int | None = Field(
        default=None,
        ge=1,
        description="Version the client last saw; a mismatch is rejected with 409",
    )


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    owner_id: str
    status: SessionStatus
    started_at: datetime
    ended_at: datetime | None
    note: str | None
    version: int
    updated_at: datetime
