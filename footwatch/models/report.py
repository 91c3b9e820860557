"""
Report and prediction models and schemas.

Dependencies: pydantic
System role: Prediction and report API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from footwatch.core.outcomes import CONFIDENCE_MAX, CONFIDENCE_MIN, ReportSource


class PredictRequest(BaseModel):
    """Request schema for running the prediction pipeline."""

    session_id: uuid.UUID | None = Field(default=None, description="Session the prediction covers")
    metadata: dict[str, Any] = Field(description="Arbitrary patient/context metadata")
    pressure: Any = Field(
        default=None,
        description="Pressure data in any array shape; recent session samples when omitted",
    )


class ReportSubmitRequest(BaseModel):
    """Request schema for submitting a precomputed report."""

    session_id: uuid.UUID | None = None
    condition: str = Field(min_length=1, max_length=255)
    confidence: float = Field(
        ge=CONFIDENCE_MIN,
        le=CONFIDENCE_MAX,
        strict=True,
        allow_inf_nan=False,
        description="Probability in [0, 1] or percentage in (1, 100]; stored as an integer percentage",
    )
    model_version: str | None = Field(default=None, max_length=255)
    recommendation: str | None = Field(default=None, max_length=2000)


class ReportResponse(BaseModel):
    """Response schema for a stored report."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    session_id: uuid.UUID | None
    condition: str
    confidence: int
    model_version: str
    recommendation: str
    source: ReportSource
    created_at: datetime


class AnalyticsResponse(BaseModel):
    """Administrative summary counts."""

    total_sessions: int
    active_sessions: int
    sessions_today: int
    total_reports: int
    flagged_reports: int
