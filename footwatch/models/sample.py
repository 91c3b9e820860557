"""
Sample domain models and schemas.

Request/response schemas for pressure-sample ingestion and listing.
Shape checking of ``pressure`` against ``grid_width``/``grid_height``
happens in the Grid value type, not here.

Dependencies: pydantic, footwatch.core.grid
System role: Sample API contracts
"""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from footwatch.core.grid import MAX_DIMENSION, MIN_DIMENSION, Foot, Grid

FiniteNumber = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class SampleCreateRequest(BaseModel):
    """Request schema for appending a sample to a session."""

    model_config = ConfigDict(populate_by_name=True)

    foot: Foot = Field(default=Foot.BOTH, description="left, right or both")
    grid_width: int | None = Field(
        default=None,
        ge=MIN_DIMENSION,
        le=MAX_DIMENSION,
        description="Columns per row; inferred from pressure when omitted",
    )
    grid_height: int | None = Field(
        default=None,
        ge=MIN_DIMENSION,
        le=MAX_DIMENSION,
        description="Number of rows; inferred from pressure when omitted",
    )
    pressure: list[list[FiniteNumber]] = Field(
        min_length=1,
        description="Row-major pressure grid",
    )
    stats: dict[str, FiniteNumber] | None = Field(default=None, description="Numeric summary")
    captured_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("captured_at", "ts"),
        description="Capture time; server time when omitted",
    )

    def to_grid(self) -> Grid:
        """Build the shape-checked grid (raises GridShapeError)."""
        return Grid.from_rows(self.pressure, width=self.grid_width, height=self.grid_height)


class DeviceSampleRequest(SampleCreateRequest):
    """Request schema for raw device ingestion."""

    session_id: uuid.UUID = Field(description="Target session, as a UUID string")


class SampleResponse(BaseModel):
    """Response schema for a stored sample."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    session_id: uuid.UUID
    foot: Foot
    grid_width: int
    grid_height: int
    pressure: list[list[float]]
    stats: dict[str, float] | None
    captured_at: datetime
    created_at: datetime
