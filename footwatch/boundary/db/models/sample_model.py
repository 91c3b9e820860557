"""
Sample ORM model.

One pressure-grid frame captured during a monitoring session.

Dependencies: sqlalchemy, footwatch.boundary.db.base
System role: Append-only telemetry persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Index, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from footwatch.boundary.db.base import Base, UUIDMixin, TimestampMixin, UTCDateTime, enum_values, utc_now
from footwatch.core.grid import Foot


class SampleModel(Base, UUIDMixin, TimestampMixin):
    """
    Sample ORM model holding one row-major pressure grid.

    ``pressure`` is stored as a JSON list of ``grid_height`` rows of
    ``grid_width`` numbers; the Grid value type guarantees the shape
    before a row reaches this table.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning session (FK)
        foot: left/right/both
        grid_width: Columns per row (1-64)
        grid_height: Rows (1-64)
        pressure: Row-major grid
        stats: Optional numeric summary map
        captured_at: Device capture time, server time when omitted
        created_at: Insert timestamp (UTC)
    """

    __tablename__ = "session_samples"
    __table_args__ = (Index("ix_samples_session_captured", "session_id", "captured_at"),)

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("sessions.id", ondelete="RESTRICT"),
        nullable=False,
    )

    foot: Mapped[Foot] = mapped_column(
        Enum(Foot, native_enum=False, length=8, values_callable=enum_values),
        nullable=False,
        default=Foot.BOTH,
    )

    grid_width: Mapped[int] = mapped_column(Integer, nullable=False)
    grid_height: Mapped[int] = mapped_column(Integer, nullable=False)

    pressure: Mapped[list] = mapped_column(JSON, nullable=False)

    stats: Mapped[dict | None] = mapped_column(JSON, nullable=True, default=None)

    captured_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
    )
