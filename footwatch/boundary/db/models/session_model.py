"""
Session ORM model.

Represents one monitoring episode for a patient.

Dependencies: sqlalchemy, footwatch.boundary.db.base
System role: Session persistence for the monitoring lifecycle
"""

from datetime import datetime

from sqlalchemy import Enum, Integer, String, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from footwatch.boundary.db.base import Base, UUIDMixin, UTCDateTime, enum_values, utc_now
from footwatch.core.session_state import SessionStatus


class SessionModel(Base, UUIDMixin):
    """
    Session ORM model for a patient's monitoring episode.

    Status changes only through the session manager. ``version`` is the
    optimistic-concurrency token: every successful write increments it and
    every conditional update checks it.

    Attributes:
        id: UUID primary key (auto-generated)
        owner_id: Opaque reference to the owning user
        status: Lifecycle state (active/paused/ended)
        started_at: Creation timestamp (UTC, immutable)
        ended_at: Terminal timestamp, stamped by the server on end
        note: Optional free text
        version: Optimistic-concurrency token
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "sessions"
    __table_args__ = (Index("ix_sessions_owner_started", "owner_id", "started_at"),)

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[SessionStatus] = mapped_column(
        Enum(SessionStatus, native_enum=False, length=16, values_callable=enum_values),
        nullable=False,
        default=SessionStatus.ACTIVE,
    )

    started_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
    )

    ended_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(),
        nullable=True,
        default=None,
    )

    note: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
    )
