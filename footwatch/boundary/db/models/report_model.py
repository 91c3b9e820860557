"""
Report ORM model.

Persisted outcome of one prediction run or direct submission.

Dependencies: sqlalchemy, footwatch.boundary.db.base
System role: Immutable prediction report persistence
"""

from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Index, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from footwatch.boundary.db.base import Base, UUIDMixin, TimestampMixin, enum_values
from footwatch.core.outcomes import ReportSource


class ReportModel(Base, UUIDMixin, TimestampMixin):
    """
    Report ORM model, immutable once inserted.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        session_id: Optional session the prediction covered
        condition: Predicted condition label
        confidence: Integer percentage 0-100
        model_version: Model identifier, "fallback" for the fallback outcome
        recommendation: Text derived from the condition
        source: model/fallback/submitted
        created_at: Insert timestamp (UTC)
    """

    __tablename__ = "reports"
    __table_args__ = (
        CheckConstraint("confidence >= 0 AND confidence <= 100", name="ck_reports_confidence_pct"),
        Index("ix_reports_user_created", "user_id", "created_at"),
    )

    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    session_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("sessions.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    condition: Mapped[str] = mapped_column(String(255), nullable=False)
    confidence: Mapped[int] = mapped_column(Integer, nullable=False)
    model_version: Mapped[str] = mapped_column(String(255), nullable=False)
    recommendation: Mapped[str] = mapped_column(Text, nullable=False)

    source: Mapped[ReportSource] = mapped_column(
        Enum(ReportSource, native_enum=False, length=16, values_callable=enum_values),
        nullable=False,
    )
