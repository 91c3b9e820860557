"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - build_async_engine(), build_session_factory(), create_all_tables(): Connection management
  - SessionModel, SampleModel, ReportModel: Core domain entities
  - SessionCRUD, SampleCRUD, ReportCRUD: Store implementations

Dependencies: sqlalchemy, footwatch.configs
System role: Database adapter providing persistent storage for sessions,
samples, and reports.
"""

from footwatch.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now
from footwatch.boundary.db.connection import (
    build_async_engine,
    build_session_factory,
    create_all_tables,
)
from footwatch.boundary.db.models import ReportModel, SampleModel, SessionModel
from footwatch.boundary.db.CRUD import (
    BaseCRUD,
    ReportCRUD,
    SampleCRUD,
    SessionCRUD,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "utc_now",
    # Connection
    "build_async_engine",
    "build_session_factory",
    "create_all_tables",
    # Models
    "SessionModel",
    "SampleModel",
    "ReportModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "SampleCRUD",
    "ReportCRUD",
]
