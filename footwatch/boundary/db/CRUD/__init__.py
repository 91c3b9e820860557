"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations. Each
instance is bound to a request-scoped AsyncSession.

Usage:
    from footwatch.boundary.db.CRUD import SessionCRUD

    sessions = SessionCRUD(db)
    session = await sessions.get(session_id)
"""

from footwatch.boundary.db.CRUD.base_crud import BaseCRUD
from footwatch.boundary.db.CRUD.session_crud import SessionCRUD
from footwatch.boundary.db.CRUD.sample_crud import SampleCRUD
from footwatch.boundary.db.CRUD.report_crud import ReportCRUD

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "SampleCRUD",
    "ReportCRUD",
]
