"""
Database models package.

Exports:
  - SessionModel: Monitoring session ORM model
  - SampleModel: Pressure sample ORM model
  - ReportModel: Prediction report ORM model

Dependencies: sqlalchemy, footwatch.boundary.db.base
System role: Database model definitions for domain entities
"""

from footwatch.boundary.db.models.session_model import SessionModel
from footwatch.boundary.db.models.sample_model import SampleModel
from footwatch.boundary.db.models.report_model import ReportModel

__all__ = [
    "SessionModel",
    "SampleModel",
    "ReportModel",
]
