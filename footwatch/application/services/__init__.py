"""Service orchestrators."""

from .analytics_service import AnalyticsService
from .ingestion_service import IngestionService
from .prediction_service import PredictionService
from .report_service import ReportService
from .sample_service import SampleService
from .session_service import SessionService

__all__ = [
    "AnalyticsService",
    "IngestionService",
    "PredictionService",
    "ReportService",
    "SampleService",
    "SessionService",
]
