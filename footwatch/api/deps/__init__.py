"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_analytics_service,
    get_async_db,
    get_current_user,
    get_ingestion_service,
    get_prediction_service,
    get_report_service,
    get_sample_service,
    get_session_service,
)

__all__ = [
    "get_analytics_service",
    "get_async_db",
    "get_current_user",
    "get_ingestion_service",
    "get_prediction_service",
    "get_report_service",
    "get_sample_service",
    "get_session_service",
]
