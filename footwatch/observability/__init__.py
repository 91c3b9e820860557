"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from footwatch.observability.logger import configure_logging

__all__ = ["configure_logging"]
