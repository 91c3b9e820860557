"""API routers."""

from . import admin, health, predict, reports, sensor, sessions

__all__ = ["admin", "health", "predict", "reports", "sensor", "sessions"]
