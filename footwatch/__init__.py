"""Footwatch: monitoring-session lifecycle and sensor-telemetry service."""

__version__ = "0.1.0"
