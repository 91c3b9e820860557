"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from footwatch.configs.base import BaseSettings
from footwatch.configs.database import DatabaseSettings
from footwatch.configs.device import DeviceSettings
from footwatch.configs.identity import IdentitySettings
from footwatch.configs.prediction import PredictionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    api_prefix: str = Field(default="/api/v1", description="Prefix for every API router")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    device: DeviceSettings = Field(default_factory=DeviceSettings)
    prediction: PredictionSettings = Field(default_factory=PredictionSettings)
    identity: IdentitySettings = Field(default_factory=IdentitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from footwatch.configs import get_settings
        settings = get_settings()
    """
    return Settings()
