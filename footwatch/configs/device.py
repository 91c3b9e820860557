"""
Device ingestion configuration settings.

Holds the shared bearer secret that monitoring hardware presents
when pushing pressure samples.

Dependencies: pydantic_settings
System role: Device gateway authentication configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from footwatch.configs.base import BaseSettings


class DeviceSettings(BaseSettings):
    """Device gateway configuration (env prefix DEVICE_)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DEVICE_",
        case_sensitive=False,
        extra="ignore",
    )

    ingest_secret: SecretStr | None = Field(
        default=None,
        description="Shared bearer secret for /sensor/ingest; unset rejects every device",
    )
