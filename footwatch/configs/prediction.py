"""
Prediction model configuration settings.

Dependencies: pydantic_settings
System role: External model endpoint configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from footwatch.configs.base import BaseSettings


class PredictionSettings(BaseSettings):
    """External prediction model configuration (env prefix ML_)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ML_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Base URL of the model service; unset forces the fallback outcome",
    )
    predict_path: str = Field(default="/predict", description="Path appended to the base URL")
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound on the model call, connect and read included",
    )
    history_samples: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Recent samples sent as pressure when a request carries none",
    )

    @property
    def endpoint(self) -> str | None:
        """Full prediction endpoint URL, or None when no model is configured."""
        if not self.url:
            return None
        return f"{self.url.rstrip('/')}/{self.predict_path.lstrip('/')}"
