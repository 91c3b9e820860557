"""
Identity configuration settings.

The user directory is an external collaborator. The upstream auth proxy
injects the resolved caller into request headers; these settings name them.

Dependencies: pydantic_settings
System role: Caller identity resolution configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from footwatch.configs.base import BaseSettings


class IdentitySettings(BaseSettings):
    """Identity header configuration (env prefix IDENTITY_)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IDENTITY_",
        case_sensitive=False,
        extra="ignore",
    )

    user_header: str = Field(default="X-User-Id", description="Header carrying the user id")
    role_header: str = Field(default="X-User-Role", description="Header carrying the user role")
    default_role: str = Field(default="patient", description="Role assumed when the header is absent")
