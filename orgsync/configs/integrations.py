"""
External integration configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Wealthbox API client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from orgsync.configs.base import BaseSettings


class WealthboxSettings(BaseSettings):
    """Wealthbox CRM API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WEALTHBOX_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://api.crmworkspace.com/v1",
        description="Wealthbox API base URL",
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP timeout for Wealthbox calls")
