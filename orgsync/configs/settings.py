"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, ValidationError

from orgsync.configs.auth import AuthSettings
from orgsync.configs.base import BaseSettings
from orgsync.configs.database import DatabaseSettings
from orgsync.configs.integrations import WealthboxSettings
from orgsync.configs.server import ServerSettings
from orgsync.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    wealthbox: WealthboxSettings = Field(default_factory=WealthboxSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


def load_settings() -> Settings:
    """
    Build a fresh Settings instance from the environment.

    Raises:
        ConfigurationError: If a required setting (e.g. AUTH_JWT_SECRET) is
            missing or invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            "Invalid or missing configuration",
            details={"fields": missing},
        ) from e


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from orgsync.configs import get_settings
        settings = get_settings()
    """
    return load_settings()
