"""
Authentication configuration settings.

Token signing and password hashing parameters. The signing secret has no
default: the application refuses to start without it.

Dependencies: pydantic, pydantic_settings
System role: Credential configuration for token issuance and verification
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import SettingsConfigDict

from orgsync.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Bearer token and password hashing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_secret: SecretStr = Field(..., description="Shared secret used to sign bearer tokens")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    token_ttl_hours: int = Field(default=24, ge=1, description="Bearer token lifetime in hours")
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt cost factor")

    @field_validator("jwt_secret")
    @classmethod
    def secret_must_not_be_blank(cls, v: SecretStr) -> SecretStr:
        """Reject empty or whitespace-only secrets."""
        if not v.get_secret_value().strip():
            raise ValueError("AUTH_JWT_SECRET must not be blank")
        return v
