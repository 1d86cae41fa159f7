"""
Authentication schemas.

Request/response schemas for registration and login.

Dependencies: pydantic, email-validator
System role: Auth API contracts
"""

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from orgsync.core.authorization import UserRole

MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2


class RegisterRequest(BaseModel):
    """Request schema for creating an account."""

    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., description="Plaintext password (at least 6 characters)")
    name: str = Field(..., description="Display name (at least 2 characters)")
    organization_id: int | None = Field(
        None,
        validation_alias=AliasChoices("organization_id", "organizationId"),
        description="Ignored; organizations are joined via PUT /api/users/{id}/organization",
    )

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return value

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < MIN_NAME_LENGTH:
            raise ValueError(f"Name must be at least {MIN_NAME_LENGTH} characters")
        return value


class LoginRequest(BaseModel):
    """Request schema for exchanging credentials for a token."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthUser(BaseModel):
    """Public user fields returned with a token."""

    id: int
    email: str
    name: str
    role: UserRole
    organization_id: int | None = None


class AuthResponse(BaseModel):
    """Response schema for register and login."""

    message: str
    token: str
    user: AuthUser
