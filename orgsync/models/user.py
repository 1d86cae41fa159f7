"""
User administration schemas.

Dependencies: pydantic, email-validator
System role: User API contracts
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from orgsync.core.authorization import UserRole
from orgsync.models.auth import MIN_NAME_LENGTH, MIN_PASSWORD_LENGTH
from orgsync.models.common import OrganizationRef


class UserResponse(BaseModel):
    """Public user representation (never includes the password hash)."""

    id: int
    email: str
    name: str
    role: UserRole
    organization_id: int | None
    organization: OrganizationRef | None = None
    created_at: datetime
    updated_at: datetime


class UpdateUserRequest(BaseModel):
    """
    Request schema for updating a user.

    Only fields present in the body are changed; sending
    ``organization_id: null`` removes the user from their organization.
    """

    name: str | None = None
    email: EmailStr | None = None
    role: UserRole | None = None
    organization_id: int | None = Field(
        None,
        validation_alias=AliasChoices("organization_id", "organizationId"),
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if len(value) < MIN_NAME_LENGTH:
            raise ValueError(f"Name must be at least {MIN_NAME_LENGTH} characters")
        return value


class ChangePasswordRequest(BaseModel):
    """Request schema for a self-service password change."""

    current_password: str = Field(
        ...,
        validation_alias=AliasChoices("current_password", "currentPassword"),
    )
    new_password: str = Field(
        ...,
        validation_alias=AliasChoices("new_password", "newPassword"),
    )

    @field_validator("current_password")
    @classmethod
    def check_current_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Current password and new password are required")
        return value

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Current password and new password are required")
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return value


class AssignOrganizationRequest(BaseModel):
    """Request schema for moving a user into (or out of) an organization."""

    organization_id: int | None = Field(
        ...,
        validation_alias=AliasChoices("organization_id", "organizationId"),
    )


class AssignOrganizationResponse(BaseModel):
    """Response schema for a user organization change."""

    message: str
    user: UserResponse
