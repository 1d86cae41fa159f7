"""
Organization schemas.

Request/response schemas for organization operations.

Dependencies: pydantic
System role: Organization API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from orgsync.boundary.db.models.organization_model import ORGANIZATION_NAME_MAX_LENGTH
from orgsync.core.authorization import UserRole
from orgsync.models.common import strip_required


def _check_organization_name(value: str) -> str:
    value = strip_required(value, "Organization name is required")
    if len(value) > ORGANIZATION_NAME_MAX_LENGTH:
        raise ValueError(
            f"Organization name cannot exceed {ORGANIZATION_NAME_MAX_LENGTH} characters"
        )
    return value


class CreateOrganizationRequest(BaseModel):
    """Request schema for creating an organization."""

    name: str = Field(..., description="Organization name (1-50 characters)")
    description: str | None = Field(None, max_length=4096, description="Organization description")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_organization_name(value)


class UpdateOrganizationRequest(BaseModel):
    """Request schema for updating an organization."""

    name: str | None = Field(None, description="Organization name (1-50 characters)")
    description: str | None = Field(None, max_length=4096, description="Organization description")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_organization_name(value)


class OrganizationMember(BaseModel):
    """User summary embedded in an organization."""

    id: int
    name: str
    email: str
    role: UserRole


class OrganizationResponse(BaseModel):
    """Response schema for organization operations."""

    id: int
    name: str
    description: str | None
    owner_id: int | None
    members: list[OrganizationMember] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
