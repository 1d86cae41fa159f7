"""
Integration configuration and Wealthbox sync schemas.

Dependencies: pydantic
System role: Integration API contracts
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator

from orgsync.models.common import OrganizationRef, strip_required


class SaveIntegrationConfigRequest(BaseModel):
    """Request schema for storing an integration API token."""

    integration_type: str = Field(
        ...,
        max_length=64,
        validation_alias=AliasChoices("integration_type", "integrationType"),
        description="Integration identifier, e.g. 'wealthbox'",
    )
    api_token: str = Field(
        ...,
        validation_alias=AliasChoices("api_token", "apiToken"),
        description="Token used to call the external API",
    )

    @field_validator("integration_type")
    @classmethod
    def check_integration_type(cls, value: str) -> str:
        return strip_required(value, "Integration type is required")

    @field_validator("api_token")
    @classmethod
    def check_api_token(cls, value: str) -> str:
        return strip_required(value, "API token is required")


class IntegrationConfigSummary(BaseModel):
    """Stored config without its secret."""

    id: int
    integration_type: str


class SaveIntegrationConfigResponse(BaseModel):
    """Response schema for a saved integration config."""

    message: str
    integration_config: IntegrationConfigSummary


class IntegrationConfigResponse(IntegrationConfigSummary):
    """Stored config including its token, returned to its owner only."""

    api_token: str


class SyncResponse(BaseModel):
    """Outcome of a Wealthbox contact sync."""

    message: str
    count: int = Field(description="Contacts inserted by this run")
    skipped: int = Field(description="Contacts skipped because their email was already stored")
    skipped_emails: list[str]


class WealthboxContactResponse(BaseModel):
    """Synced Wealthbox contact."""

    id: int
    wealthbox_id: str
    email: str
    name: str
    account: int | None
    excluded_from_assignments: bool
    organization_id: int | None
    organization: OrganizationRef | None = None


class ReassignContactRequest(BaseModel):
    """Request schema for moving a synced contact to an organization."""

    organization_id: int = Field(
        ...,
        validation_alias=AliasChoices("organization_id", "organizationId"),
    )


class ReassignContactResponse(BaseModel):
    """Response schema for a contact organization change."""

    message: str
    contact: WealthboxContactResponse
