"""
Integration API endpoints.

Routes:
- POST /integrations/config - Save an integration token
- GET /integrations/config/{integration_type} - Read an integration token
- POST /integrations/wealthbox/sync - Pull contacts from Wealthbox
- GET /integrations/wealthbox/users - List synced contacts
- PUT /integrations/wealthbox/users/{contact_id}/organization - Reassign a contact

Dependencies: orgsync.application.services, orgsync.models
System role: Integration and contact sync HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from orgsync.api.deps.auth import get_current_user
from orgsync.api.deps.dependencies import get_integration_service
from orgsync.api.error_handling import handle_service_errors
from orgsync.application.services import IntegrationService
from orgsync.core.authorization import CurrentUser
from orgsync.core.exceptions import ValidationError
from orgsync.models.integration import (
    IntegrationConfigResponse,
    ReassignContactRequest,
    ReassignContactResponse,
    SaveIntegrationConfigRequest,
    SaveIntegrationConfigResponse,
    SyncResponse,
    WealthboxContactResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/integrations", tags=["integrations"])

ALL_ORGANIZATIONS = "all"


def parse_organization_filter(raw: str | None) -> int | None:
    """
    Parse the contact list organization filter.

    Missing, empty and "all" mean no filter.

    Raises:
        ValidationError: If the value is not an integer id
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw.lower() == ALL_ORGANIZATIONS:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Invalid organization id", field="organization_id")


@router.post("/config", response_model=SaveIntegrationConfigResponse)
@handle_service_errors
async def save_integration_config(
    request: SaveIntegrationConfigRequest,
    current_user: CurrentUser = Depends(get_current_user),
    integration_service: IntegrationService = Depends(get_integration_service),
) -> SaveIntegrationConfigResponse:
    """
    Save (or replace) the caller's token for an integration.

    Raises:
        HTTPException(400): Missing integration type or token
    """
    result = await integration_service.save_config(
        current_user,
        integration_type=request.integration_type,
        api_token=request.api_token,
    )
    return SaveIntegrationConfigResponse(**result)


@router.get("/config/{integration_type}", response_model=IntegrationConfigResponse)
@handle_service_errors
async def get_integration_config(
    integration_type: str,
    current_user: CurrentUser = Depends(get_current_user),
    integration_service: IntegrationService = Depends(get_integration_service),
) -> IntegrationConfigResponse:
    """
    Read the caller's stored config for an integration.

    Raises:
        HTTPException(404): No config stored
    """
    config = await integration_service.get_config(current_user, integration_type)
    return IntegrationConfigResponse(**config)


@router.post("/wealthbox/sync", response_model=SyncResponse)
@handle_service_errors
async def sync_wealthbox_users(
    current_user: CurrentUser = Depends(get_current_user),
    integration_service: IntegrationService = Depends(get_integration_service),
) -> SyncResponse:
    """
    Pull contacts from Wealthbox and store the ones not seen before.

    Raises:
        HTTPException(404): Wealthbox integration not configured
        HTTPException(502): Wealthbox API call failed
    """
    logger.info("Starting Wealthbox sync", extra={"user_id": current_user.id})
    result = await integration_service.sync_wealthbox_contacts(current_user)
    return SyncResponse(**result)


@router.get("/wealthbox/users", response_model=list[WealthboxContactResponse])
@handle_service_errors
async def list_wealthbox_users(
    organization_id: str | None = Query(None, description='Organization id or "all"'),
    organization_id_camel: str | None = Query(None, alias="organizationId", include_in_schema=False),
    current_user: CurrentUser = Depends(get_current_user),
    integration_service: IntegrationService = Depends(get_integration_service),
) -> list[WealthboxContactResponse]:
    """
    List synced contacts sorted by name.

    Raises:
        HTTPException(400): organization_id is not an integer or "all"
    """
    raw = organization_id if organization_id is not None else organization_id_camel
    contacts = await integration_service.list_contacts(
        organization_id=parse_organization_filter(raw)
    )
    return [WealthboxContactResponse(**c) for c in contacts]


@router.put(
    "/wealthbox/users/{contact_id}/organization",
    response_model=ReassignContactResponse,
)
@handle_service_errors
async def reassign_wealthbox_user_organization(
    contact_id: int,
    request: ReassignContactRequest,
    current_user: CurrentUser = Depends(get_current_user),
    integration_service: IntegrationService = Depends(get_integration_service),
) -> ReassignContactResponse:
    """
    Assign a synced contact to an organization the caller owns.

    Raises:
        HTTPException(403): Caller does not own the organization
        HTTPException(404): Organization or contact not found
    """
    contact = await integration_service.reassign_contact_organization(
        current_user,
        contact_id,
        request.organization_id,
    )
    return ReassignContactResponse(
        message="Contact organization updated successfully",
        contact=WealthboxContactResponse(**contact),
    )
