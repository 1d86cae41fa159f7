"""
Organization API endpoints.

Routes:
- GET /organizations - List organizations owned by the caller
- POST /organizations - Create organization
- GET /organizations/{id} - Get single organization
- PUT /organizations/{id} - Update organization
- DELETE /organizations/{id} - Delete organization

Dependencies: orgsync.application.services, orgsync.models
System role: Organization management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from orgsync.api.deps.auth import get_current_user
from orgsync.api.deps.dependencies import get_organization_service
from orgsync.api.error_handling import handle_service_errors
from orgsync.application.services import OrganizationService
from orgsync.core.authorization import CurrentUser
from orgsync.models.common import MessageResponse
from orgsync.models.organization import (
    CreateOrganizationRequest,
    OrganizationResponse,
    UpdateOrganizationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.get("", response_model=list[OrganizationResponse])
@handle_service_errors
async def list_organizations(
    limit: int | None = None,
    offset: int = 0,
    current_user: CurrentUser = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service),
) -> list[OrganizationResponse]:
    """
    List the caller's organizations with their members.

    Args:
        limit: Maximum number of organizations (default all)
        offset: Number to skip (default 0)
    """
    organizations = await organization_service.list_organizations(
        current_user, limit=limit, offset=offset
    )
    return [OrganizationResponse(**o) for o in organizations]


@router.post("", response_model=OrganizationResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_organization(
    request: CreateOrganizationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    """
    Create an organization owned by the caller.

    Raises:
        HTTPException(400): Invalid name or name already used by the caller
    """
    logger.info("Creating organization", extra={"owner_id": current_user.id})

    organization = await organization_service.create_organization(
        current_user,
        name=request.name,
        description=request.description,
    )
    return OrganizationResponse(**organization)


@router.get("/{organization_id}", response_model=OrganizationResponse)
@handle_service_errors
async def get_organization(
    organization_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    """
    Get organization by ID.

    Raises:
        HTTPException(403): Caller does not own the organization
        HTTPException(404): Organization not found
    """
    organization = await organization_service.get_organization(current_user, organization_id)
    return OrganizationResponse(**organization)


@router.put("/{organization_id}", response_model=OrganizationResponse)
@handle_service_errors
async def update_organization(
    organization_id: int,
    request: UpdateOrganizationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    """
    Update organization name and/or description.

    Raises:
        HTTPException(400): Invalid name or duplicate name
        HTTPException(403): Caller does not own the organization
        HTTPException(404): Organization not found
    """
    organization = await organization_service.update_organization(
        current_user,
        organization_id,
        request.model_dump(exclude_unset=True),
    )
    return OrganizationResponse(**organization)


@router.delete("/{organization_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_organization(
    organization_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service),
) -> MessageResponse:
    """
    Delete an organization; its members and contacts become unassigned.

    Raises:
        HTTPException(403): Caller does not own the organization
        HTTPException(404): Organization not found
    """
    await organization_service.delete_organization(current_user, organization_id)
    return MessageResponse(message="Organization deleted successfully")
