"""
User administration API endpoints.

Routes:
- GET /users - List users
- POST /users/change-password - Change the caller's password
- GET /users/{id} - Get single user
- PUT /users/{id} - Update user
- DELETE /users/{id} - Delete user (admin)
- PUT /users/{id}/organization - Move a user to another organization

Dependencies: orgsync.application.services, orgsync.models
System role: User administration HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from orgsync.api.deps.auth import get_current_user
from orgsync.api.deps.dependencies import get_user_service
from orgsync.api.error_handling import handle_service_errors
from orgsync.application.services import UserService
from orgsync.core.authorization import CurrentUser
from orgsync.models.common import MessageResponse
from orgsync.models.user import (
    AssignOrganizationRequest,
    AssignOrganizationResponse,
    ChangePasswordRequest,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
@handle_service_errors
async def list_users(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """
    List users with pagination.

    Args:
        limit: Maximum number of users (default all)
        offset: Number to skip (default 0)
    """
    users = await user_service.list_users(limit=limit, offset=offset)
    return [UserResponse(**u) for u in users]


@router.post("/change-password", response_model=MessageResponse)
@handle_service_errors
async def change_password(
    request: ChangePasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Change the caller's own password.

    Raises:
        HTTPException(400): Missing or too short password
        HTTPException(401): Current password is incorrect
    """
    await user_service.change_password(
        current_user,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    return MessageResponse(message="Password changed successfully")


@router.get("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def get_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get user by ID.

    Raises:
        HTTPException(404): User not found
    """
    return UserResponse(**await user_service.get_user(user_id))


@router.put("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Update a user. Self-service for name/email; role changes need an admin.

    Raises:
        HTTPException(400): Invalid body or email already in use
        HTTPException(403): Not permitted
        HTTPException(404): User or organization not found
    """
    user = await user_service.update_user(
        current_user,
        user_id,
        request.model_dump(exclude_unset=True),
    )
    return UserResponse(**user)


@router.delete("/{user_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Delete a user.

    Raises:
        HTTPException(403): Caller is not an admin
        HTTPException(404): User not found
    """
    await user_service.delete_user(current_user, user_id)
    return MessageResponse(message="User deleted successfully")


@router.put("/{user_id}/organization", response_model=AssignOrganizationResponse)
@handle_service_errors
async def assign_user_organization(
    user_id: int,
    request: AssignOrganizationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> AssignOrganizationResponse:
    """
    Move a user into an organization the caller owns (or out with null).

    Raises:
        HTTPException(403): Not permitted
        HTTPException(404): User or organization not found
    """
    user = await user_service.assign_organization(
        current_user,
        user_id,
        request.organization_id,
    )
    return AssignOrganizationResponse(
        message="User organization updated successfully",
        user=UserResponse(**user),
    )
