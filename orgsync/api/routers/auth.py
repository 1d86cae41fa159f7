"""
Authentication API endpoints.

Routes:
- POST /auth/register - Create account and return a token
- POST /auth/login - Exchange credentials for a token

Dependencies: orgsync.application.services, orgsync.models
System role: Public identity HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from orgsync.api.deps.dependencies import get_auth_service
from orgsync.api.error_handling import handle_service_errors
from orgsync.application.services import AuthService
from orgsync.models.auth import AuthResponse, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new account.

    Args:
        request: RegisterRequest with email, password, name
        auth_service: Injected AuthService

    Returns:
        AuthResponse: Confirmation, bearer token and public user fields

    Raises:
        HTTPException(400): Invalid body or email already registered
    """
    result = await auth_service.register(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    return AuthResponse(**result)


@router.post("/login", response_model=AuthResponse)
@handle_service_errors
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Log in with email and password.

    Raises:
        HTTPException(401): Invalid credentials
    """
    result = await auth_service.login(email=request.email, password=request.password)
    return AuthResponse(**result)
