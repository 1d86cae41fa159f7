"""
Bearer token authentication dependency.

Dependencies: fastapi, orgsync.application.services
System role: Resolves the caller of every protected route
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from orgsync.api.deps.dependencies import get_auth_service
from orgsync.api.error_handling import to_http_exception
from orgsync.application.services import AuthService
from orgsync.core.authorization import CurrentUser
from orgsync.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

NO_TOKEN_MESSAGE = "Unauthorized: No token provided"


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> CurrentUser:
    """
    Resolve the authenticated caller from the Authorization header.

    Raises:
        HTTPException(401): Missing, expired or invalid token, or unknown user
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NO_TOKEN_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await auth_service.resolve_token(credentials.credentials)
    except AuthenticationError as e:
        raise to_http_exception(e) from e
