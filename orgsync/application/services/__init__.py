"""Service orchestrators."""

from .auth_service import AuthService
from .integration_service import IntegrationService
from .organization_service import OrganizationService
from .user_service import UserService

__all__ = [
    "AuthService",
    "IntegrationService",
    "OrganizationService",
    "UserService",
]
