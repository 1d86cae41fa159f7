"""API-specific dependencies."""

# Re-export common dependencies
from .auth import get_current_user
from .dependencies import (
    get_auth_service,
    get_integration_service,
    get_organization_service,
    get_settings_dependency,
    get_user_service,
    get_wealthbox_client,
)

__all__ = [
    "get_auth_service",
    "get_current_user",
    "get_integration_service",
    "get_organization_service",
    "get_settings_dependency",
    "get_user_service",
    "get_wealthbox_client",
]
