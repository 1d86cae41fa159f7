"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from orgsync.boundary.db.CRUD import user_crud, organization_crud

    # Use singleton instances
    user = await user_crud.get_by_email(db, "a@example.com")

    # Or instantiate classes directly for custom behavior
    from orgsync.boundary.db.CRUD import UserCRUD
    custom_crud = UserCRUD()
"""

from orgsync.boundary.db.CRUD.base_crud import BaseCRUD
from orgsync.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from orgsync.boundary.db.CRUD.organization_crud import OrganizationCRUD, organization_crud
from orgsync.boundary.db.CRUD.integration_config_crud import (
    IntegrationConfigCRUD,
    integration_config_crud,
)
from orgsync.boundary.db.CRUD.wealthbox_user_crud import WealthboxUserCRUD, wealthbox_user_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "OrganizationCRUD",
    "organization_crud",
    "IntegrationConfigCRUD",
    "integration_config_crud",
    "WealthboxUserCRUD",
    "wealthbox_user_crud",
]
