"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - Database, get_database(), get_async_db(): Connection pool resource and request dependencies
  - UserModel, OrganizationModel, IntegrationConfigModel, WealthboxUserModel: Domain entities
  - user_crud, organization_crud, integration_config_crud, wealthbox_user_crud: CRUD singletons

Dependencies: sqlalchemy, orgsync.configs
System role: Database adapter providing persistent storage for users,
organizations, integration tokens and synced contacts.
"""

from orgsync.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from orgsync.boundary.db.connection import Database, get_async_db, get_database
from orgsync.boundary.db.models import (
    IntegrationConfigModel,
    OrganizationModel,
    UserModel,
    WealthboxUserModel,
)
from orgsync.boundary.db.CRUD import (
    BaseCRUD,
    IntegrationConfigCRUD,
    OrganizationCRUD,
    UserCRUD,
    WealthboxUserCRUD,
    integration_config_crud,
    organization_crud,
    user_crud,
    wealthbox_user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "Database",
    "get_async_db",
    "get_database",
    # Models
    "UserModel",
    "OrganizationModel",
    "IntegrationConfigModel",
    "WealthboxUserModel",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "OrganizationCRUD",
    "IntegrationConfigCRUD",
    "WealthboxUserCRUD",
    # CRUD singletons
    "user_crud",
    "organization_crud",
    "integration_config_crud",
    "wealthbox_user_crud",
]
