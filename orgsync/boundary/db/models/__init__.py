"""
Database models package.

Exports:
  - UserModel: Account ORM model
  - OrganizationModel: Tenant ORM model
  - IntegrationConfigModel: Per-user integration token
  - WealthboxUserModel: Synced Wealthbox contact

Dependencies: sqlalchemy, orgsync.boundary.db.base
System role: Database model definitions for domain entities
"""

from orgsync.boundary.db.models.user_model import UserModel
from orgsync.boundary.db.models.organization_model import OrganizationModel
from orgsync.boundary.db.models.integration_config_model import IntegrationConfigModel
from orgsync.boundary.db.models.wealthbox_user_model import WealthboxUserModel

__all__ = [
    "UserModel",
    "OrganizationModel",
    "IntegrationConfigModel",
    "WealthboxUserModel",
]
