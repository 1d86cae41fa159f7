"""
Authorization policy.

One capability check, evaluated by the application services before every
mutating operation. Organizations are owned by the user who created them;
user administration beyond self-service is reserved to admins.

Dependencies: orgsync.core.exceptions
System role: Single source of truth for who may do what
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from orgsync.core.exceptions import PermissionDeniedError


class UserRole(str, Enum):
    """Roles a user account can hold."""

    USER = "user"
    ADMIN = "admin"


class Action(str, Enum):
    """Capabilities checked by the policy."""

    ORGANIZATION_READ = "organization:read"
    ORGANIZATION_UPDATE = "organization:update"
    ORGANIZATION_DELETE = "organization:delete"
    ORGANIZATION_ASSIGN = "organization:assign"
    USER_UPDATE = "user:update"
    USER_CHANGE_ROLE = "user:change_role"
    USER_DELETE = "user:delete"
    CONTACT_REASSIGN = "contact:reassign"


@dataclass(frozen=True)
class CurrentUser:
    """Identity attached to an authenticated request."""

    id: int
    email: str
    role: UserRole
    organization_id: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


_ORGANIZATION_OWNER_ACTIONS = {
    Action.ORGANIZATION_READ,
    Action.ORGANIZATION_UPDATE,
    Action.ORGANIZATION_DELETE,
    Action.ORGANIZATION_ASSIGN,
    Action.CONTACT_REASSIGN,
}

_ADMIN_ACTIONS = {
    Action.USER_CHANGE_ROLE,
    Action.USER_DELETE,
}


def is_allowed(actor: CurrentUser, action: Action, resource: Any = None) -> bool:
    """
    Evaluate the policy without raising.

    Args:
        actor: Authenticated caller
        action: Capability being exercised
        resource: Target record. Organizations are checked through their
            ``owner_id``; users through their ``id``.

    Returns:
        bool: True if the actor may perform the action
    """
    if action in _ORGANIZATION_OWNER_ACTIONS:
        owner_id = getattr(resource, "owner_id", None)
        return owner_id is not None and owner_id == actor.id

    if action in _ADMIN_ACTIONS:
        return actor.is_admin

    if action == Action.USER_UPDATE:
        return actor.is_admin or getattr(resource, "id", None) == actor.id

    return False


def authorize(actor: CurrentUser, action: Action, resource: Any = None) -> None:
    """
    Enforce the policy.

    Raises:
        PermissionDeniedError: If the actor may not perform the action
    """
    if not is_allowed(actor, action, resource):
        raise PermissionDeniedError(
            action.value,
            details={
                "actor_id": actor.id,
                "resource_id": getattr(resource, "id", None),
            },
        )
