"""
User administration service.

Lists, reads, updates and deletes accounts, changes the caller's own
password and moves users between organizations.

Dependencies: orgsync.boundary.db.CRUD, orgsync.core.authorization, orgsync.core.security
System role: User administration use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.CRUD.organization_crud import organization_crud
from orgsync.boundary.db.CRUD.user_crud import user_crud
from orgsync.boundary.db.models.user_model import UserModel
from orgsync.configs.auth import AuthSettings
from orgsync.core.authorization import Action, CurrentUser, authorize
from orgsync.core.exceptions import (
    AuthenticationError,
    ConflictError,
    OrganizationNotFoundError,
    UserNotFoundError,
)
from orgsync.core.security import hash_password, verify_password

logger = logging.getLogger(__name__)

EMAIL_IN_USE_MESSAGE = "Email already in use"
OWNS_ORGANIZATIONS_MESSAGE = "User still owns organizations; delete them first"


def serialize_user(user: UserModel) -> dict:
    """Public user fields (organization must be loaded)."""
    organization = user.organization
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "organization_id": user.organization_id,
        "organization": (
            {"id": organization.id, "name": organization.name}
            if organization is not None
            else None
        ),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


class UserService:
    """User administration service orchestrator."""

    def __init__(self, db: AsyncSession, settings: AuthSettings) -> None:
        """
        Initialize user service.

        Args:
            db: Async SQLAlchemy session
            settings: Auth settings (bcrypt cost for password changes)
        """
        self.db = db
        self.settings = settings

    async def _get_user_model(self, user_id: int) -> UserModel:
        user = await user_crud.get_with_organization(self.db, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _check_organization_assignable(
        self,
        actor: CurrentUser,
        organization_id: int,
    ) -> None:
        organization = await organization_crud.get_by_id(self.db, organization_id)
        if organization is None:
            raise OrganizationNotFoundError(organization_id)
        authorize(actor, Action.ORGANIZATION_ASSIGN, organization)

    async def list_users(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """List users ordered by id, each with its organization reference."""
        users = await user_crud.get_all_with_organization(self.db, limit=limit, offset=offset)
        return [serialize_user(u) for u in users]

    async def get_user(self, user_id: int) -> dict:
        """
        Get user by ID.

        Raises:
            UserNotFoundError: If user does not exist
        """
        return serialize_user(await self._get_user_model(user_id))

    async def update_user(self, actor: CurrentUser, user_id: int, changes: dict) -> dict:
        """
        Update a user's profile fields.

        Args:
            actor: Authenticated caller
            user_id: Target user
            changes: Fields present in the request (name, email, role, organization_id)

        Returns:
            dict: Updated user data

        Raises:
            UserNotFoundError: Target user does not exist
            PermissionDeniedError: Actor may not edit this user, change roles,
                or assign the requested organization
            ConflictError: Email belongs to another user
            OrganizationNotFoundError: Requested organization does not exist
        """
        user = await self._get_user_model(user_id)
        authorize(actor, Action.USER_UPDATE, user)

        changes = {k: v for k, v in changes.items() if k in {"name", "email", "role", "organization_id"}}
        if changes.get("name") is None:
            changes.pop("name", None)
        if changes.get("email") is None:
            changes.pop("email", None)
        if changes.get("role") is None:
            changes.pop("role", None)

        if "role" in changes and changes["role"] != user.role:
            authorize(actor, Action.USER_CHANGE_ROLE, user)

        if "email" in changes and changes["email"] != user.email:
            other = await user_crud.get_by_email(self.db, changes["email"])
            if other is not None and other.id != user.id:
                raise ConflictError(EMAIL_IN_USE_MESSAGE)

        if "organization_id" in changes:
            new_org_id = changes["organization_id"]
            if new_org_id is not None and new_org_id != user.organization_id:
                await self._check_organization_assignable(actor, new_org_id)

        if changes:
            try:
                await user_crud.update(self.db, user, **changes)
                await self.db.commit()
            except IntegrityError as e:
                await self.db.rollback()
                raise ConflictError(EMAIL_IN_USE_MESSAGE) from e
            logger.info(
                "User updated",
                extra={"user_id": user_id, "actor_id": actor.id, "fields": sorted(changes)},
            )

        return serialize_user(await self._get_user_model(user_id))

    async def delete_user(self, actor: CurrentUser, user_id: int) -> None:
        """
        Delete a user account.

        Raises:
            UserNotFoundError: If user does not exist
            PermissionDeniedError: If the actor is not an admin
            ConflictError: If the user still owns organizations
        """
        user = await self._get_user_model(user_id)
        authorize(actor, Action.USER_DELETE, user)

        # every organization keeps a live owner
        if await organization_crud.owner_has_any(self.db, user_id):
            raise ConflictError(
                OWNS_ORGANIZATIONS_MESSAGE, details={"user_id": user_id}
            )

        await user_crud.delete_by_id(self.db, user_id)
        await self.db.commit()
        logger.info("User deleted", extra={"user_id": user_id, "actor_id": actor.id})

    async def change_password(
        self,
        actor: CurrentUser,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the actor's own password after verifying the current one.

        Raises:
            UserNotFoundError: If the actor's account no longer exists
            AuthenticationError: If current_password does not match (hash unchanged)
        """
        user = await user_crud.get_by_id(self.db, actor.id)
        if user is None:
            raise UserNotFoundError(actor.id)

        if not verify_password(current_password, user.password_hash):
            logger.warning("Password change rejected", extra={"user_id": actor.id})
            raise AuthenticationError("Current password is incorrect")

        new_hash = hash_password(new_password, rounds=self.settings.bcrypt_rounds)
        await user_crud.update(self.db, user, password_hash=new_hash)
        await self.db.commit()
        logger.info("Password changed", extra={"user_id": actor.id})

    async def assign_organization(
        self,
        actor: CurrentUser,
        user_id: int,
        organization_id: int | None,
    ) -> dict:
        """
        Move a user into an organization, or out of any with None.

        Raises:
            UserNotFoundError: Target user does not exist
            OrganizationNotFoundError: Target organization does not exist
            PermissionDeniedError: Actor may not edit the user or does not own
                the target organization
        """
        user = await self._get_user_model(user_id)
        authorize(actor, Action.USER_UPDATE, user)

        if organization_id is not None:
            await self._check_organization_assignable(actor, organization_id)

        await user_crud.update(self.db, user, organization_id=organization_id)
        await self.db.commit()
        logger.info(
            "User organization updated",
            extra={"user_id": user_id, "organization_id": organization_id, "actor_id": actor.id},
        )

        return serialize_user(await self._get_user_model(user_id))
