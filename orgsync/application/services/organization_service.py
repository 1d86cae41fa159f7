"""
Organization service orchestrator.

Coordinates organization lifecycle operations. Organizations belong to the
user who created them; names are unique per owner, ignoring case.

Dependencies: orgsync.boundary.db.CRUD, orgsync.core.authorization
System role: Organization use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.CRUD.organization_crud import organization_crud
from orgsync.boundary.db.models.organization_model import OrganizationModel
from orgsync.core.authorization import Action, CurrentUser, authorize
from orgsync.core.exceptions import ConflictError, OrganizationNotFoundError

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Organization name must be unique"


def serialize_organization(organization: OrganizationModel) -> dict:
    """Organization fields with member summaries (members must be loaded)."""
    return {
        "id": organization.id,
        "name": organization.name,
        "description": organization.description,
        "owner_id": organization.owner_id,
        "members": [
            {
                "id": member.id,
                "name": member.name,
                "email": member.email,
                "role": member.role,
            }
            for member in organization.members
        ],
        "created_at": organization.created_at,
        "updated_at": organization.updated_at,
    }


class OrganizationService:
    """Organization service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize organization service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _ensure_unique_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> None:
        clash = await organization_crud.find_by_name_for_owner(
            self.db, owner_id, name, exclude_id=exclude_id
        )
        if clash is not None:
            logger.warning(
                "Duplicate organization name rejected",
                extra={"owner_id": owner_id, "existing_id": clash.id},
            )
            raise ConflictError(DUPLICATE_NAME_MESSAGE, details={"name": name})

    async def _load_owned(
        self,
        actor: CurrentUser,
        organization_id: int,
        action: Action,
    ) -> OrganizationModel:
        organization = await organization_crud.get_with_members(self.db, organization_id)
        if organization is None:
            raise OrganizationNotFoundError(organization_id)
        authorize(actor, action, organization)
        return organization

    async def create_organization(
        self,
        actor: CurrentUser,
        name: str,
        description: str | None = None,
    ) -> dict:
        """
        Create an organization owned by the actor.

        Args:
            actor: Authenticated caller, becomes the owner
            name: Organization name (already validated for length)
            description: Optional description

        Returns:
            dict: Organization data

        Raises:
            ConflictError: If the actor already owns an organization with this name
        """
        await self._ensure_unique_name(actor.id, name)

        organization = await organization_crud.create(
            self.db,
            name=name,
            description=description,
            owner_id=actor.id,
        )
        await self.db.commit()

        logger.info(
            "Organization created",
            extra={"organization_id": organization.id, "owner_id": actor.id},
        )

        organization = await organization_crud.get_with_members(self.db, organization.id)
        return serialize_organization(organization)

    async def list_organizations(
        self,
        actor: CurrentUser,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """List the organizations the actor owns, with members."""
        organizations = await organization_crud.get_all_for_owner(
            self.db, actor.id, limit=limit, offset=offset
        )
        return [serialize_organization(o) for o in organizations]

    async def get_organization(self, actor: CurrentUser, organization_id: int) -> dict:
        """
        Get one organization.

        Raises:
            OrganizationNotFoundError: If it does not exist
            PermissionDeniedError: If the actor does not own it
        """
        organization = await self._load_owned(actor, organization_id, Action.ORGANIZATION_READ)
        return serialize_organization(organization)

    async def update_organization(
        self,
        actor: CurrentUser,
        organization_id: int,
        changes: dict,
    ) -> dict:
        """
        Update name and/or description.

        Args:
            actor: Authenticated caller
            organization_id: Target organization
            changes: Fields present in the request (name, description)

        Raises:
            OrganizationNotFoundError: If it does not exist
            PermissionDeniedError: If the actor does not own it
            ConflictError: If the new name clashes with another of the owner's organizations
        """
        organization = await self._load_owned(actor, organization_id, Action.ORGANIZATION_UPDATE)

        if changes.get("name") is not None:
            await self._ensure_unique_name(
                organization.owner_id, changes["name"], exclude_id=organization.id
            )
        else:
            changes.pop("name", None)

        if changes:
            await organization_crud.update(self.db, organization, **changes)
            await self.db.commit()
            logger.info(
                "Organization updated",
                extra={"organization_id": organization_id, "fields": sorted(changes)},
            )

        organization = await organization_crud.get_with_members(self.db, organization_id)
        return serialize_organization(organization)

    async def delete_organization(self, actor: CurrentUser, organization_id: int) -> None:
        """
        Delete an organization. Members and contacts keep existing, unassigned.

        Raises:
            OrganizationNotFoundError: If it does not exist
            PermissionDeniedError: If the actor does not own it
        """
        await self._load_owned(actor, organization_id, Action.ORGANIZATION_DELETE)
        await organization_crud.delete_by_id(self.db, organization_id)
        await self.db.commit()
        logger.info(
            "Organization deleted",
            extra={"organization_id": organization_id, "owner_id": actor.id},
        )
