"""
Integration service orchestrator.

Stores per-user API tokens for external systems and runs the Wealthbox
contact sync.

Dependencies: orgsync.boundary.db.CRUD, orgsync.boundary.wealthbox
System role: Integration and contact sync use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.CRUD.integration_config_crud import integration_config_crud
from orgsync.boundary.db.CRUD.organization_crud import organization_crud
from orgsync.boundary.db.CRUD.wealthbox_user_crud import wealthbox_user_crud
from orgsync.boundary.db.models.wealthbox_user_model import WealthboxUserModel
from orgsync.boundary.wealthbox import WealthboxClient
from orgsync.core.authorization import Action, CurrentUser, authorize
from orgsync.core.exceptions import (
    ContactNotFoundError,
    IntegrationConfigNotFoundError,
    OrganizationNotFoundError,
)
from orgsync.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

WEALTHBOX = "wealthbox"


def serialize_contact(contact: WealthboxUserModel) -> dict:
    """Contact fields with organization reference (organization must be loaded)."""
    organization = contact.organization
    return {
        "id": contact.id,
        "wealthbox_id": contact.wealthbox_id,
        "email": contact.email,
        "name": contact.name,
        "account": contact.account,
        "excluded_from_assignments": contact.excluded_from_assignments,
        "organization_id": contact.organization_id,
        "organization": (
            {"id": organization.id, "name": organization.name}
            if organization is not None
            else None
        ),
    }


class IntegrationService:
    """Integration service orchestrator."""

    def __init__(self, db: AsyncSession, wealthbox_client: WealthboxClient) -> None:
        """
        Initialize integration service.

        Args:
            db: Async SQLAlchemy session
            wealthbox_client: Shared Wealthbox API client
        """
        self.db = db
        self.wealthbox_client = wealthbox_client

    async def save_config(
        self,
        actor: CurrentUser,
        integration_type: str,
        api_token: str,
    ) -> dict:
        """
        Store (or replace) the actor's token for an integration.

        Returns:
            dict: message and {id, integration_type}; the token is not echoed
        """
        config, created = await integration_config_crud.upsert_for_user(
            self.db,
            user_id=actor.id,
            integration_type=integration_type,
            api_token=api_token,
        )
        await self.db.commit()

        log_with_context(
            logger,
            logging.INFO,
            "Integration config saved",
            user_id=actor.id,
            integration_type=integration_type,
            created=created,
        )

        return {
            "message": "Integration configuration saved successfully",
            "integration_config": {
                "id": config.id,
                "integration_type": config.integration_type,
            },
        }

    async def get_config(self, actor: CurrentUser, integration_type: str) -> dict:
        """
        Read the actor's stored config for an integration.

        Raises:
            IntegrationConfigNotFoundError: If none is stored
        """
        config = await integration_config_crud.get_for_user(self.db, actor.id, integration_type)
        if config is None:
            raise IntegrationConfigNotFoundError(
                details={"integration_type": integration_type}
            )
        return {
            "id": config.id,
            "integration_type": config.integration_type,
            "api_token": config.api_token,
        }

    async def sync_wealthbox_contacts(self, actor: CurrentUser) -> dict:
        """
        Pull contacts from Wealthbox and store the ones not seen before.

        Contacts are processed in API order. A contact is skipped when a stored
        contact already has the same email, exact match, which includes a
        duplicate earlier in the same batch. New contacts are assigned to the
        actor's organization. The batch is committed once at the end.

        Returns:
            dict: message, count (inserted), skipped, skipped_emails

        Raises:
            IntegrationConfigNotFoundError: Actor has no Wealthbox token
            WealthboxAPIError: Fetching contacts failed
        """
        config = await integration_config_crud.get_for_user(self.db, actor.id, WEALTHBOX)
        if config is None:
            raise IntegrationConfigNotFoundError(
                message="Wealthbox integration not configured",
                details={"user_id": actor.id},
            )

        contacts = await self.wealthbox_client.fetch_users(config.api_token)

        count = 0
        skipped_emails: list[str] = []
        try:
            for contact in contacts:
                if await wealthbox_user_crud.get_by_email(self.db, contact.email) is not None:
                    skipped_emails.append(contact.email)
                    continue

                inserted = await wealthbox_user_crud.insert_if_new(
                    self.db,
                    wealthbox_id=str(contact.id),
                    email=contact.email,
                    name=contact.name,
                    account=contact.account,
                    excluded_from_assignments=contact.excluded_from_assignments,
                    organization_id=actor.organization_id,
                )
                if not inserted:
                    # stored by a concurrent sync since the check above
                    skipped_emails.append(contact.email)
                    continue
                count += 1

            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            log_exception_with_context(
                logger, "Wealthbox sync rolled back", e, user_id=actor.id, inserted=count
            )
            raise

        logger.info(
            "Wealthbox users synced",
            extra={
                "user_id": actor.id,
                "fetched": len(contacts),
                "inserted": count,
                "skipped": len(skipped_emails),
            },
        )

        return {
            "message": "Wealthbox users synced successfully",
            "count": count,
            "skipped": len(skipped_emails),
            "skipped_emails": skipped_emails,
        }

    async def list_contacts(self, organization_id: int | None = None) -> list[dict]:
        """List synced contacts by name, optionally only one organization's."""
        contacts = await wealthbox_user_crud.list_contacts(self.db, organization_id=organization_id)
        return [serialize_contact(c) for c in contacts]

    async def reassign_contact_organization(
        self,
        actor: CurrentUser,
        contact_id: int,
        organization_id: int,
    ) -> dict:
        """
        Assign a synced contact to an organization the actor owns.

        Raises:
            OrganizationNotFoundError: Organization does not exist
            ContactNotFoundError: Contact does not exist
            PermissionDeniedError: Actor does not own the organization
        """
        organization = await organization_crud.get_by_id(self.db, organization_id)
        if organization is None:
            raise OrganizationNotFoundError(organization_id)

        contact = await wealthbox_user_crud.get_by_id(self.db, contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)

        authorize(actor, Action.CONTACT_REASSIGN, organization)

        await wealthbox_user_crud.update(self.db, contact, organization_id=organization_id)
        await self.db.commit()
        logger.info(
            "Contact organization updated",
            extra={"contact_id": contact_id, "organization_id": organization_id, "actor_id": actor.id},
        )

        contact = await wealthbox_user_crud.get_with_organization(self.db, contact_id)
        return serialize_contact(contact)
