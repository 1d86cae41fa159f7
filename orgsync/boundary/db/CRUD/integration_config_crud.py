"""
Integration configuration CRUD operations.

Dependencies: sqlalchemy, orgsync.boundary.db.models
System role: Integration token persistence
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.models.integration_config_model import IntegrationConfigModel
from orgsync.boundary.db.CRUD.base_crud import BaseCRUD


class IntegrationConfigCRUD(BaseCRUD[IntegrationConfigModel]):
    """CRUD operations for IntegrationConfigModel keyed by (user, integration type)."""

    def __init__(self) -> None:
        """Initialize IntegrationConfigCRUD with IntegrationConfigModel."""
        super().__init__(IntegrationConfigModel)

    async def get_for_user(
        self,
        session: AsyncSession,
        user_id: int,
        integration_type: str,
    ) -> IntegrationConfigModel | None:
        """Retrieve the config a user holds for one integration type."""
        stmt = select(IntegrationConfigModel).where(
            IntegrationConfigModel.user_id == user_id,
            IntegrationConfigModel.integration_type == integration_type,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_for_user(
        self,
        session: AsyncSession,
        user_id: int,
        integration_type: str,
        api_token: str,
    ) -> tuple[IntegrationConfigModel, bool]:
        """
        Update the token in place if a config exists, otherwise create one.

        Returns:
            tuple: (config, created) where created is True for a new row
        """
        existing = await self.get_for_user(session, user_id, integration_type)
        if existing is not None:
            updated = await self.update(session, existing, api_token=api_token)
            return updated, False

        created = await self.create(
            session,
            user_id=user_id,
            integration_type=integration_type,
            api_token=api_token,
        )
        return created, True


integration_config_crud = IntegrationConfigCRUD()
