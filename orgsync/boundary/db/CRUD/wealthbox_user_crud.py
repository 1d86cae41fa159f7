"""
Wealthbox contact CRUD operations.

Dependencies: sqlalchemy, orgsync.boundary.db.models
System role: Synced contact persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orgsync.boundary.db.models.wealthbox_user_model import WealthboxUserModel
from orgsync.boundary.db.CRUD.base_crud import BaseCRUD

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class WealthboxUserCRUD(BaseCRUD[WealthboxUserModel]):
    """CRUD operations for WealthboxUserModel."""

    def __init__(self) -> None:
        """Initialize WealthboxUserCRUD with WealthboxUserModel."""
        super().__init__(WealthboxUserModel)

    async def get_by_email(
        self,
        session: AsyncSession,
        email: str,
    ) -> WealthboxUserModel | None:
        """Retrieve a contact by email (exact, case-sensitive comparison)."""
        stmt = select(WealthboxUserModel).where(WealthboxUserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert_if_new(self, session: AsyncSession, **fields) -> bool:
        """
        Insert a contact unless its email is already stored.

        Uses INSERT ... ON CONFLICT (email) DO NOTHING, so a row committed by
        a concurrent sync is skipped instead of failing the transaction.

        Returns:
            bool: True if a row was inserted
        """
        insert = _UPSERT_INSERTS[session.get_bind().dialect.name]
        stmt = (
            insert(WealthboxUserModel)
            .values(**fields)
            .on_conflict_do_nothing(index_elements=[WealthboxUserModel.email])
            .returning(WealthboxUserModel.id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_with_organization(
        self,
        session: AsyncSession,
        id: int,
    ) -> WealthboxUserModel | None:
        """Retrieve a contact with its organization eagerly loaded."""
        stmt = (
            select(WealthboxUserModel)
            .where(WealthboxUserModel.id == id)
            .options(selectinload(WealthboxUserModel.organization))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_contacts(
        self,
        session: AsyncSession,
        organization_id: int | None = None,
    ) -> Sequence[WealthboxUserModel]:
        """
        Retrieve synced contacts sorted by name ascending.

        Args:
            session: Async database session
            organization_id: Only contacts assigned to this organization (None for all)

        Returns:
            Sequence of WealthboxUserModels with organization loaded
        """
        stmt = (
            select(WealthboxUserModel)
            .options(selectinload(WealthboxUserModel.organization))
            .order_by(WealthboxUserModel.name.asc(), WealthboxUserModel.id.asc())
        )
        if organization_id is not None:
            stmt = stmt.where(WealthboxUserModel.organization_id == organization_id)
        result = await session.execute(stmt)
        return result.scalars().all()


wealthbox_user_crud = WealthboxUserCRUD()
