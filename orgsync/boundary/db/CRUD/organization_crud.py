"""
Organization CRUD operations.

Provides Create, Read, Update, Delete operations for OrganizationModel
with owner-scoped and case-insensitive name queries.

Dependencies: sqlalchemy, orgsync.boundary.db.models
System role: Organization persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orgsync.boundary.db.models.organization_model import OrganizationModel
from orgsync.boundary.db.CRUD.base_crud import BaseCRUD


class OrganizationCRUD(BaseCRUD[OrganizationModel]):
    """
    CRUD operations for OrganizationModel.

    Extends BaseCRUD with eager loading of members and owner-scoped lookups.
    """

    def __init__(self) -> None:
        """Initialize OrganizationCRUD with OrganizationModel."""
        super().__init__(OrganizationModel)

    async def get_with_members(
        self,
        session: AsyncSession,
        id: int,
    ) -> OrganizationModel | None:
        """
        Retrieve organization with eagerly loaded members.

        Args:
            session: Async database session
            id: Organization id

        Returns:
            OrganizationModel with members loaded, None if not found
        """
        stmt = (
            select(OrganizationModel)
            .where(OrganizationModel.id == id)
            .options(selectinload(OrganizationModel.members))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_for_owner(
        self,
        session: AsyncSession,
        owner_id: int,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[OrganizationModel]:
        """
        Retrieve all organizations owned by a user, members loaded.

        Args:
            session: Async database session
            owner_id: Owning user id
            limit: Maximum number of organizations to return
            offset: Number of organizations to skip

        Returns:
            Sequence of OrganizationModels ordered by id
        """
        stmt = (
            select(OrganizationModel)
            .where(OrganizationModel.owner_id == owner_id)
            .options(selectinload(OrganizationModel.members))
            .order_by(OrganizationModel.id)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def owner_has_any(self, session: AsyncSession, owner_id: int) -> bool:
        """Check whether the user owns at least one organization."""
        stmt = select(OrganizationModel.id).where(OrganizationModel.owner_id == owner_id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_name_for_owner(
        self,
        session: AsyncSession,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> OrganizationModel | None:
        """
        Find an organization of this owner whose name matches case-insensitively.

        Args:
            session: Async database session
            owner_id: Owning user id
            name: Name to compare
            exclude_id: Organization id to ignore (the one being renamed)

        Returns:
            The first matching OrganizationModel, None if the name is free
        """
        stmt = select(OrganizationModel).where(
            OrganizationModel.owner_id == owner_id,
            func.lower(OrganizationModel.name) == name.lower(),
        )
        if exclude_id is not None:
            stmt = stmt.where(OrganizationModel.id != exclude_id)
        result = await session.execute(stmt.limit(1))
        return result.scalars().first()


organization_crud = OrganizationCRUD()
