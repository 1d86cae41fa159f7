"""
User CRUD operations.

Dependencies: sqlalchemy, orgsync.boundary.db.models
System role: User persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orgsync.boundary.db.models.user_model import UserModel
from orgsync.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Extends BaseCRUD with email lookup and eager loading of the
    user's organization.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """Retrieve a user by exact email."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_organization(
        self,
        session: AsyncSession,
        id: int,
    ) -> UserModel | None:
        """
        Retrieve user with eagerly loaded organization.

        Args:
            session: Async database session
            id: User id

        Returns:
            UserModel with organization loaded, None if not found
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == id)
            .options(selectinload(UserModel.organization))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_with_organization(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[UserModel]:
        """Retrieve users ordered by id with eagerly loaded organizations."""
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.organization))
            .order_by(UserModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


user_crud = UserCRUD()
