"""
Base CRUD operations for SQLAlchemy models.

Generic create/read/update/delete helpers keyed by integer primary key,
shared by every model-specific CRUD class.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Methods flush but never commit; the calling service decides when the
    unit of work ends.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs: Any) -> ModelT:
        """
        Insert a row and return it with database-generated values loaded.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            The persisted instance (id, timestamps populated)
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """Load one row by primary key, None if absent."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update(self, session: AsyncSession, instance: ModelT, **kwargs: Any) -> ModelT:
        """
        Assign new values to a loaded instance and flush them.

        Args:
            session: Async database session
            instance: Persistent instance to modify
            **kwargs: Attribute names and their new values

        Returns:
            The same instance, refreshed from the database
        """
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete one row by primary key.

        Database-level ON DELETE rules apply to dependent rows.

        Returns:
            True if a row was deleted, False if none matched
        """
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: int) -> bool:
        """Check whether a row with this primary key exists."""
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
