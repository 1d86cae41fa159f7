"""
Database connection management.

Provides the Database resource: one async engine and session factory built
at process start, shared by every request, and disposed on shutdown. The
FastAPI lifespan owns it and exposes it through app.state.

Dependencies: sqlalchemy, orgsync.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from orgsync.boundary.db.base import Base
from orgsync.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores ON DELETE clauses unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Async connection pool resource.

    Usage:
        database = Database.from_settings(settings.database)
        await database.connect()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        create_tables: bool = False,
        engine_options: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            url: SQLAlchemy async URL (postgresql+asyncpg://, sqlite+aiosqlite://)
            echo: Echo SQL statements to logs
            create_tables: Create missing tables during connect()
            engine_options: Extra keyword arguments for create_async_engine
        """
        self.url = url
        self.echo = echo
        self.create_tables = create_tables
        self.engine_options = engine_options or {}
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, db_config: DatabaseSettings) -> "Database":
        """Build a Database from DatabaseSettings, with pooling for server backends."""
        return cls(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            create_tables=db_config.create_tables,
            engine_options={
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
            },
        )

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.url).get_backend_name() == "sqlite"

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._engine

    async def connect(self) -> None:
        """
        Create the engine and session factory.

        pool_pre_ping=True verifies connections before use to detect
        stale/broken connections early. SQLite gets a single shared
        connection so in-memory databases survive across sessions.
        """
        if self._engine is not None:
            return

        if self.is_sqlite:
            engine = create_async_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_async_engine(
                self.url,
                echo=self.echo,
                pool_pre_ping=True,
                **self.engine_options,
            )

        self._engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database engine created", extra={"backend": engine.dialect.name})

        if self.create_tables:
            await self.create_all()

    async def create_all(self) -> None:
        """Create all tables registered on Base.metadata (idempotent)."""
        # Model modules must be imported so their tables are registered
        import orgsync.boundary.db.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_all(self) -> None:
        """Drop all tables. Irreversible; development only."""
        import orgsync.boundary.db.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("Database tables dropped")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Acquire a session from the pool; it is closed (and any uncommitted
        work rolled back) when the block exits.
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not connected; call connect() first")
        async with self._session_factory() as session:
            yield session

    async def ping(self) -> bool:
        """Run SELECT 1 against the database."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """Close all pooled connections."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections drained")


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the Database owned by the application."""
    return request.app.state.database


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur. Services commit
    explicitly; anything left uncommitted is rolled back on close.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @router.get("/users/{id}")
        async def get_user(id: int, db: AsyncSession = Depends(get_async_db)):
            return await user_crud.get_by_id(db, id)
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
