"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, orgsync.configs
System role: Database schema initialization

Usage:
    python -m orgsync.boundary.db.create_tables
    python -m orgsync.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from orgsync.boundary.db.connection import Database
from orgsync.configs.database import DatabaseSettings
from orgsync.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(database: Database) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.
    """
    await database.connect()
    try:
        await database.create_all()
    finally:
        await database.dispose()


async def drop_all_tables(database: Database) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    await database.connect()
    try:
        await database.drop_all()
    finally:
        await database.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create or drop the orgsync schema")
    parser.add_argument("--drop", action="store_true", help="drop all tables instead")
    args = parser.parse_args(argv)

    configure_logging()
    database = Database.from_settings(DatabaseSettings())

    if args.drop:
        asyncio.run(drop_all_tables(database))
    else:
        asyncio.run(create_all_tables(database))
    logger.info("Schema operation finished", extra={"drop": args.drop})


if __name__ == "__main__":
    main()
