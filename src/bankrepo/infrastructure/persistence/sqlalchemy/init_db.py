"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from bankrepo.infrastructure.logging_config import configure_logging
from bankrepo.infrastructure.persistence.sqlalchemy.engine import (
    create_engine_from_settings,
)
from bankrepo.infrastructure.persistence.sqlalchemy.schema import (
    CREATE_STATEMENTS,
    DROP_STATEMENTS,
)

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> None:
    """
    Create the banks table and its store functions (idempotent).

    Existing tables and their data are never modified or deleted; functions
    and the procedure are replaced in place.
    """
    logger.info("Ensuring bank schema exists...")

    async with engine.begin() as conn:
        for statement in CREATE_STATEMENTS:
            await conn.execute(text(statement))

    logger.info("Bank schema is up to date")


async def drop_schema(engine: AsyncEngine) -> None:
    """
    Drop the banks table and its store functions (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping bank schema...")

    async with engine.begin() as conn:
        for statement in DROP_STATEMENTS:
            await conn.execute(text(statement))

    logger.info("Bank schema dropped successfully")


async def _init_database() -> None:
    engine = create_engine_from_settings()
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()
    logger.info("Database initialized successfully!")


async def _drop_database(force: bool = False) -> None:
    engine = create_engine_from_settings()
    try:
        if not force:
            print("WARNING: This will DELETE ALL BANKS in the database!")
            print()
            response = input("Type 'yes' to confirm: ")
            if response.lower() != "yes":
                print("Aborted.")
                sys.exit(1)
            print()
        await drop_schema(engine)
    finally:
        await engine.dispose()


def db_init():
    """Initialize database (create schema)."""
    configure_logging()
    asyncio.run(_init_database())


def db_drop():
    """Drop the bank schema."""
    configure_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_drop_database(force=force))
