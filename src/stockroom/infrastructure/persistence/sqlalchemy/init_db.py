"""Database initialization utilities."""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import stockroom.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from stockroom.infrastructure.persistence.sqlalchemy.models.base import Base
from stockroom_auth.persistence.sqlalchemy import AuthBase
from stockroom_config.settings import get_settings

logger = logging.getLogger(__name__)

# Application tables first: credentials reference users by id only
METADATAS = (Base.metadata, AuthBase.metadata)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        for metadata in METADATAS:
            await conn.run_sync(metadata.create_all)

    logger.info("Database schema is up to date")


async def _init_database() -> None:
    engine = _get_engine()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def db_init() -> None:
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_init_database())
