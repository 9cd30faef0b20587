"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from unguka.core.logging_config import get_logger
from unguka.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Alembic migrations own the schema in production. Tables are only created
    here when ``CREATE_TABLES_ON_STARTUP`` is enabled, which suits local
    development against SQLite.
    """
    if not settings.create_tables_on_startup:
        logger.debug("Skipping create_all, schema is managed by Alembic")
        return
    await create_all(engine)
    logger.info("Database tables created")
