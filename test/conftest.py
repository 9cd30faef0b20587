"""Shared pytest configuration.

Settings are read when ``unguka`` is first imported, so the test database URL
is exported here before anything from the package is loaded.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("LOGFIRE_ENABLED", "false")
os.environ.setdefault("AUTO_CREATE_SEASONS_ON_STARTUP", "false")

import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from unguka.core.database import create_all, create_sessionmaker  # noqa: E402


@pytest_asyncio.fixture(name="engine")
async def engine_fixture() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(engine)() as session:
        yield session
