from typing import AsyncGenerator
from unittest.mock import patch

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from unguka.core.database import get_session
    from unguka.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("unguka.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()
