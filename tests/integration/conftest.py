"""Fixtures for API integration tests."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from blogverse.infrastructure.api.app import create_app
from blogverse.infrastructure.api.dependencies import get_email_service
from blogverse.infrastructure.persistence.database import get_db_session
from blogverse.infrastructure.services.email_service import EmailService


@pytest.fixture
def mock_email_service():
    """Email service that records calls instead of sending."""
    return AsyncMock(spec=EmailService)


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession, mock_email_service
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and email dependencies."""
    app = create_app()

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_email_service] = lambda: mock_email_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
