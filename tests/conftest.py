"""Pytest configuration for all tests."""

import os
from typing import AsyncGenerator

# Settings are cached on first use; pin the environment before any import
os.environ.setdefault("BLOGVERSE_ENVIRONMENT", "testing")
os.environ.setdefault("BLOGVERSE_SECRET_KEY", "test-secret-key-for-bearer-tokens-0123456789")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blogverse.infrastructure.persistence import models  # noqa: F401
from blogverse.infrastructure.persistence.database import Base
from blogverse.infrastructure.persistence.models import UserModel
from blogverse.infrastructure.auth import hash_password


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user():
    """Factory for unsaved user models."""

    def _make(
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "password123",
        email_verified: bool = False,
        user_id: str | None = None,
    ) -> UserModel:
        import uuid

        return UserModel(
            id=user_id or str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=hash_password(password),
            email_verified=email_verified,
        )

    return _make
