"""Pytest configuration for all tests."""

from datetime import timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sessionkit.infrastructure.auth import TokenConfig, TokenIssuer
from sessionkit.infrastructure.persistence.database import Base
from sessionkit.infrastructure.persistence.models import RefreshTokenModel, UserModel  # noqa: F401


@pytest.fixture
def token_config() -> TokenConfig:
    return TokenConfig(
        access_secret="test-access-secret",
        refresh_secret="test-refresh-secret",
        access_token_ttl=timedelta(minutes=15),
        refresh_token_ttl=timedelta(days=7),
    )


@pytest.fixture
def token_issuer(token_config: TokenConfig) -> TokenIssuer:
    return TokenIssuer(token_config)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession, token_issuer: TokenIssuer
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and token dependencies."""
    from sessionkit.infrastructure.api.app import app
    from sessionkit.infrastructure.api.dependencies import get_token_issuer
    from sessionkit.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}
