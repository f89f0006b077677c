"""Unit tests for RefreshTokenRepository against in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from sessionkit.infrastructure.persistence.models import RefreshTokenModel
from sessionkit.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def user_id(db_session):
    user = await UserRepository(db_session).create(email="a@example.com", password_hash="salt:hash")
    return user.id


@pytest.fixture
def repository(db_session):
    return RefreshTokenRepository(db_session, clock=lambda: NOW)


async def count_tokens(session) -> int:
    return (await session.execute(select(func.count()).select_from(RefreshTokenModel))).scalar_one()


def test_hash_token():
    digest = RefreshTokenRepository.hash_token("some.jwt.value")

    assert len(digest) == 64
    assert digest == RefreshTokenRepository.hash_token("some.jwt.value")
    assert digest != RefreshTokenRepository.hash_token("other.jwt.value")


@pytest.mark.asyncio
async def test_create_stores_digest_only(repository, db_session, user_id):
    record = await repository.create(
        user_id=user_id, token="raw.jwt.token", expires_at=NOW + timedelta(days=7)
    )

    assert record.user_id == user_id
    assert record.token_hash == RefreshTokenRepository.hash_token("raw.jwt.token")
    assert record.created_at == NOW
    assert record.expires_at == NOW + timedelta(days=7)

    stored = (await db_session.execute(select(RefreshTokenModel.token_hash))).scalars().all()
    assert stored == [record.token_hash]
    assert "raw.jwt.token" not in stored


@pytest.mark.asyncio
async def test_find_by_token(repository, user_id):
    created = await repository.create(
        user_id=user_id, token="raw.jwt.token", expires_at=NOW + timedelta(days=7)
    )

    found = await repository.find_by_token("raw.jwt.token")

    assert found is not None
    assert found.id == created.id
    assert found.expires_at == NOW + timedelta(days=7)
    assert await repository.find_by_token("other.jwt.token") is None


@pytest.mark.asyncio
async def test_user_may_hold_many_tokens(repository, db_session, user_id):
    await repository.create(user_id=user_id, token="first", expires_at=NOW + timedelta(days=7))
    await repository.create(user_id=user_id, token="second", expires_at=NOW + timedelta(days=7))

    assert await count_tokens(db_session) == 2


@pytest.mark.asyncio
async def test_delete_by_token(repository, db_session, user_id):
    await repository.create(user_id=user_id, token="first", expires_at=NOW + timedelta(days=7))
    await repository.create(user_id=user_id, token="second", expires_at=NOW + timedelta(days=7))

    deleted = await repository.delete_by_token("first")

    assert deleted is not None
    assert deleted.user_id == user_id
    assert await repository.find_by_token("first") is None
    assert await repository.find_by_token("second") is not None
    assert await repository.delete_by_token("first") is None


@pytest.mark.asyncio
async def test_delete_expired(repository, db_session, user_id):
    await repository.create(user_id=user_id, token="expired", expires_at=NOW - timedelta(seconds=1))
    await repository.create(user_id=user_id, token="boundary", expires_at=NOW)
    await repository.create(user_id=user_id, token="live", expires_at=NOW + timedelta(days=1))

    deleted = await repository.delete_expired(NOW)

    assert deleted == 1
    assert await repository.find_by_token("expired") is None
    assert await repository.find_by_token("boundary") is not None
    assert await repository.find_by_token("live") is not None

    # Nothing left to delete on a second pass
    assert await repository.delete_expired(NOW) == 0


@pytest.mark.asyncio
async def test_delete_expired_enforces_retention(db_session, user_id):
    old = NOW - timedelta(days=8)
    old_repository = RefreshTokenRepository(db_session, clock=lambda: old)
    await old_repository.create(
        user_id=user_id, token="long-lived", expires_at=NOW + timedelta(days=30)
    )

    repository = RefreshTokenRepository(db_session, clock=lambda: NOW, retention=timedelta(days=7))
    await repository.create(user_id=user_id, token="recent", expires_at=NOW + timedelta(days=30))

    assert await repository.delete_expired(NOW) == 1
    assert await repository.find_by_token("long-lived") is None
    assert await repository.find_by_token("recent") is not None


@pytest.mark.asyncio
async def test_delete_expired_on_empty_table(repository):
    assert await repository.delete_expired(NOW) == 0
