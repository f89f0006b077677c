"""Repository for refresh token operations.

Provides database operations for storing, looking up and purging refresh
tokens. Tokens are addressed by value but only their SHA-256 digest is stored.
"""

import hashlib
from datetime import datetime, timedelta

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sessionkit.core.clock import Clock, as_utc, utc_now
from sessionkit.domain.entities import RefreshToken
from sessionkit.infrastructure.persistence.models import RefreshTokenModel


class RefreshTokenRepository:
    """Repository for refresh token database operations."""

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock = utc_now,
        retention: timedelta = timedelta(days=7),
    ) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
            clock: Time source for ``created_at``.
            retention: Records created longer ago than this are purged by
                ``delete_expired`` regardless of their ``expires_at``.
        """
        self._session = session
        self._clock = clock
        self._retention = retention

    @staticmethod
    def hash_token(token: str) -> str:
        """Hash a token using SHA-256.

        Args:
            token: The raw JWT token string.

        Returns:
            SHA-256 hex digest of the token.
        """
        return hashlib.sha256(token.encode()).hexdigest()

    @staticmethod
    def _to_entity(model: RefreshTokenModel) -> RefreshToken:
        return RefreshToken(
            id=model.id,
            user_id=model.user_id,
            token_hash=model.token_hash,
            created_at=as_utc(model.created_at),
            expires_at=as_utc(model.expires_at),
        )

    async def create(self, user_id: str, token: str, expires_at: datetime) -> RefreshToken:
        """Store and commit a new refresh token.

        A user may hold any number of tokens at once, one per session.

        Args:
            user_id: Owner of the token.
            token: The raw JWT token string.
            expires_at: When the token stops being accepted.

        Returns:
            The stored record.
        """
        model = RefreshTokenModel(
            user_id=user_id,
            token_hash=self.hash_token(token),
            created_at=as_utc(self._clock()),
            expires_at=as_utc(expires_at),
        )
        self._session.add(model)
        await self._session.commit()
        return self._to_entity(model)

    async def find_by_token(self, token: str) -> RefreshToken | None:
        """Look up a refresh token by value.

        Args:
            token: The raw JWT token string.

        Returns:
            The record if found, None otherwise.
        """
        stmt = select(RefreshTokenModel).where(
            RefreshTokenModel.token_hash == self.hash_token(token)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def delete_by_token(self, token: str) -> RefreshToken | None:
        """Delete a refresh token and return the removed record.

        Args:
            token: The raw JWT token string.

        Returns:
            The deleted record, or None if no record matched (including when
            a concurrent caller deleted it first).
        """
        record = await self.find_by_token(token)
        if record is None:
            return None

        result = await self._session.execute(
            delete(RefreshTokenModel).where(RefreshTokenModel.id == record.id)
        )
        await self._session.commit()
        if result.rowcount == 0:
            return None
        return record

    async def delete_expired(self, now: datetime) -> int:
        """Delete every token past its expiry or its retention window.

        Args:
            now: Reference time.

        Returns:
            Number of records deleted; 0 when nothing had expired.
        """
        now = as_utc(now)
        stmt = delete(RefreshTokenModel).where(
            or_(
                RefreshTokenModel.expires_at < now,
                RefreshTokenModel.created_at < now - self._retention,
            )
        )
        result = await self._session.execute(stmt)
        await self._session.commit()
        return result.rowcount
