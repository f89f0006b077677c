"""Store interfaces the domain services depend on.

Implementations live in ``sessionkit.infrastructure.persistence``; tests can
substitute any object with the same coroutine methods.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Protocol

from sessionkit.domain.entities import RefreshToken, User


class UserStore(Protocol):
    """Reads and writes users. Email uniqueness is enforced by the store."""

    async def find_by_email(self, email: str) -> User | None: ...

    async def find_by_id(self, user_id: str) -> User | None: ...

    async def create(self, email: str, password_hash: str, name: str | None = None) -> User:
        """Insert a user.

        Raises:
            AppError: RESOURCE_CONFLICT if the email is already taken.
        """
        ...

    async def update(self, user_id: str, changes: Mapping[str, str | None]) -> User | None:
        """Apply profile changes and return the updated user, or None if missing."""
        ...


class RefreshTokenStore(Protocol):
    """Persists refresh tokens keyed by token value."""

    async def create(self, user_id: str, token: str, expires_at: datetime) -> RefreshToken: ...

    async def find_by_token(self, token: str) -> RefreshToken | None: ...

    async def delete_by_token(self, token: str) -> RefreshToken | None: ...

    async def delete_expired(self, now: datetime) -> int: ...
