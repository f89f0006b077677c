"""Persistence repositories for database operations."""

from sessionkit.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from sessionkit.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "RefreshTokenRepository",
    "UserRepository",
]
