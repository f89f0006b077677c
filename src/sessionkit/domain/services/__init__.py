"""Domain services for SessionKit."""

from sessionkit.domain.services.auth_service import (
    AuthenticatedUser,
    AuthService,
    AuthTokens,
    LoginResult,
    RefreshResult,
)
from sessionkit.domain.services.user_service import UserService

__all__ = [
    "AuthService",
    "AuthTokens",
    "AuthenticatedUser",
    "LoginResult",
    "RefreshResult",
    "UserService",
]
