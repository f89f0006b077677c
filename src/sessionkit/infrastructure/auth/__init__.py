"""Authentication infrastructure components.

This module provides password hashing and JWT token issuance.
"""

from sessionkit.infrastructure.auth.password_hasher import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)
from sessionkit.infrastructure.auth.token_issuer import (
    AccessTokenClaims,
    RefreshTokenClaims,
    TokenConfig,
    TokenIssuer,
)

__all__ = [
    "AccessTokenClaims",
    "DUMMY_PASSWORD_HASH",
    "RefreshTokenClaims",
    "TokenConfig",
    "TokenIssuer",
    "hash_password",
    "verify_password",
]
