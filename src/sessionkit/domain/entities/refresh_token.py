"""Refresh token record entity.

One record exists per active session. The signed token itself is never kept,
only its SHA-256 digest.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class RefreshToken:
    """A persisted refresh token.

    Attributes:
        id: Unique identifier (UUID string).
        user_id: Owner of the session.
        token_hash: SHA-256 hex digest of the signed refresh token.
        created_at: When the session was opened.
        expires_at: When the record stops being accepted.
    """

    id: str
    user_id: str
    token_hash: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the record is past its expiry at ``now``."""
        return self.expires_at <= now
