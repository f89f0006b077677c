"""Domain entities for SessionKit.

Entities are pure Python dataclasses with no dependencies on infrastructure
or external frameworks.
"""

from sessionkit.domain.entities.refresh_token import RefreshToken
from sessionkit.domain.entities.user import User, UserProfile

__all__ = [
    "RefreshToken",
    "User",
    "UserProfile",
]
