"""SQLAlchemy models for SessionKit tables.

All models inherit from the Base class defined in database.py.
"""

from sessionkit.infrastructure.persistence.models.refresh_token import RefreshTokenModel
from sessionkit.infrastructure.persistence.models.user import UserModel

__all__ = [
    "RefreshTokenModel",
    "UserModel",
]
