"""User entity for authentication."""

from dataclasses import dataclass, field
from datetime import datetime

from sessionkit.core.clock import utc_now


@dataclass
class User:
    """A registered user.

    Attributes:
        id: Unique identifier (UUID string).
        email: Email address, unique across users.
        password_hash: Credential hash in ``salt:hash`` form (never plaintext).
        name: Optional display name.
        bio: Optional free-form profile text.
        location: Optional location shown on the profile.
        created_at: Timestamp when the user was created.
    """

    id: str
    email: str
    password_hash: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("User ID is required")
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")


@dataclass(frozen=True)
class UserProfile:
    """User data safe to hand back to clients (no credential hash)."""

    id: str
    email: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            bio=user.bio,
            location=user.location,
        )
