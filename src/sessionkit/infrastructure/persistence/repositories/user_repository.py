"""User repository for database operations."""

from collections.abc import Mapping

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sessionkit.core.clock import Clock, as_utc, utc_now
from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.core.logging import get_logger
from sessionkit.domain.entities import User
from sessionkit.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"

# Columns a profile update may touch
PROFILE_FIELDS = ("name", "bio", "location")


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession, clock: Clock = utc_now) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
            clock: Time source for ``created_at``.
        """
        self.session = session
        self._clock = clock

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            name=model.name,
            bio=model.bio,
            location=model.location,
            created_at=as_utc(model.created_at),
        )

    async def create(self, email: str, password_hash: str, name: str | None = None) -> User:
        """Create and commit a new user.

        Args:
            email: User's email address.
            password_hash: Credential hash.
            name: Optional display name.

        Returns:
            The created user.

        Raises:
            AppError: RESOURCE_CONFLICT if the email is already registered.
        """
        model = UserModel(
            email=email,
            password_hash=password_hash,
            name=name,
            created_at=as_utc(self._clock()),
        )
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # A concurrent registration won the race past the existence check
            await self.session.rollback()
            logger.info("User insert rejected by unique constraint", email=email)
            raise AppError(ErrorCode.RESOURCE_CONFLICT, DUPLICATE_EMAIL_MESSAGE) from e
        return self._to_entity(model)

    async def find_by_id(self, user_id: str) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID (UUID string).

        Returns:
            The user if found, None otherwise.
        """
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_by_email(self, email: str) -> User | None:
        """Get a user by email.

        Args:
            email: User's email address.

        Returns:
            The user if found, None otherwise.
        """
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def update(self, user_id: str, changes: Mapping[str, str | None]) -> User | None:
        """Apply profile changes to a user and commit.

        Only profile columns are written; any other key is ignored. A ``None``
        value clears the field.

        Args:
            user_id: User ID (UUID string).
            changes: Field name to new value.

        Returns:
            The updated user, or None if no user has this ID.
        """
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        model = result.scalar_one_or_none()
        if model is None:
            return None

        for field_name in PROFILE_FIELDS:
            if field_name in changes:
                setattr(model, field_name, changes[field_name])

        await self.session.commit()
        return self._to_entity(model)
