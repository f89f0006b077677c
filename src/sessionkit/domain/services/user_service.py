"""User profile service.

Reads and updates the profile of an authenticated user.
"""

from collections.abc import Mapping

from sessionkit.core.errors import AppError, ErrorCode, normalize_errors
from sessionkit.core.logging import get_logger
from sessionkit.domain.entities import UserProfile
from sessionkit.domain.repositories import UserStore

logger = get_logger(__name__)

USER_NOT_FOUND = "User not found"


class UserService:
    """Service for user profile business logic."""

    def __init__(self, users: UserStore) -> None:
        self.users = users

    async def get_profile(self, user_id: str) -> UserProfile:
        """Load a user's profile.

        Raises:
            AppError: RESOURCE_NOT_FOUND if the user no longer exists,
                INTERNAL_ERROR on unexpected failures.
        """
        with normalize_errors("get_profile", "Error fetching user profile"):
            user = await self.users.find_by_id(user_id)
            if user is None:
                logger.info("Profile lookup failed: user not found", user_id=user_id)
                raise AppError(ErrorCode.RESOURCE_NOT_FOUND, USER_NOT_FOUND)
            return UserProfile.from_user(user)

    async def update_profile(
        self, user_id: str, changes: Mapping[str, str | None]
    ) -> UserProfile:
        """Update a user's profile fields.

        Args:
            user_id: The user to update.
            changes: Only the fields being changed. ``None`` clears a field.

        Returns:
            The profile after the update.

        Raises:
            AppError: RESOURCE_NOT_FOUND if the user no longer exists,
                INTERNAL_ERROR on unexpected failures.
        """
        with normalize_errors("update_profile", "Error updating user profile"):
            user = await self.users.update(user_id, changes)
            if user is None:
                logger.info("Profile update failed: user not found", user_id=user_id)
                raise AppError(ErrorCode.RESOURCE_NOT_FOUND, USER_NOT_FOUND)

            logger.info("User profile updated", user_id=user_id, fields=sorted(changes))
            return UserProfile.from_user(user)
