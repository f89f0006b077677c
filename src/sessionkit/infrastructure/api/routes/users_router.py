"""User profile API routes.

Both endpoints act on the user identified by the caller's access token.
"""

from fastapi import APIRouter

from sessionkit.infrastructure.api.dependencies import CurrentUser, UserServiceDep
from sessionkit.infrastructure.api.schemas import (
    ErrorResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    UserProfileEnvelope,
    UserProfileResponse,
)

router = APIRouter()

_PROFILE_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing or invalid access token"},
    404: {"model": ErrorResponse, "description": "User no longer exists"},
}


@router.get("/profile", response_model=UserProfileEnvelope, responses=_PROFILE_ERRORS)
async def get_profile(current_user: CurrentUser, service: UserServiceDep) -> UserProfileEnvelope:
    """Return the caller's stored profile."""
    profile = await service.get_profile(current_user.user_id)
    return UserProfileEnvelope(user=UserProfileResponse.model_validate(profile))


@router.patch("/profile", response_model=ProfileUpdateResponse, responses=_PROFILE_ERRORS)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: CurrentUser,
    service: UserServiceDep,
) -> ProfileUpdateResponse:
    """Update the caller's profile.

    Only the fields present in the body are changed.
    """
    profile = await service.update_profile(
        current_user.user_id, request.model_dump(exclude_unset=True)
    )
    return ProfileUpdateResponse(
        message="User profile updated successfully",
        user=UserProfileResponse.model_validate(profile),
    )
