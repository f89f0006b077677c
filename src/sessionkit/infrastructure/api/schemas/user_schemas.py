"""Pydantic schemas for user profile endpoints."""

from pydantic import BaseModel, Field

from sessionkit.infrastructure.api.schemas.auth_schemas import UserProfileResponse


class ProfileUpdateRequest(BaseModel):
    """Request body for a partial profile update.

    Omitted fields are left unchanged; an explicit ``null`` clears the field.
    Unknown fields are ignored.
    """

    name: str | None = Field(None, max_length=255, description="Display name")
    bio: str | None = Field(None, max_length=2000, description="Free-form profile text")
    location: str | None = Field(None, max_length=255, description="Location")


class UserProfileEnvelope(BaseModel):
    user: UserProfileResponse


class ProfileUpdateResponse(BaseModel):
    message: str
    user: UserProfileResponse
