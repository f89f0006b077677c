"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Request body for registration and login.

    Fields are optional so a missing value is reported as a VALIDATION_ERROR
    by the route rather than as a framework 422.
    """

    email: str | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="User's password")


class UserProfileResponse(BaseModel):
    """Registered user as returned to clients."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: str | None = Field(None, description="Display name")
    bio: str | None = Field(None, description="Free-form profile text")
    location: str | None = Field(None, description="Location shown on the profile")

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    message: str
    user: UserProfileResponse


class LoginUserResponse(BaseModel):
    id: str
    email: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Response body for login. Tokens travel in cookies only."""

    user: LoginUserResponse


class MessageResponse(BaseModel):
    message: str


class CurrentUserResponse(BaseModel):
    user_id: str
    email: str

    model_config = {"from_attributes": True}


class ProfileResponse(BaseModel):
    user: CurrentUserResponse


class ErrorResponse(BaseModel):
    status: str = "error"
    code: str
    message: str
