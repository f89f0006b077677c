"""API Schemas for request/response validation."""

from sessionkit.infrastructure.api.schemas.auth_schemas import (
    CredentialsRequest,
    CurrentUserResponse,
    ErrorResponse,
    LoginResponse,
    LoginUserResponse,
    MessageResponse,
    ProfileResponse,
    RegisterResponse,
    UserProfileResponse,
)
from sessionkit.infrastructure.api.schemas.user_schemas import (
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    UserProfileEnvelope,
)

__all__ = [
    "CredentialsRequest",
    "CurrentUserResponse",
    "ErrorResponse",
    "LoginResponse",
    "LoginUserResponse",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "ProfileUpdateResponse",
    "RegisterResponse",
    "UserProfileEnvelope",
    "UserProfileResponse",
]
