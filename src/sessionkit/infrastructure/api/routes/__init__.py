"""API Routes for SessionKit."""

from sessionkit.infrastructure.api.routes.auth_router import router as auth_router
from sessionkit.infrastructure.api.routes.users_router import router as users_router

__all__ = [
    "auth_router",
    "users_router",
]
