"""Background jobs."""

from sessionkit.infrastructure.jobs.token_cleanup import (
    TokenCleanupScheduler,
    cleanup_expired_tokens,
)

__all__ = [
    "TokenCleanupScheduler",
    "cleanup_expired_tokens",
]
