"""Periodic removal of expired refresh tokens.

A failed cleanup cycle is logged and retried on the next tick; it never
takes the process down.
"""

import asyncio
import uuid
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sessionkit.core.clock import Clock, utc_now
from sessionkit.core.logging import LoggingContext, get_logger
from sessionkit.infrastructure.persistence.repositories import RefreshTokenRepository

logger = get_logger(__name__)


async def cleanup_expired_tokens(
    session_factory: async_sessionmaker[AsyncSession],
    clock: Clock = utc_now,
    retention: timedelta = timedelta(days=7),
) -> int | None:
    """Run one cleanup cycle.

    Args:
        session_factory: Factory for the session the cycle runs in.
        clock: Time source; records expired before ``clock()`` are removed.
        retention: Maximum age of a stored token regardless of expiry.

    Returns:
        Number of deleted records, or None if the cycle failed.
    """
    # One correlation id for every log line of the cycle
    with LoggingContext(job="token_cleanup", correlation_id=f"cid_{uuid.uuid4().hex[:12]}"):
        logger.debug("Token cleanup started")
        try:
            async with session_factory() as session:
                repo = RefreshTokenRepository(session, clock=clock, retention=retention)
                deleted = await repo.delete_expired(clock())
        except Exception as e:
            logger.error(
                "Error cleaning up expired tokens",
                error=str(e),
                exc_type=type(e).__name__,
            )
            return None

        logger.info("Cleaned up expired tokens", deleted=deleted)
        return deleted


class TokenCleanupScheduler:
    """Runs ``cleanup_expired_tokens`` on a fixed interval in the background.

    The first cycle runs immediately to clear any backlog from downtime.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        interval_seconds: float = 86400,
        clock: Clock = utc_now,
        retention: timedelta = timedelta(days=7),
    ) -> None:
        self._session_factory = session_factory
        self._interval = interval_seconds
        self._clock = clock
        self._retention = retention
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await cleanup_expired_tokens(
                self._session_factory, clock=self._clock, retention=self._retention
            )
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        """Start the background loop. Calling it twice is a no-op."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="refresh-token-cleanup")
        logger.info("Token cleanup scheduler started", interval_seconds=self._interval)

    async def stop(self) -> None:
        """Cancel the background loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Token cleanup scheduler stopped")
