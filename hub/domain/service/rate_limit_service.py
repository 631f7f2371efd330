"""Sliding-window rate limiting for authentication attempts."""

import math
import time
from collections.abc import Callable

import logfire

from hub.config import RateLimitSettings
from hub.domain.error import RateLimitExceededError
from hub.domain.repository import AttemptStore

from .base import Service

RATE_LIMIT_MESSAGE = "Too many authentication attempts, please try again later."


class RateLimitService(Service):
    """Counts attempts per key over a sliding window.

    The store is shared for the lifetime of the application. The clock is
    injectable so tests can move time forward.
    """

    def __init__(
        self,
        attempt_store: AttemptStore,
        settings: RateLimitSettings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize rate limiter.

        Args:
            attempt_store: Keyed attempt log
            settings: Window length and attempt limit
            clock: Source of the current time in seconds
        """
        self.attempt_store = attempt_store
        self.settings = settings
        self.clock = clock
        self._last_purge = clock()

    async def hit(self, key: str) -> int:
        """Record an attempt for ``key`` if it is within the limit.

        Args:
            key: Client key (IP address)

        Returns:
            Attempts remaining in the current window

        Raises:
            RateLimitExceededError: With seconds until the oldest attempt
                leaves the window
        """
        with logfire.span("rate_limit_service.hit", key=key):
            now = self.clock()
            window = self.settings.window_seconds
            if now - self._last_purge >= window:
                await self.purge_expired()

            recent = await self.attempt_store.recent(key, since=now - window)

            if len(recent) >= self.settings.max_attempts:
                retry_after = max(1, math.ceil(recent[0] + window - now))
                logfire.warn("Rate limit exceeded", key=key, retry_after=retry_after)
                raise RateLimitExceededError(RATE_LIMIT_MESSAGE, retry_after=retry_after)

            await self.attempt_store.add(key, now)
            return self.settings.max_attempts - len(recent) - 1

    async def purge_expired(self) -> int:
        """Drop keys whose attempts have all left the window."""
        self._last_purge = self.clock()
        removed = await self.attempt_store.purge(
            before=self.clock() - self.settings.window_seconds
        )
        if removed:
            logfire.info("Rate limit keys purged", removed=removed)
        return removed
