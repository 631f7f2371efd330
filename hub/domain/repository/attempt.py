"""Attempt store interface for rate limiting."""

from abc import ABC, abstractmethod


class AttemptStore(ABC):
    """Keyed log of attempt timestamps.

    Timestamps are plain seconds from whatever clock the caller uses.
    Entries older than the caller's window are evicted on access.
    """

    @abstractmethod
    async def recent(self, key: str, since: float) -> list[float]:
        """Timestamps recorded for ``key`` at or after ``since``, oldest first.

        Args:
            key: Client key (e.g. IP address)
            since: Earliest timestamp still inside the window

        Returns:
            Timestamps inside the window
        """
        pass

    @abstractmethod
    async def add(self, key: str, at: float) -> None:
        """Record one attempt for ``key``.

        Args:
            key: Client key
            at: Attempt timestamp
        """
        pass

    @abstractmethod
    async def purge(self, before: float) -> int:
        """Drop every timestamp older than ``before``.

        Args:
            before: Cutoff timestamp

        Returns:
            Number of keys removed entirely
        """
        pass
