"""Process-local attempt store used by the rate limiter."""

import asyncio

from hub.domain.repository import AttemptStore


class InMemoryAttemptStore(AttemptStore):
    """Process-local attempt log keyed by client.

    One instance is shared by every request in the process; a lock keeps
    read-then-append sequences consistent across concurrent handlers.
    """

    def __init__(self) -> None:
        self._attempts: dict[str, list[float]] = {}
        self._lock = asyncio.Lock()

    async def recent(self, key: str, since: float) -> list[float]:
        """Timestamps for ``key`` inside the window. Older ones are evicted."""
        async with self._lock:
            kept = [t for t in self._attempts.get(key, []) if t >= since]
            if kept:
                self._attempts[key] = kept
            else:
                self._attempts.pop(key, None)
            return list(kept)

    async def add(self, key: str, at: float) -> None:
        """Record one attempt."""
        async with self._lock:
            self._attempts.setdefault(key, []).append(at)

    async def purge(self, before: float) -> int:
        """Drop stale timestamps and return how many keys were emptied."""
        async with self._lock:
            removed = 0
            for key in list(self._attempts):
                kept = [t for t in self._attempts[key] if t >= before]
                if kept:
                    self._attempts[key] = kept
                else:
                    del self._attempts[key]
                    removed += 1
            return removed
