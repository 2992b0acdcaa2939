"""In-memory expiring key-value cache."""

import time
from typing import Any, Callable, Hashable, Optional


class TTLCache:
    """Key-value store whose entries expire after a per-entry TTL.

    Expired entries are evicted when read, and swept from the whole store
    on the next write after the earliest expiry passes.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict = {}
        self._next_expiry = float("inf")

    def get(self, key: Hashable) -> tuple[bool, Any]:
        """Return ``(hit, value)``. Expired entries are evicted on access."""
        entry = self._entries.get(key)
        if entry is None:
            return False, None

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return False, None
        return True, value

    def set(self, key: Hashable, value: Any, ttl_seconds: Optional[float] = None):
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        now = self._clock()
        if now >= self._next_expiry:
            self._purge(now)
        expires_at = now + ttl
        self._entries[key] = (value, expires_at)
        self._next_expiry = min(self._next_expiry, expires_at)

    def _purge(self, now: float):
        self._entries = {k: entry for k, entry in self._entries.items() if entry[1] > now}
        self._next_expiry = min((entry[1] for entry in self._entries.values()), default=float("inf"))

    def clear(self):
        self._entries.clear()
        self._next_expiry = float("inf")

    def __len__(self) -> int:
        return len(self._entries)
