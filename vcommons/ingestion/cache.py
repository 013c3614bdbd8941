"""In-memory cache with a per-entry freshness window."""

import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple


class TTLCache:
    """Memoize values for a limited time.

    Expired entries are dropped when read and swept on every write. The
    clock is injectable so tests can move time forward without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache."""
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def put(self, key: Hashable, value: Any, ttl: float) -> None:
        """Store a value for ``ttl`` seconds. A non-positive ttl stores nothing.

        Every write also drops expired entries, including keys that are never
        read again.
        """
        now = self._clock()
        self._evict_expired(now)

        if ttl <= 0:
            self._entries.pop(key, None)
            return
        self._entries[key] = (now + ttl, value)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
