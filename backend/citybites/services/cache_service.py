"""In-process TTL cache for recommendation payloads.

Entries expire lazily: an expired entry is treated as a miss on lookup and
replaced by the next ``set`` for the same key. There is no sweeper and no
capacity bound, so memory grows with the number of distinct keys seen within
the process lifetime (cities x preference strings x restaurant names).
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

TTL_RECOMMENDATIONS = 10 * 60  # 10 minutes


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    expires_at: float


class TTLCache:
    """Key/value store with per-entry expiry and an injectable clock."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        default_ttl: float = TTL_RECOMMENDATIONS,
    ):
        self._clock = clock
        self._default_ttl = default_ttl
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or expiry."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            return None
        return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Set a value with TTL in seconds (defaults to the cache's TTL)."""
        if ttl is None:
            ttl = self._default_ttl
        entry = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl)
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # Typed key helpers

    def restaurants_key(self, city: str) -> str:
        return f"restaurants:{city.lower()}"

    def menu_key(self, city: str, restaurant_name: str) -> str:
        return f"menu:{city.lower()}:{restaurant_name.lower()}"

    def itinerary_key(self, city: str, preferences: str | None) -> str:
        return f"itinerary:{city.lower()}:{(preferences or '').lower()}"

    def food_map_key(self, city: str, preferences: str | None, days: int) -> str:
        return f"foodmap:{city.lower()}:{(preferences or '').lower()}:{days}d"
