# src/dolarbot/shared/cache.py
"""
Response Cache - In-memory TTL Store for API Responses

Keeps normalized API responses for a bounded time window so repeated
requests do not reach the upstream service. Expiration is lazy: an entry
older than the TTL is dropped the next time it is read.

Files that USE this module:
- dolarbot.application.api_calls (creates the shared cache instance)
- dolarbot.adapters.providers.dolar_argentina (reads and writes responses)
- tests.test_cache (unit tests)

Files that this module USES:
- dolarbot.config (settings for the default TTL)
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Hashable, Optional, Type, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _CacheEntry:
    value: Any
    stored_at: float


class ResponseCache:
    """Thread-safe key/value store whose entries expire after a fixed TTL."""

    def __init__(self, ttl: Optional[timedelta] = None, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the cache.

        Args:
            ttl: Entry time-to-live (defaults to settings.cache_ttl)
            clock: Source of monotonic seconds; tests pass a fake one
        """
        if ttl is None:
            from dolarbot.config import settings
            ttl = settings.cache_ttl
        if ttl.total_seconds() <= 0:
            raise ValueError("cache ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[Hashable, _CacheEntry] = {}
        self._lock = threading.Lock()

    def _is_fresh(self, entry: _CacheEntry, now: float) -> bool:
        return now - entry.stored_at < self.ttl.total_seconds()

    def get(self, key: Hashable, expected_type: Optional[Type[T]] = None) -> Optional[T]:
        """
        Return the value stored under ``key`` if it has not expired.

        Args:
            key: Cache key
            expected_type: When given, a value of another type counts as a miss

        Returns:
            The stored value, or None on a miss
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not self._is_fresh(entry, now):
                del self._entries[key]
                log.debug("Cache entry expired: %s", key)
                return None
            value = entry.value

        if expected_type is not None and not isinstance(value, expected_type):
            log.warning("Cache entry %s holds %s, expected %s", key, type(value).__name__, expected_type.__name__)
            return None
        return value

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        if value is None:
            raise ValueError("cannot cache None")
        entry = _CacheEntry(value=value, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
