"""Thread-safe in-memory cache with TTL and LRU eviction.

Remote intent answers are cached per normalized query. Entries expire
after ``default_ttl_seconds`` and the least recently used entry is
evicted once ``max_size`` is reached.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """In-memory implementation of CachePort.

    Attributes:
        default_ttl_seconds: Lifetime of an entry (None = no expiry)
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[SearchIntent](name="remote_intent", max_size=128)
        intent = cache.get_or_compute("delhi to gurgaon", lambda: provider.parse(q))
    """

    default_ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "cache"

    _entries: "OrderedDict[str, Tuple[Any, float]]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def _expired(self, deadline: float) -> bool:
        return time.monotonic() >= deadline

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, deadline = entry
            if self._expired(deadline):
                del self._entries[key]
                self._logger.debug("Cache entry expired", extra={"key": key})
                return None

            self._entries.move_to_end(key)
            return value

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        """Store a value.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Optional lifetime override for this entry.
        """
        lifetime = ttl if ttl is not None else self.default_ttl_seconds
        deadline = time.monotonic() + lifetime if lifetime is not None else float("inf")

        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = (value, deadline)

            while self.max_size is not None and len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": evicted, "reason": "max_size"},
                )

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        cached = self.get(key)
        if cached is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return cached

        # computed outside the lock
        computed = compute_fn()
        if computed is not None:
            self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        self._logger.info("Cache cleared", extra={"entries_cleared": dropped})
        return dropped

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def size(self) -> int:
        with self._lock:
            return len(self._entries)
