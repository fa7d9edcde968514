"""Cache port - Injectable caching abstraction.

Used to remember remote intent answers per normalized query so that
repeated searches do not hit the external service again.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if missing or expired."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many were dropped."""
        ...

    def invalidate(self, key: str) -> bool:
        """Drop one entry; True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of live entries."""
        ...
