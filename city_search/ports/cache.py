"""Cache port - Injectable caching abstraction.

Geocoding answers are kept for a short while so that retyping a query,
or selecting the same candidate twice, does not hit the public service
again.
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

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        """Store a value under ``key``; ``ttl`` overrides the default lifetime."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute, store and return it.

        Exceptions raised by ``compute_fn`` propagate and nothing is
        stored.
        """
        ...

    def clear(self) -> int:
        """Drop every entry and return how many were dropped."""
        ...

    def invalidate(self, key: str) -> bool:
        """Drop one entry; True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
