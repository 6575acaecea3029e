"""Thread-safe in-memory query cache.

Plays the role a client-side data-fetching library gives a web page by
default: answers are reused while fresh and the least recently used
entries are dropped once the cache is full.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """LRU cache with an optional time-to-live.

    Attributes:
        ttl_seconds: Lifetime of an entry (None = never expires)
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging
        clock: Monotonic time source, injectable for tests

    Example:
        cache = InMemoryCache[list](name="search", ttl_seconds=300)
        results = cache.get_or_compute("search:hanoi", lambda: fetch("hanoi"))
    """

    ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "cache"
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    _store: "OrderedDict[str, Tuple[Any, float]]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, expires_at = entry
            if self.clock() >= expires_at:
                del self._store[key]
                self._logger.debug("Cache entry expired", extra={"key": key})
                self._misses += 1
                return None

            self._store.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        """Store ``value``; ``ttl`` overrides the cache lifetime for this entry."""
        effective_ttl = ttl if ttl is not None else self.ttl_seconds
        expires_at = (
            self.clock() + effective_ttl if effective_ttl is not None else float("inf")
        )

        with self._lock:
            self._store[key] = (value, expires_at)
            self._store.move_to_end(key)

            while self.max_size is not None and len(self._store) > self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": evicted, "reason": "max_size"},
                )

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        value = self.get(key)
        if value is not None:
            return value

        # Computed outside the lock so a slow request does not block readers.
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
        self._logger.info("Cache cleared", extra={"entries_cleared": count})
        return count

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._store.pop(key, None) is not None

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counters and the current size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
