"""Null cache implementation.

Always misses, so every geocoding call reaches the underlying service.
Used by the tests to count outbound requests, and handy when debugging
stale answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache implementing CachePort."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def invalidate(self, key: str) -> bool:
        return False

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {"size": 0, "hits": 0, "misses": 0, "hit_rate_percent": 0}
