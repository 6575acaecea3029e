"""Debouncing of search-as-you-type events.

Each UI event calls ``settle()`` from its own worker thread. The call
sleeps for the debounce delay and then hands back a token if it is still
the latest event for its key; superseded events get None and do nothing.
The token is checked again with ``is_current()`` once the slow work is
done, so an answer that arrives after a newer event is dropped too.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class Debouncer:
    """Latest-wins debouncer keyed by event name.

    Attributes:
        delay_seconds: How long typing must pause before an event fires
        sleep: Sleep function, injectable for tests
    """

    delay_seconds: float = 0.5
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    _generations: Dict[str, int] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _bump(self, key: str) -> int:
        with self._lock:
            generation = self._generations.get(key, 0) + 1
            self._generations[key] = generation
            return generation

    def settle(self, key: str = "default") -> Optional[int]:
        """Wait out the delay.

        Returns:
            A token for this event, or None if a newer event arrived
            meanwhile.
        """
        generation = self._bump(key)
        if self.delay_seconds > 0:
            self.sleep(self.delay_seconds)
        return generation if self.is_current(key, generation) else None

    def is_current(self, key: str, token: Optional[int]) -> bool:
        """True while no newer event (or cancel) happened since ``token``."""
        if token is None:
            return False
        with self._lock:
            return self._generations.get(key) == token

    def cancel(self, key: str = "default") -> None:
        """Supersede any event waiting or running on ``key``."""
        self._bump(key)
