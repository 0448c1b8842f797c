from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class CounterStore:
    """Process-wide click counter shown on the About tab."""

    def __init__(self, initial: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            value = self._value
        logger.debug("Counter incremented to %d", value)
        return value

    def get(self) -> int:
        with self._lock:
            return self._value
