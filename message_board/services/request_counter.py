from __future__ import annotations

import threading


class RequestCounter:
    """Per-process page hit counter. Resets on restart, never persisted."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
