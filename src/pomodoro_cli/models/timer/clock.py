"""Monotonic clock used for all timer arithmetic."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current monotonic time in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Clock backed by ``time.monotonic``, immune to wall-clock changes."""

    def now(self) -> float:
        return time.monotonic()
