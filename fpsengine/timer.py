"""A pausable high-resolution timer driven by an integer nanosecond clock."""

from __future__ import annotations

import time
from typing import Callable

TICKS_PER_SECOND = 1_000_000_000
_ADVANCE_TICKS = TICKS_PER_SECOND // 10


class SystemTimer:
    """Measures running time and per-frame elapsed time; can be stopped and stepped.

    ``clock`` returns the current time in integer nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._stopped = True
        self._stop_time: int | None = None
        self._last_elapsed = 0
        self._base = 0

    def __repr__(self) -> str:
        return f"SystemTimer(stopped={self._stopped})"

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def _adjusted_now(self) -> int:
        """The stop time while one is recorded, otherwise the clock."""
        if self._stop_time:
            return self._stop_time
        return self._clock()

    def reset(self) -> None:
        now = self._adjusted_now()
        self._base = self._last_elapsed = now
        self._stop_time = None
        self._stopped = False

    def start(self) -> None:
        now = self._clock()
        if self._stopped:
            self._base += now - (self._stop_time or 0)
        self._stop_time = None
        self._last_elapsed = now
        self._stopped = False

    def stop(self) -> None:
        if self._stopped:
            return
        now = self._clock()
        self._last_elapsed = self._stop_time = now
        self._stopped = True

    def advance(self) -> None:
        """Move the recorded stop time forward by a tenth of a second."""
        self._stop_time = (self._stop_time or 0) + _ADVANCE_TICKS

    def time(self) -> float:
        """Seconds measured since the last reset, excluding stopped periods."""
        return (self._adjusted_now() - self._base) / TICKS_PER_SECOND

    def absolute_time(self) -> float:
        """The clock's current reading in seconds."""
        return self._clock() / TICKS_PER_SECOND

    def elapsed(self) -> float:
        """Seconds since the previous call, never negative."""
        now = self._adjusted_now()
        seconds = (now - self._last_elapsed) / TICKS_PER_SECOND
        self._last_elapsed = now
        return max(seconds, 0.0)