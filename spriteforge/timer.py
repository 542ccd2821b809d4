"""Frame timer that measures delta and total time, excluding paused spans."""

from __future__ import annotations

import time
from typing import Callable


class GameTimer:
    """Measures time between ticks from a monotonic counter.

    ``clock`` returns an integer count and ``counts_per_second`` says how many
    counts make a second; by default nanoseconds from ``time.perf_counter_ns``.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        counts_per_second: int = 1_000_000_000,
    ) -> None:
        self._clock = clock
        self._seconds_per_count = 1.0 / counts_per_second
        self._delta = -1.0
        self._base = 0
        self._paused = 0
        self._stop = 0
        self._prev = 0
        self._curr = 0
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def total_time(self) -> float:
        """Seconds since reset(), not counting time spent stopped."""
        end = self._stop if self._stopped else self._curr
        return ((end - self._paused) - self._base) * self._seconds_per_count

    def delta_time(self) -> float:
        return self._delta

    def delta_time_ms(self) -> float:
        return self._delta * 1000.0

    def reset(self) -> None:
        now = self._clock()
        self._base = now
        self._prev = now
        self._stop = 0
        self._stopped = False

    def start(self) -> None:
        """Resume after stop(); the stopped span is added to the paused time."""
        now = self._clock()
        if self._stopped:
            self._paused += now - self._stop
            self._prev = now
            self._stop = 0
            self._stopped = False

    def stop(self) -> None:
        if not self._stopped:
            self._stop = self._clock()
            self._stopped = True

    def tick(self) -> None:
        """Measure the time since the previous tick; zero while stopped."""
        if self._stopped:
            self._delta = 0.0
            return
        self._curr = self._clock()
        self._delta = (self._curr - self._prev) * self._seconds_per_count
        self._prev = self._curr
        if self._delta < 0.0:
            self._delta = 0.0