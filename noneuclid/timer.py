"""High-resolution tick timer."""

from __future__ import annotations

import time
from typing import Callable

_NANOSECONDS = 1_000_000_000


class Timer:
    """Measures elapsed time in ticks of a monotonic clock."""

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = _NANOSECONDS,
    ) -> None:
        self._clock = clock
        self.frequency = frequency
        self._t1 = 0
        self._t2 = 0

    def start(self) -> None:
        self._t1 = self._clock()

    def stop(self) -> float:
        """Seconds since the last start."""
        self._t2 = self._clock()
        return (self._t2 - self._t1) / self.frequency

    def ticks(self) -> int:
        self._t2 = self._clock()
        return self._t2

    def seconds_to_ticks(self, s: float) -> int:
        return int(self.frequency * s)

    def stop_start(self) -> float:
        """Seconds since the last start; the stop time becomes the new start."""
        result = self.stop()
        self._t1 = self._t2
        return result