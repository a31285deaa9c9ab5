"""
Real-time tick clock

Samples a monotonic clock once per tick and hands out the elapsed seconds.
Lag is not compensated: a slow frame simply produces a larger dt.
"""

import time
from typing import Callable, Optional


class TickClock:
    def __init__(self, time_fn: Callable[[], float] = time.perf_counter):
        self._time_fn = time_fn
        self._last: Optional[float] = None

    def sample(self) -> float:
        """Seconds since the previous sample (0.0 on the first call)"""
        now = self._time_fn()
        if self._last is None:
            self._last = now
            return 0.0
        dt = max(0.0, now - self._last)
        self._last = now
        return dt
