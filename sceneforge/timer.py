"""Frame timing: elapsed time, per-frame delta, frame rate and a stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time in seconds from a monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = float(clock())
        self._timer_start = self._start
        self._delta = 0.0
        self._fps = 0.0
        self._scale = 1.0
        self._last: float | None = None
        self._window_start = 0.0
        self._frames = 0

    def update(self) -> None:
        """Advance one frame, refreshing the delta and, once a second, the frame rate."""
        current = self.run_time()
        if self._last is None:
            self._last = current
            self._window_start = current
        self._delta = current - self._last
        self._last = current
        self._frames += 1
        elapsed = current - self._window_start
        if elapsed >= 1.0:
            self._fps = self._frames / elapsed
            self._window_start = current
            self._frames = 0

    def run_time(self) -> float:
        """Seconds since the timer was created."""
        return float(self._clock()) - self._start

    def time_delta(self) -> float:
        """Seconds between the last two updates, multiplied by the timescale."""
        return self._delta * self._scale

    def frame_rate(self) -> float:
        return self._fps

    @property
    def timescale(self) -> float:
        return self._scale

    @timescale.setter
    def timescale(self, value: float) -> None:
        self._scale = float(value)

    def start_timer(self) -> None:
        """Restart the stopwatch."""
        self._timer_start = float(self._clock())

    def timer_run_time(self) -> float:
        """Seconds since the stopwatch was last started."""
        return float(self._clock()) - self._timer_start