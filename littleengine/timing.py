"""Frame timing and wall-clock helpers."""

from __future__ import annotations

import math
import time as _time
from collections.abc import Callable
from datetime import datetime


class Time:
    """Tracks elapsed time, per-frame delta and frame rate.

    One shared instance is available through :meth:`instance`. Separate
    instances may be built with their own clock, which is handy for tests.
    """

    _shared: Time | None = None

    def __init__(self, clock: Callable[[], float] = _time.perf_counter) -> None:
        self._clock = clock
        self._start: float | None = None
        self._elapsed_time = 0.0
        self._delta_time = 0.0
        self._fps = 0.0

    @classmethod
    def instance(cls) -> Time:
        """Return the process-wide timer."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def start(self) -> None:
        """Mark the current moment as time zero."""
        self._start = self._clock()

    def tick(self) -> None:
        """Advance one frame and update elapsed time, delta and FPS."""
        if self._start is None:
            raise RuntimeError("Time.start() must be called before tick()")
        previous = self._elapsed_time
        self._elapsed_time = self._clock() - self._start
        self._delta_time = self._elapsed_time - previous
        self._fps = 1.0 / self._delta_time if self._delta_time else math.inf

    def current_time_formatted(self) -> str:
        """Return the local wall-clock time as HH:MM:SS."""
        return datetime.now().strftime("%H:%M:%S")

    @property
    def delta_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta_time

    @property
    def elapsed_time(self) -> float:
        """Seconds since :meth:`start` as of the last tick."""
        return self._elapsed_time

    @property
    def fps(self) -> float:
        """Frame rate derived from the last delta."""
        return self._fps