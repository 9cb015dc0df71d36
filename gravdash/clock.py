"""Frame timing in milliseconds with an adjustable speed."""

from __future__ import annotations

import time
from typing import Callable


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Clock:
    """Measures the time between frames, scaled by a speed factor."""

    def __init__(self, time_source: Callable[[], int] | None = None) -> None:
        self._now = time_source or _monotonic_ms
        self._start = self._now()
        self._last_frame_time = self.elapsed()
        self.speed = 1.0
        self.delta = 0

    def update(self) -> None:
        """Record the scaled time since the previous update in ``delta``."""
        now = self.elapsed()
        self.delta = int(self.speed * float(now - self._last_frame_time))
        self._last_frame_time = now

    def elapsed(self) -> int:
        """Milliseconds since the clock was created."""
        return self._now() - self._start

    def set_speed(self, speed: float) -> None:
        """Set the factor applied to the measured frame time."""
        self.speed = speed