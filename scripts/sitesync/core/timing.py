"""Elapsed-time helpers for per-repo update durations."""

import time
from typing import Callable

Clock = Callable[[], float]


class Stopwatch:
    """Wall-clock seconds since construction, read from an injectable clock."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._started = clock()

    def elapsed(self) -> float:
        return round(self._clock() - self._started, 3)


def format_duration(seconds: float) -> str:
    """Short duration for summary lines: 850ms, 12.3s, 4m 05s, 1h 02m."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes, secs = divmod(int(round(seconds)), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"

    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m"
