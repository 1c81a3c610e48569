"""Monotonic millisecond clocks consumed by the frame-rate tracker."""

import time
from typing import Callable

Millis = int | float
Clock = Callable[[], Millis]


def monotonic_ms() -> int:
    """Current monotonic time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Deterministic clock for simulation and tests.

    Usage::

        clock = ManualClock()
        tracker = FrameRateTracker(clock=clock)
        clock.advance(16)
        tracker.on_frame()
    """

    def __init__(self, start_ms: Millis = 0):
        self._now = start_ms

    def __call__(self) -> Millis:
        return self._now

    @property
    def now(self) -> Millis:
        return self._now

    def advance(self, ms: Millis) -> Millis:
        if ms < 0:
            raise ValueError(f"Cannot advance clock by negative amount: {ms}")
        self._now += ms
        return self._now

    def set(self, ms: Millis) -> None:
        """Jump to an absolute time. May move backwards."""
        self._now = ms
