"""Drive a tracker at simulated frame cadences without sleeping."""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .clock import ManualClock, Millis
from .tracker import FrameRateTracker


@dataclass
class FrameSample:
    """Tracker state observed right after one simulated frame."""

    frame: int
    time_ms: Millis
    current_fps: int
    synced_fps: int


def simulate_frames_at_fps(
    tracker: FrameRateTracker,
    clock: ManualClock,
    target_fps: int,
    duration_ms: int,
) -> int:
    """Feed ``duration_ms`` worth of frames at ``target_fps``.

    The frame interval is ``1000 // target_fps`` whole milliseconds, so 60 FPS
    runs at 16 ms and settles at 62. Returns the number of frames driven.
    """
    if target_fps <= 0:
        return 0
    interval = 1000 // target_fps
    if interval <= 0:
        return 0
    frames = duration_ms // interval
    for _ in range(frames):
        clock.advance(interval)
        tracker.on_frame()
    return frames


def simulate_intervals(
    tracker: FrameRateTracker,
    clock: ManualClock,
    intervals_ms: Iterable[Millis],
) -> list[FrameSample]:
    """Advance the clock by each interval in turn, one frame per interval."""
    trace: list[FrameSample] = []
    for i, interval in enumerate(intervals_ms):
        clock.advance(interval)
        tracker.on_frame()
        trace.append(
            FrameSample(
                frame=i,
                time_ms=clock.now,
                current_fps=tracker.current_fps,
                synced_fps=tracker.synced_fps,
            )
        )
    return trace


def jittered_intervals(
    target_fps: float,
    count: int,
    jitter_ms: float = 0.0,
    seed: int | None = None,
) -> np.ndarray:
    """Frame intervals around ``1000 / target_fps`` with gaussian jitter.

    Intervals are clipped at 0; a zero interval exercises the repeated
    timestamp path of the tracker.
    """
    if target_fps <= 0:
        raise ValueError(f"target_fps must be > 0, got {target_fps}")
    base = 1000.0 / target_fps
    if jitter_ms <= 0:
        return np.full(count, base)
    rng = np.random.default_rng(seed)
    return np.clip(rng.normal(base, jitter_ms, size=count), 0.0, None)
