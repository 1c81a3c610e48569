#!/usr/bin/env python3
"""
FrameRateTracker throughput benchmark

Measures the cost of on_frame() per call:
- different history capacities
- steady vs. jittered cadence
- skipping vs. counting slow frames
"""

import sys
import time
import pathlib

import numpy as np

PROJECT_ROOT = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from framerate import FrameRateTracker, ManualClock, TrackerConfig
from framerate.simulation import jittered_intervals


def steady_intervals(n=10000, fps=60.0):
    """Fixed cadence"""
    return np.full(n, 1000.0 / fps)


def stall_intervals(n=10000, fps=60.0, stall_every=500):
    """Fixed cadence with a 1.5 s stall every ``stall_every`` frames"""
    intervals = steady_intervals(n, fps)
    intervals[::stall_every] = 1500.0
    return intervals


def benchmark_on_frame(config, intervals, name=""):
    """Time on_frame() over a precomputed interval sequence"""
    clock = ManualClock()
    tracker = FrameRateTracker(config, clock=clock)

    # Warmup: fill the ring once
    for dt in intervals[:config.history_capacity]:
        clock.advance(dt)
        tracker.on_frame()

    n = len(intervals)
    start = time.perf_counter()
    for dt in intervals:
        clock.advance(dt)
        tracker.on_frame()
    elapsed = time.perf_counter() - start

    calls = n / elapsed
    us = elapsed / n * 1e6
    print(f"  {name:28s} | {calls:10.0f} calls/s | {us:6.2f} us/call | fps={tracker.current_fps}")
    return calls


def main():
    print()
    print("FrameRateTracker benchmark")
    print("=" * 72)
    print()

    steady = steady_intervals()
    jittered = jittered_intervals(60.0, 10000, jitter_ms=3.0, seed=0)
    stalls = stall_intervals()

    print(f"  {'Scenario':28s} | {'Throughput':>15s} | {'Cost':>11s} | Result")
    print("  " + "-" * 70)
    results = []
    for capacity in (30, 60, 240):
        cfg = TrackerConfig(history_capacity=capacity)
        results.append(benchmark_on_frame(cfg, steady, f"steady, history={capacity}"))
    results.append(benchmark_on_frame(TrackerConfig(), jittered, "jitter 3ms, history=60"))
    results.append(benchmark_on_frame(TrackerConfig(), stalls, "stalls, skip slow frames"))
    results.append(benchmark_on_frame(
        TrackerConfig(count_slow_frames=True), stalls, "stalls, count slow frames"))

    # A 1000 FPS render loop must not spend more than 1% of its budget here
    budget = 1000 * 100
    worst = min(results)
    print()
    print(f"  Slowest scenario: {worst:.0f} calls/s (need >= {budget})")
    ok = worst >= budget
    print(f"  Result: {'PASS' if ok else 'WARN'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
