from .clock import ManualClock, monotonic_ms
from .tracker import FrameRateTracker, TrackerConfig

__all__ = ["FrameRateTracker", "ManualClock", "TrackerConfig", "monotonic_ms"]
