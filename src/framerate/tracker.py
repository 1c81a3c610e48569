"""Ring-buffer FPS tracker with a periodically latched snapshot."""

import logging
from dataclasses import dataclass

from .clock import Clock, Millis, monotonic_ms

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 60
DEFAULT_SYNC_INTERVAL_MS = 5000


@dataclass(frozen=True)
class TrackerConfig:
    """Tuning knobs for :class:`FrameRateTracker`.

    A frame slower than 1 FPS truncates to an instantaneous value of 0 and is
    left out of the mean, the same as an empty slot. ``count_slow_frames``
    counts those frames as 0 readings instead.
    """

    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    sync_interval_ms: int = DEFAULT_SYNC_INTERVAL_MS
    count_slow_frames: bool = False

    def __post_init__(self) -> None:
        if self.history_capacity < 1:
            raise ValueError(
                f"history_capacity must be >= 1, got {self.history_capacity}"
            )
        if self.sync_interval_ms < 0:
            raise ValueError(
                f"sync_interval_ms must be >= 0, got {self.sync_interval_ms}"
            )


class FrameRateTracker:
    """Rolling-average FPS from per-frame events.

    Call :meth:`on_frame` once per rendered frame. ``current_fps`` is the
    integer mean of the last ``history_capacity`` instantaneous samples and
    ``synced_fps`` is a copy of it refreshed at most once per
    ``sync_interval_ms`` of clock time.

    Usage::

        tracker = FrameRateTracker()
        while running:
            render()
            tracker.on_frame()
            hud.text = f"{tracker.current_fps} fps"

    Not thread-safe; the render loop owns it.
    """

    def __init__(
        self,
        config: TrackerConfig | None = None,
        clock: Clock = monotonic_ms,
        **overrides,
    ):
        if config is None:
            config = TrackerConfig(**overrides)
        elif overrides:
            raise TypeError("Pass either a TrackerConfig or keyword overrides, not both")
        self.config = config
        self._clock = clock

        self._history: list[int | None] = [None] * config.history_capacity
        self._write_index = 0
        self._current_fps = 0
        self._synced_fps = 0
        self._last_frame_time: Millis = 0
        self._last_sync_time: Millis = 0
        self._last_update_time: Millis = 0
        self.reset()

    @property
    def history_capacity(self) -> int:
        return self.config.history_capacity

    @property
    def sync_interval_ms(self) -> int:
        return self.config.sync_interval_ms

    @property
    def current_fps(self) -> int:
        return self._current_fps

    @property
    def synced_fps(self) -> int:
        return self._synced_fps

    @property
    def write_index(self) -> int:
        return self._write_index

    @property
    def last_update_time(self) -> Millis:
        """Clock time of the last frame that produced a sample."""
        return self._last_update_time

    @property
    def sample_count(self) -> int:
        return sum(1 for s in self._history if s is not None)

    def samples(self) -> list[int]:
        """Recorded samples, oldest first."""
        i = self._write_index
        ordered = self._history[i:] + self._history[:i]
        return [s for s in ordered if s is not None]

    def history_value(self, index: int) -> int:
        """Sample stored at ring slot *index*; 0 if empty or out of range."""
        if not 0 <= index < self.config.history_capacity:
            return 0
        sample = self._history[index]
        return 0 if sample is None else sample

    def initialize(self) -> None:
        """Stamp all timestamps with the current time and clear the history.

        ``write_index`` and the FPS values are left as they are; use
        :meth:`reset` for a full restart.
        """
        now = self._clock()
        self._last_update_time = now
        self._last_frame_time = now
        self._last_sync_time = now
        for i in range(self.config.history_capacity):
            self._history[i] = None

    def reset(self) -> None:
        self.initialize()
        self._write_index = 0
        self._current_fps = 0
        self._synced_fps = 0
        logger.debug("FPS tracker reset at %s ms", self._last_frame_time)

    def on_frame(self) -> None:
        now = self._clock()
        elapsed = now - self._last_frame_time

        # A clock that steps backwards is treated like a repeated timestamp.
        if elapsed > 0:
            instant_fps = int(1000.0 / elapsed)
            self._history[self._write_index] = instant_fps
            self._write_index = (self._write_index + 1) % self.config.history_capacity
            self._recompute()
            self._last_update_time = now

        self._last_frame_time = now

        if now - self._last_sync_time >= self.config.sync_interval_ms:
            self._synced_fps = self._current_fps
            self._last_sync_time = now
            logger.debug("Synced FPS latched at %d (t=%s ms)", self._synced_fps, now)

    def _recompute(self) -> None:
        if self.config.count_slow_frames:
            counted = [s for s in self._history if s is not None]
        else:
            counted = [s for s in self._history if s is not None and s > 0]
        # No counted samples: keep the previous value.
        if counted:
            self._current_fps = sum(counted) // len(counted)

    def __repr__(self) -> str:
        return (
            f"FrameRateTracker(current_fps={self._current_fps}, "
            f"synced_fps={self._synced_fps}, samples={self.sample_count}/"
            f"{self.config.history_capacity})"
        )
