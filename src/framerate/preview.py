"""Render loop that feeds frames into a FrameRateTracker and draws the result."""

import logging
import time
from typing import Iterator

import cv2
import numpy as np

from .capture import fps_shortfall, open_capture
from .tracker import FrameRateTracker

logger = logging.getLogger(__name__)

WINDOW_NAME = "FPS Preview"

# Warn when the loop renders this far below the camera's negotiated rate
SHORTFALL_WARN = 0.1


def draw_fps_overlay(
    frame: np.ndarray,
    current_fps: int,
    synced_fps: int,
    camera_fps: float | None = None,
) -> np.ndarray:
    """Draw current and synced FPS in the top-left corner (in place).

    When *camera_fps* is known it is appended so dropped frames show up.
    """
    text = f"FPS: {current_fps} (synced {synced_fps})"
    if camera_fps:
        text += f" / cam {camera_fps:.0f}"
    cv2.putText(
        frame, text, (10, 30),
        cv2.FONT_HERSHEY_SIMPLEX, 1.0, (0, 255, 0), 2,
    )
    return frame


def synthetic_frames(width: int = 640, height: int = 480) -> Iterator[np.ndarray]:
    """Endless test pattern: a vertical bar sweeping across a dark frame."""
    bar_width = max(1, width // 16)
    step = max(1, bar_width // 2)
    x = 0
    while True:
        frame = np.full((height, width, 3), 32, dtype=np.uint8)
        frame[:, x:x + bar_width] = (255, 255, 255)
        yield frame
        x = (x + step) % width


def camera_frames(cap: cv2.VideoCapture) -> Iterator[np.ndarray]:
    """Yield frames from *cap* until a read fails."""
    while True:
        ret, frame = cap.read()
        if not ret:
            logger.warning("Camera read failed, ending preview")
            return
        yield frame


def run_preview(
    frames: Iterator[np.ndarray],
    tracker: FrameRateTracker,
    target_fps: float | None = None,
    max_frames: int | None = None,
    show: bool = True,
    camera_fps: float | None = None,
) -> int:
    """Consume *frames*, ticking *tracker* once per frame.

    ``target_fps`` paces the loop with ``time.sleep`` (useful for synthetic
    frames, which would otherwise render as fast as possible). Returns the
    number of frames rendered.
    """
    frame_interval = 1.0 / target_fps if target_fps else 0.0
    rendered = 0
    logger.info("Preview started (target_fps=%s)", target_fps)
    try:
        for frame in frames:
            t0 = time.monotonic()
            tracker.on_frame()
            draw_fps_overlay(frame, tracker.current_fps, tracker.synced_fps, camera_fps)
            rendered += 1

            if show:
                cv2.imshow(WINDOW_NAME, frame)
                if cv2.waitKey(1) & 0xFF == ord("q"):
                    break
            if max_frames is not None and rendered >= max_frames:
                break

            sleep_time = frame_interval - (time.monotonic() - t0)
            if sleep_time > 0:
                time.sleep(sleep_time)
    except KeyboardInterrupt:
        pass
    finally:
        if show:
            cv2.destroyAllWindows()
        logger.info("Preview stopped after %d frames, %r", rendered, tracker)
    return rendered


def preview_camera(
    tracker: FrameRateTracker,
    camera_index: int = 0,
    width: int = 640,
    height: int = 480,
    fps: int = 30,
    max_frames: int | None = None,
) -> int:
    """Open a camera and run the preview loop on it.

    At the end the tracker's synced rate is compared with the rate the
    driver negotiated, and a shortfall beyond ``SHORTFALL_WARN`` is logged.
    """
    cap, mode = open_capture(camera_index, width, height, fps)
    try:
        rendered = run_preview(camera_frames(cap), tracker,
                               max_frames=max_frames, camera_fps=mode.fps)
    finally:
        cap.release()

    measured = tracker.synced_fps or tracker.current_fps
    shortfall = fps_shortfall(mode, measured)
    if shortfall is not None and shortfall > SHORTFALL_WARN:
        logger.warning(
            "Measured %d fps is %.0f%% below the camera's %.0f fps",
            measured, shortfall * 100, mode.fps,
        )
    return rendered
