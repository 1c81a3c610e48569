"""Open an OpenCV capture for the preview loop and read back its negotiated mode."""

import logging
from dataclasses import dataclass

import cv2

logger = logging.getLogger(__name__)


@dataclass
class CaptureMode:
    """Resolution and frame rate the driver actually granted.

    ``fps`` is 0.0 when the backend does not report a rate.
    """

    width: int
    height: int
    fps: float

    def __str__(self) -> str:
        return f"{self.width}x{self.height} @ {self.fps:.0f}fps"


def open_capture(
    index: int = 0,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
) -> tuple[cv2.VideoCapture, CaptureMode]:
    """Open camera *index*, request a mode and return what was negotiated.

    Raises RuntimeError if the camera cannot be opened.
    """
    cap = cv2.VideoCapture(index)
    if not cap.isOpened():
        cap.release()
        raise RuntimeError(f"Cannot open camera {index}")

    if width and height:
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    if fps:
        cap.set(cv2.CAP_PROP_FPS, fps)

    mode = CaptureMode(
        width=int(cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
        height=int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        fps=float(cap.get(cv2.CAP_PROP_FPS) or 0.0),
    )
    logger.info("Camera %d opened at %s", index, mode)
    return cap, mode


def fps_shortfall(mode: CaptureMode, measured_fps: int) -> float | None:
    """Fraction of the negotiated rate the tracker did not observe.

    0.0 means the render loop kept up; None if the driver gave no rate.
    """
    if mode.fps <= 0:
        return None
    return max(0.0, 1.0 - measured_fps / mode.fps)
