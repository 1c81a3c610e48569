"""CLI entry point for the frame-rate tracker.

Usage:
    # Simulated 60 FPS for 6 seconds on a deterministic clock
    python -m framerate.main simulate --fps 60 --duration 6000

    # Same, with 3 ms of gaussian jitter per frame
    python -m framerate.main simulate --fps 60 --duration 6000 --jitter 3 --seed 1

    # Live preview from a camera, or from a synthetic pattern
    python -m framerate.main preview -c 0
    python -m framerate.main preview --synthetic --fps 144
"""

import argparse
import logging
import sys

from .clock import ManualClock
from .preview import preview_camera, run_preview, synthetic_frames
from .simulation import jittered_intervals, simulate_intervals
from .tracker import (
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_SYNC_INTERVAL_MS,
    FrameRateTracker,
    TrackerConfig,
)


def _positive(kind):
    """argparse type: *kind* value strictly greater than zero."""
    def parse(text: str):
        value = kind(text)
        if value <= 0:
            raise argparse.ArgumentTypeError(f"must be > 0, got {text}")
        return value
    parse.__name__ = kind.__name__
    return parse


def _non_negative(kind):
    """argparse type: *kind* value greater than or equal to zero."""
    def parse(text: str):
        value = kind(text)
        if value < 0:
            raise argparse.ArgumentTypeError(f"must be >= 0, got {text}")
        return value
    parse.__name__ = kind.__name__
    return parse


def _config_from_args(args: argparse.Namespace) -> TrackerConfig:
    return TrackerConfig(
        history_capacity=args.history,
        sync_interval_ms=args.sync_interval,
        count_slow_frames=args.count_slow_frames,
    )


def cmd_simulate(args: argparse.Namespace) -> None:
    clock = ManualClock()
    tracker = FrameRateTracker(_config_from_args(args), clock=clock)

    count = int(args.duration * args.fps / 1000)
    intervals = jittered_intervals(args.fps, count, args.jitter, seed=args.seed)
    trace = simulate_intervals(tracker, clock, intervals)

    print(f"Simulating {count} frames @ {args.fps}fps "
          f"(jitter {args.jitter}ms, history {args.history}, "
          f"sync every {args.sync_interval}ms)\n")
    print(f"{'frame':>7} {'t (ms)':>10} {'current':>8} {'synced':>7}")
    for s in trace:
        if s.frame % args.every == 0 or s is trace[-1]:
            print(f"{s.frame:>7} {s.time_ms:>10.1f} {s.current_fps:>8} {s.synced_fps:>7}")
    print(f"\nFinal: current={tracker.current_fps} synced={tracker.synced_fps}")


def cmd_preview(args: argparse.Namespace) -> None:
    tracker = FrameRateTracker(_config_from_args(args))
    if args.synthetic:
        print(f"Synthetic preview {args.width}x{args.height} @ {args.fps}fps")
        print("Press 'q' in the preview window to quit.\n")
        frames = synthetic_frames(args.width, args.height)
        rendered = run_preview(frames, tracker, target_fps=args.fps,
                               max_frames=args.max_frames)
    else:
        print(f"Previewing camera {args.camera}")
        print(f"Resolution: {args.width}x{args.height} @ {args.fps}fps")
        print("Press 'q' in the preview window to quit.\n")
        rendered = preview_camera(
            tracker,
            camera_index=args.camera,
            width=args.width,
            height=args.height,
            fps=args.fps,
            max_frames=args.max_frames,
        )
    print(f"Rendered {rendered} frames, last FPS {tracker.current_fps} "
          f"(synced {tracker.synced_fps})")


def _add_tracker_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--history", type=_positive(int),
                   default=DEFAULT_HISTORY_CAPACITY,
                   help="Samples kept for averaging")
    p.add_argument("--sync-interval", type=_non_negative(int),
                   default=DEFAULT_SYNC_INTERVAL_MS,
                   help="Minimum ms between synced FPS updates")
    p.add_argument("--count-slow-frames", action="store_true",
                   help="Average frames slower than 1 FPS in as 0 readings")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Frame-rate tracker - simulation & live preview"
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    # simulate
    p_sim = sub.add_parser("simulate", help="Drive a tracker on a simulated clock")
    p_sim.add_argument("--fps", type=_positive(float), default=60.0, help="Target frame rate")
    p_sim.add_argument("--duration", type=_non_negative(int), default=6000, help="Simulated ms")
    p_sim.add_argument("--jitter", type=_non_negative(float), default=0.0,
                       help="Std-dev of frame interval jitter in ms")
    p_sim.add_argument("--seed", type=int, default=None)
    p_sim.add_argument("--every", type=_positive(int), default=30,
                       help="Print one row every N frames")
    _add_tracker_args(p_sim)

    # preview
    p_pre = sub.add_parser("preview", help="Live FPS overlay on camera frames")
    p_pre.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    p_pre.add_argument("--synthetic", action="store_true",
                       help="Render a test pattern instead of a camera")
    p_pre.add_argument("--width", type=int, default=640)
    p_pre.add_argument("--height", type=int, default=480)
    p_pre.add_argument("--fps", type=_positive(int), default=30)
    p_pre.add_argument("--max-frames", type=_positive(int), default=None)
    _add_tracker_args(p_pre)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "simulate": cmd_simulate,
        "preview": cmd_preview,
    }
    try:
        handlers[args.command](args)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
