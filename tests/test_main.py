"""Tests for the command line entry point."""

import re
from unittest.mock import MagicMock

import pytest

from framerate import main as cli


def test_simulate_prints_summary(capsys):
    assert cli.main(["simulate", "--fps", "60", "--duration", "6000"]) == 0
    out = capsys.readouterr().out
    assert "Simulating 360 frames" in out
    m = re.search(r"Final: current=(\d+) synced=(\d+)", out)
    assert m is not None
    current, synced = int(m.group(1)), int(m.group(2))
    assert abs(current - 60) <= 1
    assert abs(synced - 60) <= 1


def test_simulate_with_jitter_and_options(capsys):
    code = cli.main([
        "simulate", "--fps", "30", "--duration", "3000", "--jitter", "2",
        "--seed", "5", "--history", "10", "--sync-interval", "1000",
        "--count-slow-frames", "--every", "10",
    ])
    assert code == 0
    out = capsys.readouterr().out
    rows = [line for line in out.splitlines() if re.match(r"\s+\d+\s+\d", line)]
    # frames 0, 10, ..., 80 plus the last one
    assert len(rows) == 10


@pytest.mark.parametrize("argv, message", [
    (["simulate", "--history", "0"], "--history: must be > 0"),
    (["simulate", "--fps", "0"], "--fps: must be > 0"),
    (["simulate", "--fps", "-30"], "--fps: must be > 0"),
    (["simulate", "--duration", "-1"], "--duration: must be >= 0"),
    (["simulate", "--sync-interval", "-5"], "--sync-interval: must be >= 0"),
    (["simulate", "--every", "0"], "--every: must be > 0"),
    (["preview", "--fps", "0"], "--fps: must be > 0"),
])
def test_invalid_numbers_rejected_by_parser(capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
    assert message in capsys.readouterr().err


def test_non_numeric_fps_rejected(capsys):
    with pytest.raises(SystemExit):
        cli.main(["simulate", "--fps", "fast"])
    assert "invalid float value" in capsys.readouterr().err


def test_zero_duration_simulates_nothing(capsys):
    assert cli.main(["simulate", "--duration", "0"]) == 0
    assert "Final: current=0 synced=0" in capsys.readouterr().out


def test_simulate_errors_are_not_swallowed(monkeypatch):
    monkeypatch.setattr(cli, "simulate_intervals",
                        MagicMock(side_effect=ValueError("boom")))
    with pytest.raises(ValueError, match="boom"):
        cli.main(["simulate"])


def test_preview_synthetic(capsys, monkeypatch):
    run = MagicMock(return_value=12)
    monkeypatch.setattr(cli, "run_preview", run)
    assert cli.main(["preview", "--synthetic", "--fps", "144", "--max-frames", "12"]) == 0
    _, tracker = run.call_args.args
    assert run.call_args.kwargs == {"target_fps": 144, "max_frames": 12}
    assert tracker.history_capacity == 60
    assert "Rendered 12 frames" in capsys.readouterr().out


def test_preview_camera_failure(capsys, monkeypatch):
    monkeypatch.setattr(
        cli, "preview_camera",
        MagicMock(side_effect=RuntimeError("Cannot open camera 3")),
    )
    assert cli.main(["preview", "-c", "3"]) == 1
    assert "Cannot open camera 3" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
