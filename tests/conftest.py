"""Shared pytest configuration and fixtures for the frame-rate tracker tests."""

import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without an install
PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from framerate import FrameRateTracker, ManualClock  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "hardware: mark test as requiring a physical camera"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as sleeping on the real clock"
    )


def pytest_addoption(parser):
    parser.addoption(
        "--run-hardware",
        action="store_true",
        default=False,
        help="Run tests that require a physical camera",
    )
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests that sleep on the real clock",
    )


def pytest_collection_modifyitems(config, items):
    """Skip hardware and slow tests unless their option is given."""
    gates = {
        "hardware": ("--run-hardware", "Need --run-hardware option to run"),
        "slow": ("--run-slow", "Need --run-slow option to run"),
    }
    for marker, (option, reason) in gates.items():
        if config.getoption(option):
            continue
        skip = pytest.mark.skip(reason=reason)
        for item in items:
            if marker in item.keywords:
                item.add_marker(skip)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def clock() -> ManualClock:
    """Deterministic clock starting at t=0 ms."""
    return ManualClock()


@pytest.fixture
def tracker(clock: ManualClock) -> FrameRateTracker:
    """Tracker with default settings bound to the manual clock."""
    return FrameRateTracker(clock=clock)
