"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing dispatchbench.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ --quick            # Skip full-size runs
"""

import importlib.util
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from dispatchbench import Counter


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Fixtures
# =============================================================================

class FakeClock:
    """Millisecond clock returning preset readings in order."""

    def __init__(self, readings: Iterable[int]):
        self.readings: List[int] = list(readings)
        self.calls = 0

    def __call__(self) -> int:
        value = self.readings[self.calls]
        self.calls += 1
        return value


def clock_for_elapsed(elapsed: Iterable[int], start: int = 1_000) -> FakeClock:
    """Build a clock whose consecutive (before, after) pairs differ by `elapsed`."""
    readings = []
    now = start
    for e in elapsed:
        readings.extend([now, now + e])
        now += e + 5
    return FakeClock(readings)


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def cli_module():
    """Load bin/benchmark.py as a module."""
    path = ROOT / "bin" / "benchmark.py"
    spec = importlib.util.spec_from_file_location("benchmark_cli", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DISPATCHBENCH_OUTPUT_DIR", "DISPATCHBENCH_LOG_LEVEL", "DISPATCHBENCH_CHART"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_clock():
    return clock_for_elapsed
