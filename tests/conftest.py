"""
Shared test fixtures for the wifi score reporter.

Provides a controllable clock, default scoring parameters and a factory for
link measurements.
"""

import pytest

from wifi_score.core.config import ScoringParams
from wifi_score.domain.models.measurement import LinkMeasurement

# Comfortably after the first reasonable wall clock (mid-2017)
PLAUSIBLE_NOW_MS = 1_500_000_000_000


class FakeClock:
    """Clock whose time only moves when a test moves it."""

    def __init__(self, now_ms: int = PLAUSIBLE_NOW_MS):
        self.now_ms = now_ms

    def get_wall_clock_millis(self) -> int:
        return self.now_ms

    def get_elapsed_since_boot_millis(self) -> int:
        return self.now_ms

    def advance(self, millis: int = 3000) -> None:
        self.now_ms += millis


@pytest.fixture
def clock():
    """Fake clock starting at a plausible wall clock time."""
    return FakeClock()


@pytest.fixture
def scoring_params():
    """Default RSSI thresholds and horizon."""
    return ScoringParams()


@pytest.fixture
def make_measurement():
    """
    Factory for link measurements.

    Usage:
        m = make_measurement(rssi=-60, frequency=2412)
    """

    def _create(**overrides):
        fields = {
            "rssi": -65,
            "frequency": 5180,
            "link_speed": 433,
            "tx_success_rate": 12.5,
            "tx_retries_rate": 1.25,
            "tx_bad_rate": 0.5,
            "rx_success_rate": 20.0,
        }
        fields.update(overrides)
        return LinkMeasurement(**fields)

    return _create
