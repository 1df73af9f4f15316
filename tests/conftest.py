"""
Pytest fixtures for builder analytics tests. No network: collectors are static or mocked.
"""

from __future__ import annotations

import pytest

from builder_analytics.analytics.engine import BuilderScoringEngine
from builder_analytics.analytics.models import BuilderSignals
from builder_analytics.collector.static_collector import StaticSignalCollector

from builder_fixtures import BUILDER_A, BUILDER_B, NETWORK_STATS, NOW


@pytest.fixture
def fixed_clock():
    return lambda: float(NOW)


@pytest.fixture
def static_collector():
    return StaticSignalCollector(
        {
            BUILDER_A: BuilderSignals(transactions=42, balance="1.25", last_activity=NOW - 3600),
            BUILDER_B: BuilderSignals(transactions=7, balance="0.0"),
        },
        network_stats=NETWORK_STATS,
    )


@pytest.fixture
def engine(static_collector, fixed_clock):
    return BuilderScoringEngine(static_collector, clock=fixed_clock)
