"""
Pytest tests for BuilderScoringEngine: tracking, re-tracking, validation, reports.

Collectors are static or mocked so tests run without RPC.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from builder_analytics.analytics.engine import BuilderScoringEngine
from builder_analytics.analytics.models import BuilderSignals
from builder_analytics.analytics.registry import BuilderRegistry
from builder_analytics.collector.static_collector import StaticSignalCollector
from builder_analytics.core.exceptions import InvalidBuilderAddress

from builder_fixtures import BUILDER_A, BUILDER_B, BUILDER_C, NETWORK_STATS, NOW


def test_track_scores_and_stores(engine):
    signals = BuilderSignals(transactions=42, balance="1.25", last_activity=NOW - 3600)
    record = engine.track(BUILDER_A, "pk", signals)
    assert record.score == 154
    assert record.address == BUILDER_A.lower()
    assert record.passkey == "pk"
    assert engine.get(BUILDER_A) == record
    assert engine.registry.size() == 1


def test_track_empty_signals_scores_zero(engine):
    record = engine.track(BUILDER_C, "", BuilderSignals())
    assert record.score == 0
    assert record.last_activity is None
    assert record.contracts == ()


@pytest.mark.parametrize("address", ["", "   ", None])
def test_track_rejects_empty_address(engine, address):
    with pytest.raises(InvalidBuilderAddress):
        engine.track(address, "pk", BuilderSignals(transactions=1))
    assert engine.registry.size() == 0


def test_invalid_address_is_value_error(engine):
    with pytest.raises(ValueError, match="non-empty"):
        engine.track("", "", BuilderSignals())


def test_retrack_overwrites(engine):
    engine.track(BUILDER_A, "first", BuilderSignals(transactions=1))
    engine.track(BUILDER_A.lower(), "second", BuilderSignals(transactions=500))
    assert engine.registry.size() == 1
    latest = engine.get(BUILDER_A)
    assert latest.transactions == 500
    assert latest.passkey == "second"
    assert latest.score == 500


def test_track_address_uses_collector(engine):
    record = engine.track_address(BUILDER_A, "pk")
    assert record.score == 154
    record_b = engine.track_address(BUILDER_B)
    assert record_b.score == 7
    assert record_b.balance == "0.0"
    assert engine.registry.size() == 2


def test_track_address_unknown_builder_scores_zero(engine):
    record = engine.track_address(BUILDER_C, "pk")
    assert record.score == 0


def test_track_address_without_collector():
    eng = BuilderScoringEngine(clock=lambda: float(NOW))
    with pytest.raises(RuntimeError):
        eng.track_address(BUILDER_A)


def test_track_address_rejects_empty_before_fetch():
    collector = MagicMock()
    eng = BuilderScoringEngine(collector, clock=lambda: float(NOW))
    with pytest.raises(InvalidBuilderAddress):
        eng.track_address("")
    collector.collect.assert_not_called()


def test_generate_report_scenario(fixed_clock):
    """Scores [300, 300, 150] in insertion order, limit 2."""
    eng = BuilderScoringEngine(StaticSignalCollector(network_stats=NETWORK_STATS), clock=fixed_clock)
    eng.track("0x" + "a" * 40, "", BuilderSignals(transactions=300))
    eng.track("0x" + "b" * 40, "", BuilderSignals(transactions=300))
    eng.track("0x" + "c" * 40, "", BuilderSignals(transactions=150))
    report = eng.generate_report(limit=2)
    assert report.total_builders == 3
    assert [r.address for r in report.top_builders] == ["0x" + "a" * 40, "0x" + "b" * 40]
    assert report.average_score == 250
    assert report.network_stats == NETWORK_STATS


def test_generate_report_empty(engine):
    report = engine.generate_report()
    assert report.total_builders == 0
    assert report.average_score == 0
    assert report.top_builders == ()


def test_generate_report_twice_is_idempotent(engine):
    engine.track_address(BUILDER_A)
    engine.track_address(BUILDER_B)
    r1 = engine.generate_report()
    r2 = engine.generate_report()
    assert r1.builders == r2.builders
    assert r1.top_builders == r2.top_builders
    assert r1.total_builders == r2.total_builders
    assert r1.average_score == r2.average_score


def test_network_stats_failure_substitutes_empty(fixed_clock):
    collector = StaticSignalCollector()
    collector.get_network_stats = MagicMock(side_effect=RuntimeError("rpc down"))
    eng = BuilderScoringEngine(collector, clock=fixed_clock)
    eng.track(BUILDER_A, "", BuilderSignals(transactions=3))
    report = eng.generate_report()
    assert report.network_stats == {}
    assert report.total_builders == 1


def test_shared_registry_is_used(fixed_clock):
    registry = BuilderRegistry()
    eng = BuilderScoringEngine(StaticSignalCollector(), registry=registry, clock=fixed_clock)
    eng.track(BUILDER_A, "", BuilderSignals(transactions=1))
    assert registry.get(BUILDER_A) is not None
    assert eng.registry is registry
