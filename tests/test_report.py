"""
Pytest tests for report generation: ranking stability, averages, JSON shape.
"""

from __future__ import annotations

import json

from builder_analytics.analytics.models import BuilderRecord
from builder_analytics.analytics.report import (
    average_score,
    generate_report,
    iso_timestamp,
    top_builders,
)

NOW = 1_700_000_000


def _rec(address: str, score: int) -> BuilderRecord:
    return BuilderRecord(
        address=address,
        passkey="",
        transactions=score,
        balance="0",
        contracts=(),
        last_activity=None,
        score=score,
    )


def test_top_builders_stable_ties():
    """[300, 300, 150] with limit 2 -> both 300s in original order."""
    a, b, c = _rec("0xa", 300), _rec("0xb", 300), _rec("0xc", 150)
    top = top_builders([a, b, c], limit=2)
    assert [r.address for r in top] == ["0xa", "0xb"]
    assert average_score([a, b, c]) == 250


def test_top_builders_descending_and_ties_keep_order():
    recs = [_rec("0x1", 5), _rec("0x2", 20), _rec("0x3", 5), _rec("0x4", 20), _rec("0x5", 1)]
    top = top_builders(recs, limit=10)
    assert [r.address for r in top] == ["0x2", "0x4", "0x1", "0x3", "0x5"]


def test_top_builders_length_is_min_of_limit_and_total():
    recs = [_rec(f"0x{i}", i) for i in range(5)]
    assert len(top_builders(recs, limit=3)) == 3
    assert len(top_builders(recs, limit=10)) == 5
    assert top_builders([], limit=10) == []
    assert top_builders(recs, limit=0) == []


def test_average_score_empty_is_zero():
    assert average_score([]) == 0


def test_average_score_whole_mean_serializes_without_fraction():
    recs = [_rec("0xa", 300), _rec("0xb", 300), _rec("0xc", 150)]
    assert isinstance(average_score(recs), int)
    doc = generate_report(recs, {}, NOW).to_dict()
    assert '"averageScore": 250,' in json.dumps(doc)
    assert average_score([_rec("0xa", 1), _rec("0xb", 2)]) == 1.5


def test_generate_report_fields():
    recs = [_rec("0xa", 300), _rec("0xb", 300), _rec("0xc", 150)]
    stats = {"latestBlock": 1, "blockTime": NOW, "gasPrice": 1000, "networkId": 8453}
    report = generate_report(recs, stats, NOW, limit=2)
    assert report.total_builders == 3
    assert list(report.builders) == recs
    assert [r.address for r in report.top_builders] == ["0xa", "0xb"]
    assert report.average_score == 250
    assert report.network_stats == stats
    assert report.timestamp == "2023-11-14T22:13:20.000Z"


def test_generate_report_empty_registry_and_failed_network():
    report = generate_report([], None, NOW)
    assert report.total_builders == 0
    assert report.builders == ()
    assert report.top_builders == ()
    assert report.average_score == 0
    assert report.network_stats == {}


def test_generate_report_idempotent():
    recs = [_rec("0xa", 10), _rec("0xb", 30)]
    r1 = generate_report(recs, {}, NOW)
    r2 = generate_report(recs, {"latestBlock": 2}, NOW + 60)
    assert r1.builders == r2.builders
    assert r1.top_builders == r2.top_builders
    assert r1.total_builders == r2.total_builders
    assert r1.average_score == r2.average_score


def test_report_to_dict_shape():
    rec = BuilderRecord(
        address="0xabc",
        passkey="secret",
        transactions=42,
        balance="1.25",
        contracts=("0xdef",),
        last_activity=NOW - 3600,
        score=204,
    )
    doc = generate_report([rec], {"networkId": 8453}, NOW).to_dict()
    assert list(doc) == ["timestamp", "totalBuilders", "builders", "topBuilders", "averageScore", "networkStats"]
    assert doc["builders"][0] == {
        "address": "0xabc",
        "passkey": "secret",
        "transactions": 42,
        "balance": "1.25",
        "contracts": ["0xdef"],
        "lastActivity": NOW - 3600,
        "score": 204,
    }
    assert doc["topBuilders"] == doc["builders"]
    assert doc["networkStats"] == {"networkId": 8453}
    # serializable as-is
    assert json.loads(json.dumps(doc)) == doc


def test_iso_timestamp_milliseconds():
    assert iso_timestamp(0) == "1970-01-01T00:00:00.000Z"
    assert iso_timestamp(1.2345) == "1970-01-01T00:00:01.234Z"
