"""
Report generation: ranking, average score and network snapshot over a registry snapshot.

Stateless transform. Ranking uses a stable sort, so builders with equal scores
keep their snapshot order.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable

from builder_analytics.analytics.models import BuilderRecord, Report

DEFAULT_TOP_LIMIT = 10


def iso_timestamp(now: float) -> str:
    """UTC ISO-8601 with millisecond precision and Z suffix (2026-10-18T12:00:00.000Z)."""
    dt = datetime.fromtimestamp(now, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def top_builders(records: Iterable[BuilderRecord], limit: int = DEFAULT_TOP_LIMIT) -> list[BuilderRecord]:
    """Records by descending score, ties in input order, at most `limit` entries."""
    ranked = sorted(records, key=lambda r: r.score, reverse=True)
    return ranked[: max(limit, 0)]


def average_score(records: Iterable[BuilderRecord]) -> int | float:
    """Mean score; 0 for no records. Whole means are ints so the JSON reads 250, not 250.0."""
    scores = [r.score for r in records]
    if not scores:
        return 0
    mean = sum(scores) / len(scores)
    return int(mean) if mean.is_integer() else mean


def generate_report(
    records: Iterable[BuilderRecord],
    network_stats: dict[str, Any] | None,
    now: float,
    limit: int = DEFAULT_TOP_LIMIT,
) -> Report:
    """
    Build a Report from a registry snapshot and a network snapshot.

    network_stats is included verbatim; None (collector failure) becomes {}.
    """
    snapshot = list(records)
    return Report(
        timestamp=iso_timestamp(now),
        total_builders=len(snapshot),
        builders=tuple(snapshot),
        top_builders=tuple(top_builders(snapshot, limit)),
        average_score=average_score(snapshot),
        network_stats=dict(network_stats or {}),
    )
