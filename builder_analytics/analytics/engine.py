"""
Builder scoring engine: track builders and produce reports.

track() is pure given its signals: it scores, stores and returns an immutable
record. track_address() pulls the signals from the injected collector first.
generate_report() snapshots the registry before ranking, so concurrent tracking
cannot leave a half-counted report.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Callable

from builder_analytics.analytics.models import BuilderRecord, BuilderSignals, Report
from builder_analytics.analytics.registry import BuilderRegistry
from builder_analytics.analytics.report import DEFAULT_TOP_LIMIT, generate_report
from builder_analytics.analytics.scoring import calculate_builder_score
from builder_analytics.builder_logging import bind_builder, get_logger, short_address
from builder_analytics.core.exceptions import InvalidBuilderAddress
from builder_analytics.utils.address_utils import normalize_address

if TYPE_CHECKING:
    from builder_analytics.collector.base import SignalCollector

logger = get_logger(__name__)


class BuilderScoringEngine:
    """
    Scores builders from collector signals and keeps them in its own registry.

    Args:
        collector: signal source used by track_address() and for network stats.
        registry: storage for scored records; a fresh one is created if omitted.
        clock: returns the current Unix time in seconds (time.time by default).
    """

    def __init__(
        self,
        collector: SignalCollector | None = None,
        *,
        registry: BuilderRegistry | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._collector = collector
        self._registry = registry if registry is not None else BuilderRegistry()
        self._clock = clock

    @property
    def registry(self) -> BuilderRegistry:
        return self._registry

    def track(self, address: str, passkey: str, signals: BuilderSignals) -> BuilderRecord:
        """
        Score one builder from already-collected signals and store it.

        Raises InvalidBuilderAddress if address is empty; the registry is untouched.
        """
        key = normalize_address(address)
        if not key:
            raise InvalidBuilderAddress(address)

        score = calculate_builder_score(signals, self._clock())
        record = BuilderRecord(
            address=key,
            passkey=passkey or "",
            transactions=signals.transactions,
            balance=signals.balance,
            contracts=tuple(signals.contracts),
            last_activity=signals.last_activity,
            score=score,
        )
        self._registry.upsert(record)
        logger.info(
            "builder_tracked",
            address=short_address(key),
            transactions=record.transactions,
            balance=record.balance,
            contracts=len(record.contracts),
            last_activity=record.last_activity,
            score=score,
        )
        return record

    def track_address(self, address: str, passkey: str = "") -> BuilderRecord:
        """Collect signals for address from the collector, then track it."""
        if not normalize_address(address):
            raise InvalidBuilderAddress(address)
        if self._collector is None:
            raise RuntimeError("track_address requires a signal collector")
        bind_builder(address).info("builder_tracking")
        signals = self._collector.collect(address)
        return self.track(address, passkey, signals)

    def get(self, address: str) -> BuilderRecord | None:
        return self._registry.get(address)

    def _network_stats(self) -> dict[str, Any]:
        if self._collector is None:
            return {}
        try:
            return self._collector.get_network_stats() or {}
        except Exception as e:
            logger.warning("network_stats_failed", error=str(e))
            return {}

    def generate_report(self, limit: int = DEFAULT_TOP_LIMIT) -> Report:
        """Report over a snapshot of the registry plus the collector's network snapshot."""
        records = self._registry.all()
        network_stats = self._network_stats()
        report = generate_report(records, network_stats, self._clock(), limit=limit)
        logger.info(
            "report_generated",
            total_builders=report.total_builders,
            average_score=report.average_score,
            top_limit=limit,
        )
        return report
