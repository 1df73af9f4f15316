"""
Offline signal collector serving preloaded facts.

Used by tests and when BUILDER_USE_DUMMY_DATA=1 (no RPC). Unknown addresses
get empty signals, which score 0.
"""

from __future__ import annotations

from typing import Any, Mapping

from builder_analytics.analytics.models import BuilderSignals
from builder_analytics.collector.base import SignalCollector
from builder_analytics.utils.address_utils import normalize_address


class StaticSignalCollector(SignalCollector):
    def __init__(
        self,
        signals: Mapping[str, BuilderSignals] | None = None,
        network_stats: dict[str, Any] | None = None,
    ) -> None:
        self._signals = {normalize_address(a): s for a, s in (signals or {}).items()}
        self._network_stats = dict(network_stats or {})

    def set_signals(self, address: str, signals: BuilderSignals) -> None:
        self._signals[normalize_address(address)] = signals

    def _lookup(self, address: str) -> BuilderSignals:
        return self._signals.get(normalize_address(address)) or BuilderSignals()

    def get_transaction_count(self, address: str) -> int:
        return self._lookup(address).transactions

    def get_balance(self, address: str) -> str:
        return self._lookup(address).balance

    def get_deployed_contracts(self, address: str) -> list[str]:
        return list(self._lookup(address).contracts)

    def get_last_activity(self, address: str) -> int | None:
        return self._lookup(address).last_activity

    def get_network_stats(self) -> dict[str, Any]:
        return dict(self._network_stats)
