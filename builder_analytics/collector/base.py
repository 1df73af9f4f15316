"""
Signal collector interface consumed by the scoring engine.

Every method fails soft: on any data-source error an implementation logs and
returns the safe default (0, "0", [], None, {}) instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from builder_analytics.analytics.models import BuilderSignals


class SignalCollector(ABC):
    """Source of raw per-address facts and a network snapshot."""

    @abstractmethod
    def get_transaction_count(self, address: str) -> int:
        """Transaction count (nonce) of address; 0 on failure."""

    @abstractmethod
    def get_balance(self, address: str) -> str:
        """Balance in native units as a decimal string; "0" on failure."""

    @abstractmethod
    def get_deployed_contracts(self, address: str) -> list[str]:
        """Contracts deployed by address; [] when unknown."""

    @abstractmethod
    def get_last_activity(self, address: str) -> int | None:
        """Unix timestamp of the most recent observed activity; None if not found."""

    @abstractmethod
    def get_network_stats(self) -> dict[str, Any]:
        """{latestBlock, blockTime, gasPrice, networkId}; {} on failure."""

    def collect(self, address: str) -> BuilderSignals:
        """Fetch all four per-address signals."""
        return BuilderSignals.from_values(
            transactions=self.get_transaction_count(address),
            balance=self.get_balance(address),
            contracts=self.get_deployed_contracts(address),
            last_activity=self.get_last_activity(address),
        )
