"""
Data models for builder scoring and reporting.

BuilderSignals is the raw per-address output of a signal collector.
BuilderRecord is the scored, immutable registry entry. Report is the derived
point-in-time summary; its to_dict() is the JSON document written to disk, so
field names there are stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BuilderSignals:
    """
    Raw on-chain facts for one address.

    Failed fetches arrive here already replaced by defaults (0, "0", (), None)
    and are scored exactly like genuine zeros.
    """

    transactions: int = 0
    balance: str = "0"  # native units (ether), decimal string
    contracts: tuple[str, ...] = ()
    last_activity: int | None = None  # Unix seconds; None if not seen in the scan window

    @classmethod
    def from_values(
        cls,
        transactions: int = 0,
        balance: str = "0",
        contracts: Any = None,
        last_activity: int | None = None,
    ) -> "BuilderSignals":
        """Build from loosely typed collector values (list contracts, numeric balance)."""
        return cls(
            transactions=int(transactions or 0),
            balance=str(balance) if balance is not None else "0",
            contracts=tuple(contracts or ()),
            last_activity=int(last_activity) if last_activity is not None else None,
        )


@dataclass(frozen=True)
class BuilderRecord:
    """
    Scored builder entry, keyed by normalized address in the registry.

    score is derived from the other fields plus a clock reading; passkey is
    carried through untouched.
    """

    address: str
    passkey: str
    transactions: int
    balance: str
    contracts: tuple[str, ...]
    last_activity: int | None
    score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "passkey": self.passkey,
            "transactions": self.transactions,
            "balance": self.balance,
            "contracts": list(self.contracts),
            "lastActivity": self.last_activity,
            "score": self.score,
        }


@dataclass(frozen=True)
class Report:
    """Point-in-time builder report. Never stored by the engine."""

    timestamp: str
    total_builders: int
    builders: tuple[BuilderRecord, ...]
    top_builders: tuple[BuilderRecord, ...]
    average_score: int | float
    network_stats: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "totalBuilders": self.total_builders,
            "builders": [b.to_dict() for b in self.builders],
            "topBuilders": [b.to_dict() for b in self.top_builders],
            "averageScore": self.average_score,
            "networkStats": dict(self.network_stats),
        }
