"""
Builder registry: scored records keyed by normalized address.

Owned by one engine for the lifetime of a run. Re-tracking an address replaces
its record (last write wins). Records are immutable, so handing them out needs
no copying; all() returns a snapshot list taken under the lock.
"""

from __future__ import annotations

import threading

from builder_analytics.analytics.models import BuilderRecord
from builder_analytics.utils.address_utils import normalize_address


class BuilderRegistry:
    """In-memory address -> BuilderRecord map, safe for concurrent upserts and snapshots."""

    def __init__(self) -> None:
        self._records: dict[str, BuilderRecord] = {}
        self._lock = threading.Lock()

    def upsert(self, record: BuilderRecord) -> None:
        key = normalize_address(record.address)
        with self._lock:
            self._records[key] = record

    def get(self, address: str) -> BuilderRecord | None:
        with self._lock:
            return self._records.get(normalize_address(address))

    def all(self) -> list[BuilderRecord]:
        """Snapshot of all records (first-tracked order)."""
        with self._lock:
            return list(self._records.values())

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, str):
            return False
        return self.get(address) is not None
