"""Address normalization and validation utilities."""

from __future__ import annotations

import re

_HEX_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def normalize_address(address: str | None) -> str:
    """
    Canonical registry key for a chain address: stripped and lower-cased.

    EVM addresses are case-insensitive; mixed case is only an EIP-55 checksum.
    """
    return (address or "").strip().lower()


def is_valid_address(address: str | None) -> bool:
    """Return True if address looks like a 20-byte hex address."""
    return bool(_HEX_ADDRESS_RE.match((address or "").strip()))


def same_address(a: str | None, b: str | None) -> bool:
    if not a or not b:
        return False
    return normalize_address(a) == normalize_address(b)
