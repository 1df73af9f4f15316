"""
Application-level exceptions.

Collector (RPC) failures never surface here: collectors convert them into
safe defaults. Only caller input errors are raised to the caller.
"""

from __future__ import annotations


class BuilderAnalyticsError(Exception):
    """Base class for project errors."""


class InvalidBuilderAddress(BuilderAnalyticsError, ValueError):
    """Raised when a builder address is empty or blank."""

    def __init__(self, address: str | None) -> None:
        self.address = address
        super().__init__("Builder address must be non-empty")
