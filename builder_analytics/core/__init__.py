"""
Core utilities shared by the engine, collectors and CLI.
"""

from builder_analytics.core.exceptions import BuilderAnalyticsError, InvalidBuilderAddress

__all__ = ["BuilderAnalyticsError", "InvalidBuilderAddress"]
