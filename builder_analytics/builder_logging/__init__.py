"""
Structured logging for Base Builder Analytics.

JSON logs with timestamp, level, event_type and builder context.
Use get_logger() in all modules for aggregation-friendly output.
"""

from builder_analytics.builder_logging.logger import bind_builder, get_logger, short_address

__all__ = ["bind_builder", "get_logger", "short_address"]
