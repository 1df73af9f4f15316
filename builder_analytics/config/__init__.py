"""
Configuration for Base Builder Analytics.

Settings come from environment variables (optionally a project-root .env).
CLI flags override them.
"""

from builder_analytics.config.env import (  # noqa: F401
    get_activity_scan_blocks,
    get_report_filename,
    get_rpc_timeout,
    get_rpc_url,
    get_top_builders_limit,
    use_dummy_data,
)

__all__ = [
    "get_activity_scan_blocks",
    "get_report_filename",
    "get_rpc_timeout",
    "get_rpc_url",
    "get_top_builders_limit",
    "use_dummy_data",
]
