"""
Main entrypoint: track the configured builders and write builder-report.json.

Env: BASE_RPC_URL, BUILDER_REPORT_FILE, TOP_BUILDERS_LIMIT, ACTIVITY_SCAN_BLOCKS,
BUILDER_USE_DUMMY_DATA, LOG_LEVEL, LOG_FORMAT. See builder_analytics.cli for flags.
"""

from builder_analytics.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
