"""
Environment variable loading for Base Builder Analytics.

- BASE_RPC_URL: JSON-RPC endpoint of the Base node (default: public mainnet endpoint)
- BUILDER_REPORT_FILE: report filename written to the working directory
- TOP_BUILDERS_LIMIT: size of the topBuilders ranking (default: 10)
- ACTIVITY_SCAN_BLOCKS: recent blocks scanned for last activity (default: 100)
- RPC_REQUEST_TIMEOUT: HTTP timeout per RPC request in seconds (default: 30)
- BUILDER_USE_DUMMY_DATA: 1/true/yes/on to run without RPC
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is builder_analytics/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

BASE_MAINNET_RPC_URL = "https://mainnet.base.org"
DEFAULT_REPORT_FILE = "builder-report.json"
DEFAULT_TOP_BUILDERS_LIMIT = 10
DEFAULT_ACTIVITY_SCAN_BLOCKS = 100
DEFAULT_RPC_TIMEOUT_SEC = 30.0


def load_builder_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH)


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_rpc_url() -> str:
    """Return BASE_RPC_URL from env, or the public Base mainnet endpoint."""
    load_builder_env()
    return (os.getenv("BASE_RPC_URL") or "").strip() or BASE_MAINNET_RPC_URL


def get_report_filename() -> str:
    load_builder_env()
    return (os.getenv("BUILDER_REPORT_FILE") or "").strip() or DEFAULT_REPORT_FILE


def get_top_builders_limit() -> int:
    load_builder_env()
    return _int_env("TOP_BUILDERS_LIMIT", DEFAULT_TOP_BUILDERS_LIMIT)


def get_activity_scan_blocks() -> int:
    """Number of most recent blocks the last-activity scan walks through."""
    load_builder_env()
    return _int_env("ACTIVITY_SCAN_BLOCKS", DEFAULT_ACTIVITY_SCAN_BLOCKS)


def get_rpc_timeout() -> float:
    load_builder_env()
    raw = (os.getenv("RPC_REQUEST_TIMEOUT") or "").strip()
    try:
        value = float(raw) if raw else DEFAULT_RPC_TIMEOUT_SEC
    except ValueError:
        return DEFAULT_RPC_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_RPC_TIMEOUT_SEC


def use_dummy_data() -> bool:
    """
    Return True when the offline collector should be used (no RPC).
    Set BUILDER_USE_DUMMY_DATA=1 when the node is unreachable.
    """
    load_builder_env()
    raw = (os.getenv("BUILDER_USE_DUMMY_DATA") or "").strip().lower()
    return raw in ("1", "true", "yes", "on")


def masked_rpc_url(url: str) -> str:
    """Hide API keys embedded in provider URLs before logging them."""
    if "api-key=" in url:
        return url.split("api-key=")[0] + "api-key=***"
    if "/v2/" in url:
        return url.split("/v2/")[0] + "/v2/***"
    return url
