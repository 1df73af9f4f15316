"""
Track builders on Base and write a builder report.

Usage:
  builder-analytics
  builder-analytics --builder 0xAbc...:passkey --builder 0xDef... --output report.json
  python -m builder_analytics.cli --dummy --limit 5

With no --builder the built-in example builder is tracked. Exits 1 on any error.
"""

from __future__ import annotations

import argparse
import json
import sys

from builder_analytics.analytics.engine import BuilderScoringEngine
from builder_analytics.builder_logging import get_logger, short_address
from builder_analytics.collector.base import SignalCollector
from builder_analytics.collector.rpc_collector import RpcSignalCollector, gas_price_gwei
from builder_analytics.collector.static_collector import StaticSignalCollector
from builder_analytics.config.env import (
    get_activity_scan_blocks,
    get_report_filename,
    get_rpc_timeout,
    get_rpc_url,
    get_top_builders_limit,
    load_builder_env,
    masked_rpc_url,
    use_dummy_data,
)
from builder_analytics.storage.report_writer import save_report
from builder_analytics.utils.address_utils import is_valid_address

logger = get_logger(__name__)

EXAMPLE_BUILDER_ADDRESS = "0x4EfE0d3958BEC89Fbef4cab0b07F63Ab49BC0e91"
EXAMPLE_BUILDER_PASSKEY = "0xcde6b9bcf9dfcbfe65f3fd9b26614efc2705f4eb147e95c6b49d030f2837f6e0"


def parse_builder_arg(value: str) -> tuple[str, str]:
    """Split 'ADDRESS[:PASSKEY]' into (address, passkey)."""
    address, _, passkey = value.partition(":")
    address = address.strip()
    if not address:
        raise argparse.ArgumentTypeError("builder address must be non-empty")
    return address, passkey.strip()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Track builder activity on Base and write a builder report")
    ap.add_argument(
        "--builder",
        action="append",
        type=parse_builder_arg,
        default=None,
        metavar="ADDRESS[:PASSKEY]",
        help="Builder to track (repeatable; default: built-in example builder)",
    )
    ap.add_argument("--output", default=None, help="Report file (default: BUILDER_REPORT_FILE or builder-report.json)")
    ap.add_argument("--limit", type=int, default=None, help="Size of the topBuilders ranking (default: 10)")
    ap.add_argument("--rpc-url", default=None, help="JSON-RPC endpoint (default: BASE_RPC_URL or mainnet.base.org)")
    ap.add_argument("--scan-blocks", type=int, default=None, help="Recent blocks scanned for last activity (default: 100)")
    ap.add_argument("--dummy", action="store_true", help="Use offline dummy data instead of RPC")
    return ap


def build_collector(args: argparse.Namespace) -> SignalCollector:
    if args.dummy or use_dummy_data():
        logger.info("collector_selected", collector="static")
        return StaticSignalCollector()
    rpc_url = args.rpc_url or get_rpc_url()
    scan_blocks = args.scan_blocks or get_activity_scan_blocks()
    logger.info("collector_selected", collector="rpc", rpc_url=masked_rpc_url(rpc_url), scan_blocks=scan_blocks)
    return RpcSignalCollector(rpc_url, scan_blocks=scan_blocks, timeout=get_rpc_timeout())


def run(args: argparse.Namespace) -> int:
    builders = args.builder or [(EXAMPLE_BUILDER_ADDRESS, EXAMPLE_BUILDER_PASSKEY)]
    limit = args.limit if args.limit is not None else get_top_builders_limit()
    output = args.output or get_report_filename()

    engine = BuilderScoringEngine(build_collector(args))
    for address, passkey in builders:
        if not is_valid_address(address):
            logger.warning("builder_address_not_hex", address=short_address(address))
        print(f"Tracking builder: {address}")
        record = engine.track_address(address, passkey)
        print("Builder Info:", json.dumps(record.to_dict(), indent=2))

    report = engine.generate_report(limit=limit)
    path = save_report(report, output)
    print(f"Report saved to {path}")

    gwei = gas_price_gwei(report.network_stats)
    if gwei is not None:
        print(f"Network {report.network_stats.get('networkId')} block {report.network_stats.get('latestBlock')} gas {gwei} gwei")
    print("Analysis complete!")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_builder_env()
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except Exception as e:
        logger.exception("builder_analytics_failed", error=str(e))
        print(f"[builder-analytics] ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
