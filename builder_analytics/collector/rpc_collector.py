"""
JSON-RPC signal collector for Base (any EVM node speaking eth_* methods).

Fetches nonce, balance, last activity and network stats over HTTP with requests.
Rate limits (429) and transport errors are retried; anything that still fails is
logged and replaced by the safe default, so callers never see an exception.

Last activity is a best-effort check, not a history index: only the
`scan_blocks` most recent blocks (100 by default) are walked, newest first, and
the first block holding a transaction from or to the address wins. Older
activity is reported as None.

Deployed contracts need an indexer or event logs; until one is wired in the
collector reports none.
"""

from __future__ import annotations

import time
from decimal import Decimal
from typing import Any

import requests

from builder_analytics.builder_logging import get_logger, short_address
from builder_analytics.collector.base import SignalCollector
from builder_analytics.config.env import (
    BASE_MAINNET_RPC_URL,
    DEFAULT_ACTIVITY_SCAN_BLOCKS,
    DEFAULT_RPC_TIMEOUT_SEC,
)
from builder_analytics.utils.address_utils import same_address

logger = get_logger(__name__)

WEI_PER_ETHER = 10**18
ETHER_DECIMALS = 18
MAX_RETRIES = 3
RETRY_DELAY_SEC = 2.0


def format_ether(wei: int) -> str:
    """
    Format a wei amount as an ether decimal string.

    Always keeps one fractional digit and strips trailing zeros:
    0 -> "0.0", 10**18 -> "1.0", 1_250_000_000_000_000_000 -> "1.25".
    """
    whole, fraction = divmod(int(wei), WEI_PER_ETHER)
    fraction_str = str(fraction).rjust(ETHER_DECIMALS, "0").rstrip("0") or "0"
    return f"{whole}.{fraction_str}"


def _hex_to_int(value: Any) -> int:
    if isinstance(value, int):
        return value
    return int(str(value), 16)


class RpcSignalCollector(SignalCollector):
    """
    Signal collector backed by an Ethereum JSON-RPC endpoint.

    Args:
        rpc_url: HTTP endpoint (e.g. https://mainnet.base.org).
        scan_blocks: recent blocks inspected by get_last_activity.
        timeout: HTTP timeout per request, seconds.
        max_retries: attempts per RPC call before giving up.
        retry_delay: seconds to wait after a 429 or transport error.
    """

    def __init__(
        self,
        rpc_url: str = BASE_MAINNET_RPC_URL,
        *,
        scan_blocks: int = DEFAULT_ACTIVITY_SCAN_BLOCKS,
        timeout: float = DEFAULT_RPC_TIMEOUT_SEC,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SEC,
    ) -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        if scan_blocks < 1:
            raise ValueError("scan_blocks must be positive")
        self._rpc_url = rpc_url.strip()
        self._scan_blocks = scan_blocks
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay
        self._request_id = 0

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    def _next_id(self) -> int:
        self._request_id += 1
        return self._request_id

    def _rpc_post(self, method: str, params: list[Any]) -> Any | None:
        """POST one JSON-RPC call; return its result, or None on any failure."""
        payload = {"jsonrpc": "2.0", "id": self._next_id(), "method": method, "params": params}
        for attempt in range(self._max_retries):
            try:
                r = requests.post(self._rpc_url, json=payload, timeout=self._timeout)
                if r.status_code == 429:
                    logger.warning("rpc_rate_limit", method=method, attempt=attempt + 1)
                    if attempt < self._max_retries - 1:
                        time.sleep(self._retry_delay)
                    continue
                r.raise_for_status()
                data = r.json()
            except (requests.RequestException, ValueError) as e:
                logger.warning("rpc_request_error", method=method, error=str(e), attempt=attempt + 1)
                if attempt < self._max_retries - 1:
                    time.sleep(self._retry_delay)
                    continue
                return None
            if not isinstance(data, dict):
                logger.warning("rpc_bad_response", method=method)
                return None
            if data.get("error"):
                logger.warning("rpc_error", method=method, error=str(data.get("error")))
                return None
            return data.get("result")
        return None

    def get_transaction_count(self, address: str) -> int:
        result = self._rpc_post("eth_getTransactionCount", [address, "latest"])
        if result is None:
            logger.warning("transaction_count_unavailable", address=short_address(address))
            return 0
        try:
            return _hex_to_int(result)
        except (TypeError, ValueError) as e:
            logger.warning("transaction_count_parse_failed", address=short_address(address), error=str(e))
            return 0

    def get_balance(self, address: str) -> str:
        result = self._rpc_post("eth_getBalance", [address, "latest"])
        if result is None:
            logger.warning("balance_unavailable", address=short_address(address))
            return "0"
        try:
            return format_ether(_hex_to_int(result))
        except (TypeError, ValueError) as e:
            logger.warning("balance_parse_failed", address=short_address(address), error=str(e))
            return "0"

    def get_deployed_contracts(self, address: str) -> list[str]:
        return []

    def _get_block_number(self) -> int | None:
        result = self._rpc_post("eth_blockNumber", [])
        if result is None:
            return None
        return _hex_to_int(result)

    def _get_block(self, number: int, full_transactions: bool = False) -> dict[str, Any] | None:
        result = self._rpc_post("eth_getBlockByNumber", [hex(number), full_transactions])
        return result if isinstance(result, dict) else None

    def get_last_activity(self, address: str) -> int | None:
        try:
            latest = self._get_block_number()
            if latest is None:
                logger.warning("last_activity_unavailable", address=short_address(address))
                return None
            for offset in range(self._scan_blocks):
                number = latest - offset
                if number < 0:
                    break
                block = self._get_block(number, full_transactions=True)
                if block is None:
                    logger.warning(
                        "last_activity_block_unavailable",
                        address=short_address(address),
                        block=number,
                    )
                    return None
                for tx in block.get("transactions") or []:
                    if not isinstance(tx, dict):
                        continue
                    if same_address(tx.get("from"), address) or same_address(tx.get("to"), address):
                        return _hex_to_int(block["timestamp"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("last_activity_parse_failed", address=short_address(address), error=str(e))
            return None
        logger.debug("last_activity_not_found", address=short_address(address), scanned_blocks=self._scan_blocks)
        return None

    def get_network_stats(self) -> dict[str, Any]:
        try:
            latest = self._get_block_number()
            block = self._get_block(latest) if latest is not None else None
            gas_price = self._rpc_post("eth_gasPrice", [])
            chain_id = self._rpc_post("eth_chainId", [])
            if latest is None or block is None or gas_price is None or chain_id is None:
                logger.warning("network_stats_unavailable")
                return {}
            return {
                "latestBlock": latest,
                "blockTime": _hex_to_int(block["timestamp"]),
                "gasPrice": _hex_to_int(gas_price),
                "networkId": _hex_to_int(chain_id),
            }
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("network_stats_parse_failed", error=str(e))
            return {}


def gas_price_gwei(stats: dict[str, Any]) -> Decimal | None:
    """Gas price from a network snapshot in gwei, for display."""
    wei = stats.get("gasPrice")
    if wei is None:
        return None
    return Decimal(int(wei)) / Decimal(10**9)
