"""
Signal collectors: adapters between chain data sources and the scoring engine.
"""

from builder_analytics.collector.base import SignalCollector
from builder_analytics.collector.rpc_collector import RpcSignalCollector, format_ether
from builder_analytics.collector.static_collector import StaticSignalCollector

__all__ = [
    "RpcSignalCollector",
    "SignalCollector",
    "StaticSignalCollector",
    "format_ether",
]
