"""
Base Builder Analytics: activity-based reputation scores for builders on Base.

Collects on-chain signals per address (transactions, balance, deployed contracts,
recent activity), scores them, and writes a ranked builder report.
"""

__version__ = "0.1.0"
