"""
Scoring engine: integer builder score from raw on-chain signals.

Formula: transactions + floor(balance * 10) + contracts * 50 + recency bonus.
Recency bonus by days since last activity: < 1 -> 100, < 7 -> 50, < 30 -> 25, else 0.
Lower bounds are inclusive, so exactly 1 day scores 50, not 100.
"""

from __future__ import annotations

import math

from builder_analytics.analytics.models import BuilderSignals

SECONDS_PER_DAY = 86400

TX_POINTS = 1
BALANCE_POINTS_PER_UNIT = 10  # 1 point per 0.1 native unit
CONTRACT_POINTS = 50

# (days upper bound, bonus), checked in order
RECENCY_TIERS: tuple[tuple[float, int], ...] = (
    (1, 100),
    (7, 50),
    (30, 25),
)


def recency_bonus(last_activity: int | None, now: float) -> int:
    """Bonus for recent activity; 0 when no activity was observed."""
    if last_activity is None:
        return 0
    days_since = (now - last_activity) / SECONDS_PER_DAY
    for upper_days, bonus in RECENCY_TIERS:
        if days_since < upper_days:
            return bonus
    return 0


def balance_points(balance: str) -> int:
    # Balance is non-negative by contract, so floor == truncation toward zero.
    return math.floor(float(balance) * BALANCE_POINTS_PER_UNIT)


def calculate_builder_score(signals: BuilderSignals, now: float) -> int:
    """
    Compute the builder score at instant `now` (Unix seconds).

    Pure and deterministic: the same signals and `now` always give the same score.
    """
    score = signals.transactions * TX_POINTS
    score += balance_points(signals.balance)
    score += len(signals.contracts) * CONTRACT_POINTS
    score += recency_bonus(signals.last_activity, now)
    return score
