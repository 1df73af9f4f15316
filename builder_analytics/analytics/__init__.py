"""
Builder analytics engine.

Scores builder addresses from on-chain signals and aggregates them into reports.
Modules: models, scoring, registry, report, engine.
"""

from builder_analytics.analytics.engine import BuilderScoringEngine
from builder_analytics.analytics.models import BuilderRecord, BuilderSignals, Report
from builder_analytics.analytics.registry import BuilderRegistry
from builder_analytics.analytics.report import average_score, generate_report, top_builders
from builder_analytics.analytics.scoring import calculate_builder_score, recency_bonus

__all__ = [
    "BuilderRecord",
    "BuilderRegistry",
    "BuilderScoringEngine",
    "BuilderSignals",
    "Report",
    "average_score",
    "calculate_builder_score",
    "generate_report",
    "recency_bonus",
    "top_builders",
]
