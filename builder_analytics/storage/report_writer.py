"""
Report persistence: write a builder report as pretty-printed JSON.
"""

from __future__ import annotations

import json
from pathlib import Path

from builder_analytics.analytics.models import Report
from builder_analytics.builder_logging import get_logger
from builder_analytics.config.env import DEFAULT_REPORT_FILE

logger = get_logger(__name__)


def save_report(
    report: Report,
    filename: str | Path = DEFAULT_REPORT_FILE,
    directory: str | Path | None = None,
) -> Path:
    """
    Write report.to_dict() to directory/filename (directory defaults to cwd).

    Absolute filenames are used as-is. Returns the written path; I/O errors propagate.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    report_path = base / Path(filename)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
    logger.info("report_saved", path=str(report_path), total_builders=report.total_builders)
    return report_path
