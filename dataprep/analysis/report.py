from __future__ import annotations

import logging

from ..models.analysis_result import AnalysisResult
from ..models.field_types import Table
from .charts import count_series
from .insights import generate_insights
from .outliers import detect_outliers
from .stats import describe_field

"""Analysis boundary: one call producing stats, chart data and insights."""

logger = logging.getLogger(__name__)

__all__ = [
    "CHART_TYPES",
    "InvalidArgumentError",
    "analyze",
]

CHART_TYPES = ("bar", "line")


class InvalidArgumentError(ValueError):
    """Raised when the caller supplies no table, field or chart type."""


def analyze(table: Table | None, field: str | None, chart_type: str | None, z_threshold: float = 3.0) -> AnalysisResult:
    """Summarize ``field`` of a cleaned table.

    Raises:
        InvalidArgumentError: table empty or None, field or chart type missing,
            or an unsupported chart type.
    """
    if not table or not field or not chart_type:
        raise InvalidArgumentError("Missing input.")
    if chart_type not in CHART_TYPES:
        raise InvalidArgumentError(f"unsupported chart type: {chart_type}")

    summary = describe_field(table, field)
    logger.debug(f"analyze field={field} count={summary.count} chart={chart_type}")
    return AnalysisResult(
        field=field,
        chart_type=chart_type,
        summary=summary,
        chart_data=count_series(table, field, chart_type),
        insights=generate_insights(summary),
        outliers=detect_outliers(table, field, z_threshold),
    )
