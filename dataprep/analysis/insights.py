from __future__ import annotations

from ..models.analysis_result import FieldStats

"""Plain-language observations derived from a field's summary statistics."""

__all__ = [
    "NO_INSIGHTS",
    "generate_insights",
]

NO_INSIGHTS = "No numerical insights available."

HIGH_MEAN = 1000
LARGE_COUNT = 100


def generate_insights(stats: FieldStats | None) -> list[str]:
    if stats is None or stats.mean is None:
        return [NO_INSIGHTS]

    insights = []
    if stats.mean > HIGH_MEAN:
        insights.append("High average value detected.")
    if stats.count > LARGE_COUNT:
        insights.append("Large dataset processed.")
    if stats.median is not None and stats.median < stats.mean:
        insights.append("Data is right-skewed.")
    return insights
