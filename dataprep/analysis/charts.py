from __future__ import annotations

from collections import Counter

from ..models.analysis_result import ChartPoint
from ..models.field_types import Table
from ..models.value import as_number
from ..pipeline.dates import format_date, parse_date

"""Chart series data.

Only the aggregated points are produced here; rendering them is left to the
caller.
"""

__all__ = [
    "LINE_DATE_FIELDS",
    "bar_series",
    "line_series",
    "count_series",
]

# Fields probed, in order, for the x-axis of a count-based line chart.
LINE_DATE_FIELDS = ("date", "joined", "created_at")


def bar_series(table: Table, group_by: str, value_field: str) -> list[ChartPoint]:
    """Sum of ``value_field`` per ``group_by`` value, in first-seen order.

    Missing group values fall into "unknown"; non-numeric values count as 0.
    """
    totals: dict[str, float] = {}
    for row in table:
        group = row.get(group_by)
        label = "unknown" if group is None else str(group)
        totals[label] = totals.get(label, 0) + (as_number(row.get(value_field)) or 0)
    return [ChartPoint(label=k, value=v) for k, v in totals.items()]


def line_series(table: Table, date_field: str, value_field: str) -> list[ChartPoint]:
    """Sum of ``value_field`` per canonical date, sorted by date.

    Rows whose date does not parse are skipped.
    """
    totals: dict[str, float] = {}
    for row in table:
        parsed = parse_date(row.get(date_field))
        if parsed is None:
            continue
        label = format_date(parsed)
        totals[label] = totals.get(label, 0) + (as_number(row.get(value_field)) or 0)
    return [ChartPoint(label=k, value=totals[k]) for k in sorted(totals)]


def count_series(table: Table, field: str, chart_type: str) -> list[ChartPoint]:
    """Occurrence counts, keyed by ``field`` for bar charts or by date for line charts."""
    counts: Counter[str] = Counter()
    for row in table:
        if chart_type == "line":
            key = next((row.get(f) for f in LINE_DATE_FIELDS if row.get(f)), None)
        else:
            key = row.get(field)
        if key is None or key == "":
            continue
        counts[str(key)] += 1
    return [ChartPoint(label=label, value=count) for label, count in counts.items()]
