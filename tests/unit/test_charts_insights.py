from __future__ import annotations

import pytest

from dataprep.analysis.charts import bar_series, count_series, line_series
from dataprep.analysis.insights import NO_INSIGHTS, generate_insights
from dataprep.analysis.report import InvalidArgumentError, analyze
from dataprep.models.analysis_result import ChartPoint, FieldStats


def test_bar_series_sums_per_group():
    table = [
        {"city": "oslo", "amount": 10},
        {"city": "rome", "amount": 5},
        {"city": "oslo", "amount": "2"},
        {"amount": 1},
        {"city": "rome", "amount": "n/a"},
    ]
    assert bar_series(table, "city", "amount") == [
        ChartPoint("oslo", 12),
        ChartPoint("rome", 5),
        ChartPoint("unknown", 1),
    ]


def test_line_series_sorted_by_date():
    table = [
        {"day": "2024/02/01", "amount": 1},
        {"day": "2024-01-01", "amount": 2},
        {"day": "2024-02-01", "amount": 3},
        {"day": "later", "amount": 4},
    ]
    assert line_series(table, "day", "amount") == [
        ChartPoint("2024-01-01", 2),
        ChartPoint("2024-02-01", 4),
    ]


def test_count_series_bar_and_line():
    table = [
        {"cat": "a", "joined": "2024-01-01"},
        {"cat": "b", "joined": "2024-01-01"},
        {"cat": "a", "created_at": "2024-01-02"},
        {"cat": None},
    ]
    assert count_series(table, "cat", "bar") == [ChartPoint("a", 2), ChartPoint("b", 1)]
    assert count_series(table, "cat", "line") == [ChartPoint("2024-01-01", 2), ChartPoint("2024-01-02", 1)]


def test_insights():
    assert generate_insights(None) == [NO_INSIGHTS]
    assert generate_insights(FieldStats(count=0)) == [NO_INSIGHTS]
    stats = FieldStats(count=150, mean=1200.0, median=900, min=1, max=5000, std=10.0)
    assert generate_insights(stats) == [
        "High average value detected.",
        "Large dataset processed.",
        "Data is right-skewed.",
    ]
    assert generate_insights(FieldStats(count=3, mean=2.0, median=2, min=1, max=3, std=1.0)) == []


@pytest.mark.parametrize(
    "table, field, chart",
    [
        ([], "amount", "bar"),
        (None, "amount", "bar"),
        ([{"amount": 1}], "", "bar"),
        ([{"amount": 1}], "amount", None),
        ([{"amount": 1}], "amount", "pie"),
    ],
)
def test_analyze_rejects_missing_input(table, field, chart):
    with pytest.raises(InvalidArgumentError):
        analyze(table, field, chart)


def test_analyze_result():
    table = [{"amount": v} for v in (10, 10, 10, 10, 1000)]
    result = analyze(table, "amount", "bar", z_threshold=2)
    assert result.summary.count == 5
    assert result.summary.median == 10
    assert result.outliers == [{"amount": 1000}]
    assert result.insights == ["Data is right-skewed."]
    data = result.to_dict()
    assert data["chart_data"] == [{"label": "10", "value": 4}, {"label": "1000", "value": 1}]
    assert data["summary"]["mean"] == 208.0
