from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from ..models.analysis_result import FieldStats
from ..models.field_types import FieldType, FieldTypeMap, Table
from ..models.value import as_number

"""Summary statistics for numeric fields.

Population statistics throughout (divide by n). The median is the element at
index ``n // 2`` of the ascending sort, so even-length inputs report the upper
of the two middle values rather than their average.
"""

__all__ = [
    "numeric_values",
    "middle_element",
    "population_moments",
    "describe_values",
    "describe_field",
    "summary_stats",
]


def numeric_values(table: Table, field: str) -> list[int | float]:
    """Numeric values of ``field`` in row order, non-numeric values skipped."""
    values = []
    for row in table:
        number = as_number(row.get(field))
        if number is not None:
            values.append(number)
    return values


def middle_element(values: Iterable[Any]) -> Any:
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def population_moments(series: pd.Series) -> tuple[float, float]:
    """Mean and population std (ddof=0) of a non-empty float series.

    A constant series reports its value and std 0 exactly, so float rounding
    in the mean never makes equal values look spread out.
    """
    lo, hi = series.min(), series.max()
    if lo == hi:
        return float(lo), 0.0
    return float(series.mean()), float(series.std(ddof=0))


def describe_values(values: list[int | float]) -> FieldStats:
    if not values:
        return FieldStats(count=0)
    series = pd.Series(values, dtype="float64")
    mean, std = population_moments(series)
    return FieldStats(
        count=len(values),
        mean=mean,
        median=middle_element(values),
        min=float(series.min()),
        max=float(series.max()),
        std=std,
    )


def describe_field(table: Table, field: str) -> FieldStats:
    return describe_values(numeric_values(table, field))


def summary_stats(table: Table, types: FieldTypeMap) -> dict[str, FieldStats]:
    """Statistics for every field typed ``number`` in ``types``, in map order."""
    return {
        field: describe_field(table, field)
        for field, field_type in types.items()
        if field_type is FieldType.NUMBER
    }
