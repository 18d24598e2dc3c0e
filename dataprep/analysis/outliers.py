from __future__ import annotations

import math

import pandas as pd

from ..models.field_types import Table
from ..models.value import as_number
from .stats import numeric_values, population_moments

"""Outlier detection.

Z-score rule: a row is an outlier when ``|value - mean| / std`` meets or
exceeds the threshold, with mean and std taken over every numeric value of
the field (population std).

Zero standard deviation: a value equal to the mean has z = 0, any other value
has z = +inf. Nothing is ever divided by zero. A value at the mean (z = 0) is
never an outlier, so an all-equal column yields none whatever the threshold.
"""

__all__ = [
    "z_score",
    "detect_outliers",
    "detect_outliers_by_threshold",
]


def z_score(value: float, mean: float, std: float) -> float:
    deviation = abs(value - mean)
    if std == 0:
        return 0.0 if deviation == 0 else math.inf
    return deviation / std


def detect_outliers(table: Table, field: str, z_threshold: float = 3.0) -> Table:
    """Rows whose ``field`` value lies ``z_threshold`` std or more from the mean."""
    values = numeric_values(table, field)
    if not values:
        return []
    mean, std = population_moments(pd.Series(values, dtype="float64"))
    outliers: Table = []
    for row in table:
        value = as_number(row.get(field))
        if value is None:
            continue
        z = z_score(value, mean, std)
        if z > 0 and z >= z_threshold:
            outliers.append(dict(row))
    return outliers


def detect_outliers_by_threshold(table: Table, field: str, threshold: float = 1_000_000) -> Table:
    """Rows whose absolute ``field`` value is strictly above ``threshold``."""
    outliers: Table = []
    for row in table:
        value = as_number(row.get(field))
        if value is not None and abs(value) > threshold:
            outliers.append(dict(row))
    return outliers
