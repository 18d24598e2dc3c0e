from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .field_types import Table

"""Result models for the read-only analytics."""

__all__ = [
    "FieldStats",
    "ChartPoint",
    "AnalysisResult",
]


@dataclass(frozen=True)
class FieldStats:
    """Summary statistics of one numeric field.

    ``std`` is the population standard deviation. Everything except ``count``
    is None when the field holds no numeric values.
    """
    count: int
    mean: float | None = None
    median: float | None = None
    min: float | None = None
    max: float | None = None
    std: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ChartPoint:
    label: str
    value: float


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the analysis boundary hands back for one field."""
    field: str
    chart_type: str
    summary: FieldStats
    chart_data: list[ChartPoint]
    insights: list[str]
    outliers: Table = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "chart_type": self.chart_type,
            "summary": self.summary.to_dict(),
            "chart_data": [asdict(p) for p in self.chart_data],
            "insights": list(self.insights),
            "outliers": list(self.outliers),
        }
