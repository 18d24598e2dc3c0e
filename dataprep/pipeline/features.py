from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..models.field_types import Row, Table
from ..models.value import as_number
from .dates import parse_date

"""Derived columns.

Features are computed per row from the original fields and appended after
them; no original field is modified. The default registry carries the three
customer features (``days_since_joined``, ``spending_category``,
``is_high_value``) that depend on a ``joined``/``amount`` schema.
"""

__all__ = [
    "FeatureContext",
    "FeatureFn",
    "FeatureRegistry",
    "HIGH_SPEND_THRESHOLD",
    "MEDIUM_SPEND_THRESHOLD",
    "HIGH_VALUE_THRESHOLD",
    "days_since_joined",
    "spending_category",
    "is_high_value",
    "default_registry",
    "derive_features",
]

HIGH_SPEND_THRESHOLD = 1000
MEDIUM_SPEND_THRESHOLD = 500
HIGH_VALUE_THRESHOLD = 1500


@dataclass(frozen=True)
class FeatureContext:
    """Inputs shared by every feature of one run."""
    today: date


FeatureFn = Callable[[Row, FeatureContext], Any]


class FeatureRegistry:
    """Ordered name -> feature function mapping.

    Registration order is the column order of the derived fields.
    """

    def __init__(self) -> None:
        self._features: dict[str, FeatureFn] = {}

    def register(self, name: str, fn: FeatureFn) -> None:
        self._features[name] = fn

    def unregister(self, name: str) -> None:
        self._features.pop(name, None)

    def names(self) -> list[str]:
        return list(self._features)

    def __contains__(self, name: object) -> bool:
        return name in self._features

    def __iter__(self) -> Iterator[tuple[str, FeatureFn]]:
        return iter(list(self._features.items()))

    def __len__(self) -> int:
        return len(self._features)

    def copy(self) -> FeatureRegistry:
        clone = FeatureRegistry()
        for name, fn in self:
            clone.register(name, fn)
        return clone


def days_since_joined(row: Row, ctx: FeatureContext) -> int | None:
    joined = parse_date(row.get("joined"))
    if joined is None:
        return None
    return (ctx.today - joined).days


def spending_category(row: Row, ctx: FeatureContext) -> str:
    amount = as_number(row.get("amount"))
    if amount is None:
        return "unknown"
    if amount >= HIGH_SPEND_THRESHOLD:
        return "high"
    if amount >= MEDIUM_SPEND_THRESHOLD:
        return "medium"
    return "low"


def is_high_value(row: Row, ctx: FeatureContext) -> bool:
    # a non-numeric amount is never high value
    amount = as_number(row.get("amount"))
    return amount is not None and amount > HIGH_VALUE_THRESHOLD


def default_registry() -> FeatureRegistry:
    registry = FeatureRegistry()
    registry.register("days_since_joined", days_since_joined)
    registry.register("spending_category", spending_category)
    registry.register("is_high_value", is_high_value)
    return registry


def derive_features(
    table: Table,
    today: date | None = None,
    registry: FeatureRegistry | None = None,
) -> Table:
    """Return new rows with every registered feature appended.

    ``today`` defaults to the local current date and is fixed for the whole
    call, so every row sees the same reference day.
    """
    ctx = FeatureContext(today=today or date.today())
    features = registry if registry is not None else default_registry()
    enriched_table: Table = []
    for row in table:
        enriched = dict(row)
        for name, fn in features:
            enriched[name] = fn(row, ctx)
        enriched_table.append(enriched)
    return enriched_table
