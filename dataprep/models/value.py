from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from ..pipeline.numbers import is_finite_number, parse_number

"""Tagged value variant for dynamic row values.

Raw rows arrive as untyped Python objects (strings from CSV, anything from
JSON). ``tag_value`` classifies a value into a closed set of kinds so stages can
branch on the kind instead of on ``isinstance`` chains, and so values become
hashable for deduplication. Tagging is total: it never raises.
"""

__all__ = [
    "ValueKind",
    "TaggedValue",
    "tag_value",
    "as_number",
]


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    LIST = "list"
    MAPPING = "mapping"
    OTHER = "other"


@dataclass(frozen=True)
class TaggedValue:
    """A value paired with its kind.

    ``value`` is always hashable: lists become tuples of TaggedValue and
    mappings become frozensets of (key, TaggedValue) pairs, so two tagged values
    compare equal exactly when the originals are structurally equal.
    """
    kind: ValueKind
    value: Any

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL


def tag_value(value: Any) -> TaggedValue:
    if value is None:
        return TaggedValue(ValueKind.NULL, None)
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return TaggedValue(ValueKind.BOOLEAN, value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return TaggedValue(ValueKind.NULL, None)
        return TaggedValue(ValueKind.NUMBER, value)
    if isinstance(value, str):
        return TaggedValue(ValueKind.STRING, value)
    if isinstance(value, datetime):
        return TaggedValue(ValueKind.DATE, value.isoformat())
    if isinstance(value, date):
        return TaggedValue(ValueKind.DATE, value.isoformat())
    if isinstance(value, (list, tuple)):
        return TaggedValue(ValueKind.LIST, tuple(tag_value(v) for v in value))
    if isinstance(value, dict):
        return TaggedValue(
            ValueKind.MAPPING,
            frozenset((str(k), tag_value(v)) for k, v in value.items()),
        )
    try:
        hash(value)
    except TypeError:
        return TaggedValue(ValueKind.OTHER, repr(value))
    return TaggedValue(ValueKind.OTHER, value)


def as_number(value: Any) -> int | float | None:
    """Return ``value`` as a finite number, or None when it is not numeric.

    Numbers pass through; numeric strings (thousands commas allowed) are
    parsed. Booleans, nulls and everything else are not numeric.
    """
    tagged = tag_value(value)
    if tagged.kind is ValueKind.NUMBER:
        return tagged.value if is_finite_number(tagged.value) else None
    if tagged.kind is ValueKind.STRING:
        return parse_number(tagged.value)
    return None
