from __future__ import annotations

from typing import Any

from ..models.field_types import FieldType, FieldTypeMap, Row
from .dates import parse_date
from .numbers import parse_number

"""Type inference from a single representative row.

The map produced here is authoritative for every later stage; it is never
re-derived from cleaned data.
"""

__all__ = [
    "BOOLEAN_TOKENS",
    "infer_type",
    "infer_types",
]

BOOLEAN_TOKENS = frozenset({"true", "false", "yes", "no", "1", "0"})


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def infer_type(value: Any) -> FieldType:
    """Infer the type of one sample value.

    Precedence: empty -> string, boolean token -> boolean, finite number ->
    number, strict date -> date, anything else -> string. "1" and "0" are
    booleans, not numbers.
    """
    text = _as_text(value)
    if not text:
        return FieldType.STRING
    if text.lower() in BOOLEAN_TOKENS:
        return FieldType.BOOLEAN
    if parse_number(text) is not None:
        return FieldType.NUMBER
    if parse_date(value if not isinstance(value, str) else text) is not None:
        return FieldType.DATE
    return FieldType.STRING


def infer_types(row: Row) -> FieldTypeMap:
    """Derive a FieldTypeMap covering every key of ``row``.

    Pure function of the sampled row; fields absent from it are absent from
    the map.
    """
    return {key: infer_type(value) for key, value in row.items()}
