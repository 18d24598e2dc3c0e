from __future__ import annotations

import re
from typing import Any

from ..models.field_types import FieldType, FieldTypeMap, Table
from .dates import format_date, parse_date
from .numbers import resolve_number

"""Value normalization into each field's canonical form.

Only raw strings are rewritten; values that are already typed (numbers,
booleans, None, imputed defaults) pass through untouched. A value that cannot
be coerced becomes None and its row survives: dropping rows is the
validator's job. Fields missing from the type map are left as they are.

Canonical forms are fixed points, so cleaning an already cleaned table is a
no-op.
"""

__all__ = [
    "TRUTHY",
    "FALSY",
    "clean_value",
    "clean_values",
]

TRUTHY = frozenset({"yes", "true", "1"})
FALSY = frozenset({"no", "false", "0"})

_NON_WORD = re.compile(r"[^\w\s]")


def _clean_number(raw: str) -> int | float | None:
    return resolve_number(raw)


def _clean_boolean(raw: str) -> bool | None:
    lowered = raw.lower()
    if lowered in TRUTHY:
        return True
    if lowered in FALSY:
        return False
    return None


def _clean_date(raw: str) -> str | None:
    parsed = parse_date(raw)
    return format_date(parsed) if parsed is not None else None


def _clean_string(raw: str) -> str:
    return _NON_WORD.sub("", raw).lower()


_CLEANERS = {
    FieldType.NUMBER: _clean_number,
    FieldType.BOOLEAN: _clean_boolean,
    FieldType.DATE: _clean_date,
    FieldType.STRING: _clean_string,
}


def clean_value(value: Any, field_type: FieldType | None) -> Any:
    """Normalize one value for ``field_type``.

    ``field_type`` None marks an unmapped field: the value is returned as-is.
    """
    if field_type is None or not isinstance(value, str):
        return value
    return _CLEANERS[field_type](value.strip())


def clean_values(table: Table, types: FieldTypeMap) -> Table:
    """Return a new table with every mapped string value canonicalized."""
    return [
        {key: clean_value(value, types.get(key)) for key, value in row.items()}
        for row in table
    ]
