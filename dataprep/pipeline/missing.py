from __future__ import annotations

import logging
import math
from typing import Any

from ..models.field_types import FieldType, FieldTypeMap, Row, Table

"""Missing value detection and resolution.

Three strategies: ``drop`` removes any row holding a missing value, ``impute``
substitutes a per-type default, ``flag`` keeps values and adds an
``is_<field>_missing`` column after each field. Any other strategy name returns
the rows unchanged.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "MISSING_TOKENS",
    "IMPUTE_DEFAULTS",
    "is_missing",
    "missing_flag_name",
    "resolve_missing",
]

MISSING_TOKENS = frozenset({"n/a", "na", "null", "none", "", "-"})

# date and unmapped fields impute to None
IMPUTE_DEFAULTS: dict[FieldType, Any] = {
    FieldType.STRING: "unknown",
    FieldType.NUMBER: 0,
    FieldType.BOOLEAN: False,
    FieldType.DATE: None,
}


def is_missing(value: Any) -> bool:
    """True when ``value`` is semantically absent.

    Present-but-falsy values such as ``0`` or ``False`` are not missing.
    """
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return str(value).strip().lower() in MISSING_TOKENS


def missing_flag_name(field: str) -> str:
    return f"is_{field}_missing"


def _drop(table: Table) -> Table:
    return [dict(row) for row in table if not any(is_missing(v) for v in row.values())]


def _impute(table: Table, types: FieldTypeMap) -> Table:
    result: Table = []
    for row in table:
        filled: Row = {}
        for key, value in row.items():
            if is_missing(value):
                field_type = types.get(key)
                filled[key] = IMPUTE_DEFAULTS.get(field_type) if field_type is not None else None
            else:
                filled[key] = value
        result.append(filled)
    return result


def _flag(table: Table) -> Table:
    result: Table = []
    for row in table:
        flagged: Row = {}
        for key, value in row.items():
            flagged[key] = value
            flagged[missing_flag_name(key)] = is_missing(value)
        result.append(flagged)
    return result


def resolve_missing(table: Table, types: FieldTypeMap, strategy: str = "impute") -> Table:
    """Apply ``strategy`` to every row and return a new table."""
    if strategy == "drop":
        return _drop(table)
    if strategy == "impute":
        return _impute(table, types)
    if strategy == "flag":
        return _flag(table)
    logger.debug(f"unknown missing strategy '{strategy}' -> rows passed through unchanged")
    return [dict(row) for row in table]
