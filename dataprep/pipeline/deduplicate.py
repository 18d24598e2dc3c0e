from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.field_types import Row, Table
from ..models.value import TaggedValue, tag_value

"""Duplicate row removal.

Both passes are single left-to-right scans: the first occurrence wins and the
survivors keep their relative order. Key computation never raises, whatever
mix of value types the rows hold.
"""

__all__ = [
    "KEY_SEPARATOR",
    "row_identity",
    "composite_key",
    "deduplicate_exact",
    "deduplicate_by_keys",
]

KEY_SEPARATOR = "|"


def row_identity(row: Row) -> frozenset[tuple[str, TaggedValue]]:
    """Hashable identity of a row, independent of field order.

    Values are tagged, so ``True`` and ``1`` stay distinct while ``1`` and
    ``1.0`` compare equal.
    """
    return frozenset((key, tag_value(value)) for key, value in row.items())


def _key_part(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def composite_key(row: Row, keys: Sequence[str]) -> str:
    return KEY_SEPARATOR.join(_key_part(row.get(k)) for k in keys)


def deduplicate_exact(table: Table) -> Table:
    """Drop rows structurally equal to an earlier row."""
    seen: set[frozenset[tuple[str, TaggedValue]]] = set()
    result: Table = []
    for row in table:
        identity = row_identity(row)
        if identity in seen:
            continue
        seen.add(identity)
        result.append(dict(row))
    return result


def deduplicate_by_keys(table: Table, keys: Sequence[str]) -> Table:
    """Keep the first row for each composite key over ``keys``.

    Absent and None key values both contribute an empty segment.
    """
    seen: set[str] = set()
    result: Table = []
    for row in table:
        key = composite_key(row, keys)
        if key in seen:
            continue
        seen.add(key)
        result.append(dict(row))
    return result
