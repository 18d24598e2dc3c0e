from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..models.field_types import Row, Table
from .dates import parse_date

"""Row validation.

A row survives when it passes both the schema predicate (required fields
present and non-empty) and the logic predicate (``joined`` is not in the
future). Failing rows are dropped whole; nothing is corrected.
"""

__all__ = [
    "MISSING_REQUIRED_FIELD",
    "FUTURE_JOIN_DATE",
    "validate_schema",
    "validate_logic",
    "rejection_reason",
    "validate_rows",
]

MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
FUTURE_JOIN_DATE = "FUTURE_JOIN_DATE"


def validate_schema(row: Row, required_fields: Sequence[str] = ()) -> bool:
    return all(row.get(f) is not None and row.get(f) != "" for f in required_fields)


def validate_logic(row: Row, today: date | None = None) -> bool:
    """False when ``joined`` holds a date strictly after ``today``.

    An absent, empty or unparseable ``joined`` does not fail the row.
    """
    joined = row.get("joined")
    if not joined:
        return True
    parsed = parse_date(joined)
    if parsed is None:
        return True
    return parsed <= (today or date.today())


def rejection_reason(
    row: Row, required_fields: Sequence[str] = (), today: date | None = None
) -> tuple[str, str] | None:
    """Return ``(error_type, message)`` for an invalid row, None for a valid one."""
    missing = [f for f in required_fields if row.get(f) is None or row.get(f) == ""]
    if missing:
        return MISSING_REQUIRED_FIELD, f"required fields missing or empty: {missing}"
    if not validate_logic(row, today):
        return FUTURE_JOIN_DATE, f"joined date {row.get('joined')!r} is in the future"
    return None


def validate_rows(
    table: Table, required_fields: Sequence[str] = (), today: date | None = None
) -> Table:
    """Keep the rows that satisfy both predicates."""
    reference = today or date.today()
    return [
        dict(row)
        for row in table
        if validate_schema(row, required_fields) and validate_logic(row, reference)
    ]
