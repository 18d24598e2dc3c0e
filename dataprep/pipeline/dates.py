from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

"""Strict date parsing shared by inference, cleaning, features and validation.

Each accepted format is a full-match regex paired with a ``strptime`` pattern:
the regex pins the exact shape (zero padding, separators, month-name case) and
``strptime`` rejects impossible calendar dates. There is no fuzzy fallback.
"""

__all__ = [
    "DATE_FORMATS",
    "CANONICAL_DATE_FORMAT",
    "parse_date",
    "format_date",
    "is_date",
]

CANONICAL_DATE_FORMAT = "%Y-%m-%d"

# Order matters only for ambiguous strings; the first match wins.
DATE_FORMATS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d"),          # YYYY-MM-DD
    (re.compile(r"\d{4}/\d{2}/\d{2}"), "%Y/%m/%d"),          # YYYY/MM/DD
    (re.compile(r"\d{4}\.\d{2}\.\d{2}"), "%Y.%m.%d"),        # YYYY.MM.DD
    (re.compile(r"\d{2}-\d{2}-\d{4}"), "%d-%m-%Y"),          # DD-MM-YYYY
    (re.compile(r"[1-9]\d? [A-Z][a-z]{2} \d{4}"), "%d %b %Y"),  # D MMM YYYY
    (re.compile(r"\d{2}/\d{2}/\d{4}"), "%m/%d/%Y"),          # MM/DD/YYYY
)


def parse_date(value: Any) -> date | None:
    """Return the calendar date ``value`` denotes, or None.

    ``date``/``datetime`` objects are accepted as-is (datetimes are truncated
    to their date). Strings must match one of DATE_FORMATS exactly after
    trimming surrounding whitespace.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    for pattern, fmt in DATE_FORMATS:
        if not pattern.fullmatch(raw):
            continue
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: date) -> str:
    return value.strftime(CANONICAL_DATE_FORMAT)


def is_date(value: Any) -> bool:
    return parse_date(value) is not None
