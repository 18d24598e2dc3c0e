from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.field_types import Table

"""Source readers: CSV / JSON text -> list of row dicts.

CSV cells are kept as the raw strings found in the file. pandas' default NA
coercion is disabled so that sentinels like "N/A" or "-" reach the missing
value stage untouched. JSON must be an array of objects (a single object is
accepted as a one-row table); values keep their JSON types.
"""

__all__ = [
    "SUPPORTED_FORMATS",
    "SourceFormatError",
    "detect_format",
    "parse_rows",
    "read_rows",
]

SUPPORTED_FORMATS = ("csv", "json")


class SourceFormatError(Exception):
    """Raised for an unsupported file format or content that cannot be parsed."""


def detect_format(path: Path) -> str:
    fmt = path.suffix.lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise SourceFormatError(f"Unsupported file format '{path.suffix}'. Use .csv or .json")
    return fmt


def _parse_csv(text: str) -> Table:
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise SourceFormatError(f"invalid csv: {e}") from e
    return [{str(k): v for k, v in rec.items()} for rec in df.to_dict(orient="records")]


def _parse_json(text: str) -> Table:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceFormatError(f"invalid json: {e}") from e
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise SourceFormatError("json source must be an array of objects")
    return [dict(r) for r in data]


def parse_rows(text: str, fmt: str) -> Table:
    """Parse already-decoded source text of format ``fmt`` into rows."""
    if fmt == "csv":
        return _parse_csv(text)
    if fmt == "json":
        return _parse_json(text)
    raise SourceFormatError(f"Unsupported file format '{fmt}'. Use csv or json")


def read_rows(path: Path) -> Table:
    """Read a .csv or .json file into rows.

    Raises:
        SourceFormatError: unsupported suffix or unparseable content.
        FileNotFoundError: ``path`` does not exist.
    """
    fmt = detect_format(path)
    text = path.read_text(encoding="utf-8")
    return parse_rows(text, fmt)
