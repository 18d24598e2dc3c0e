from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd

from ..models.field_types import Table

"""Exporters for cleaned tables (JSON and CSV)."""

logger = logging.getLogger(__name__)

__all__ = [
    "export_json",
    "export_csv",
]


def export_json(table: Table, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(table, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
    logger.info(f"cleaned JSON exported to {path}")
    return path


def export_csv(table: Table, path: Path) -> Path:
    """Write ``table`` as CSV with a header row.

    Columns are the union of all row keys in first-seen order; absent values
    are written as empty cells.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    columns: list[str] = []
    for row in table:
        for key in row:
            if key not in columns:
                columns.append(key)
    pd.DataFrame(table, columns=columns).to_csv(path, index=False)
    logger.info(f"cleaned CSV exported to {path}")
    return path
