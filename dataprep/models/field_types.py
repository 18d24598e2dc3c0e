from __future__ import annotations

from enum import Enum
from typing import Any

"""Table shape and field type vocabulary.

A Row is an ordered mapping of field name to a dynamic value, a Table is an
ordered list of rows. Rows are never forced to share a field set; a missing
key is simply absent.
"""

__all__ = [
    "FieldType",
    "FieldTypeMap",
    "Row",
    "Table",
]


class FieldType(str, Enum):
    """Semantic type inferred once per table.

    The string values are the wire names used in configs and exports.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


Row = dict[str, Any]
Table = list[Row]
FieldTypeMap = dict[str, FieldType]
