from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""RejectionRecord model for the rejected-rows log.

Every row the pipeline drops for a structural or logical reason is written as
one JSON Lines record. ``row`` is the 0-based position of the row in the table
the stage received; -1 marks a table-level problem where no row applies.

The record layout is fixed by ``dataprep/logging/rejection_log_schema.json``.
"""

__all__ = [
    "RejectionRecord",
]


@dataclass(frozen=True)
class RejectionRecord:
    """Structured record of one rejected row.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: Input file name (or "<memory>" for in-process tables)
        stage: Pipeline stage that dropped the row
        row: Row position within the stage input. -1 when unknown
        error_type: Classification in UPPER_SNAKE_CASE
        message: Human readable reason
    """
    timestamp: str
    source: str
    stage: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(source: str, stage: str, row: int, error_type: str, message: str) -> RejectionRecord:
        """Create a new RejectionRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return RejectionRecord(
            timestamp=ts,
            source=source,
            stage=stage,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line with exactly the dataclass keys."""
        return json.dumps(asdict(self), ensure_ascii=False)
