from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import RejectionRecord

"""Rejected-row log buffering.

Records are collected in memory during a run and appended to
``<log_dir>/rejected-YYYYMMDD-HHMMSS.log`` (UTC) as JSON Lines on flush. The
file name is fixed on first access so repeated flushes append to one file.
"""

__all__ = [
    "RejectionRecord",
    "RejectionLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class RejectionLogBuffer:
    """In-memory buffer of rejection records; flush writes JSON Lines.

    Not thread-safe: one buffer belongs to one pipeline run.
    """

    def __init__(self, log_dir: Path | None = None) -> None:
        self._records: list[RejectionRecord] = []
        self._log_dir = log_dir if log_dir is not None else LOGS_DIR
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._log_dir / f"rejected-{stamp}.log"
        return self._file_path

    @property
    def records(self) -> list[RejectionRecord]:
        return list(self._records)

    def append(self, record: RejectionRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file and clear the buffer.

        Returns the file path, or None when there was nothing to write (no
        file is created in that case).
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
