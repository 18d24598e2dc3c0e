from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .field_types import FieldTypeMap, Table

"""Processing result models for pipeline runs.

The runner returns a PipelineResult; each stage contributes a StageStat so the
summary line and the debug log can show where rows were lost.
"""

__all__ = [
    "StageStat",
    "PipelineResult",
]


@dataclass(frozen=True)
class StageStat:
    """Row counts and timing for one pipeline stage."""
    stage: str
    rows_in: int
    rows_out: int
    elapsed_seconds: float

    @property
    def rows_removed(self) -> int:
        return self.rows_in - self.rows_out


@dataclass(frozen=True)
class PipelineResult:
    """Aggregated output of a pipeline run."""
    field_types: FieldTypeMap
    rows: Table
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float  # rows_in / elapsed
    stage_stats: list[StageStat] = field(default_factory=list)
    rows_in: int = 0
    rejected_rows: int = 0  # dropped by the row validator

    @property
    def rows_out(self) -> int:
        return len(self.rows)

    def stage(self, name: str) -> StageStat | None:
        for stat in self.stage_stats:
            if stat.stage == name:
                return stat
        return None
