from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, date, datetime

from ..logging.error_log import RejectionLogBuffer
from ..models.config_models import PipelineConfig
from ..models.error_record import RejectionRecord
from ..models.field_types import FieldTypeMap, Table
from ..models.processing_result import PipelineResult, StageStat
from ..pipeline.clean import clean_values
from ..pipeline.deduplicate import deduplicate_by_keys, deduplicate_exact
from ..pipeline.features import FeatureRegistry, derive_features
from ..pipeline.infer import infer_types
from ..pipeline.missing import resolve_missing
from ..pipeline.validate import rejection_reason, validate_rows
from .progress import StageProgress

"""Pipeline runner: executes the stages in order over one table.

Stage order is fixed: infer -> missing -> clean -> deduplicate -> features ->
validate. Each stage receives the complete output of the previous one. The
runner owns the side effects (timing, logging, progress, rejection records);
the stages themselves stay pure.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "PipelineError",
    "VALIDATE_STAGE",
    "run_pipeline",
]

VALIDATE_STAGE = "validate"


class PipelineError(Exception):
    """Raised when the runner is called with inputs it cannot honour."""


def _check_field_types(table: Table, field_types: FieldTypeMap) -> None:
    fields = {key for row in table for key in row}
    if field_types and not fields.intersection(field_types):
        raise PipelineError(
            f"field types {sorted(field_types)} do not match any table field {sorted(fields)}"
        )


def _planned_stages(config: PipelineConfig, infer: bool) -> int:
    # missing, clean and validate always run
    return 3 + int(infer) + int(config.deduplicate) + int(config.derive_features)


def run_pipeline(
    table: Table,
    config: PipelineConfig | None = None,
    *,
    field_types: FieldTypeMap | None = None,
    today: date | None = None,
    source: str = "<memory>",
    error_log: RejectionLogBuffer | None = None,
    registry: FeatureRegistry | None = None,
) -> PipelineResult:
    """Run every stage over ``table`` and return the cleaned result.

    Args:
        table: Parsed input rows. Not modified.
        config: Stage settings; defaults to ``PipelineConfig()``.
        field_types: Pre-computed type map. When None the first row is used
            for inference.
        today: Reference date for features and validation.
        source: Name recorded in rejection records.
        error_log: Buffer receiving one record per row dropped by validation.
        registry: Feature registry; defaults to the built-in features.

    Raises:
        PipelineError: ``field_types`` shares no field with the table.
    """
    cfg = config or PipelineConfig()
    reference_day = today or date.today()
    start_time = datetime.now(UTC)
    stage_stats: list[StageStat] = []
    rows_in = len(table)

    if not table:
        end_time = datetime.now(UTC)
        logger.info(f"source={source} is empty -> nothing to clean")
        return PipelineResult(
            field_types=dict(field_types or {}),
            rows=[],
            start_time=start_time,
            end_time=end_time,
            elapsed_seconds=(end_time - start_time).total_seconds(),
            throughput_rows_per_sec=0.0,
            stage_stats=[],
            rows_in=0,
        )

    if field_types is not None:
        _check_field_types(table, field_types)

    with StageProgress(_planned_stages(cfg, field_types is None), description=f"Cleaning {source}") as progress:

        def run_stage(name: str, current: Table, fn: Callable[[Table], Table]) -> Table:
            progress.start_stage(name)
            t0 = time.perf_counter()
            out = fn(current)
            elapsed = time.perf_counter() - t0
            stage_stats.append(StageStat(stage=name, rows_in=len(current), rows_out=len(out), elapsed_seconds=elapsed))
            progress.finish_stage(len(out))
            logger.info(f"stage={name} rows={len(current)}->{len(out)} elapsed={elapsed:.6f}s")
            return out

        types: FieldTypeMap = dict(field_types) if field_types is not None else {}
        if field_types is None:
            # first row is the representative sample
            def infer(current: Table) -> Table:
                types.update(infer_types(current[0]))
                return current

            table = run_stage("infer", table, infer)
        type_names = {k: v.value for k, v in types.items()}
        logger.debug(f"field types: {type_names}")

        table = run_stage("missing", table, lambda t: resolve_missing(t, types, cfg.missing_strategy))
        table = run_stage("clean", table, lambda t: clean_values(t, types))

        if cfg.deduplicate:
            if cfg.dedup_keys:
                table = run_stage("deduplicate", table, lambda t: deduplicate_by_keys(t, cfg.dedup_keys))
            else:
                table = run_stage("deduplicate", table, deduplicate_exact)

        if cfg.derive_features:
            table = run_stage(
                "features", table, lambda t: derive_features(t, today=reference_day, registry=registry)
            )

        rejected = 0
        for idx, row in enumerate(table):
            reason = rejection_reason(row, cfg.required_fields, reference_day)
            if reason is None:
                continue
            rejected += 1
            if error_log is not None:
                error_type, message = reason
                error_log.append(RejectionRecord.create(source, VALIDATE_STAGE, idx, error_type, message))
        table = run_stage(
            VALIDATE_STAGE, table, lambda t: validate_rows(t, cfg.required_fields, reference_day)
        )

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput = rows_in / elapsed_seconds if elapsed_seconds > 0 else 0.0

    logger.info(f"source={source} rows_in={rows_in} rows_out={len(table)} rejected={rejected}")
    return PipelineResult(
        field_types=types,
        rows=table,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_rows_per_sec=throughput,
        stage_stats=stage_stats,
        rows_in=rows_in,
        rejected_rows=rejected,
    )
