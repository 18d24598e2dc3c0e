from __future__ import annotations

from ..models.processing_result import PipelineResult

"""SUMMARY line rendering for pipeline runs."""

__all__ = [
    "format_metric",
    "render_summary_line",
    "render_stage_line",
]


def format_metric(value: float) -> str:
    """Render a non-negative metric without scientific notation.

    Integral values drop the decimal point; values below 0.01 keep up to six
    decimals.
    """
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 4))


def render_summary_line(result: PipelineResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY rows_in={in} rows_out={out} removed={in-out} rejected={rejected}
    fields={n} stages={k} elapsed_sec={elapsed} throughput_rps={throughput}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = PipelineResult(
        ...     field_types={}, rows=[{"a": 1}], start_time=t, end_time=t,
        ...     elapsed_seconds=2.0, throughput_rows_per_sec=1.0, rows_in=2,
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows_in=2 rows_out=1 removed=1 rejected=0 fields=0 stages=0 elapsed_sec=2 throughput_rps=1'
    """
    return (
        f"SUMMARY rows_in={result.rows_in} "
        f"rows_out={result.rows_out} "
        f"removed={result.rows_in - result.rows_out} "
        f"rejected={result.rejected_rows} "
        f"fields={len(result.field_types)} "
        f"stages={len(result.stage_stats)} "
        f"elapsed_sec={format_metric(result.elapsed_seconds)} "
        f"throughput_rps={format_metric(result.throughput_rows_per_sec)}"
    )


def render_stage_line(result: PipelineResult) -> str:
    """One ``stage:in->out`` token per stage, for debug output."""
    return " ".join(f"{s.stage}:{s.rows_in}->{s.rows_out}" for s in result.stage_stats)
