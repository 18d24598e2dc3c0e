from __future__ import annotations

import doctest
import re
from datetime import datetime, timezone

import dataprep.services.summary as summary_module
from dataprep.models.field_types import FieldType
from dataprep.models.processing_result import PipelineResult, StageStat
from dataprep.services.summary import format_metric, render_stage_line, render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+rows_in=([0-9]+)\s+rows_out=([0-9]+)\s+removed=([0-9]+)\s+rejected=([0-9]+)\s+"
    r"fields=([0-9]+)\s+stages=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)\s+throughput_rps=([0-9]+\.?[0-9]*)$"
)

T0 = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


def _result(**overrides) -> PipelineResult:
    base = dict(
        field_types={"a": FieldType.NUMBER, "b": FieldType.STRING},
        rows=[{"a": 1, "b": "x"}] * 7,
        start_time=T0,
        end_time=T0,
        elapsed_seconds=2.0,
        throughput_rows_per_sec=5.0,
        stage_stats=[
            StageStat("infer", 10, 10, 0.0),
            StageStat("missing", 10, 9, 0.1),
            StageStat("validate", 9, 7, 0.1),
        ],
        rows_in=10,
        rejected_rows=2,
    )
    base.update(overrides)
    return PipelineResult(**base)


def test_render_summary_line_matches_contract():
    line = render_summary_line(_result())
    match = SUMMARY_PATTERN.match(line)
    assert match, line
    assert match.groups() == ("10", "7", "3", "2", "2", "3", "2", "5")


def test_render_summary_line_fractional_metrics():
    line = render_summary_line(_result(elapsed_seconds=0.000123, throughput_rows_per_sec=81300.81300813))
    assert "elapsed_sec=0.000123" in line
    assert "throughput_rps=81300.813" in line
    assert SUMMARY_PATTERN.match(line)


def test_format_metric():
    assert format_metric(0) == "0"
    assert format_metric(3.0) == "3"
    assert format_metric(0.0000004) == "0"
    assert format_metric(1.23456) == "1.2346"


def test_render_stage_line():
    assert render_stage_line(_result()) == "infer:10->10 missing:10->9 validate:9->7"


def test_module_doctest():
    failures, _ = doctest.testmod(summary_module)
    assert failures == 0
