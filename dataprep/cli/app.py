from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from ..analysis.outliers import detect_outliers
from ..analysis.report import CHART_TYPES, InvalidArgumentError, analyze
from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..io.reader import SourceFormatError, read_rows
from ..io.writer import export_csv, export_json
from ..logging.error_log import RejectionLogBuffer
from ..logging.init import log_summary, set_level, setup_logging
from ..models.config_models import AnalysisConfig, PipelineConfig
from ..services.pipeline_runner import PipelineError, run_pipeline
from ..services.summary import render_stage_line, render_summary_line

"""CLI entrypoint.

Flow: load config -> read source file -> run pipeline -> export cleaned data
-> optional analysis -> SUMMARY line. Command line options override the
config file.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_ALL_ROWS_DROPPED = 2

CONFIG_ENV_VAR = "DATAPREP_CONFIG"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load ``.env`` so that DATAPREP_* variables can come from a file."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _split_list(value: str | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="dataprep", description="Clean, type and analyse CSV/JSON records")
    p.add_argument("input", type=Path, help="Source .csv or .json file")
    p.add_argument("--config", type=Path, default=None, help=f"Pipeline YAML (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--strategy", default=None, help="Missing value strategy: drop | impute | flag")
    p.add_argument("--dedup-keys", default=None, help="Comma separated key fields for deduplication")
    p.add_argument("--no-dedup", action="store_true", help="Skip deduplication")
    p.add_argument("--no-features", action="store_true", help="Skip derived features")
    p.add_argument("--required", default=None, help="Comma separated required fields")
    p.add_argument("--output-dir", type=Path, default=None, help="Directory for cleaned exports")
    p.add_argument("--format", choices=("json", "csv", "both"), default="both", help="Export format")
    p.add_argument("--analyze", dest="analyze_field", default=None, help="Field to analyse after cleaning")
    p.add_argument("--chart", choices=CHART_TYPES, default=None, help="Chart type for the analysis")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> PipelineConfig:
    explicit = args.config or (Path(os.environ[CONFIG_ENV_VAR]) if os.getenv(CONFIG_ENV_VAR) else None)
    if explicit is not None:
        cfg = load_config(explicit)
    elif DEFAULT_CONFIG_PATH.exists():
        cfg = load_config(DEFAULT_CONFIG_PATH)
    else:
        cfg = PipelineConfig()

    overrides: dict[str, object] = {}
    if args.strategy is not None:
        overrides["missing_strategy"] = args.strategy
    keys = _split_list(args.dedup_keys)
    if keys is not None:
        overrides["dedup_keys"] = keys
    if args.no_dedup:
        overrides["deduplicate"] = False
    if args.no_features:
        overrides["derive_features"] = False
    required = _split_list(args.required)
    if required is not None:
        overrides["required_fields"] = required
    if args.output_dir is not None:
        overrides["output_directory"] = str(args.output_dir)
    if args.analyze_field is not None:
        chart = args.chart or (cfg.analysis.chart_type if cfg.analysis else "bar")
        overrides["analysis"] = AnalysisConfig(field=args.analyze_field, chart_type=chart)
    elif args.chart is not None and cfg.analysis is not None:
        overrides["analysis"] = replace(cfg.analysis, chart_type=args.chart)
    return replace(cfg, **overrides) if overrides else cfg


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None -> read sys.argv; an explicit [] must not pick up the test runner's args
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_level(logging.DEBUG)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        table = read_rows(args.input)
    except FileNotFoundError:
        logger.error(f"input not found: {args.input}")
        return EXIT_FATAL
    except SourceFormatError as e:
        logger.error(f"source: {e}")
        return EXIT_FATAL

    logger.info(f"Processing {args.input} rows={len(table)} strategy={cfg.missing_strategy}")

    error_log = RejectionLogBuffer()
    try:
        result = run_pipeline(table, cfg, source=args.input.name, error_log=error_log)
    except PipelineError as e:
        logger.error(f"pipeline: {e}")
        return EXIT_FATAL

    rejected_path = error_log.flush()
    if rejected_path is not None:
        logger.warning(f"{result.rejected_rows} rows rejected -> {rejected_path}")
    logger.debug(f"stages {render_stage_line(result)}")

    out_dir = Path(cfg.output_directory)
    stem = args.input.stem
    if args.format in ("json", "both"):
        export_json(result.rows, out_dir / f"{stem}_cleaned.json")
    if args.format in ("csv", "both"):
        export_csv(result.rows, out_dir / f"{stem}_cleaned.csv")

    if cfg.outliers is not None:
        outliers = detect_outliers(result.rows, cfg.outliers.field, cfg.outliers.z_threshold)
        logger.info(f"outliers field={cfg.outliers.field} z>={cfg.outliers.z_threshold} count={len(outliers)}")

    if cfg.analysis is not None:
        try:
            analysis = analyze(result.rows, cfg.analysis.field, cfg.analysis.chart_type)
        except InvalidArgumentError as e:
            logger.error(f"analysis: {e}")
            return EXIT_FATAL
        logger.info(f"analysis={json.dumps(analysis.to_dict(), ensure_ascii=False, default=str)}")

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.rows_in > 0 and result.rows_out == 0:
        return EXIT_ALL_ROWS_DROPPED
    return EXIT_SUCCESS

