from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import AnalysisConfig, OutlierConfig, PipelineConfig

"""Pipeline config loader.

Responsibilities:
- Load YAML (default ``config/pipeline.yml``)
- Validate against the packaged ``pipeline_schema.json``
- Apply defaults for every optional key
"""

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "config_from_dict",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/pipeline.yml")
SCHEMA_PATH = Path(__file__).with_name("pipeline_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or not valid JSON, or the
            config data violates the schema (wrong types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def config_from_dict(data: dict[str, Any]) -> PipelineConfig:
    """Build a PipelineConfig from already-parsed config data."""
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")
    _validate_config_schema(data)

    outliers_raw = data.get("outliers")
    outliers = None
    if outliers_raw:
        outliers = OutlierConfig(
            field=outliers_raw["field"],
            z_threshold=float(outliers_raw.get("z_threshold", 3.0)),
        )
    analysis_raw = data.get("analysis")
    analysis = None
    if analysis_raw:
        analysis = AnalysisConfig(
            field=analysis_raw["field"],
            chart_type=analysis_raw.get("chart_type", "bar"),
        )

    cfg = PipelineConfig(
        missing_strategy=data.get("missing_strategy", "impute"),
        deduplicate=data.get("deduplicate", True),
        dedup_keys=tuple(data.get("dedup_keys", ())),
        derive_features=data.get("derive_features", True),
        required_fields=tuple(data.get("required_fields", ())),
        outliers=outliers,
        analysis=analysis,
        output_directory=data.get("output_directory", "./output"),
    )
    if not cfg.known_strategy:
        logger.warning(f"unknown missing_strategy '{cfg.missing_strategy}': missing values will be left as-is")
    return cfg


def load_config(path: Path) -> PipelineConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    return config_from_dict(data)
