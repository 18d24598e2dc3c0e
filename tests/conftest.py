# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from datetime import date
from pathlib import Path

import pytest

from dataprep.logging.init import APP_LOGGER_NAME, reset_logging

# Fixed reference day so date-dependent features and validation are stable.
TODAY = date(2024, 6, 1)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("DATAPREP_CONFIG", raising=False)
        yield p


def _reset_app_logger() -> None:
    reset_logging()
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture(autouse=True)
def _fresh_logging():
    _reset_app_logger()
    yield
    _reset_app_logger()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """missing_strategy: impute
deduplicate: true
dedup_keys: []
derive_features: true
required_fields: [name]
outliers:
  field: amount
  z_threshold: 2.0
analysis:
  field: amount
  chart_type: bar
output_directory: ./output
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "pipeline.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def customers_csv() -> str:
    return (
        "name,amount,joined,active\n"
        "Alice!,\"1,200\",2023-01-15,yes\n"
        "Alice!,\"1,200\",2023-01-15,yes\n"
        "Bob,twelve,15-02-2023,NO\n"
        "Carol,N/A,2099-01-01,1\n"
        "Dan,500,not a date,maybe\n"
        "-,2000,2024/05/31,0\n"
    )


@pytest.fixture()
def customers_rows() -> list[dict[str, object]]:
    return [
        {"name": "Alice!", "amount": "1,200", "joined": "2023-01-15", "active": "yes"},
        {"name": "Alice!", "amount": "1,200", "joined": "2023-01-15", "active": "yes"},
        {"name": "Bob", "amount": "twelve", "joined": "15-02-2023", "active": "NO"},
        {"name": "Carol", "amount": "N/A", "joined": "2099-01-01", "active": "1"},
        {"name": "Dan", "amount": "500", "joined": "not a date", "active": "maybe"},
        {"name": "-", "amount": "2000", "joined": "2024/05/31", "active": "0"},
    ]
