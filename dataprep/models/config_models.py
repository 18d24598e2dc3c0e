from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for the cleaning pipeline.

These are the typed form of ``config/pipeline.yml`` after schema validation.
The loader in ``dataprep.config.loader`` builds them; the runner and CLI only
ever see these objects.
"""

__all__ = [
    "MISSING_STRATEGIES",
    "OutlierConfig",
    "AnalysisConfig",
    "PipelineConfig",
]

# Recognised strategies. Anything else is accepted and behaves as a no-op.
MISSING_STRATEGIES = ("drop", "impute", "flag")


@dataclass(frozen=True)
class OutlierConfig:
    """Z-score outlier detection settings."""
    field: str
    z_threshold: float = 3.0


@dataclass(frozen=True)
class AnalysisConfig:
    """Field and chart flavour used by the analysis boundary."""
    field: str
    chart_type: str = "bar"  # bar | line


@dataclass(frozen=True)
class PipelineConfig:
    """Root configuration for one pipeline run.

    ``dedup_keys`` empty means exact-row deduplication; non-empty switches to
    key-based deduplication. ``required_fields`` feeds the schema predicate of
    the row validator.
    """
    missing_strategy: str = "impute"
    deduplicate: bool = True
    dedup_keys: tuple[str, ...] = ()
    derive_features: bool = True
    required_fields: tuple[str, ...] = ()
    outliers: OutlierConfig | None = None
    analysis: AnalysisConfig | None = None
    output_directory: str = "./output"

    @property
    def known_strategy(self) -> bool:
        return self.missing_strategy in MISSING_STRATEGIES
