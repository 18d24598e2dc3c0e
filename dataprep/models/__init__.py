"""Domain models for the dataprep cleaning pipeline.

Plain frozen dataclasses and enums shared by the pipeline stages, the
analytics and the boundary services.
"""

from .analysis_result import AnalysisResult, ChartPoint, FieldStats
from .config_models import AnalysisConfig, OutlierConfig, PipelineConfig
from .field_types import FieldType, FieldTypeMap, Row, Table
from .processing_result import PipelineResult, StageStat
from .value import TaggedValue, ValueKind, as_number, tag_value

__all__ = [
    # Table shape
    "FieldType",
    "FieldTypeMap",
    "Row",
    "Table",
    # Value variant
    "TaggedValue",
    "ValueKind",
    "as_number",
    "tag_value",
    # Configuration models
    "AnalysisConfig",
    "OutlierConfig",
    "PipelineConfig",
    # Results
    "AnalysisResult",
    "ChartPoint",
    "FieldStats",
    "PipelineResult",
    "StageStat",
]
