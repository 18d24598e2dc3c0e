"""dataprep: clean, type and analyse tabular records of unknown shape.

The public surface is the row-transformation pipeline (one pure function per
stage) plus the read-only analytics that consume its output.
"""

from .analysis.outliers import detect_outliers, detect_outliers_by_threshold
from .analysis.stats import summary_stats
from .models.field_types import FieldType, FieldTypeMap, Row, Table
from .pipeline.clean import clean_values
from .pipeline.deduplicate import deduplicate_by_keys, deduplicate_exact
from .pipeline.features import derive_features
from .pipeline.infer import infer_types
from .pipeline.missing import resolve_missing
from .pipeline.validate import validate_rows

__version__ = "0.3.0"

__all__ = [
    "FieldType",
    "FieldTypeMap",
    "Row",
    "Table",
    "infer_types",
    "resolve_missing",
    "clean_values",
    "deduplicate_exact",
    "deduplicate_by_keys",
    "derive_features",
    "validate_rows",
    "summary_stats",
    "detect_outliers",
    "detect_outliers_by_threshold",
]
