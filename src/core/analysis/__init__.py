"""Column statistics, grouping and the analysis engine that ties them together."""

from .column_analyzer import column_stats, numeric_columns, numeric_values
from .engine import AnalysisEngine
from .grouping import UNKNOWN_GROUP, group_by, group_key, partition_rows

__all__ = [
    "AnalysisEngine",
    "UNKNOWN_GROUP",
    "column_stats",
    "group_by",
    "group_key",
    "numeric_columns",
    "numeric_values",
    "partition_rows",
]
