"""Data Processing Module

Temporal expression parsing and query analysis.
"""

from .core import (
    DateRange,
    QueryAnalysis,
    QueryDirection,
    RangeKind,
    TemporalParser,
    parse_temporal_expression,
    analyze_query,
    extract_patient_name,
    is_count_query,
    determine_query_direction
)

__all__ = [
    "DateRange",
    "QueryAnalysis",
    "QueryDirection",
    "RangeKind",
    "TemporalParser",
    "parse_temporal_expression",
    "analyze_query",
    "extract_patient_name",
    "is_count_query",
    "determine_query_direction"
]
