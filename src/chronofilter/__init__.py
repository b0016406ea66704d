"""chronofilter - Temporal Expression Parser for Query Filters

Turns free-text date expressions such as "last month", "Q4 2025" or
"between January and March" into normalized calendar date ranges.
"""

__version__ = "0.1.0"
__description__ = "Temporal expression parser for search and filter queries"

from .processors import (
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
