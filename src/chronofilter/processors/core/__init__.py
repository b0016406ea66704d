"""Temporal Parsing Processors

Matchers, calendar arithmetic and the dispatcher that turn free-text date
expressions into normalized date ranges, plus the auxiliary query extractors.
"""

from .models import DateRange, QueryAnalysis, QueryDirection, RangeKind
from .calendar_utils import month_range, quarter_range, year_range, week_range, to_iso_date
from .absolute_matchers import match_iso_date, match_quarter, match_year
from .month_matchers import match_month, match_week_of_month, infer_month_year
from .relative_matcher import match_relative_date
from .range_matcher import match_explicit_range
from .query_analyzer import extract_patient_name, is_count_query, determine_query_direction
from .temporal_parser import TemporalParser, parse_temporal_expression, analyze_query

__all__ = [
    "DateRange",
    "QueryAnalysis",
    "QueryDirection",
    "RangeKind",
    "month_range",
    "quarter_range",
    "year_range",
    "week_range",
    "to_iso_date",
    "match_iso_date",
    "match_quarter",
    "match_year",
    "match_month",
    "match_week_of_month",
    "infer_month_year",
    "match_relative_date",
    "match_explicit_range",
    "extract_patient_name",
    "is_count_query",
    "determine_query_direction",
    "TemporalParser",
    "parse_temporal_expression",
    "analyze_query"
]
