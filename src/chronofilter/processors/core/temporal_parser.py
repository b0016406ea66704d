"""Temporal Expression Parser for Query Filters

Converts free-text date expressions typed into a search or filter box
("last month", "Q4 2025", "between January and March") into normalized
calendar date ranges. Matchers are tried in a fixed priority order and the
first one that recognizes the text wins:

    explicit range -> ISO date -> quarter -> year -> month
    -> week of month -> relative date

The order resolves overlaps between matchers: "2025-10" must reach the ISO
matcher before the year matcher sees "2025", and "Q4 2025" must reach the
quarter matcher for the same reason. Because the month matcher precedes the
week-of-month matcher, "first week of October" resolves to the whole month
through the dispatcher; ``match_week_of_month`` handles it when called
directly.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from ...core.config_manager import ConfigManager, ParserConfig
from ...core.error_handler import ErrorHandler, TemporalParseError
from ...core.logging_manager import LoggingManager
from .absolute_matchers import match_iso_date, match_quarter, match_year
from .models import DateRange, QueryAnalysis, RangeKind
from .month_matchers import match_month, match_week_of_month
from .query_analyzer import determine_query_direction, extract_patient_name, is_count_query
from .range_matcher import match_explicit_range
from .relative_matcher import match_relative_date

Matcher = Callable[[str, date], Optional[DateRange]]

ReferenceDate = Union[date, datetime, None]

# Kinds whose ranges must never be inverted
_ORDERED_KINDS = {RangeKind.SPECIFIC, RangeKind.RELATIVE, RangeKind.MONTH,
                  RangeKind.QUARTER, RangeKind.YEAR}


class TemporalParser:
    """Prioritized cascade of temporal expression matchers."""

    def __init__(self, config: Optional[ParserConfig] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """Initialize the parser.

        Args:
            config: Parser settings (defaults are used when omitted)
            error_handler: Handler that receives internal failures
        """
        self.config = config or ParserConfig()
        self.logger = LoggingManager.get_logger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self.matchers = self._build_matchers()

    @classmethod
    def from_config(cls, config_path: Optional[Path] = None,
                    environment: Optional[str] = None) -> 'TemporalParser':
        """Create a parser from the YAML configuration hierarchy."""
        app_config = ConfigManager(config_path, environment).load_config()
        return cls(app_config.parser)

    def _build_matchers(self) -> List[Tuple[str, Matcher]]:
        """Build the matcher list in priority order.

        Returns:
            List of (name, matcher) pairs
        """
        max_days = self.config.max_relative_days

        return [
            ("explicit_range", lambda text, ref: match_explicit_range(text, ref, self._dispatch)),
            ("iso_date", match_iso_date),
            ("quarter", match_quarter),
            ("year", match_year),
            ("month", match_month),
            ("week_of_month", match_week_of_month),
            ("relative_date", lambda text, ref: match_relative_date(text, ref, max_days)),
        ]

    def parse(self, text: str, reference_date: ReferenceDate = None) -> Optional[DateRange]:
        """Parse a temporal expression into a date range.

        Args:
            text: Free-text query
            reference_date: The "current" date relative expressions resolve
                against (defaults to today)

        Returns:
            The first matching date range, or None when nothing is recognized
            or an internal error occurred
        """
        if not text or not isinstance(text, str):
            return None

        reference = self._resolve_reference_date(reference_date)
        text = self._limit_length(text)

        try:
            return self._dispatch(text, reference)
        except Exception as e:
            if self.config.strict:
                raise
            self.error_handler.handle_error(e, context=f"Temporal parse failed for {text!r}")
            return None

    def analyze(self, text: str, reference_date: ReferenceDate = None) -> QueryAnalysis:
        """Run the parser and the auxiliary extractors over one query."""
        return QueryAnalysis(
            text=text,
            date_range=self.parse(text, reference_date),
            patient_name=extract_patient_name(text),
            is_count_query=is_count_query(text),
            direction=determine_query_direction(text),
        )

    def _dispatch(self, text: str, reference: date) -> Optional[DateRange]:
        for name, matcher in self.matchers:
            result = matcher(text, reference)
            if result is None:
                continue

            self._check_invariants(name, result)
            self.logger.debug(
                f"{name} matched {result.original_expression!r}: "
                f"{result.start_date}..{result.end_date} ({result.range_kind.value}, "
                f"confidence={result.confidence:.2f})"
            )
            return result

        return None

    def _check_invariants(self, matcher_name: str, result: DateRange):
        if result.range_kind in _ORDERED_KINDS and result.is_inverted:
            raise TemporalParseError(
                f"{matcher_name} produced an inverted {result.range_kind.value} range "
                f"{result.start_date}..{result.end_date}",
                matcher=matcher_name
            )

        if result.range_kind is RangeKind.SPECIFIC and result.start_date != result.end_date:
            raise TemporalParseError(
                f"{matcher_name} produced a specific range spanning {result.span_days} days",
                matcher=matcher_name
            )

        if result.range_kind is RangeKind.RANGE and result.is_inverted:
            self.logger.warning(
                f"Explicit range {result.original_expression!r} ends before it starts "
                f"({result.start_date}..{result.end_date})"
            )

    def _resolve_reference_date(self, reference_date: ReferenceDate) -> date:
        if reference_date is None:
            return date.today()
        if isinstance(reference_date, datetime):
            return reference_date.date()
        return reference_date

    def _limit_length(self, text: str) -> str:
        limit = self.config.max_query_length
        if len(text) > limit:
            self.logger.warning(f"Query truncated from {len(text)} to {limit} characters")
            return text[:limit]
        return text


_default_parser: Optional[TemporalParser] = None


def get_default_parser() -> TemporalParser:
    """Shared parser with default settings used by the module-level helpers."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TemporalParser()
    return _default_parser


def parse_temporal_expression(text: str, reference_date: ReferenceDate = None) -> Optional[DateRange]:
    """Parse a free-text temporal expression. Never raises.

    Args:
        text: Free-text query
        reference_date: The "current" date (defaults to today)

    Returns:
        Matching date range or None
    """
    return get_default_parser().parse(text, reference_date)


def analyze_query(text: str, reference_date: ReferenceDate = None) -> QueryAnalysis:
    """Date range, patient name, count flag and direction for one query."""
    return get_default_parser().analyze(text, reference_date)
