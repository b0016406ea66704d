"""Result types produced by the temporal parser and query analyzer."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional


class RangeKind(Enum):
    """Which matcher family produced a date range."""
    SPECIFIC = "specific"      # Single calendar day (2025-10-15, today)
    RELATIVE = "relative"      # Relative to the reference date (last month)
    RANGE = "range"            # Explicit span (between X and Y, first week of Oct)
    RECURRING = "recurring"    # Reserved, never emitted
    MONTH = "month"            # Whole calendar month
    QUARTER = "quarter"        # Whole calendar quarter
    YEAR = "year"              # Whole calendar year


class QueryDirection(Enum):
    """Temporal direction a query is asking about."""
    PAST = "past"
    FUTURE = "future"
    ALL = "all"


@dataclass(frozen=True)
class DateRange:
    """Normalized calendar date range recognized in a query.

    Dates are ISO ``YYYY-MM-DD`` strings. ``original_expression`` is the
    substring of the input the matcher recognized, and ``confidence`` is a
    ranking signal in ``[0, 1]`` rather than a probability.
    """
    start_date: str
    end_date: str
    range_kind: RangeKind
    original_expression: str
    confidence: float

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {self.confidence}")
        for label, value in (("start_date", self.start_date), ("end_date", self.end_date)):
            if not isinstance(value, str) or len(value) != 10:
                raise ValueError(f"{label} must be a YYYY-MM-DD string, got {value!r}")
            date.fromisoformat(value)

    @property
    def start(self) -> date:
        return date.fromisoformat(self.start_date)

    @property
    def end(self) -> date:
        return date.fromisoformat(self.end_date)

    @property
    def span_days(self) -> int:
        """Inclusive number of days covered by the range."""
        return (self.end - self.start).days + 1

    @property
    def is_inverted(self) -> bool:
        """True when the end precedes the start (explicit ranges only)."""
        return self.end < self.start

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_date": self.start_date,
            "end_date": self.end_date,
            "range_kind": self.range_kind.value,
            "original_expression": self.original_expression,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class QueryAnalysis:
    """Everything the query analyzer extracts from one piece of text."""
    text: str
    date_range: Optional[DateRange]
    patient_name: Optional[str]
    is_count_query: bool
    direction: QueryDirection

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "date_range": self.date_range.to_dict() if self.date_range else None,
            "patient_name": self.patient_name,
            "is_count_query": self.is_count_query,
            "direction": self.direction.value,
        }
