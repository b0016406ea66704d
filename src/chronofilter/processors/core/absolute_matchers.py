"""Matchers for ISO dates, quarters and years.

Each matcher takes the raw query text and the reference date and returns a
``DateRange`` or ``None``.
"""

import re
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, Dict, List, Optional

from .calendar_utils import MONTH_ALTERNATION, month_range, quarter_range, year_range
from .models import DateRange, RangeKind

# A time part may follow the day directly (2025-10-15T10:00)
FULL_ISO_PATTERN = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})(?:\b|(?=T\d))")
# A YYYY-MM prefix of a longer YYYY-MM-DD token is not a month reference
PARTIAL_ISO_PATTERN = re.compile(r"\b(\d{4})-(\d{2})\b(?!-\d)")

QUARTER_WITH_YEAR_PATTERN = re.compile(r"\bq([1-4])\s+(\d{4})\b", re.IGNORECASE)
BARE_QUARTER_PATTERN = re.compile(r"\bq([1-4])\b", re.IGNORECASE)

BARE_YEAR_PATTERN = re.compile(r"\b(20\d{2})\b")
MONTH_BEFORE_YEAR_PATTERN = re.compile(rf"\b(?:{MONTH_ALTERNATION})\s+$", re.IGNORECASE)


def _build_relative_year_patterns() -> List[Dict[str, Any]]:
    """Build patterns for years named relative to the reference date.

    Returns:
        List of relative year pattern configurations, in priority order
    """
    return [
        {"pattern": re.compile(r"this year", re.IGNORECASE), "offset": 0, "confidence": 0.98},
        {"pattern": re.compile(r"last year", re.IGNORECASE), "offset": -1, "confidence": 0.98},
        {"pattern": re.compile(r"next year", re.IGNORECASE), "offset": 1, "confidence": 0.98},
    ]


RELATIVE_YEAR_PATTERNS = _build_relative_year_patterns()


def is_supported_year(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def match_iso_date(text: str, reference_date: date) -> Optional[DateRange]:
    """Recognize ``YYYY-MM-DD`` (one day) or ``YYYY-MM`` (whole month).

    Tokens with the right shape but impossible components (``2025-13-40``,
    ``2025-02-30``) are skipped rather than coerced.
    """
    for match in FULL_ISO_PATTERN.finditer(text):
        year, month, day = (int(part) for part in match.groups())
        try:
            parsed = date(year, month, day)
        except ValueError:
            continue

        iso = parsed.isoformat()
        return DateRange(iso, iso, RangeKind.SPECIFIC, match.group(0), 0.99)

    for match in PARTIAL_ISO_PATTERN.finditer(text):
        year, month = int(match.group(1)), int(match.group(2))
        if not (is_supported_year(year) and 1 <= month <= 12):
            continue

        start, end = month_range(year, month - 1)
        return DateRange(start, end, RangeKind.MONTH, match.group(0), 0.95)

    return None


def match_quarter(text: str, reference_date: date) -> Optional[DateRange]:
    """Recognize ``Q4 2025`` or a bare ``Q1`` in the reference year."""
    match = QUARTER_WITH_YEAR_PATTERN.search(text)
    if match and is_supported_year(int(match.group(2))):
        start, end = quarter_range(int(match.group(2)), int(match.group(1)))
        return DateRange(start, end, RangeKind.QUARTER, match.group(0), 0.98)

    match = BARE_QUARTER_PATTERN.search(text)
    if match:
        start, end = quarter_range(reference_date.year, int(match.group(1)))
        return DateRange(start, end, RangeKind.QUARTER, match.group(0), 0.95)

    return None


def match_year(text: str, reference_date: date) -> Optional[DateRange]:
    """Recognize this/last/next year, then a bare ``20xx`` year."""
    for pattern_config in RELATIVE_YEAR_PATTERNS:
        match = pattern_config["pattern"].search(text)
        if match:
            year = reference_date.year + pattern_config["offset"]
            if not is_supported_year(year):
                return None

            start, end = year_range(year)
            return DateRange(start, end, RangeKind.YEAR, match.group(0),
                             pattern_config["confidence"])

    # Restricted to 20xx so unrelated numbers are not taken for years.
    # "October 2025" belongs to the month matcher.
    for match in BARE_YEAR_PATTERN.finditer(text):
        if MONTH_BEFORE_YEAR_PATTERN.search(text, 0, match.start()):
            continue

        start, end = year_range(int(match.group(1)))
        return DateRange(start, end, RangeKind.YEAR, match.group(0), 0.95)

    return None
