"""Month name and week-of-month matchers.

Month words come from the calendar-ordered vocabulary in ``calendar_utils``.
Both matchers scan the text left to right, so when several month names appear
the leftmost one wins regardless of vocabulary order.
"""

import re
from datetime import date, timedelta
from typing import Optional

from .absolute_matchers import is_supported_year
from .calendar_utils import DAYS_PER_WEEK, MONTH_ALTERNATION, MONTH_INDEX, month_range, to_iso_date
from .models import DateRange, RangeKind

MONTH_WITH_YEAR_PATTERN = re.compile(rf"\b({MONTH_ALTERNATION})\s+(\d{{4}})\b", re.IGNORECASE)
BARE_MONTH_PATTERN = re.compile(rf"\b({MONTH_ALTERNATION})\b", re.IGNORECASE)

WEEK_OF_MONTH_PATTERN = re.compile(
    r"\b(first|second|third|fourth|last)\s+week\s+of\s+(\w+)", re.IGNORECASE
)

# Offset in whole weeks from the first of the month
WEEK_ORDINALS = {"first": 0, "second": 1, "third": 2, "fourth": 3}


def month_index(name: str) -> Optional[int]:
    """0-based month index for a vocabulary word, or None."""
    return MONTH_INDEX.get(name.lower())


def infer_month_year(month: int, reference_date: date, text: str) -> int:
    """Pick the year for a month mentioned without one.

    Only a month later than the reference month, in text that contains
    "next", moves to the following year. Every other branch resolves to the
    reference year.
    """
    lowered = text.lower()
    current_year = reference_date.year
    current_month = reference_date.month - 1

    if month < current_month and "last" in lowered:
        return current_year
    if month < current_month and "next" not in lowered:
        return current_year
    if month > current_month and "next" in lowered:
        return current_year + 1
    return current_year


def match_month(text: str, reference_date: date) -> Optional[DateRange]:
    """Recognize ``October 2025`` or a bare ``October``/``Oct``."""
    match = MONTH_WITH_YEAR_PATTERN.search(text)
    if match and is_supported_year(int(match.group(2))):
        start, end = month_range(int(match.group(2)), month_index(match.group(1)))
        return DateRange(start, end, RangeKind.MONTH, match.group(0), 0.98)

    match = BARE_MONTH_PATTERN.search(text)
    if match:
        month = month_index(match.group(1))
        year = infer_month_year(month, reference_date, text)
        if not is_supported_year(year):
            return None

        start, end = month_range(year, month)
        return DateRange(start, end, RangeKind.MONTH, match.group(0), 0.90)

    return None


def match_week_of_month(text: str, reference_date: date) -> Optional[DateRange]:
    """Recognize ``first|second|third|fourth|last week of <month>``.

    The month always resolves in the reference year. Weeks are flat 7-day
    windows counted from the 1st, except "last" which counts back from the
    final day of the month.
    """
    match = WEEK_OF_MONTH_PATTERN.search(text)
    if not match:
        return None

    month = month_index(match.group(2))
    if month is None:
        return None

    ordinal = match.group(1).lower()
    first_iso, last_iso = month_range(reference_date.year, month)

    if ordinal == "last":
        week_end = date.fromisoformat(last_iso)
        week_start = week_end - timedelta(days=DAYS_PER_WEEK - 1)
    else:
        week_start = date.fromisoformat(first_iso) + timedelta(weeks=WEEK_ORDINALS[ordinal])
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)

    return DateRange(
        to_iso_date(week_start),
        to_iso_date(week_end),
        RangeKind.RANGE,
        match.group(0),
        0.90
    )
