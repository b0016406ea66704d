"""Calendar arithmetic for temporal ranges.

Month indices are 0-based (0 = January) throughout this module, matching the
month vocabulary used by the matchers. Weeks run Sunday through Saturday.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Tuple, Union

from dateutil.relativedelta import relativedelta

DAYS_PER_WEEK = 7

# (name, 0-based month index) in calendar order, full names and abbreviations
MONTH_VOCABULARY: Tuple[Tuple[str, int], ...] = (
    ("january", 0), ("jan", 0),
    ("february", 1), ("feb", 1),
    ("march", 2), ("mar", 2),
    ("april", 3), ("apr", 3),
    ("may", 4),
    ("june", 5), ("jun", 5),
    ("july", 6), ("jul", 6),
    ("august", 7), ("aug", 7),
    ("september", 8), ("sep", 8), ("sept", 8),
    ("october", 9), ("oct", 9),
    ("november", 10), ("nov", 10),
    ("december", 11), ("dec", 11),
)

MONTH_INDEX: Dict[str, int] = dict(MONTH_VOCABULARY)

# Regex alternation of every month word, longest first
MONTH_ALTERNATION = "|".join(
    sorted((name for name, _ in MONTH_VOCABULARY), key=len, reverse=True)
)

# First and last 0-based month of each quarter
QUARTER_MONTHS = {
    1: (0, 2),    # Jan-Mar
    2: (3, 5),    # Apr-Jun
    3: (6, 8),    # Jul-Sep
    4: (9, 11),   # Oct-Dec
}


def to_iso_date(value: Union[date, datetime]) -> str:
    """Format a date (or the date part of a datetime) as ``YYYY-MM-DD``."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def month_range(year: int, month_index: int) -> Tuple[str, str]:
    """Get the first and last day of a month.

    Args:
        year: Calendar year
        month_index: 0-based month (0 = January, 11 = December)

    Returns:
        Tuple of ISO start and end dates

    Raises:
        ValueError: If the month index is outside 0-11
    """
    if not 0 <= month_index <= 11:
        raise ValueError(f"Invalid month index: {month_index}")

    first_day = date(year, month_index + 1, 1)
    # Day zero of the following month
    last_day = first_day + relativedelta(months=1, days=-1)

    return to_iso_date(first_day), to_iso_date(last_day)


def _quarter_number(quarter: Union[int, str]) -> int:
    if isinstance(quarter, str):
        label = quarter.strip().lower()
        if label.startswith("q"):
            label = label[1:]
        if not label.isdigit():
            raise ValueError(f"Invalid quarter: {quarter}")
        quarter = int(label)

    if quarter not in QUARTER_MONTHS:
        raise ValueError(f"Invalid quarter: {quarter}")
    return quarter


def quarter_range(year: int, quarter: Union[int, str]) -> Tuple[str, str]:
    """Get the first and last day of a quarter.

    Args:
        year: Calendar year
        quarter: Quarter number (1-4) or label ("q1".."q4", any case)

    Returns:
        Tuple of ISO start and end dates
    """
    first_month, last_month = QUARTER_MONTHS[_quarter_number(quarter)]
    return month_range(year, first_month)[0], month_range(year, last_month)[1]


def year_range(year: int) -> Tuple[str, str]:
    """Get the first and last day of a year."""
    return f"{year:04d}-01-01", f"{year:04d}-12-31"


def shift_month(year: int, month_index: int, delta: int) -> Tuple[int, int]:
    """Move a (year, 0-based month) pair by ``delta`` months."""
    shifted = date(year, month_index + 1, 1) + relativedelta(months=delta)
    return shifted.year, shifted.month - 1


def offset_days(reference: date, days: int) -> date:
    return reference + timedelta(days=days)


def week_start(reference: date) -> date:
    """Sunday on or before the reference date."""
    # weekday() is 0 for Monday; shift so Sunday is 0
    days_since_sunday = (reference.weekday() + 1) % DAYS_PER_WEEK
    return reference - timedelta(days=days_since_sunday)


def week_range(reference: date, weeks_offset: int = 0) -> Tuple[str, str]:
    """Sunday-to-Saturday week containing ``reference``, shifted by whole weeks.

    Args:
        reference: Any day in the anchor week
        weeks_offset: -1 for the previous week, 1 for the next one

    Returns:
        Tuple of ISO start (Sunday) and end (Saturday) dates
    """
    start = week_start(reference) + timedelta(weeks=weeks_offset)
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    return to_iso_date(start), to_iso_date(end)
