"""Relative date matcher.

Relative expressions are resolved against the caller's reference date. The
pattern table is ordered and the first pattern that resolves wins, so e.g.
"last month" is checked before "last week" and both before "last N days".
"""

import re
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple

from .calendar_utils import month_range, offset_days, shift_month, to_iso_date, week_range
from .models import DateRange, RangeKind

DEFAULT_MAX_RELATIVE_DAYS = 3650

Resolver = Callable[[date, Any, int], Optional[Tuple[str, str]]]


def _relative_month(offset: int) -> Resolver:
    def resolve(reference: date, match, max_days: int) -> Tuple[str, str]:
        year, month = shift_month(reference.year, reference.month - 1, offset)
        return month_range(year, month)
    return resolve


def _relative_week(offset: int) -> Resolver:
    def resolve(reference: date, match, max_days: int) -> Tuple[str, str]:
        return week_range(reference, offset)
    return resolve


def _relative_day(offset: int) -> Resolver:
    def resolve(reference: date, match, max_days: int) -> Tuple[str, str]:
        day = to_iso_date(offset_days(reference, offset))
        return day, day
    return resolve


def _day_window(direction: int) -> Resolver:
    """Window of N days ending (-1) or starting (1) on the reference date."""
    def resolve(reference: date, match, max_days: int) -> Optional[Tuple[str, str]]:
        days = int(match.group(1))
        if days > max_days:
            return None

        boundary = to_iso_date(offset_days(reference, direction * days))
        today = to_iso_date(reference)
        return (boundary, today) if direction < 0 else (today, boundary)
    return resolve


def _build_relative_patterns() -> List[Dict[str, Any]]:
    """Build the ordered relative date pattern table.

    Returns:
        List of relative date pattern configurations
    """
    return [
        {
            "pattern": re.compile(r"last month", re.IGNORECASE),
            "type": "previous_month",
            "resolve": _relative_month(-1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"this month|current month", re.IGNORECASE),
            "type": "current_month",
            "resolve": _relative_month(0),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"next month", re.IGNORECASE),
            "type": "next_month",
            "resolve": _relative_month(1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"last week", re.IGNORECASE),
            "type": "previous_week",
            "resolve": _relative_week(-1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.95
        },
        {
            "pattern": re.compile(r"this week|current week", re.IGNORECASE),
            "type": "current_week",
            "resolve": _relative_week(0),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.95
        },
        {
            "pattern": re.compile(r"next week", re.IGNORECASE),
            "type": "next_week",
            "resolve": _relative_week(1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.95
        },
        {
            "pattern": re.compile(r"yesterday", re.IGNORECASE),
            "type": "previous_day",
            "resolve": _relative_day(-1),
            "kind": RangeKind.SPECIFIC,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"tomorrow", re.IGNORECASE),
            "type": "next_day",
            "resolve": _relative_day(1),
            "kind": RangeKind.SPECIFIC,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"today", re.IGNORECASE),
            "type": "same_day",
            "resolve": _relative_day(0),
            "kind": RangeKind.SPECIFIC,
            "confidence": 0.98
        },
        {
            "pattern": re.compile(r"(?:last|past)\s+(\d+)\s+days?", re.IGNORECASE),
            "type": "trailing_days",
            "resolve": _day_window(-1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.95
        },
        {
            "pattern": re.compile(r"next\s+(\d+)\s+days?", re.IGNORECASE),
            "type": "upcoming_days",
            "resolve": _day_window(1),
            "kind": RangeKind.RELATIVE,
            "confidence": 0.95
        },
    ]


RELATIVE_PATTERNS = _build_relative_patterns()


def match_relative_date(
    text: str,
    reference_date: date,
    max_days: int = DEFAULT_MAX_RELATIVE_DAYS
) -> Optional[DateRange]:
    """Recognize relative expressions such as "last month" or "next 7 days".

    Args:
        text: Query text
        reference_date: Date that "today" refers to
        max_days: Largest N accepted by the "last/next N days" forms

    Returns:
        Matching date range or None
    """
    for pattern_config in RELATIVE_PATTERNS:
        match = pattern_config["pattern"].search(text)
        if not match:
            continue

        bounds = pattern_config["resolve"](reference_date, match, max_days)
        if bounds is None:
            continue

        start, end = bounds
        return DateRange(
            start,
            end,
            pattern_config["kind"],
            match.group(0),
            pattern_config["confidence"]
        )

    return None
