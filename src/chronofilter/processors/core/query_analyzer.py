"""Auxiliary query extractors.

Patient name, count-query and direction detection. These run on the raw query
independently of date parsing.
"""

import calendar
import re
from typing import Optional

from .calendar_utils import MONTH_INDEX
from .models import QueryDirection

# Keywords are case-insensitive, names must be capitalized
PATIENT_NAME_PATTERNS = [
    re.compile(r"\b(?i:for|patient)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)"),
    re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)'s\s+(?i:appointments?|schedule)\b"),
]

COUNT_KEYWORDS = ("how many", "count", "number of", "total")

PAST_KEYWORDS = ("past", "previous", "last", "had", "completed")
FUTURE_KEYWORDS = ("upcoming", "next", "future", "scheduled")

# Capitalized words that start a sentence fragment rather than a name
NON_NAME_WORDS = frozenset({
    "today", "tomorrow", "yesterday", "tonight", "next", "last", "this",
    "the", "all", "any", "every", "each", "upcoming", "previous", "past",
    "week", "month", "year", "quarter", "my", "our", "me", "us",
    "show", "list", "find", "get", "view", "check", "display", "see",
    "what", "when", "where", "which", "who", "how", "are", "is", "was",
    "were", "did", "does", "do", "has", "have", "had", "please"
})

# Month and weekday words double as first names (April, May, Jan)
CALENDAR_WORDS = frozenset(
    set(MONTH_INDEX)
    | {name.lower() for name in calendar.day_name}
    | {name.lower() for name in calendar.day_abbr}
)


def _is_name_word(word: str) -> bool:
    lowered = word.lower()
    return lowered not in NON_NAME_WORDS and lowered not in CALENDAR_WORDS


def _clean_name(candidate: str) -> Optional[str]:
    """Turn a regex candidate into a name, or None.

    Leading filler words ("Show", "Next") are dropped. A calendar word is
    only accepted as a first name when a surname follows it; on its own
    ("October", "Monday") the candidate is rejected.
    """
    words = candidate.split()
    while words and words[0].lower() in NON_NAME_WORDS:
        words.pop(0)

    if not words:
        return None

    if words[0].lower() in CALENDAR_WORDS:
        if len(words) > 1 and _is_name_word(words[1]):
            return " ".join(words[:2])
        return None

    name = [words[0]]
    for word in words[1:]:
        if not _is_name_word(word):
            break
        name.append(word)
    return " ".join(name)


def extract_patient_name(text: str) -> Optional[str]:
    """Extract a patient name from phrases like "for John Doe",
    "patient Sarah" or "John's appointments".

    Args:
        text: Query text

    Returns:
        The name (one or two capitalized words) or None
    """
    if not text or not isinstance(text, str):
        return None

    for pattern in PATIENT_NAME_PATTERNS:
        for match in pattern.finditer(text):
            name = _clean_name(match.group(1))
            if name:
                return name

    return None


def is_count_query(text: str) -> bool:
    """True when the query asks for a count or total."""
    lowered = text.lower() if isinstance(text, str) else ""
    return any(keyword in lowered for keyword in COUNT_KEYWORDS)


def determine_query_direction(text: str) -> QueryDirection:
    """Classify the query as looking at the past, the future, or both.

    Past keywords take precedence when both sets occur.
    """
    lowered = text.lower() if isinstance(text, str) else ""

    if any(keyword in lowered for keyword in PAST_KEYWORDS):
        return QueryDirection.PAST

    if any(keyword in lowered for keyword in FUTURE_KEYWORDS):
        return QueryDirection.FUTURE

    return QueryDirection.ALL
