"""Explicit range matcher: "between <A> and <B>" / "from <A> to <B>".

Both clauses are parsed by the full dispatcher, passed in as ``parse`` so this
module does not depend on the parser itself. The range runs from the start of
clause A to the end of clause B exactly as written; no reordering is applied.
"""

import re
from datetime import date
from typing import Callable, Optional

from .models import DateRange, RangeKind

ParseFunction = Callable[[str, date], Optional[DateRange]]

# Clause B stops at the first whitespace, comma, period or semicolon
EXPLICIT_RANGE_PATTERNS = [
    re.compile(r"\bbetween\s+(.+?)\s+and\s+(.+?)(?=[\s,.;]|$)", re.IGNORECASE),
    re.compile(r"\bfrom\s+(.+?)\s+to\s+(.+?)(?=[\s,.;]|$)", re.IGNORECASE),
]


def match_explicit_range(
    text: str,
    reference_date: date,
    parse: ParseFunction
) -> Optional[DateRange]:
    """Recognize an explicit two-clause range.

    Args:
        text: Query text
        reference_date: Reference date forwarded to the clause parser
        parse: Dispatcher used to resolve each clause

    Returns:
        Range from clause A's start to clause B's end, or None when either
        clause does not parse
    """
    for pattern in EXPLICIT_RANGE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        start_range = parse(match.group(1).strip(), reference_date)
        end_range = parse(match.group(2).strip(), reference_date)

        if start_range and end_range:
            return DateRange(
                start_range.start_date,
                end_range.end_date,
                RangeKind.RANGE,
                match.group(0).strip(),
                0.95
            )

    return None
