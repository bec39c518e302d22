"""
Lenient parsing of the date/time text found in encoding.com responses.

The service writes timestamps as ``YYYY-MM-DD HH:MM:SS`` but uses a
zero-filled ``0000-00-00 00:00:00`` placeholder for events that have not
happened yet, and occasionally leaves the element empty. Both of those
must come back as None rather than as some fabricated timestamp.

Example:
    >>> parse_time('2010-06-09 12:34:56')
    datetime.datetime(2010, 6, 9, 12, 34, 56, tzinfo=...)
    >>> parse_time('0000-00-00 00:00:00') is None
    True
"""

import re
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import NamedTuple, Sequence

_MONTHS = {
    'jan': 1, 'feb': 2, 'mar': 3, 'apr': 4, 'may': 5, 'jun': 6,
    'jul': 7, 'aug': 8, 'sep': 9, 'oct': 10, 'nov': 11, 'dec': 12,
}
_MONTH_NAME = r'(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?'

# Year first: 2010-06-09, 2010/6/9, 2010.06.09
_YMD_PATTERN = re.compile(r'(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})')
# US ordering: 06/09/2010
_MDY_PATTERN = re.compile(r'\b(\d{1,2})/(\d{1,2})/(\d{4})\b')
# 9 Jun 2010, Wed, 09 Jun 2010
_DAY_MONTH_PATTERN = re.compile(r'\b(\d{1,2})\s+' + _MONTH_NAME + r',?\s+(\d{4})\b', re.IGNORECASE)
# Jun 9, 2010 / June 9th 2010
_MONTH_DAY_PATTERN = re.compile(
    r'\b' + _MONTH_NAME + r'\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})\b', re.IGNORECASE
)
_TIME_PATTERN = re.compile(r'(?<!\d)(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\.\d+)?\s*([ap]\.?m\.?)?', re.IGNORECASE)


class TimeComponents(NamedTuple):
    """Date/time fields recovered from free text; None where absent."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None

    def is_blank(self) -> bool:
        """True when every component is missing or zero."""
        return all(part is None or part == 0 for part in self)


def _match_date(text: str) -> tuple[tuple[int, int, int] | None, str]:
    """Find a date in text, returning (year, month, day) and the remaining text."""
    match = _YMD_PATTERN.search(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
    else:
        match = _MDY_PATTERN.search(text)
        if match:
            month, day, year = (int(g) for g in match.groups())
        else:
            match = _DAY_MONTH_PATTERN.search(text)
            if match:
                day, month_name, year = match.groups()
                day, month, year = int(day), _MONTHS[month_name[:3].lower()], int(year)
            else:
                match = _MONTH_DAY_PATTERN.search(text)
                if not match:
                    return None, text
                month_name, day, year = match.groups()
                day, month, year = int(day), _MONTHS[month_name[:3].lower()], int(year)

    rest = text[:match.start()] + ' ' + text[match.end():]
    return (year, month, day), rest


def parse_date_components(text: str | None) -> TimeComponents:
    """Extract whatever date and time components can be found in text."""
    if not text:
        return TimeComponents()

    date, rest = _match_date(text.strip())
    year = month = day = None
    if date:
        year, month, day = date

    hour = minute = second = None
    match = _TIME_PATTERN.search(rest)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        second = int(match.group(3)) if match.group(3) else None
        meridian = (match.group(4) or '').replace('.', '').lower()
        if meridian == 'pm' and hour < 12:
            hour += 12
        elif meridian == 'am' and hour == 12:
            hour = 0

    return TimeComponents(year, month, day, hour, minute, second)


def parse_time(text: str | None) -> datetime | None:
    """
    Parse date text into a local, timezone-aware datetime.

    Returns None when nothing usable is found, when every component is
    zero (the service's "not yet" placeholder), or when the components do
    not form a complete, valid calendar date.
    """
    parts = parse_date_components(text)
    if parts.is_blank():
        return None
    if parts.year is None or parts.month is None or parts.day is None:
        return None

    try:
        naive = datetime(
            parts.year, parts.month, parts.day,
            parts.hour or 0, parts.minute or 0, parts.second or 0,
        )
        return naive.astimezone()
    except (ValueError, OverflowError, OSError):
        return None


def parse_time_node(nodes: ET.Element | Sequence[ET.Element] | None) -> datetime | None:
    """Parse the text of an element, or of the first element of a sequence."""
    if nodes is None:
        return None
    if not isinstance(nodes, ET.Element):
        nodes = list(nodes)
        if not nodes:
            return None
        nodes = nodes[0]
    return parse_time(nodes.text)
