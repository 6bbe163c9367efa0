#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Weekday derivation for meeting dates.

Accepted inputs:
    "8 January 2025" / "08 january 2025"   (day, full month name, year)
    "2025-01-08", "2025/01/08"              (ISO-like)
    "8 Jan 2025", "08-Jan-2025"             (abbreviated month)
    "January 8, 2025", "Jan 8, 2025", "January 8 2025"

Purely numeric day/month orders such as "08/01/2025" are ambiguous and are
treated as unparseable. Anything that cannot be parsed yields an empty
weekday, never an exception.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)


MONTH_NAMES = [
    'january', 'february', 'march', 'april', 'may', 'june',
    'july', 'august', 'september', 'october', 'november', 'december'
]

# Sunday-first, matching the 0=Sunday..6=Saturday index
DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

DAY_MONTH_YEAR_RE = re.compile(r'^(\d{1,2})\s+(\w+)\s+(\d{4})$', re.IGNORECASE | re.ASCII)

FALLBACK_FORMATS = (
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%d %b %Y',
    '%d-%b-%Y',
    '%d-%B-%Y',
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %d %Y',
    '%b %d %Y',
)


def _parse_day_month_year(text: str) -> Optional[date]:
    match = DAY_MONTH_YEAR_RE.match(text)
    if not match:
        return None
    day, month, year = match.groups()
    month = month.lower()
    if month not in MONTH_NAMES:
        return None
    iso = f"{year}-{MONTH_NAMES.index(month) + 1:02d}-{int(day):02d}"
    try:
        return date.fromisoformat(iso)
    except ValueError:
        return None


def _parse_fallback(text: str) -> Optional[date]:
    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_meeting_date(date_string: str) -> Optional[date]:
    """Parse a meeting date in any accepted format, or return None."""
    if not date_string:
        return None
    text = str(date_string).strip()
    # strptime matches non-ASCII digits too
    if not text.isascii():
        return None
    return _parse_day_month_year(text) or _parse_fallback(text)


def weekday_name(date_string: str) -> str:
    """
    Return the English weekday for a date string, or '' if it can't be parsed.

    >>> weekday_name("15 March 2025")
    'Saturday'
    >>> weekday_name("not a date")
    ''
    """
    try:
        parsed = parse_meeting_date(date_string)
    except Exception as e:
        logger.debug(f"Date parsing failed for {date_string!r}: {e}")
        return ''
    if parsed is None:
        if date_string:
            logger.debug(f"Unrecognized date format: {date_string!r}")
        return ''
    return DAY_NAMES[parsed.isoweekday() % 7]


def format_date_with_day(date_string: str, include_day: bool) -> str:
    """Prefix the weekday ("Wednesday, 08 January 2025") when requested and derivable."""
    if not include_day:
        return date_string
    day = weekday_name(date_string)
    return f"{day}, {date_string}" if day else date_string
