"""Known layouts and canonical formatting.

This module is the single source of truth for the format list: the fixed,
ordered set of date/time layouts the parsers try. Order is part of the
contract. Day-first layouts come before year-first ones, so an ambiguous
string such as "01/02/2020 10:00" is read as 1 February 2020.
"""

from __future__ import annotations

from datetime import datetime

from dateserial.format.strftime import strftime

# Canonical layout for date-only strings
DEFAULT_DATE_FORMAT: str = "%Y-%m-%d"

# Layouts tried in order, first match wins
FORMATS: tuple[str, ...] = (
    "%d/%m/%Y %H:%M:%S",
    "%d-%m-%Y %H:%M:%S",
    "%d.%m.%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d-%m-%Y %H:%M",
    "%d.%m.%Y %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y.%m.%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y-%m-%d %H:%M",
    "%Y.%m.%d %H:%M",
)

# Canonical layout for full date/time strings
FULL_FORMAT: str = FORMATS[0]


def format_full(value: datetime) -> str:
    """Format a datetime with the canonical full layout.

    Examples:
        >>> format_full(datetime(2020, 2, 1, 10, 5, 9))
        '01/02/2020 10:05:09'
    """
    return strftime(value, FULL_FORMAT)


def format_date_only(value: datetime) -> str:
    """Format the calendar date of a datetime as year-month-day.

    Examples:
        >>> format_date_only(datetime(2020, 2, 1, 10, 5, 9))
        '2020-02-01'
    """
    return strftime(value, DEFAULT_DATE_FORMAT)


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "FORMATS",
    "FULL_FORMAT",
    "format_date_only",
    "format_full",
]
