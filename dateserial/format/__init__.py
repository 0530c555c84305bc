"""Date/time formatting and strict pattern parsing.

Functions:
    strftime: Format a datetime using a strftime-style pattern.
    strptime: Parse a string using a strftime-style pattern, exactly.
    format_full: Format with the canonical "%d/%m/%Y %H:%M:%S" layout.
    format_date_only: Format with the canonical "%Y-%m-%d" layout.

Constants:
    FORMATS: The ordered format list tried by the parsers.
    DEFAULT_DATE_FORMAT: Canonical date-only layout.
    FULL_FORMAT: Canonical full layout.

Examples:
    >>> from datetime import datetime
    >>> from dateserial.format import format_full, strptime

    >>> format_full(datetime(2024, 1, 15, 14, 30, 45))
    '15/01/2024 14:30:45'

    >>> strptime("2024.01.15 14:30", "%Y.%m.%d %H:%M").day
    15
"""

from __future__ import annotations

from dateserial.format.layouts import (
    DEFAULT_DATE_FORMAT,
    FORMATS,
    FULL_FORMAT,
    format_date_only,
    format_full,
)
from dateserial.format.strftime import strftime, strptime

__all__: list[str] = [
    # Layouts
    "DEFAULT_DATE_FORMAT",
    "FORMATS",
    "FULL_FORMAT",
    "format_date_only",
    "format_full",
    # strftime
    "strftime",
    "strptime",
]
