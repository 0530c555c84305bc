"""dateserial: date/time parsing, formatting and epoch helpers.

dateserial reads date/time strings through fixed, ordered fallback chains
and converts between datetimes and Unix epoch seconds. Every function is a
pure function of its inputs.

Parsing:
    parse_date_only: Calendar date from a free-form string, or a default
    parse_full_datetime: Date and time from the format list, or a default
    parse_timestamp_or_general: Epoch seconds or a date/time string
    parse_date: Format list match, raising FormatError
    try_parse_*: Strict variants returning a ParseResult

Formatting:
    format_full: "%d/%m/%Y %H:%M:%S"
    format_date_only: "%Y-%m-%d"
    strftime, strptime: Strict, locale-independent pattern engine

Conversion:
    to_epoch_seconds, from_epoch_seconds, to_local, to_utc

Comparison:
    is_approximately, is_not_approximately

Exceptions:
    DateSerialError: Base exception
    ParseError: Failed to parse string
    FormatError: No known layout matched
    PatternError: Unsupported pattern directive

Example:
    >>> from datetime import datetime
    >>> from dateserial import parse_date_only, to_epoch_seconds
    >>> parse_date_only("01/02/2020 10:00", datetime.min)
    datetime.datetime(2020, 2, 1, 0, 0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Parsing
from dateserial.parse import (
    ParseResult,
    parse_date,
    parse_date_only,
    parse_full_datetime,
    parse_timestamp_or_general,
    try_parse_date,
    try_parse_date_only,
    try_parse_full_datetime,
    try_parse_timestamp_or_general,
)

# Formatting
from dateserial.format import (
    DEFAULT_DATE_FORMAT,
    FORMATS,
    FULL_FORMAT,
    format_date_only,
    format_full,
    strftime,
    strptime,
)

# Conversion
from dateserial.convert import from_epoch_seconds, to_epoch_seconds, to_local, to_utc

# Comparison
from dateserial.arithmetic import is_approximately, is_not_approximately

# Configuration
from dateserial.config import DayBoundary, ParseOptions, configure_logging

# Exceptions
from dateserial.errors import DateSerialError, FormatError, ParseError, PatternError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Parsing
    "ParseResult",
    "parse_date",
    "parse_date_only",
    "parse_full_datetime",
    "parse_timestamp_or_general",
    "try_parse_date",
    "try_parse_date_only",
    "try_parse_full_datetime",
    "try_parse_timestamp_or_general",
    # Formatting
    "DEFAULT_DATE_FORMAT",
    "FORMATS",
    "FULL_FORMAT",
    "format_date_only",
    "format_full",
    "strftime",
    "strptime",
    # Conversion
    "from_epoch_seconds",
    "to_epoch_seconds",
    "to_local",
    "to_utc",
    # Comparison
    "is_approximately",
    "is_not_approximately",
    # Configuration
    "DayBoundary",
    "ParseOptions",
    "configure_logging",
    # Exceptions
    "DateSerialError",
    "FormatError",
    "ParseError",
    "PatternError",
]
