"""dateserial exception hierarchy.

All dateserial-specific exceptions inherit from DateSerialError.
"""

from __future__ import annotations


class DateSerialError(Exception):
    """Base exception for all dateserial errors."""

    pass


class ParseError(DateSerialError, ValueError):
    """Failed to parse a string representation.

    Raised when a string cannot be read as a date/time value by a
    particular pattern or parser.

    Examples:
        - "2024-13-01" against "%Y-%m-%d" (month out of range)
        - "01/02/2020" against "%Y-%m-%d" (layout mismatch)
        - Empty or None input
    """

    pass


class FormatError(ParseError):
    """No known layout matched.

    Raised by parse_date when the input matches none of the layouts in
    the format list.
    """

    pass


class PatternError(DateSerialError, ValueError):
    """Invalid pattern string.

    Raised when a format pattern contains an unsupported directive.
    This is a programming error and is never absorbed by a fallback chain.
    """

    pass


__all__ = [
    "DateSerialError",
    "ParseError",
    "FormatError",
    "PatternError",
]
