"""Strict strftime-style formatting and parsing.

This module implements a small, locale-independent subset of the strftime
directives. Unlike :meth:`datetime.datetime.strptime`, parsing is exact:
every numeric field must have its full width, so "1/2/2020" does not match
"%d/%m/%Y".

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Microseconds (1-6 digits when parsing, 6 when formatting)
    %z - UTC offset (Z, +0000, -05:30)
    %% - Literal %

Not Supported (locale-dependent):
    %a, %A, %b, %B, %c, %x, %X, %p

Functions:
    strftime: Format a datetime using a strftime-style pattern.
    strptime: Parse a string using a strftime-style pattern.

Examples:
    >>> from datetime import datetime
    >>> strftime(datetime(2024, 1, 15, 14, 30, 45), "%d/%m/%Y %H:%M:%S")
    '15/01/2024 14:30:45'

    >>> strptime("15.01.2024 14:30", "%d.%m.%Y %H:%M")
    datetime.datetime(2024, 1, 15, 14, 30)
"""

from __future__ import annotations

import functools
import re
from datetime import datetime, timedelta, timezone

from dateserial._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from dateserial.errors import ParseError, PatternError

# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>\d{4})",
    "%m": r"(?P<month>\d{2})",
    "%d": r"(?P<day>\d{2})",
    "%H": r"(?P<hour>\d{2})",
    "%M": r"(?P<minute>\d{2})",
    "%S": r"(?P<second>\d{2})",
    "%f": r"(?P<microsecond>\d{1,6})",
    "%z": r"(?P<tz_offset>[Zz]|[+-]\d{2}:?\d{2})",
    "%%": r"%",
}

_SUPPORTED = ", ".join(_PARSE_PATTERNS)


def strftime(value: datetime, fmt: str) -> str:
    """Format a datetime using a strftime-style pattern.

    Args:
        value: The datetime to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        PatternError: If format contains unsupported directives.

    Examples:
        >>> strftime(datetime(2024, 1, 15), "%Y-%m-%d")
        '2024-01-15'

        >>> strftime(datetime(2024, 1, 15, 14, 30, 45, 123456), "%H:%M:%S.%f")
        '14:30:45.123456'
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            result.append(_format_directive(value, fmt[i : i + 2]))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: datetime, directive: str) -> str:
    """Format a single directive."""
    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{value.year:04d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%H":
        return f"{value.hour:02d}"
    elif directive == "%M":
        return f"{value.minute:02d}"
    elif directive == "%S":
        return f"{value.second:02d}"
    elif directive == "%f":
        return f"{value.microsecond:06d}"
    elif directive == "%z":
        offset = value.utcoffset()
        if offset is None:
            return ""  # naive values have no offset, same as datetime.strftime
        total = int(offset.total_seconds())
        sign = "+" if total >= 0 else "-"
        total = abs(total)
        hours, rest = divmod(total, SECONDS_PER_HOUR)
        return f"{sign}{hours:02d}{rest // SECONDS_PER_MINUTE:02d}"
    else:
        raise PatternError(
            f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}"
        )


def strptime(s: str, fmt: str) -> datetime:
    """Parse a string using a strftime-style pattern.

    The whole string must match. Missing time components default to 0.
    A ``%z`` directive produces an aware result; otherwise the result is
    naive.

    Args:
        s: The string to parse.
        fmt: Format string with %-directives.

    Returns:
        The parsed datetime.

    Raises:
        ParseError: If the string doesn't match the format, or the matched
            values do not form a valid date/time.
        PatternError: If format contains unsupported directives.

    Examples:
        >>> strptime("2024-01-15", "%Y-%m-%d")
        datetime.datetime(2024, 1, 15, 0, 0)

        >>> strptime("31/02/2024 10:00", "%d/%m/%Y %H:%M")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: invalid date/time in '31/02/2024 10:00': day is out of range for month
    """
    pattern = _compile(fmt)

    if not isinstance(s, str):
        raise ParseError(f"expected a string, got {type(s).__name__}")

    match = pattern.fullmatch(s)
    if not match:
        raise ParseError(f"string {s!r} does not match format {fmt!r}")

    groups = match.groupdict()

    if groups.get("year") is None or groups.get("month") is None or groups.get("day") is None:
        raise ParseError(
            f"format {fmt!r} must contain year, month, and day directives"
        )

    tzinfo = None
    if groups.get("tz_offset"):
        tzinfo = _parse_offset(groups["tz_offset"])

    microsecond = 0
    if groups.get("microsecond"):
        microsecond = int(groups["microsecond"].ljust(6, "0"))

    try:
        return datetime(
            int(groups["year"]),
            int(groups["month"]),
            int(groups["day"]),
            int(groups.get("hour") or 0),
            int(groups.get("minute") or 0),
            int(groups.get("second") or 0),
            microsecond,
            tzinfo=tzinfo,
        )
    except ValueError as exc:
        raise ParseError(f"invalid date/time in {s!r}: {exc}") from exc


def _parse_offset(text: str) -> timezone:
    """Convert "Z", "+HHMM" or "+HH:MM" into a fixed-offset timezone."""
    if text in ("Z", "z"):
        return timezone.utc
    digits = text[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        raise ParseError(f"UTC offset out of range: {text!r}")
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if text[0] == "-" else offset)


@functools.lru_cache(maxsize=64)
def _compile(fmt: str) -> re.Pattern[str]:
    """Convert a strftime format string to a compiled regex.

    Raises:
        PatternError: If format contains unsupported or repeated directives.
    """
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise PatternError(
                    f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED}"
                )
            if directive != "%%":
                if directive in seen:
                    raise PatternError(f"directive {directive} appears more than once in {fmt!r}")
                seen.add(directive)
            result.append(_PARSE_PATTERNS[directive])
            i += 2
        else:
            result.append(re.escape(fmt[i]))
            i += 1

    return re.compile("".join(result), re.ASCII)


__all__ = ["strftime", "strptime"]
