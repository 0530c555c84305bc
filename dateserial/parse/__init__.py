"""Date/time string parsing with fallback chains.

Every operation here is an ordered chain of strategies, tried in turn
until one parses the input. The order is fixed and documented per
function, so the outcome for an ambiguous string is deterministic.

Three error-visibility tiers:
    Silent default: parse_date_only, parse_full_datetime and
        parse_timestamp_or_general return the caller's default on failure.
    Explicit failure: the try_* functions return a ParseResult whose
        success flag must be checked.
    Raising: parse_date raises FormatError.

Public API:
    parse_date_only: Calendar date from a free-form string.
    try_parse_date_only: Strict variant of parse_date_only.
    parse_full_datetime: Date and time from the format list.
    try_parse_full_datetime: Strict variant of parse_full_datetime.
    try_parse_date: Format list match with an explicit success flag.
    parse_date: Format list match, raising FormatError.
    parse_timestamp_or_general: Epoch seconds, else a general or
        pattern-based parse.
    try_parse_timestamp_or_general: Strict variant.
    ParseResult: Result of a strict parse.

Examples:
    >>> from datetime import datetime
    >>> from dateserial.parse import parse_date_only, parse_timestamp_or_general

    >>> parse_date_only("01/02/2020 10:00", datetime.min)
    datetime.datetime(2020, 2, 1, 0, 0)

    >>> parse_timestamp_or_general("1700000000", datetime.min)
    datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

import logging
from datetime import datetime

from dateutil import parser as dateutil_parser

from dateserial.config.options import DEFAULT_OPTIONS, ParseOptions
from dateserial.errors import FormatError
from dateserial.parse._chain import ParseResult, Strategy, run_chain
from dateserial.parse._strategies import (
    date_only_chain,
    full_datetime_chain,
    timestamp_or_general_chain,
)

logger = logging.getLogger(__name__)


def _or_default(result: ParseResult, text: str, default: datetime) -> datetime:
    if not result.success:
        logger.debug("Using default for %r", text)
    return result.value_or(default)


def try_parse_date_only(
    text: str,
    fmt: str | None = None,
    *,
    options: ParseOptions | None = None,
) -> ParseResult:
    """Parse a calendar date, reporting success explicitly.

    See parse_date_only for the fallback order.
    """
    return run_chain(text, date_only_chain(fmt, options or DEFAULT_OPTIONS))


def parse_date_only(
    text: str,
    default: datetime,
    fmt: str | None = None,
    *,
    options: ParseOptions | None = None,
) -> datetime:
    """Parse a string where only the calendar date is meaningful.

    Fallback order:
        1. Exact "%Y-%m-%d".
        2. Exact fmt, when given.
        3. General (dateutil) parse.
        4. Each layout of the format list, in order.
        5. An integer, read as Unix epoch seconds.

    Every success is truncated to a naive midnight value. Aware values are
    read in the calendar chosen by options.day_boundary (local by default).

    Args:
        text: The string to parse.
        default: Returned unchanged when nothing matches.
        fmt: Optional extra pattern, tried right after the canonical one.
        options: Parse options. If None, uses DEFAULT_OPTIONS.

    Returns:
        The date as a naive datetime at midnight, or default.

    Raises:
        PatternError: If fmt contains an unsupported directive.

    Examples:
        >>> parse_date_only("2020-05-01", datetime.min)
        datetime.datetime(2020, 5, 1, 0, 0)

        >>> parse_date_only("01.05.2020 10:30", datetime.min)
        datetime.datetime(2020, 5, 1, 0, 0)

        >>> parse_date_only("not-a-date", datetime.min)
        datetime.datetime(1, 1, 1, 0, 0)
    """
    return _or_default(try_parse_date_only(text, fmt, options=options), text, default)


def try_parse_full_datetime(text: str) -> ParseResult:
    """Parse a date and time against the format list, reporting success.

    Examples:
        >>> result = try_parse_full_datetime("2020/05/01 10:30")
        >>> result.success, result.value
        (True, datetime.datetime(2020, 5, 1, 10, 30))

        >>> bool(try_parse_full_datetime("2020-05-01"))
        False
    """
    return run_chain(text, full_datetime_chain())


def parse_full_datetime(text: str, default: datetime) -> datetime:
    """Parse a date and time against the format list.

    The layouts are tried in order and the time of day is kept.

    Args:
        text: The string to parse.
        default: Returned unchanged when no layout matches.

    Returns:
        A naive datetime, or default.
    """
    return _or_default(try_parse_full_datetime(text), text, default)


def try_parse_date(text: str) -> ParseResult:
    """Match the format list exactly, reporting success explicitly."""
    return try_parse_full_datetime(text)


def parse_date(text: str) -> datetime:
    """Match the format list exactly.

    Raises:
        FormatError: If no layout matches.

    Examples:
        >>> parse_date("15-01-2024 14:30:45")
        datetime.datetime(2024, 1, 15, 14, 30, 45)
    """
    result = try_parse_full_datetime(text)
    if not result.success:
        raise FormatError(f"{text!r} does not match any known date/time layout")
    return result.value  # type: ignore[return-value]


def try_parse_timestamp_or_general(
    text: str,
    fmt: str | None = None,
    parserinfo: dateutil_parser.parserinfo | None = None,
    *,
    assume_local: bool = False,
    options: ParseOptions | None = None,
) -> ParseResult:
    """Parse epoch seconds or a date/time string, reporting success.

    See parse_timestamp_or_general for the fallback order.
    """
    chain = timestamp_or_general_chain(
        fmt or None,
        parserinfo,
        assume_local,
        options or DEFAULT_OPTIONS,
    )
    return run_chain(text, chain)


def parse_timestamp_or_general(
    text: str,
    default: datetime,
    fmt: str | None = None,
    parserinfo: dateutil_parser.parserinfo | None = None,
    *,
    assume_local: bool = False,
    options: ParseOptions | None = None,
) -> datetime:
    """Parse epoch seconds, else a general or pattern-based date/time.

    Fallback order:
        1. If the whole input is an integer, read it as Unix epoch seconds.
           The result is the naive local view when assume_local is True,
           otherwise an aware UTC datetime.
        2. If fmt is empty, a general (dateutil) parse using parserinfo as
           the locale information. Otherwise an exact match against fmt;
           with assume_local an aware match is converted to local time.

    Args:
        text: The string to parse.
        default: Returned unchanged when nothing matches.
        fmt: Optional exact pattern replacing the general parse.
        parserinfo: dateutil locale information for the general parse.
        assume_local: Choose the local view over UTC.
        options: Parse options. If None, uses DEFAULT_OPTIONS.

    Raises:
        PatternError: If fmt contains an unsupported directive.

    Examples:
        >>> parse_timestamp_or_general("0", datetime.min)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)

        >>> parse_timestamp_or_general("2020-05-01 10:30", datetime.min)
        datetime.datetime(2020, 5, 1, 10, 30)

        >>> parse_timestamp_or_general("01|05|2020", datetime.min, "%d|%m|%Y")
        datetime.datetime(2020, 5, 1, 0, 0)
    """
    result = try_parse_timestamp_or_general(
        text,
        fmt,
        parserinfo,
        assume_local=assume_local,
        options=options,
    )
    return _or_default(result, text, default)


__all__ = [
    "ParseResult",
    "Strategy",
    "parse_date",
    "parse_date_only",
    "parse_full_datetime",
    "parse_timestamp_or_general",
    "try_parse_date",
    "try_parse_date_only",
    "try_parse_full_datetime",
    "try_parse_timestamp_or_general",
]
