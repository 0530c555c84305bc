"""Strategy building blocks and the fallback chains built from them.

Each building block returns a Strategy. The chain functions assemble them
in the documented priority order and are cached per argument set, since
strategies are immutable.

Internal module - use the functions in dateserial.parse instead.
"""

from __future__ import annotations

import functools
import re
from datetime import datetime, time, timezone

from dateutil import parser as dateutil_parser

from dateserial.config.options import DEFAULT_OPTIONS, DayBoundary, ParseOptions
from dateserial.convert.epoch import from_epoch_seconds, to_local
from dateserial.errors import ParseError
from dateserial.format.layouts import DEFAULT_DATE_FORMAT, FORMATS
from dateserial.format.strftime import strptime
from dateserial.parse._chain import Strategy

# Optionally signed integer with surrounding whitespace
_INTEGER_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)

# Strings that open with a 4-digit year are read year/month/day
_YEAR_FIRST_PATTERN = re.compile(r"\s*[0-9]{4}[^0-9]", re.ASCII)

# Any decimal digit outside 0-9
_NON_ASCII_DIGIT = re.compile(r"(?![0-9])\d")

# Fields missing from the input are taken from these, never from the clock.
# Both are leap years so that "29 Feb" parses against either.
_ANCHOR = datetime(2000, 1, 1)
_ALT_ANCHOR = datetime(2004, 1, 1)


def exact(fmt: str) -> Strategy:
    """Exact match against a single pattern."""
    return Strategy(name=f"exact {fmt}", attempt=functools.partial(strptime, fmt=fmt))


def layouts() -> tuple[Strategy, ...]:
    """Exact match against each entry of the format list, in order."""
    return tuple(exact(fmt) for fmt in FORMATS)


def general(
    options: ParseOptions = DEFAULT_OPTIONS,
    parserinfo: dateutil_parser.parserinfo | None = None,
) -> Strategy:
    """Lenient parse with dateutil.

    Args:
        options: Supplies the day-first preference when parserinfo is None.
        parserinfo: Locale information (month names, day-first, etc.) for
            the dateutil parser.

    Pure integers are rejected so that they reach the epoch step. The input
    must name a year; a missing month or day is read as 1, and a missing
    time of day as midnight. Digits outside 0-9 and UTC offsets of a day or
    more are rejected.
    """
    info = parserinfo if parserinfo is not None else dateutil_parser.parserinfo(dayfirst=options.dayfirst)
    lenient = dateutil_parser.parser(info)

    def attempt(text: str) -> datetime:
        if not isinstance(text, str) or not text.strip():
            raise ParseError("empty input")
        if _INTEGER_PATTERN.fullmatch(text):
            raise ParseError(f"{text!r} is an integer")
        if _NON_ASCII_DIGIT.search(text):
            raise ParseError(f"{text!r} contains non-ASCII digits")
        dayfirst = info.dayfirst and not _YEAR_FIRST_PATTERN.match(text)
        try:
            value = lenient.parse(text, default=_ANCHOR, dayfirst=dayfirst)
            missing_year = (
                value.year == _ANCHOR.year
                and lenient.parse(text, default=_ALT_ANCHOR, dayfirst=dayfirst).year == _ALT_ANCHOR.year
            )
            # dateutil builds out-of-range offsets without complaint
            value.utcoffset()
        except (ValueError, OverflowError) as exc:
            raise ParseError(f"cannot parse {text!r}: {exc}") from exc
        if missing_year:
            raise ParseError(f"{text!r} has no year")
        return value

    return Strategy(name="general", attempt=attempt)


def epoch(local: bool) -> Strategy:
    """Read an integer as Unix epoch seconds.

    Args:
        local: Return the naive local view instead of the aware UTC value.
    """

    def attempt(text: str) -> datetime:
        if not isinstance(text, str) or not _INTEGER_PATTERN.fullmatch(text):
            raise ParseError(f"{text!r} is not an integer")
        try:
            value = from_epoch_seconds(int(text))
            return to_local(value) if local else value
        except (OverflowError, OSError, ValueError) as exc:
            raise ParseError(f"timestamp out of range: {text!r}") from exc

    return Strategy(name="epoch local" if local else "epoch utc", attempt=attempt)


def truncate(value: datetime, boundary: DayBoundary = DayBoundary.LOCAL) -> datetime:
    """Drop the time of day, keeping a naive midnight value.

    Naive values keep their own calendar date. Aware values are first
    converted to the local zone or to UTC, depending on boundary.

    Raises:
        ParseError: If the converted value falls outside the datetime range.
    """
    if value.tzinfo is not None:
        try:
            if boundary is DayBoundary.UTC:
                value = value.astimezone(timezone.utc)
            else:
                value = value.astimezone()
        except (OverflowError, OSError, ValueError) as exc:
            raise ParseError(f"cannot convert {value!r} for truncation") from exc
    return datetime.combine(value.date(), time())


def truncated(strategy: Strategy, options: ParseOptions = DEFAULT_OPTIONS) -> Strategy:
    """Wrap a strategy so that its result is truncated to the date."""

    def attempt(text: str) -> datetime:
        return truncate(strategy.attempt(text), options.day_boundary)

    return Strategy(name=f"{strategy.name} (date)", attempt=attempt)


def localized(strategy: Strategy) -> Strategy:
    """Wrap a strategy so that aware results become naive local values."""

    def attempt(text: str) -> datetime:
        value = strategy.attempt(text)
        try:
            return to_local(value)
        except (OverflowError, OSError, ValueError) as exc:
            raise ParseError(f"cannot convert {value!r} to local time") from exc

    return Strategy(name=f"{strategy.name} (local)", attempt=attempt)


@functools.lru_cache(maxsize=32)
def date_only_chain(
    fmt: str | None = None,
    options: ParseOptions = DEFAULT_OPTIONS,
) -> tuple[Strategy, ...]:
    """Fallback chain for date-only parsing.

    1. exact canonical date layout
    2. exact fmt, when given
    3. general parse
    4. each format list layout
    5. epoch seconds

    Steps 2-5 are truncated to the date.
    """
    chain = [exact(DEFAULT_DATE_FORMAT)]
    if fmt:
        chain.append(truncated(exact(fmt), options))
    chain.append(truncated(general(options), options))
    chain.extend(truncated(strategy, options) for strategy in layouts())
    chain.append(truncated(epoch(local=False), options))
    return tuple(chain)


@functools.lru_cache(maxsize=1)
def full_datetime_chain() -> tuple[Strategy, ...]:
    """Fallback chain for full date/time parsing: the format list only."""
    return layouts()


@functools.lru_cache(maxsize=32)
def timestamp_or_general_chain(
    fmt: str | None = None,
    parserinfo: dateutil_parser.parserinfo | None = None,
    assume_local: bool = False,
    options: ParseOptions = DEFAULT_OPTIONS,
) -> tuple[Strategy, ...]:
    """Fallback chain for timestamp-or-general parsing.

    1. epoch seconds, local or UTC view
    2. general parse when fmt is empty, otherwise exact fmt
    """
    chain = [epoch(local=assume_local)]
    if not fmt:
        chain.append(general(options, parserinfo))
    elif assume_local:
        chain.append(localized(exact(fmt)))
    else:
        chain.append(exact(fmt))
    return tuple(chain)


__all__ = [
    "date_only_chain",
    "epoch",
    "exact",
    "full_datetime_chain",
    "general",
    "layouts",
    "localized",
    "timestamp_or_general_chain",
    "truncate",
    "truncated",
]
