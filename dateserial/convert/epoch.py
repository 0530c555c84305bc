"""Epoch conversion utilities.

This module converts between datetimes and Unix epoch seconds, and provides
the local and UTC views used throughout dateserial.

A naive datetime is read as local time. An aware datetime is read at its own
offset. Conversion is exact integer arithmetic; fractional seconds are
dropped, truncating toward zero.

Functions:
    to_epoch_seconds: Convert a datetime to whole Unix seconds.
    from_epoch_seconds: Create an aware UTC datetime from Unix seconds.
    to_local: Naive local wall-clock view of a datetime.
    to_utc: Aware UTC view of a datetime.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from datetime import datetime, timezone
    >>> to_epoch_seconds(datetime(1970, 1, 1, tzinfo=timezone.utc))
    0

    >>> from_epoch_seconds(1700000000)
    datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from dateserial._internal.constants import SECONDS_PER_DAY, UNIX_EPOCH


def to_epoch_seconds(dt: datetime) -> int:
    """Convert a datetime to Unix timestamp in whole seconds.

    Args:
        dt: The datetime to convert. Naive values are local time.

    Returns:
        Seconds since 1970-01-01 00:00:00 UTC, truncated toward zero.

    Examples:
        >>> to_epoch_seconds(datetime(2023, 11, 14, 22, 13, 20, 999999, tzinfo=timezone.utc))
        1700000000

        >>> to_epoch_seconds(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc))
        0
    """
    delta = to_utc(dt) - UNIX_EPOCH
    seconds = delta.days * SECONDS_PER_DAY + delta.seconds
    # timedelta floors toward negative infinity
    if seconds < 0 and delta.microseconds:
        seconds += 1
    return seconds


def from_epoch_seconds(seconds: int) -> datetime:
    """Create a datetime from Unix seconds.

    The result is tagged UTC. Use :func:`to_local` for the local view.

    Args:
        seconds: Unix timestamp in seconds since 1970-01-01 00:00:00 UTC.

    Returns:
        An aware datetime in UTC.

    Raises:
        OverflowError: If the timestamp is outside the datetime range.

    Examples:
        >>> from_epoch_seconds(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return UNIX_EPOCH + timedelta(seconds=seconds)


def to_local(dt: datetime) -> datetime:
    """Return the naive local wall-clock view of a datetime.

    Naive values are already local and are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def to_utc(dt: datetime) -> datetime:
    """Return the aware UTC view of a datetime.

    Naive values are read as local time.
    """
    return dt.astimezone(timezone.utc)


__all__ = [
    "from_epoch_seconds",
    "to_epoch_seconds",
    "to_local",
    "to_utc",
]
