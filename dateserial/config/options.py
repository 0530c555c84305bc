"""Parse options for the fallback chains.

Options are passed explicitly as ``options=`` to the parse functions.
Leaving them out uses DEFAULT_OPTIONS.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DayBoundary(Enum):
    """Calendar used when an aware value is truncated to its date.

    Naive values carry no offset and always keep their own calendar date.

    Values:
        LOCAL: Convert to the local zone, then take the date.
        UTC: Convert to UTC, then take the date.
    """

    LOCAL = "local"
    UTC = "utc"


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for the lenient parsing steps.

    Attributes:
        dayfirst: Read ambiguous numeric dates as day/month in the general
            parser. Matches the day-first layouts of the format list.
        day_boundary: Calendar used when truncating aware values to a date.

    Examples:
        >>> opts = ParseOptions(dayfirst=False)
        >>> # "01/02/2020 10:00" is now read as January 2 by the general parser

        >>> opts = ParseOptions(day_boundary=DayBoundary.UTC)
        >>> # "2020-05-01T23:30:00-05:00" now truncates to 2020-05-02
    """

    dayfirst: bool = True
    day_boundary: DayBoundary = DayBoundary.LOCAL


DEFAULT_OPTIONS = ParseOptions()


__all__ = [
    "DayBoundary",
    "ParseOptions",
    "DEFAULT_OPTIONS",
]
