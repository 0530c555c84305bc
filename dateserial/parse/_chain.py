"""Strategy objects and the short-circuit fallback runner.

A fallback chain is an ordered tuple of strategies. ``run_chain`` tries
each one in turn and stops at the first that parses the input. A strategy
signals "no match" by raising ParseError; any other exception is a real
error and propagates.

Internal module - use the functions in dateserial.parse instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from dateserial.errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strategy:
    """One named interpretation attempt.

    Attributes:
        name: Human-readable name, reported in ParseResult.strategy.
        attempt: Callable that parses the text or raises ParseError.
    """

    name: str
    attempt: Callable[[str], datetime]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a strict parse.

    Attributes:
        value: The parsed datetime, or None when nothing matched.
        success: True when a strategy matched. Check this before trusting
            value.
        strategy: Name of the strategy that matched, or None.

    A ParseResult is truthy exactly when success is True.

    Examples:
        >>> from dateserial.parse import try_parse_date
        >>> result = try_parse_date("01/02/2020 10:00")
        >>> result.success, result.value.month
        (True, 2)
        >>> result.strategy
        'exact %d/%m/%Y %H:%M'
    """

    value: datetime | None
    success: bool
    strategy: str | None = None

    def __bool__(self) -> bool:
        return self.success

    def value_or(self, default: datetime) -> datetime:
        """Return the parsed value, or default when parsing failed."""
        if self.success:
            return self.value  # type: ignore[return-value]
        return default


FAILED = ParseResult(value=None, success=False)


def run_chain(text: str, strategies: Iterable[Strategy]) -> ParseResult:
    """Try each strategy in order and return the first success.

    Args:
        text: The input string.
        strategies: Strategies in priority order.

    Returns:
        ParseResult of the first strategy that matched, or FAILED.
    """
    for strategy in strategies:
        try:
            value = strategy.attempt(text)
        except ParseError as exc:
            logger.debug("Strategy %s rejected %r: %s", strategy.name, text, exc)
            continue
        logger.debug("Parsed %r with strategy %s", text, strategy.name)
        return ParseResult(value=value, success=True, strategy=strategy.name)

    logger.debug("No strategy matched %r", text)
    return FAILED


__all__ = [
    "FAILED",
    "ParseResult",
    "Strategy",
    "run_chain",
]
