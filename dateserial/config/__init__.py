"""Configuration: parse options and logging setup."""

from __future__ import annotations

from dateserial.config.logging import configure_logging
from dateserial.config.options import DEFAULT_OPTIONS, DayBoundary, ParseOptions

__all__: list[str] = [
    "DEFAULT_OPTIONS",
    "DayBoundary",
    "ParseOptions",
    "configure_logging",
]
