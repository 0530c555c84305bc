"""Internal utilities for dateserial.

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dateserial._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH,
)

__all__: list[str] = [
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "UNIX_EPOCH",
]
