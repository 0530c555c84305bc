"""Internal constants for dateserial.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timezone

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# 1970-01-01 00:00:00 UTC
UNIX_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "UNIX_EPOCH",
]
