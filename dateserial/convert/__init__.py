"""Epoch conversion and local/UTC views.

Examples:
    >>> from dateserial.convert import from_epoch_seconds, to_epoch_seconds
    >>> to_epoch_seconds(from_epoch_seconds(1700000000))
    1700000000
"""

from __future__ import annotations

from dateserial.convert.epoch import (
    from_epoch_seconds,
    to_epoch_seconds,
    to_local,
    to_utc,
)

__all__ = [
    "to_epoch_seconds",
    "from_epoch_seconds",
    "to_local",
    "to_utc",
]
