"""Comparison helpers for datetimes.

Functions:
    is_approximately: Test that two datetimes are within a tolerance.
    is_not_approximately: Test that two datetimes are further apart.
"""

from __future__ import annotations

from dateserial.arithmetic.comparisons import is_approximately, is_not_approximately

__all__: list[str] = [
    "is_approximately",
    "is_not_approximately",
]
