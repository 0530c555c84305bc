"""Approximate comparisons for datetimes.

Comparison Rules:
    - Naive vs Naive: compared as local wall-clock values
    - Aware vs Aware: compared as UTC instants
    - Naive vs Aware: TypeError, as with datetime subtraction

Supported Operations:
    - is_approximately: Test that two datetimes are within a tolerance
    - is_not_approximately: Negation of is_approximately
"""

from __future__ import annotations

from datetime import datetime, timedelta


def is_approximately(left: datetime, right: datetime, epsilon: timedelta) -> bool:
    """Test that two datetimes lie within epsilon of each other.

    The check is symmetric and inclusive at the boundary. A negative
    epsilon never matches.

    Args:
        left: First datetime.
        right: Second datetime.
        epsilon: Largest allowed absolute difference.

    Returns:
        True if ``|right - left| <= epsilon``.

    Raises:
        TypeError: If one value is naive and the other aware.

    Examples:
        >>> a = datetime(2024, 1, 15, 12, 0, 0)
        >>> is_approximately(a, a + timedelta(milliseconds=500), timedelta(seconds=1))
        True
        >>> is_approximately(a, a + timedelta(seconds=1), timedelta(seconds=1))
        True
        >>> is_approximately(a, a - timedelta(seconds=2), timedelta(seconds=1))
        False
    """
    return abs(right - left) <= epsilon


def is_not_approximately(left: datetime, right: datetime, epsilon: timedelta) -> bool:
    """Test that two datetimes are more than epsilon apart."""
    return not is_approximately(left, right, epsilon)


__all__ = [
    "is_approximately",
    "is_not_approximately",
]
