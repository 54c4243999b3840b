"""Utility constants and helpers for chronometry.

Earth clock metrics and the standard Gregorian/Julian month tables shared by
the built-in calendars.
"""

import math

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

COMMON_MONTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_MONTHS: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def truncate(value: float) -> float:
    """Truncate toward zero, keeping the float type (``-1.5 -> -1.0``)."""
    return float(math.trunc(value))
