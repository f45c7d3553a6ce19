"""Calendar utilities for ChronoBox.

This module provides internal functions for calendar calculations on the
proleptic Gregorian calendar: leap years, month lengths, and conversion
between epoch days (days since 1970-01-01) and year/month/day fields.

An instant is stored as epoch milliseconds. Wall-clock fields are obtained
by shifting the instant by a fixed UTC offset and splitting the result into
an epoch day and milliseconds within that day.

This module is not part of the public API.
"""

from __future__ import annotations

from chronobox._internal.constants import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to epoch days (1970-01-01 is day 0).

    Examples:
        >>> ymd_to_days(1970, 1, 1)
        0
        >>> ymd_to_days(2024, 1, 15)
        19737
    """
    y = year - 1
    # Python's // floors toward negative infinity, so this holds for y < 0 too
    ordinal = y * 365 + y // 4 - y // 100 + y // 400
    ordinal += _days_before_month(year, month) + day
    return ordinal - UNIX_EPOCH_ORDINAL


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert epoch days to (year, month, day).

    Examples:
        >>> days_to_ymd(0)
        (1970, 1, 1)
        >>> days_to_ymd(19737)
        (2024, 1, 15)
    """
    # n is 0-indexed (n=0 means 0001-01-01)
    n = days + UNIX_EPOCH_ORDINAL - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400: each has 36524 days (except last)
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leap)
    if preceding > n:
        month -= 1
        preceding -= days_in_month(year, month)
    return (year, month, n - preceding + 1)


def day_of_week(days: int) -> int:
    """Return the day of week for an epoch day (Monday=0, Sunday=6).

    1970-01-01 was a Thursday.
    """
    return (days + 3) % 7


def split_millis(
    millis: int,
    offset_seconds: int = 0,
) -> tuple[int, int, int, int, int, int, int]:
    """Split epoch milliseconds into wall-clock fields at a UTC offset.

    Returns:
        Tuple of (year, month, day, hours, minutes, seconds, milliseconds).

    Examples:
        >>> split_millis(0)
        (1970, 1, 1, 0, 0, 0, 0)
        >>> split_millis(0, -3600)
        (1969, 12, 31, 23, 0, 0, 0)
    """
    days, ms_of_day = divmod(millis + offset_seconds * MS_PER_SECOND, MS_PER_DAY)
    year, month, day = days_to_ymd(days)
    hours, rem = divmod(ms_of_day, MS_PER_HOUR)
    minutes, rem = divmod(rem, MS_PER_MINUTE)
    seconds, ms = divmod(rem, MS_PER_SECOND)
    return (year, month, day, hours, minutes, seconds, ms)


def join_millis(
    year: int,
    month: int,
    day: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
    offset_seconds: int = 0,
) -> int:
    """Combine wall-clock fields at a UTC offset into epoch milliseconds.

    The inverse of split_millis. Fields are not range-checked.
    """
    local = (
        ymd_to_days(year, month, day) * MS_PER_DAY
        + hours * MS_PER_HOUR
        + minutes * MS_PER_MINUTE
        + seconds * MS_PER_SECOND
        + milliseconds
    )
    return local - offset_seconds * MS_PER_SECOND


# First and last millisecond of the supported year range, in UTC
MIN_MILLIS: int = join_millis(MIN_YEAR, 1, 1)
MAX_MILLIS: int = join_millis(MAX_YEAR, 12, 31, 23, 59, 59, 999)


def is_representable(millis: int, offset_seconds: int = 0) -> bool:
    """Check that an instant falls in the supported year range.

    Both the UTC fields and the wall-clock fields at the given offset must
    lie within MIN_YEAR..MAX_YEAR.
    """
    local = millis + offset_seconds * MS_PER_SECOND
    return MIN_MILLIS <= millis <= MAX_MILLIS and MIN_MILLIS <= local <= MAX_MILLIS


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_days",
    "days_to_ymd",
    "day_of_week",
    "split_millis",
    "join_millis",
    "is_representable",
    "MIN_MILLIS",
    "MAX_MILLIS",
]
