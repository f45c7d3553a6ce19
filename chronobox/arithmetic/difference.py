"""Differences between instants.

Fixed-length units (milliseconds up to weeks) give the raw millisecond
delta divided by the unit length, so fractional results are normal:
eight days is 1.142857... weeks.

Calendar units ignore everything below their own field. Months compare
year and month only, years compare the year only, so 2024-01-31 and
2024-02-01 are one month apart while 2024-01-01 and 2024-01-31 are zero.
"""

from __future__ import annotations

from chronobox._internal.calendar import split_millis
from chronobox.units.timeunit import TimeUnit, resolve_time_unit
from chronobox.units.timezone import Timezone


def difference(left: int, right: int, unit: TimeUnit | str, timezone: Timezone) -> float:
    """Return left - right expressed in unit.

    Args:
        left: Epoch milliseconds of the minuend.
        right: Epoch milliseconds of the subtrahend.
        unit: TimeUnit member or its string value.
        timezone: Zone whose wall-clock fields calendar units compare.

    Returns:
        A float for fixed-length units, an int for MONTHS and YEARS.

    Raises:
        UnsupportedUnitError: If unit is not a TimeUnit.

    Examples:
        >>> difference(86_400_000, 0, TimeUnit.HOURS, Timezone.utc())
        24.0
    """
    unit = resolve_time_unit(unit)

    if not unit.is_calendar:
        return (left - right) / unit.to_millis()

    left_year, left_month, *_ = split_millis(left, timezone.offset_seconds)
    right_year, right_month, *_ = split_millis(right, timezone.offset_seconds)

    if unit is TimeUnit.MONTHS:
        return (left_year - right_year) * 12 + (left_month - right_month)
    return left_year - right_year


__all__ = ["difference"]
