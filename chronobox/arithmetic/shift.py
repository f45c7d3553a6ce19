"""Unit-based shifting of instants.

This module implements add/subtract for every TimeUnit, including the
month overflow clamping behavior for calendar units.

Clamping behavior:
    When adding months or years lands on a day that does not exist in the
    target month (e.g., Jan 31 + 1 month), the day is clamped to the last
    valid day of that month. The time of day is kept.

Examples:
    2024-01-31 + 1 month  -> 2024-02-29  # leap year
    2023-01-31 + 1 month  -> 2023-02-28
    2024-03-31 - 1 month  -> 2024-02-29
    2024-02-29 + 1 year   -> 2025-02-28
"""

from __future__ import annotations

from chronobox._internal.calendar import days_in_month, join_millis, split_millis
from chronobox.units.timeunit import TimeUnit, resolve_time_unit
from chronobox.units.timezone import Timezone


def shift_millis(millis: int, amount: int, unit: TimeUnit | str, timezone: Timezone) -> int:
    """Offset an instant by a number of units.

    Fixed-length units (milliseconds up to weeks) add amount times the
    unit length. With a fixed-offset zone this is the same as adding to
    the wall-clock field and normalizing. Months and years move the
    wall-clock fields and clamp the day.

    Args:
        millis: Epoch milliseconds.
        amount: Number of units (negative to go back).
        unit: TimeUnit member or its string value.
        timezone: Zone whose wall-clock fields calendar units act on.

    Returns:
        The shifted epoch milliseconds. Range is not checked.

    Raises:
        UnsupportedUnitError: If unit is not a TimeUnit.
    """
    unit = resolve_time_unit(unit)

    if not unit.is_calendar:
        return millis + amount * unit.to_millis()

    offset = timezone.offset_seconds
    year, month, day, hour, minute, second, ms = split_millis(millis, offset)

    if unit is TimeUnit.MONTHS:
        year, month_index = divmod(year * 12 + (month - 1) + amount, 12)
        month = month_index + 1
    else:
        year += amount

    day = min(day, days_in_month(year, month))
    return join_millis(year, month, day, hour, minute, second, ms, offset_seconds=offset)


__all__ = ["shift_millis"]
