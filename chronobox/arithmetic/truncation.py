"""Truncation of instants to a granularity.

Every field finer than the granularity is reset, on the wall-clock fields
of the given zone:

    MILLISECONDS - unchanged
    SECONDS      - milliseconds zeroed
    MINUTES      - seconds and below zeroed
    HOURS        - minutes and below zeroed
    DAYS         - midnight
    WEEKS        - midnight on the Monday of the same week
    MONTHS       - midnight on the 1st of the month
    YEARS        - midnight on January 1st

Years use the same zone as every other granularity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronobox._internal.calendar import day_of_week, days_to_ymd, ymd_to_days
from chronobox._internal.constants import MS_PER_DAY
from chronobox.units.timeunit import TimeUnit, resolve_time_unit
from chronobox.units.timezone import Timezone

if TYPE_CHECKING:
    from chronobox.core.datevalue import DateValue


def truncate_millis(millis: int, granularity: TimeUnit | str, timezone: Timezone) -> int:
    """Truncate epoch milliseconds to a granularity.

    Args:
        millis: Epoch milliseconds.
        granularity: TimeUnit member or its string value.
        timezone: Zone whose wall-clock fields are truncated.

    Returns:
        The truncated epoch milliseconds.

    Raises:
        UnsupportedUnitError: If granularity is not a TimeUnit.

    Examples:
        >>> truncate_millis(1_500, TimeUnit.SECONDS, Timezone.utc())
        1000
        >>> truncate_millis(90_000_000, TimeUnit.DAYS, Timezone.utc())
        86400000
    """
    unit = resolve_time_unit(granularity, "Unsupported time unit for truncation")
    if unit is TimeUnit.MILLISECONDS:
        return millis

    offset = timezone.offset_millis
    local = millis + offset

    if unit is not TimeUnit.WEEKS and not unit.is_calendar:
        step = unit.to_millis()
        return local - local % step - offset

    days = local // MS_PER_DAY
    if unit is TimeUnit.WEEKS:
        days -= day_of_week(days)
    else:
        year, month, _ = days_to_ymd(days)
        month = month if unit is TimeUnit.MONTHS else 1
        days = ymd_to_days(year, month, 1)
    return days * MS_PER_DAY - offset


def truncate_date(value: DateValue, granularity: TimeUnit | str) -> DateValue:
    """Return a DateValue truncated to a granularity.

    The result keeps the format and timezone of value.

    Raises:
        UnsupportedUnitError: If granularity is not a TimeUnit.

    Examples:
        >>> from chronobox import DateValue
        >>> truncate_date(DateValue("2024-02-25T15:45:30.123Z"), "weeks").to_iso_format()
        '2024-02-19T00:00:00.000Z'
    """
    millis = truncate_millis(value.epoch_millis, granularity, value.timezone)
    return value._with_millis(millis)


__all__ = ["truncate_millis", "truncate_date"]
