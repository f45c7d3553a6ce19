"""TimeUnit enumeration for arithmetic steps and granularities.

This module provides the TimeUnit enum and the runtime gate that every
public operation applies to unit arguments, since units may arrive as
plain strings.
"""

from __future__ import annotations

from enum import Enum

from chronobox._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from chronobox.errors import UnsupportedUnitError


class TimeUnit(Enum):
    """Closed set of time units, from milliseconds up to years.

    Each unit serves both as an arithmetic step size (add, subtract, diff)
    and as a truncation granularity (is_after, is_before, truncate_date).

    Note:
        YEARS and MONTHS have no fixed millisecond length.
        The to_millis() method returns None for these units.

    Examples:
        >>> TimeUnit.HOURS.to_millis()
        3600000

        >>> TimeUnit("days") is TimeUnit.DAYS
        True

        >>> TimeUnit.MONTHS.to_millis() is None
        True
    """

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    def to_millis(self) -> int | None:
        """Return the length of one unit in milliseconds.

        Returns:
            The number of milliseconds in one unit, or None for
            calendar-based units (MONTHS and YEARS).
        """
        return _UNIT_MILLIS[self]

    @property
    def is_calendar(self) -> bool:
        """Return True for units measured on calendar fields."""
        return _UNIT_MILLIS[self] is None


_UNIT_MILLIS: dict[TimeUnit, int | None] = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: MS_PER_SECOND,
    TimeUnit.MINUTES: MS_PER_MINUTE,
    TimeUnit.HOURS: MS_PER_HOUR,
    TimeUnit.DAYS: MS_PER_DAY,
    TimeUnit.WEEKS: MS_PER_WEEK,
    TimeUnit.MONTHS: None,  # Variable length
    TimeUnit.YEARS: None,  # Variable length (leap years)
}

_UNIT_VALUES: frozenset[str] = frozenset(unit.value for unit in TimeUnit)


def is_valid_time_unit(unit: object) -> bool:
    """Check whether a value names one of the eight time units.

    Accepts TimeUnit members and their string values.

    Examples:
        >>> is_valid_time_unit(TimeUnit.WEEKS)
        True
        >>> is_valid_time_unit("weeks")
        True
        >>> is_valid_time_unit("fortnights")
        False
        >>> is_valid_time_unit(None)
        False
    """
    if isinstance(unit, TimeUnit):
        return True
    return isinstance(unit, str) and unit in _UNIT_VALUES


def resolve_time_unit(unit: object, message: str = "Unsupported time unit") -> TimeUnit:
    """Return the TimeUnit for a member or string value.

    Args:
        unit: A TimeUnit member or its string value.
        message: Prefix for the error message.

    Raises:
        UnsupportedUnitError: If unit is not one of the eight time units.
    """
    if not is_valid_time_unit(unit):
        raise UnsupportedUnitError(unit, message)
    return TimeUnit(unit)


__all__ = ["TimeUnit", "is_valid_time_unit", "resolve_time_unit"]
