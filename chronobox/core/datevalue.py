"""DateValue, an immutable instant with a display format.

This module provides the DateValue class: a point in time with millisecond
precision, paired with a token template used by format_date() and a fixed
UTC-offset zone that supplies its wall-clock fields.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
from typing import Union

from chronobox._internal.calendar import is_representable, join_millis, split_millis
from chronobox.arithmetic.difference import difference
from chronobox.arithmetic.shift import shift_millis
from chronobox.arithmetic.truncation import truncate_millis
from chronobox.clock import Clock, system_clock
from chronobox.core.components import DateComponents
from chronobox.errors import ChronoBoxError, InvalidDateError
from chronobox.format.iso8601 import format_iso8601, parse_iso8601
from chronobox.format.tokens import render_template
from chronobox.units.dateformat import DateFormat, resolve_format
from chronobox.units.timeunit import TimeUnit, resolve_time_unit
from chronobox.units.timezone import Timezone

logger = logging.getLogger(__name__)

DateInput = Union["DateValue", _datetime.datetime, _datetime.date, str, int, float]

_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MILLI = _datetime.timedelta(milliseconds=1)


def _to_millis(value: object, timezone: Timezone) -> int:
    """Convert a date input to epoch milliseconds.

    Naive datetimes, dates and offset-less strings are read as wall-clock
    time in timezone.
    """
    if isinstance(value, DateValue):
        return value._millis
    if isinstance(value, bool):
        raise TypeError("bool is not a valid date input")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value} is not a finite timestamp")
        return int(value)
    if isinstance(value, str):
        return parse_iso8601(value, timezone)
    if isinstance(value, _datetime.datetime):
        if value.utcoffset() is not None:
            return (value - _EPOCH) // _ONE_MILLI
        return join_millis(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond // 1000,
            offset_seconds=timezone.offset_seconds,
        )
    if isinstance(value, _datetime.date):
        return join_millis(
            value.year, value.month, value.day, offset_seconds=timezone.offset_seconds
        )
    raise TypeError(f"unsupported date input type: {type(value).__name__}")


def _check_amount(amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an integer, got {type(amount).__name__}")


class DateValue:
    """An immutable instant paired with a display format.

    DateValue stores an absolute point in time as epoch milliseconds. The
    calendar fields it reports, formats, shifts and truncates are the
    wall-clock fields in its timezone, which is UTC unless another fixed
    offset is given.

    Every operation that looks like a mutation (add, subtract,
    with_format) returns a new DateValue.

    Attributes:
        epoch_millis: Milliseconds since 1970-01-01T00:00:00Z.
        format: The token template used by format_date().
        timezone: The zone supplying wall-clock fields.

    Examples:
        >>> d = DateValue("2024-01-31")
        >>> d.add(1, TimeUnit.MONTHS).format_date()
        '2024-02-29'

        >>> DateValue("2024-01-15").diff("2024-01-10")
        5.0

        >>> DateValue("2024-01-01", DateFormat.VERBOSE).format_date()
        'January 01, 2024'
    """

    __slots__ = ("_millis", "_format", "_tz")

    def __init__(
        self,
        value: DateInput | None = None,
        fmt: DateFormat | str = DateFormat.ISO,
        *,
        timezone: Timezone | str | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a DateValue.

        Args:
            value: A DateValue, datetime, date, ISO-like string, or epoch
                milliseconds. None means the current instant from clock.
            fmt: A DateFormat preset or a custom token template.
            timezone: Zone for wall-clock fields, as a Timezone or an
                offset string such as "+05:30". Defaults to the zone of a
                DateValue input, otherwise UTC.
            clock: Source of the current instant when value is None.
                Defaults to the system clock.

        Raises:
            InvalidDateError: If value does not resolve to a valid instant.
            TypeError: If fmt or timezone has the wrong type.
            TimezoneError: If timezone is an invalid offset string.

        Examples:
            >>> DateValue(0).to_iso_format()
            '1970-01-01T00:00:00.000Z'

            >>> DateValue("2024-01-15T12:00:00Z", timezone="+05:30").get_components().hours
            17
        """
        self._format: str = resolve_format(fmt)

        if timezone is None:
            timezone = value.timezone if isinstance(value, DateValue) else Timezone.utc()
        elif isinstance(timezone, str):
            timezone = Timezone.from_string(timezone)
        elif not isinstance(timezone, Timezone):
            raise TypeError(
                f"timezone must be a Timezone or str, got {type(timezone).__name__}"
            )
        self._tz: Timezone = timezone

        try:
            if value is None:
                value = (clock or system_clock)()
            millis = _to_millis(value, timezone)
            if not is_representable(millis, timezone.offset_seconds):
                raise InvalidDateError("Invalid date input")
        except (ChronoBoxError, ValueError, TypeError, OverflowError) as exc:
            raise InvalidDateError(f"Failed to parse date: {exc}") from exc

        self._millis: int = millis

    def _with_millis(self, millis: int) -> DateValue:
        """Return a DateValue at millis with this format and timezone."""
        return DateValue(millis, self._format, timezone=self._tz)

    def _other_millis(self, other: DateInput) -> int:
        """Resolve a comparison operand, reading it in this value's zone."""
        if other is None:
            raise InvalidDateError("Failed to parse date: no date given")
        if isinstance(other, DateValue):
            return other._millis
        return DateValue(other, timezone=self._tz)._millis

    # Properties

    @property
    def epoch_millis(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00Z."""
        return self._millis

    @property
    def format(self) -> str:
        """Return the token template used by format_date()."""
        return self._format

    @property
    def timezone(self) -> Timezone:
        """Return the zone supplying wall-clock fields."""
        return self._tz

    # Arithmetic

    def add(self, amount: int, unit: TimeUnit | str) -> DateValue:
        """Return a new DateValue offset by amount units.

        Months and years keep the day of month, clamped to the length of
        the resulting month: 2024-01-31 plus one month is 2024-02-29.

        Args:
            amount: Number of units; negative values go back in time.
            unit: A TimeUnit member or its string value.

        Raises:
            UnsupportedUnitError: If unit is not a TimeUnit.
            TypeError: If amount is not an integer.
            InvalidDateError: If the result leaves the supported range.

        Examples:
            >>> DateValue("2024-01-01").add(5, TimeUnit.DAYS).format_date()
            '2024-01-06'
        """
        unit = resolve_time_unit(unit)
        _check_amount(amount)
        return self._with_millis(shift_millis(self._millis, amount, unit, self._tz))

    def subtract(self, amount: int, unit: TimeUnit | str) -> DateValue:
        """Return a new DateValue moved back by amount units.

        Exactly add(-amount, unit).

        Examples:
            >>> DateValue("2024-03-31").subtract(1, "months").format_date()
            '2024-02-29'
        """
        unit = resolve_time_unit(unit)
        _check_amount(amount)
        return self.add(-amount, unit)

    def diff(self, other: DateInput, unit: TimeUnit | str = TimeUnit.DAYS) -> float:
        """Return self - other expressed in unit.

        Units from milliseconds to weeks divide the raw millisecond delta
        and may be fractional. MONTHS and YEARS subtract calendar fields
        and ignore the day of month.

        Args:
            other: Any input accepted by the constructor, read in this
                value's timezone.
            unit: A TimeUnit member or its string value.

        Raises:
            UnsupportedUnitError: If unit is not a TimeUnit. Checked before
                other is read.
            InvalidDateError: If other does not resolve to a valid instant.

        Examples:
            >>> DateValue("2024-01-15").diff("2023-11-15", TimeUnit.MONTHS)
            2
        """
        unit = resolve_time_unit(unit)
        return difference(self._millis, self._other_millis(other), unit, self._tz)

    # Components and formatting

    def get_components(self) -> DateComponents:
        """Return the wall-clock fields of this instant.

        Examples:
            >>> DateValue("2024-01-15T12:30:45.123").get_components().milliseconds
            123
        """
        return DateComponents(*split_millis(self._millis, self._tz.offset_seconds))

    def format_date(self) -> str:
        """Render this instant with the stored token template.

        Examples:
            >>> DateValue("2024-01-15", DateFormat.EU).format_date()
            '15.01.2024'
        """
        year, month, day, *_ = split_millis(self._millis, self._tz.offset_seconds)
        return render_template(self._format, year, month, day)

    def to_iso_format(self) -> str:
        """Return the instant as ISO 8601 in this value's timezone.

        Examples:
            >>> DateValue("2024-01-15T12:30:45.123").to_iso_format()
            '2024-01-15T12:30:45.123Z'
        """
        return format_iso8601(self._millis, self._tz)

    def is_valid(self) -> bool:
        """Return True if the instant lies in the supported range."""
        return is_representable(self._millis, self._tz.offset_seconds)

    def to_date(self) -> _datetime.datetime:
        """Return a new aware datetime for this instant in this value's timezone."""
        utc = _EPOCH + _datetime.timedelta(milliseconds=self._millis)
        return utc.astimezone(self._tz.to_tzinfo())

    def with_format(self, new_format: DateFormat | str) -> DateValue:
        """Return a new DateValue with the same instant and another format.

        Examples:
            >>> DateValue("2024-01-15").with_format("DD-MM-YYYY").format_date()
            '15-01-2024'
        """
        return DateValue(self._millis, new_format, timezone=self._tz)

    # Comparison

    def _truncated_pair(self, other: DateInput, granularity: TimeUnit | str) -> tuple[int, int]:
        unit = resolve_time_unit(granularity)
        other_millis = self._other_millis(other)
        if unit is TimeUnit.MILLISECONDS:
            return self._millis, other_millis

        left = truncate_millis(self._millis, unit, self._tz)
        right = truncate_millis(other_millis, unit, self._tz)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "comparing %s with %s at %s granularity",
                format_iso8601(left, self._tz),
                format_iso8601(right, self._tz),
                unit.value,
            )
        return left, right

    def is_after(
        self,
        other: DateInput,
        granularity: TimeUnit | str = TimeUnit.MILLISECONDS,
    ) -> bool:
        """Return True if this instant is strictly after other.

        At coarser granularities both instants are truncated first, so two
        instants on the same calendar day are not after one another at
        DAYS granularity.

        Raises:
            UnsupportedUnitError: If granularity is not a TimeUnit.

        Examples:
            >>> DateValue("2024-01-15T18:00").is_after("2024-01-15T09:00")
            True
            >>> DateValue("2024-01-15T18:00").is_after("2024-01-15T09:00", TimeUnit.DAYS)
            False
        """
        left, right = self._truncated_pair(other, granularity)
        return left > right

    def is_before(
        self,
        other: DateInput,
        granularity: TimeUnit | str = TimeUnit.MILLISECONDS,
    ) -> bool:
        """Return True if this instant is strictly before other.

        Raises:
            UnsupportedUnitError: If granularity is not a TimeUnit.
        """
        left, right = self._truncated_pair(other, granularity)
        return left < right

    def is_same(
        self,
        other: DateInput,
        granularity: TimeUnit | str = TimeUnit.MILLISECONDS,
    ) -> bool:
        """Return True if both instants truncate to the same value.

        Raises:
            UnsupportedUnitError: If granularity is not a TimeUnit.
        """
        left, right = self._truncated_pair(other, granularity)
        return left == right

    # Value semantics

    def __eq__(self, other: object) -> bool:
        """Equal when instant, format and timezone all match."""
        if not isinstance(other, DateValue):
            return NotImplemented
        return (
            self._millis == other._millis
            and self._format == other._format
            and self._tz == other._tz
        )

    def __hash__(self) -> int:
        return hash((self._millis, self._format, self._tz))

    def __repr__(self) -> str:
        tz_part = "" if self._tz.is_utc else f", timezone={self._tz!r}"
        return f"DateValue({self.to_iso_format()!r}, {self._format!r}{tz_part})"

    def __str__(self) -> str:
        """Return format_date()."""
        return self.format_date()


__all__ = ["DateValue", "DateInput"]
