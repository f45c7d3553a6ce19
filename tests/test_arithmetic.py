"""Tests for the chronobox.arithmetic module.

This test module verifies the millisecond-level functions behind the
DateValue methods:
    - shift_millis: fixed and calendar units, clamping
    - difference: continuous and calendar units
    - truncate_millis / truncate_date: every granularity, zone handling
"""

from __future__ import annotations

import pytest

from chronobox import DateValue
from chronobox.arithmetic import difference, shift_millis, truncate_date, truncate_millis
from chronobox.errors import UnsupportedUnitError
from chronobox.format import parse_iso8601
from chronobox.units.timeunit import TimeUnit
from chronobox.units.timezone import Timezone


def _ms(text: str) -> int:
    return parse_iso8601(text)


# =============================================================================
# Shift Tests
# =============================================================================


class TestShiftMillis:
    """Tests for shift_millis()."""

    def test_fixed_units(self, utc: Timezone) -> None:
        """Fixed units add amount times their length."""
        assert shift_millis(0, 3, TimeUnit.SECONDS, utc) == 3000
        assert shift_millis(0, 2, TimeUnit.WEEKS, utc) == 14 * 86_400_000
        assert shift_millis(0, -1, "days", utc) == -86_400_000

    @pytest.mark.parametrize("unit", [u for u in TimeUnit if not u.is_calendar])
    def test_non_calendar_units_are_linear(self, unit: TimeUnit, ist: Timezone) -> None:
        """Non-calendar units move by their fixed length in any zone."""
        start = _ms("2024-01-31T22:00:00Z")
        assert shift_millis(start, 3, unit, ist) - start == 3 * unit.to_millis()
        assert difference(start + 3 * unit.to_millis(), start, unit, ist) == 3.0

    def test_months_clamp(self, utc: Timezone) -> None:
        """Month shifts clamp to the end of the target month."""
        assert shift_millis(_ms("2023-01-31"), 1, TimeUnit.MONTHS, utc) == _ms("2023-02-28")

    def test_months_carry_into_years(self, utc: Timezone) -> None:
        """Month shifts carry across year boundaries both ways."""
        assert shift_millis(_ms("2024-11-15"), 3, TimeUnit.MONTHS, utc) == _ms("2025-02-15")
        assert shift_millis(_ms("2024-11-15"), -25, TimeUnit.MONTHS, utc) == _ms("2022-10-15")

    def test_years_clamp(self, utc: Timezone) -> None:
        """Feb 29 plus a year lands on Feb 28."""
        assert shift_millis(_ms("2024-02-29"), 1, TimeUnit.YEARS, utc) == _ms("2025-02-28")
        assert shift_millis(_ms("2024-02-29"), 4, TimeUnit.YEARS, utc) == _ms("2028-02-29")

    def test_calendar_units_keep_time(self, utc: Timezone) -> None:
        """Time of day is preserved by month shifts."""
        start = _ms("2024-01-31T10:15:00.250")
        assert shift_millis(start, 1, TimeUnit.MONTHS, utc) == _ms("2024-02-29T10:15:00.250")

    def test_calendar_units_use_zone(self) -> None:
        """Months move the wall-clock fields of the zone."""
        zone = Timezone.from_hours(5)
        # 2024-02-01T03:00+05:00 in wall-clock time
        start = _ms("2024-01-31T22:00:00Z")
        assert shift_millis(start, 1, TimeUnit.MONTHS, zone) == _ms("2024-03-01T03:00:00+05:00")

    def test_unsupported_unit(self, utc: Timezone) -> None:
        """Unknown units are rejected."""
        with pytest.raises(UnsupportedUnitError, match="Unsupported time unit: fortnights"):
            shift_millis(0, 1, "fortnights", utc)


# =============================================================================
# Difference Tests
# =============================================================================


class TestDifference:
    """Tests for difference()."""

    def test_fixed_units_are_ratios(self, utc: Timezone) -> None:
        """Fixed units divide the raw delta."""
        assert difference(90 * 60_000, 0, TimeUnit.HOURS, utc) == 1.5
        assert difference(0, 86_400_000, TimeUnit.DAYS, utc) == -1.0

    def test_months_ignore_day(self, utc: Timezone) -> None:
        """Month differences use year and month fields only."""
        assert difference(_ms("2024-02-01"), _ms("2024-01-31"), TimeUnit.MONTHS, utc) == 1
        assert difference(_ms("2024-01-31"), _ms("2024-01-01"), TimeUnit.MONTHS, utc) == 0

    def test_years_ignore_month(self, utc: Timezone) -> None:
        """Year differences use the year field only."""
        assert difference(_ms("2024-01-01"), _ms("2023-12-31"), TimeUnit.YEARS, utc) == 1
        assert difference(_ms("2024-12-31"), _ms("2024-01-01"), TimeUnit.YEARS, utc) == 0

    def test_unsupported_unit(self, utc: Timezone) -> None:
        """Unknown units are rejected."""
        with pytest.raises(UnsupportedUnitError):
            difference(0, 0, None, utc)  # type: ignore[arg-type]


# =============================================================================
# Truncation Tests
# =============================================================================


class TestTruncateMillis:
    """Tests for truncate_millis()."""

    @pytest.mark.parametrize(
        ("granularity", "expected"),
        [
            (TimeUnit.MILLISECONDS, "2024-02-25T15:45:30.123Z"),
            (TimeUnit.SECONDS, "2024-02-25T15:45:30.000Z"),
            (TimeUnit.MINUTES, "2024-02-25T15:45:00.000Z"),
            (TimeUnit.HOURS, "2024-02-25T15:00:00.000Z"),
            (TimeUnit.DAYS, "2024-02-25T00:00:00.000Z"),
            (TimeUnit.WEEKS, "2024-02-19T00:00:00.000Z"),  # Monday of the same week
            (TimeUnit.MONTHS, "2024-02-01T00:00:00.000Z"),
            (TimeUnit.YEARS, "2024-01-01T00:00:00.000Z"),
        ],
    )
    def test_granularities(self, granularity: TimeUnit, expected: str, utc: Timezone) -> None:
        """Each granularity zeroes the finer fields."""
        millis = _ms("2024-02-25T15:45:30.123Z")
        assert truncate_millis(millis, granularity, utc) == _ms(expected)

    def test_string_granularity(self, utc: Timezone) -> None:
        """String values are accepted."""
        assert truncate_millis(1500, "seconds", utc) == 1000

    def test_weeks_from_monday(self, utc: Timezone) -> None:
        """A Monday truncates to itself at midnight."""
        millis = _ms("2024-02-19T08:00:00Z")
        assert truncate_millis(millis, TimeUnit.WEEKS, utc) == _ms("2024-02-19")

    def test_weeks_across_month(self, utc: Timezone) -> None:
        """Week truncation can move into the previous month."""
        millis = _ms("2024-03-02T08:00:00Z")  # Saturday
        assert truncate_millis(millis, TimeUnit.WEEKS, utc) == _ms("2024-02-26")

    def test_days_in_zone(self, ist: Timezone) -> None:
        """Days truncate to local midnight of the zone."""
        millis = _ms("2024-02-25T15:45:30.123Z")  # 21:15:30.123+05:30
        assert truncate_millis(millis, TimeUnit.DAYS, ist) == _ms("2024-02-25T00:00:00+05:30")
        assert truncate_millis(millis, TimeUnit.HOURS, ist) == _ms("2024-02-25T21:00:00+05:30")

    def test_years_in_zone(self) -> None:
        """Years use the same zone as every other granularity."""
        zone = Timezone.from_hours(-5)
        millis = _ms("2024-01-01T03:00:00Z")  # 2023-12-31T22:00-05:00
        assert truncate_millis(millis, TimeUnit.YEARS, zone) == _ms("2023-01-01T00:00:00-05:00")

    def test_before_epoch(self, utc: Timezone) -> None:
        """Negative instants truncate toward the past."""
        assert truncate_millis(-1, TimeUnit.DAYS, utc) == -86_400_000

    def test_unsupported_granularity(self, utc: Timezone) -> None:
        """Unknown granularities are rejected with a truncation message."""
        with pytest.raises(
            UnsupportedUnitError, match="^Unsupported time unit for truncation: INVALID_UNIT$"
        ):
            truncate_millis(0, "INVALID_UNIT", utc)


class TestTruncateDate:
    """Tests for truncate_date()."""

    def test_returns_date_value(self, base_value: DateValue) -> None:
        """The result is a new DateValue at the truncated instant."""
        result = truncate_date(base_value, TimeUnit.MONTHS)
        assert isinstance(result, DateValue)
        assert result.to_iso_format() == "2024-02-01T00:00:00.000Z"
        assert base_value.to_iso_format() == "2024-02-25T15:45:30.123Z"

    def test_keeps_format_and_zone(self) -> None:
        """Format and timezone carry over."""
        value = DateValue("2024-02-25T15:45:30.123Z", "DD/MM", timezone="+05:30")
        result = truncate_date(value, "days")
        assert result.format == "DD/MM"
        assert result.timezone == value.timezone
        assert result.to_iso_format() == "2024-02-25T00:00:00.000+05:30"

    def test_unsupported_granularity(self, base_value: DateValue) -> None:
        """Unknown granularities are rejected."""
        with pytest.raises(UnsupportedUnitError):
            truncate_date(base_value, "INVALID_UNIT")
