"""ChronoBox: a small immutable date value.

ChronoBox wraps an instant with millisecond precision together with a
display format, and offers calendar arithmetic, differences, formatting and
granularity-aware comparison on it.

Core Types:
    DateValue: Immutable instant with a display format
    DateComponents: Wall-clock fields of a DateValue

Units:
    TimeUnit: Arithmetic steps and granularities (MILLISECONDS ... YEARS)
    DateFormat: Preset templates (ISO, US, EU, VERBOSE)
    Timezone: Fixed UTC-offset zone

Helpers:
    is_valid_time_unit: Check a value against the TimeUnit set
    truncate_date: Truncate a DateValue to a granularity
    FixedClock, system_clock: Sources for "now"

Exceptions:
    ChronoBoxError: Base exception
    InvalidDateError: Input is not a valid instant
    ParseError: Malformed ISO-like string
    UnsupportedUnitError: Unit outside the TimeUnit set
    TimezoneError: Invalid UTC offset

Example:
    >>> from chronobox import DateValue, DateFormat, TimeUnit
    >>> d = DateValue("2024-01-31", DateFormat.US)
    >>> d.add(1, TimeUnit.MONTHS).format_date()
    '02/29/2024'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chronobox.core.components import DateComponents
from chronobox.core.datevalue import DateValue

# Units
from chronobox.units.dateformat import DateFormat
from chronobox.units.timeunit import TimeUnit, is_valid_time_unit
from chronobox.units.timezone import Timezone

# Helpers
from chronobox.arithmetic.truncation import truncate_date
from chronobox.clock import FixedClock, system_clock

# Exceptions
from chronobox.errors import (
    ChronoBoxError,
    InvalidDateError,
    ParseError,
    TimezoneError,
    UnsupportedUnitError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "DateValue",
    "DateComponents",
    # Units
    "DateFormat",
    "TimeUnit",
    "Timezone",
    # Helpers
    "is_valid_time_unit",
    "truncate_date",
    "FixedClock",
    "system_clock",
    # Exceptions
    "ChronoBoxError",
    "InvalidDateError",
    "ParseError",
    "UnsupportedUnitError",
    "TimezoneError",
]
