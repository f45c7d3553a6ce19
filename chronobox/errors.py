"""ChronoBox exception hierarchy.

All ChronoBox-specific exceptions inherit from ChronoBoxError.
"""

from __future__ import annotations


class ChronoBoxError(Exception):
    """Base exception for all ChronoBox errors."""

    pass


class InvalidDateError(ChronoBoxError):
    """Input could not be resolved to a valid instant.

    Raised when constructing a DateValue from a value that is not a real
    point in time, or when arithmetic leaves the representable range.

    Examples:
        - Malformed date string ("not a date", "2024-13-01")
        - NaN or infinite epoch milliseconds
        - Adding 10000 years to a date
    """

    pass


class ParseError(InvalidDateError):
    """Failed to parse an ISO-like date string.

    Examples:
        - Empty string
        - Month or day outside its valid range
        - Unrecognized offset suffix
    """

    pass


class UnsupportedUnitError(ChronoBoxError):
    """Value outside the closed TimeUnit enumeration.

    Raised by add, subtract, diff, comparison and truncation when the unit
    is not a TimeUnit member or one of their string values.

    Attributes:
        unit: The offending value, exactly as it was passed.
    """

    def __init__(self, unit: object, message: str = "Unsupported time unit") -> None:
        super().__init__(f"{message}: {unit}")
        self.unit = unit


class TimezoneError(ChronoBoxError):
    """Invalid fixed UTC offset.

    Examples:
        - Offset outside -14h to +14h
        - Unparseable offset string ("+5:3")
    """

    pass


__all__ = [
    "ChronoBoxError",
    "InvalidDateError",
    "ParseError",
    "UnsupportedUnitError",
    "TimezoneError",
]
