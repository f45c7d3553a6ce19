"""ISO 8601 parsing and rendering of instants.

This module converts between ISO-like strings and epoch milliseconds.

Accepted forms:
    Dates:
        - YYYY
        - YYYY-MM
        - YYYY-MM-DD

    Times (after a 'T' or a single space):
        - HH:MM
        - HH:MM:SS
        - HH:MM:SS.f (fractional seconds, 1-9 digits, ',' also accepted)

    Offsets (after the time):
        - Z
        - +HH:MM, +HHMM, +HH (and '-' forms)

Strings without an offset are wall-clock time in the zone passed by the
caller. Fractional seconds beyond milliseconds are truncated.

Examples:
    >>> parse_iso8601("1970-01-01T00:00:01.5Z")
    1500

    >>> format_iso8601(1500)
    '1970-01-01T00:00:01.500Z'
"""

from __future__ import annotations

import re

from chronobox._internal.calendar import days_in_month, join_millis, split_millis
from chronobox.errors import ParseError, TimezoneError
from chronobox.units.timezone import Timezone

_ISO_PATTERN = re.compile(
    r"""
    ^(?P<year>\d{4})
    (?:-(?P<month>\d{2})
        (?:-(?P<day>\d{2}))?
    )?
    (?:[Tt\ ]
        (?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})
            (?:[.,](?P<fraction>\d{1,9}))?
        )?
        (?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?
    )?$
    """,
    re.VERBOSE | re.ASCII,
)


def parse_iso8601(s: str, timezone: Timezone | None = None) -> int:
    """Parse an ISO-like string into epoch milliseconds.

    Args:
        s: The string to parse. Surrounding whitespace is ignored.
        timezone: Zone for strings without an offset. Defaults to UTC.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        ParseError: If the string is malformed or a field is out of range.

    Examples:
        >>> parse_iso8601("2024-01-15")
        1705276800000

        >>> parse_iso8601("2024-01-15T01:00:00+01:00")
        1705276800000

        >>> parse_iso8601("2024-01-15T00:00", Timezone.from_hours(-5))
        1705294800000
    """
    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}")

    text = s.strip()
    if not text:
        raise ParseError("empty date string")

    match = _ISO_PATTERN.match(text)
    if match is None:
        raise ParseError(f"cannot parse {s!r} as an ISO 8601 date")

    fields = match.groupdict()
    year = int(fields["year"])
    month = int(fields["month"] or 1)
    day = int(fields["day"] or 1)
    hour = int(fields["hour"] or 0)
    minute = int(fields["minute"] or 0)
    second = int(fields["second"] or 0)
    fraction = fields["fraction"] or ""
    millisecond = int(fraction[:3].ljust(3, "0"))

    if month < 1 or month > 12:
        raise ParseError(f"month must be 1-12, got {month} in {s!r}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ParseError(
            f"day must be 1-{max_day} for {year:04d}-{month:02d}, got {day} in {s!r}"
        )
    if hour > 23:
        raise ParseError(f"hour must be 0-23, got {hour} in {s!r}")
    if minute > 59:
        raise ParseError(f"minute must be 0-59, got {minute} in {s!r}")
    if second > 59:
        raise ParseError(f"second must be 0-59, got {second} in {s!r}")

    if fields["offset"]:
        try:
            zone = Timezone.from_string(fields["offset"])
        except TimezoneError as exc:
            raise ParseError(f"invalid offset in {s!r}: {exc}") from exc
    else:
        zone = timezone or Timezone.utc()

    return join_millis(
        year, month, day, hour, minute, second, millisecond,
        offset_seconds=zone.offset_seconds,
    )


def format_iso8601(millis: int, timezone: Timezone | None = None) -> str:
    """Render epoch milliseconds as an ISO 8601 string.

    Args:
        millis: Milliseconds since 1970-01-01T00:00:00Z.
        timezone: Zone whose wall-clock fields are rendered. Defaults to UTC.

    Returns:
        String like "2024-01-15T12:30:45.123Z" or "2024-01-15T12:30:45.123+05:30".
    """
    zone = timezone or Timezone.utc()
    year, month, day, hour, minute, second, ms = split_millis(millis, zone.offset_seconds)
    suffix = "Z" if zone.is_utc else str(zone)
    return (
        f"{year:04d}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{ms:03d}{suffix}"
    )


__all__ = ["parse_iso8601", "format_iso8601"]
