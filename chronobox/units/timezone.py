"""Fixed UTC-offset zones.

A DateValue reads its wall-clock fields (components, formatting,
calendar arithmetic and truncation) through a Timezone. Only fixed
offsets are modelled; there is no timezone database and no DST.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import ClassVar

from chronobox._internal.constants import MAX_UTC_OFFSET_SECONDS, MS_PER_SECOND
from chronobox.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$", re.ASCII)


class Timezone:
    """A timezone represented as a fixed offset from UTC.

    Positive offsets are east of UTC (ahead in time), negative offsets are
    west of UTC.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).offset_seconds
        19800

        >>> str(Timezone.from_string("-0500"))
        '-05:00'
    """

    __slots__ = ("_offset_seconds",)

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int = 0) -> None:
        """Create a Timezone with the given UTC offset.

        Args:
            offset_seconds: UTC offset in seconds, a whole number of minutes
                within +/- 14 hours.

        Raises:
            TimezoneError: If the offset is not an integer number of whole
                minutes inside that range.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        if offset_seconds % 60 != 0:
            raise TimezoneError(
                f"offset_seconds must be a whole number of minutes, got {offset_seconds}"
            )
        self._offset_seconds: int = offset_seconds

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from an hour and minute offset.

        The minutes take their sign from hours, so from_hours(-3, 30)
        is UTC-03:30.

        Raises:
            TimezoneError: If minutes is outside 0-59 or the offset is
                out of range.
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * 3600 + sign * minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse "Z", "UTC", "+HH:MM", "+HHMM" or "+HH" (and "-" forms).

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> Timezone.from_string("Z").is_utc
            True
            >>> Timezone.from_string("+05:30").offset_seconds
            19800
        """
        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (int(hours_str) * 3600 + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds."""
        return self._offset_seconds

    @property
    def offset_millis(self) -> int:
        """Return the UTC offset in milliseconds."""
        return self._offset_seconds * MS_PER_SECOND

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_seconds == 0

    def to_tzinfo(self) -> _datetime.timezone:
        """Return the equivalent datetime.timezone."""
        if self.is_utc:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self._offset_seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return "UTC", or an offset such as "+05:30"."""
        if self._offset_seconds == 0:
            return "UTC"

        total_minutes = abs(self._offset_seconds) // 60
        hours, minutes = divmod(total_minutes, 60)
        sign = "+" if self._offset_seconds > 0 else "-"
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
