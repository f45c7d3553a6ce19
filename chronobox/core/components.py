"""DateComponents record returned by DateValue.get_components()."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DateComponents:
    """Wall-clock fields of an instant.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).
        hours: The hour (0-23).
        minutes: The minute (0-59).
        seconds: The second (0-59).
        milliseconds: The millisecond (0-999).
    """

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def as_dict(self) -> dict[str, int]:
        """Return the fields as a plain dictionary."""
        return asdict(self)


__all__ = ["DateComponents"]
