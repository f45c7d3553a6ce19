"""Clock sources for "now".

A clock is any zero-argument callable returning epoch milliseconds.
DateValue reads the current instant only through a clock, so tests can
pin "now" with FixedClock.

Examples:
    >>> from chronobox import DateValue
    >>> DateValue(clock=FixedClock(0)).to_iso_format()
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class FixedClock:
    """A clock that always returns the same instant.

    Attributes:
        millis: The epoch milliseconds returned on every call.
    """

    __slots__ = ("_millis",)

    def __init__(self, millis: int) -> None:
        self._millis = millis

    @property
    def millis(self) -> int:
        return self._millis

    def __call__(self) -> int:
        return self._millis

    def __repr__(self) -> str:
        return f"FixedClock({self._millis})"


__all__ = ["Clock", "system_clock", "FixedClock"]
