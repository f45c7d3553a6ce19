"""Internal utilities for ChronoBox.

This module contains private implementation details:
    - Calendar arithmetic on epoch days and epoch milliseconds
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronobox._internal.calendar import (
    day_of_week,
    days_in_month,
    days_to_ymd,
    is_leap_year,
    is_representable,
    join_millis,
    split_millis,
    ymd_to_days,
)

__all__: list[str] = [
    "day_of_week",
    "days_in_month",
    "days_to_ymd",
    "is_leap_year",
    "is_representable",
    "join_millis",
    "split_millis",
    "ymd_to_days",
]
