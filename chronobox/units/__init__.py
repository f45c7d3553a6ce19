"""Units, presets and zones.

This module provides:
    - TimeUnit: The closed set of arithmetic steps and granularities
    - DateFormat: Named token templates for formatting
    - Timezone: Fixed UTC-offset zone for wall-clock fields
"""

from __future__ import annotations

from chronobox.units.dateformat import DateFormat, resolve_format
from chronobox.units.timeunit import TimeUnit, is_valid_time_unit, resolve_time_unit
from chronobox.units.timezone import Timezone

__all__: list[str] = [
    "DateFormat",
    "TimeUnit",
    "Timezone",
    "is_valid_time_unit",
    "resolve_format",
    "resolve_time_unit",
]
