"""Core value types.

This module provides:
    - DateValue: Immutable instant with a display format
    - DateComponents: Wall-clock fields of a DateValue
"""

from __future__ import annotations

from chronobox.core.components import DateComponents
from chronobox.core.datevalue import DateInput, DateValue

__all__: list[str] = [
    "DateComponents",
    "DateInput",
    "DateValue",
]
