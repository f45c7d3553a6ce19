"""Calendar arithmetic on epoch milliseconds.

The functions in this module are the canonical implementations behind the
DateValue methods. They work on plain epoch milliseconds and a Timezone,
so they can be used without constructing wrapper values.

Shift Operations (from chronobox.arithmetic.shift):
    - shift_millis: Offset an instant by a number of units, with clamping

Difference Operations (from chronobox.arithmetic.difference):
    - difference: Signed difference in a unit

Truncation Operations (from chronobox.arithmetic.truncation):
    - truncate_millis: Zero every field finer than a granularity
    - truncate_date: The same for a DateValue
"""

from __future__ import annotations

from chronobox.arithmetic.difference import difference
from chronobox.arithmetic.shift import shift_millis
from chronobox.arithmetic.truncation import truncate_date, truncate_millis

__all__ = [
    # Shift operations
    "shift_millis",
    # Difference operations
    "difference",
    # Truncation operations
    "truncate_millis",
    "truncate_date",
]
