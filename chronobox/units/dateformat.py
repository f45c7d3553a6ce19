"""DateFormat presets for DateValue.format_date()."""

from __future__ import annotations

from enum import Enum


class DateFormat(Enum):
    """Named token templates.

    Any other string is accepted as a custom template wherever a
    DateFormat is; see chronobox.format.tokens for the token set.
    """

    ISO = "YYYY-MM-DD"
    US = "MM/DD/YYYY"
    EU = "DD.MM.YYYY"
    VERBOSE = "MMMM DD, YYYY"


def resolve_format(fmt: DateFormat | str) -> str:
    """Return the template string for a preset or custom format.

    Raises:
        TypeError: If fmt is neither a DateFormat nor a string.

    Examples:
        >>> resolve_format(DateFormat.US)
        'MM/DD/YYYY'
        >>> resolve_format("DD-MM-YYYY")
        'DD-MM-YYYY'
    """
    if isinstance(fmt, DateFormat):
        return fmt.value
    if isinstance(fmt, str):
        return fmt
    raise TypeError(f"format must be a DateFormat or str, got {type(fmt).__name__}")


__all__ = ["DateFormat", "resolve_format"]
