"""Token template rendering.

Supported Tokens:
    YYYY - 4-digit year (e.g., 2024)
    MMMM - Full English month name (e.g., January)
    MM   - 2-digit month (01-12)
    DD   - 2-digit day (01-31)

Tokens are substituted in the order above and every occurrence of a token
is replaced. MMMM goes before MM because they share characters. There is
no escaping: any other text, including partial tokens such as "M" or
"YY", is copied verbatim.

Examples:
    >>> render_template("MMMM DD, YYYY", 2024, 1, 1)
    'January 01, 2024'

    >>> render_template("DD.MM.YYYY", 2024, 3, 9)
    '09.03.2024'
"""

from __future__ import annotations

from chronobox._internal.constants import MONTH_NAMES


def month_name(month: int) -> str:
    """Return the English name of a month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return MONTH_NAMES[month - 1]


def render_template(template: str, year: int, month: int, day: int) -> str:
    """Substitute date tokens in a template.

    Args:
        template: A preset or custom template string.
        year: The year to render.
        month: The month (1-12).
        day: The day of month.

    Returns:
        The rendered string.
    """
    return (
        template.replace("YYYY", f"{year:04d}")
        .replace("MMMM", month_name(month))
        .replace("MM", f"{month:02d}")
        .replace("DD", f"{day:02d}")
    )


__all__ = ["month_name", "render_template"]
