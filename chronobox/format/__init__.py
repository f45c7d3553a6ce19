"""Formatting and parsing.

This module provides functions for converting instants to and from
string representations:
    - Token templates (YYYY, MMMM, MM, DD)
    - ISO 8601 parsing and rendering

Functions:
    render_template: Substitute date tokens in a template.
    month_name: English name of a month.
    parse_iso8601: Parse an ISO-like string into epoch milliseconds.
    format_iso8601: Render epoch milliseconds as ISO 8601.
"""

from __future__ import annotations

from chronobox.format.iso8601 import format_iso8601, parse_iso8601
from chronobox.format.tokens import month_name, render_template

__all__: list[str] = [
    # Token templates
    "render_template",
    "month_name",
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
]
