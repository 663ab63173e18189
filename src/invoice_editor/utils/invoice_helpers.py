"""Helper functions for invoice input parsing and display formatting."""

from __future__ import annotations

import math
import re
from datetime import date, datetime

# Leading decimal number, optional exponent; trailing text is ignored
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y")


def parse_number(value: str | float | int | None) -> float:
    """
    Coerce free-form numeric input to a float.

    Text is read up to the end of its leading number, so "12abc" is 12.
    Input with no leading number becomes 0.0 instead of raising.

    Args:
        value: Raw field value from the editor (text or a number).

    Returns:
        The parsed number, or 0.0 when nothing numeric can be read.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a date string from the editor's date inputs.

    Args:
        date_str: ISO date (e.g., "2024-12-25") or m/d/y text.

    Returns:
        date object if parsing succeeds, None otherwise.
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: date | None) -> str:
    """Format a date for display or return the N/A label."""
    if not value:
        return "N/A"
    return value.strftime("%b %d, %Y")


def format_currency(value: float, symbol: str) -> str:
    """
    Format an amount with the currency symbol prefixed.

    Args:
        value: Amount already converted to the display currency.
        symbol: Currency glyph (e.g., '$', 'Rs.').

    Returns:
        Formatted string like '$1234.56'.
    """
    return f"{symbol}{value:.2f}"


def format_quantity(value: float) -> str:
    """Render a numeric field without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
