"""Utility functions shared across the invoice editor package."""

from invoice_editor.utils.invoice_helpers import (
    format_currency,
    format_date,
    format_quantity,
    parse_date,
    parse_number,
)

__all__ = [
    "format_currency",
    "format_date",
    "format_quantity",
    "parse_date",
    "parse_number",
]
