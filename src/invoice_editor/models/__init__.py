"""
Data models and serialization helpers for the Invoice Editor.

This package provides:
- Invoice document models (InvoiceDocument, LineItem, Logo, ColorTheme)
- Currency descriptors and the fixed currency catalog
- Session state enums (ViewMode, ExportStatus)
- Serialization to JSON-compatible dictionaries for Reflex state

Reflex view models live in models.reflex_models and are imported
directly by the state and components.
"""

from invoice_editor.models.common import ExportStatus, ViewMode
from invoice_editor.models.currency import (
    CURRENCIES,
    DEFAULT_CURRENCY,
    Currency,
    find_currency,
)
from invoice_editor.models.invoice import (
    ColorTheme,
    InvoiceDocument,
    LineItem,
    Logo,
    default_document,
    deserialize_document,
    serialize_document,
)

__all__ = [
    "CURRENCIES",
    "DEFAULT_CURRENCY",
    "ColorTheme",
    "Currency",
    "ExportStatus",
    "InvoiceDocument",
    "LineItem",
    "Logo",
    "ViewMode",
    "default_document",
    "deserialize_document",
    "find_currency",
    "serialize_document",
]
