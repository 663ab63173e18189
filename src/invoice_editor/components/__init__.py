"""
Reflex UI components for the Invoice Editor.

This package provides the composable pieces of the single page:
- invoice_form: Editable company, client, metadata, items and notes
- invoice_preview: Read-only invoice with computed totals
- toolbar: Currency selector and PDF export button
"""

from invoice_editor.components.invoice_form import invoice_form
from invoice_editor.components.invoice_preview import invoice_preview
from invoice_editor.components.toolbar import toolbar

__all__ = [
    "invoice_form",
    "invoice_preview",
    "toolbar",
]
