"""
Toolbar component for the Invoice Editor.

Provides the currency selector and the PDF export button.
"""

import reflex as rx

from invoice_editor.models.currency import CURRENCIES
from invoice_editor.state import EditorState


def toolbar() -> rx.Component:
    """
    Build the toolbar row above the editor and preview.

    Returns:
        The toolbar component.
    """
    return rx.box(
        rx.box(
            rx.text("Currency:", class_name="label"),
            rx.el.select(
                *[
                    rx.el.option(currency.label, value=currency.code)
                    for currency in CURRENCIES
                ],
                value=EditorState.currency_code,
                on_change=EditorState.set_currency,
                class_name="currency-select",
            ),
            class_name="currency-picker",
        ),
        rx.button(
            rx.icon("download", size=16),
            "Export to PDF",
            loading=EditorState.is_exporting,
            disabled=EditorState.is_exporting,
            on_click=EditorState.export_pdf,
            class_name="export-button",
            title="Export to PDF",
        ),
        class_name="toolbar",
    )
