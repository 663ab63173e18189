"""
Reflex invoice preview component.

Displays EditorState.preview, the same formatted projection the PDF
exporter rasterizes. The theme color only tints the table header and the
grand total.
"""

import reflex as rx

from invoice_editor.models.reflex_models import PreviewRowModel
from invoice_editor.state import EditorState

_COLUMNS = (
    ("Description", "span-5"),
    ("Qty", "span-1 center"),
    ("Price", "span-2 right"),
    ("Tax", "span-1 right"),
    ("Disc", "span-1 right"),
    ("Amount", "span-2 right"),
)


def invoice_preview() -> rx.Component:
    """
    Build the read-only invoice preview.

    Returns:
        The preview component.
    """
    preview = EditorState.preview
    return rx.box(
        rx.box(
            _company_block(),
            _metadata_panel(),
            class_name="preview-header",
        ),
        rx.cond(preview.has_client, _client_block()),
        _items_table(),
        _totals_block(),
        rx.cond(
            preview.notes != "",
            rx.box(
                rx.heading("Notes:", size="1", as_="h3"),
                rx.text(preview.notes, class_name="muted small"),
                class_name="preview-notes",
            ),
        ),
        class_name="invoice-preview",
    )


def _company_block() -> rx.Component:
    preview = EditorState.preview
    return rx.box(
        rx.cond(
            preview.logo_uri != "",
            rx.image(src=preview.logo_uri, alt=preview.company_name, class_name="preview-logo"),
        ),
        rx.heading(preview.company_name, size="3", as_="h2"),
        rx.foreach(preview.company_lines, lambda line: rx.text(line, class_name="muted small")),
    )


def _metadata_panel() -> rx.Component:
    preview = EditorState.preview
    return rx.box(
        rx.heading("INVOICE", size="4", as_="h1"),
        rx.box(
            _meta_row("Invoice Number:", preview.invoice_number),
            _meta_row("Invoice Date:", preview.issue_date),
            _meta_row("Due Date:", preview.due_date),
            class_name="meta-grid",
        ),
        class_name="meta-panel",
    )


def _meta_row(label: str, value: rx.Var) -> rx.Component:
    return rx.fragment(
        rx.text(label, class_name="label"),
        rx.text(value),
    )


def _client_block() -> rx.Component:
    """Build the Bill To section."""
    preview = EditorState.preview
    return rx.box(
        rx.text("Bill To:", class_name="muted small label"),
        rx.heading(preview.client_name, size="3", as_="h2"),
        rx.foreach(preview.client_lines, lambda line: rx.text(line, class_name="muted small")),
        class_name="preview-client",
    )


def _items_table() -> rx.Component:
    return rx.box(
        rx.box(
            *[rx.text(label, class_name=span) for label, span in _COLUMNS],
            background_color=EditorState.preview.accent_color,
            class_name="preview-row preview-row-head",
        ),
        rx.foreach(EditorState.preview.rows, _item_row),
        class_name="preview-table",
    )


def _item_row(row: PreviewRowModel) -> rx.Component:
    """Build one table row; even rows are striped."""
    values = (
        row.description,
        row.quantity,
        row.price,
        row.tax,
        row.discount,
        row.amount,
    )
    return rx.box(
        *[
            rx.text(value, class_name=span)
            for value, (_, span) in zip(values, _COLUMNS)
        ],
        class_name=rx.cond(row.striped, "preview-row striped", "preview-row"),
    )


def _totals_block() -> rx.Component:
    preview = EditorState.preview
    return rx.box(
        _totals_row("Subtotal:", preview.subtotal),
        _totals_row("Tax:", preview.tax),
        _totals_row("Discount:", preview.discount),
        rx.text(preview.total_label, class_name="right total", color=preview.accent_color),
        rx.text(preview.grand_total, class_name="right total", color=preview.accent_color),
        class_name="preview-totals",
    )


def _totals_row(label: str, value: rx.Var) -> rx.Component:
    return rx.fragment(
        rx.text(label, class_name="right label"),
        rx.text(value, class_name="right"),
    )
