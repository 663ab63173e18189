"""
Reflex invoice form component.

Renders editable fields bound to EditorState.document. Every change is
sent as a single-field update; numeric item fields are parsed by the
session, so the inputs pass raw text through.
"""

import reflex as rx

from invoice_editor.models.invoice import ColorTheme
from invoice_editor.models.reflex_models import LineItemModel
from invoice_editor.state import EditorState

LOGO_UPLOAD_ID = "logo_upload"


def invoice_form() -> rx.Component:
    """
    Build the full editor form.

    Returns:
        The form component with parties, metadata, items and notes.
    """
    return rx.box(
        rx.box(
            _company_section(),
            _client_section(),
            class_name="form-grid",
        ),
        _items_section(),
        _field(
            "Notes",
            rx.text_area(
                value=EditorState.document.notes,
                on_change=lambda value: EditorState.set_text_field("notes", value),
                placeholder="Additional notes or payment instructions",
                rows="3",
            ),
        ),
        class_name="invoice-form",
    )


def _company_section() -> rx.Component:
    """Build the company name, description and logo inputs."""
    return rx.box(
        rx.heading("Company Information", size="3", as_="h3"),
        _text_input("Company Name", "company_name", "Your Company Name"),
        _text_area("Company Description", "company_address", "Company Description"),
        _field("Company Logo", _logo_upload()),
        class_name="form-section",
    )


def _client_section() -> rx.Component:
    """Build the client inputs plus invoice number, theme and dates."""
    return rx.box(
        rx.heading("Client Information", size="3", as_="h3"),
        _text_input("Client Name", "client_name", "Client Name"),
        _text_area("Client Description", "client_address", "Client Description"),
        rx.box(
            _text_input("Invoice Number", "invoice_number", "INV-001"),
            _field("Color Theme", _theme_picker()),
            class_name="field-pair",
        ),
        rx.box(
            _date_input("Invoice Date", "issue_date", EditorState.document.issue_date),
            _date_input("Due Date", "due_date", EditorState.document.due_date),
            class_name="field-pair",
        ),
        class_name="form-section",
    )


def _items_section() -> rx.Component:
    return rx.box(
        rx.box(
            rx.heading("Invoice Items", size="3", as_="h3"),
            rx.button(
                rx.icon("plus", size=16),
                "Add Item",
                on_click=EditorState.add_item,
                size="1",
                class_name="add-item-button",
            ),
            class_name="section-header",
        ),
        rx.foreach(EditorState.document.items, _item_card),
        class_name="form-section",
    )


def _item_card(item: LineItemModel) -> rx.Component:
    """Build the editable card for one line item."""
    return rx.box(
        _field(
            "Description",
            rx.input(
                value=item.description,
                on_change=lambda value: EditorState.update_item(
                    item.id, "description", value
                ),
                placeholder="Item description",
            ),
            class_name="span-5",
        ),
        _number_field(item, "Qty", "quantity", min="1", class_name="span-1"),
        _number_field(
            item, "Price", "unit_price", min="0", step="0.01", class_name="span-2"
        ),
        _number_field(
            item, "Tax %", "tax_percent", min="0", max="100", class_name="span-1"
        ),
        _number_field(
            item,
            "Discount %",
            "discount_percent",
            min="0",
            max="100",
            class_name="span-2",
        ),
        rx.box(
            rx.button(
                rx.icon("trash-2", size=16),
                color_scheme="red",
                on_click=EditorState.remove_item(item.id),
                disabled=~EditorState.can_remove_items,
                title="Remove item",
            ),
            class_name="span-1 item-actions",
        ),
        class_name="card item-card",
    )


def _number_field(
    item: LineItemModel,
    label: str,
    field: str,
    class_name: str,
    **attrs: str,
) -> rx.Component:
    """Build a numeric input bound to one item field."""
    return _field(
        label,
        rx.input(
            type="number",
            value=getattr(item, field),
            on_change=lambda value: EditorState.update_item(item.id, field, value),
            **attrs,
        ),
        class_name=class_name,
    )


def _theme_picker() -> rx.Component:
    """Build one swatch button per palette color."""
    return rx.box(
        *[
            rx.el.button(
                type="button",
                title=theme.display_name,
                background_color=theme.color,
                on_click=EditorState.set_theme(theme.value),
                class_name=rx.cond(
                    EditorState.document.color_theme == theme.value,
                    "theme-swatch active",
                    "theme-swatch",
                ),
            )
            for theme in ColorTheme
        ],
        class_name="theme-picker",
    )


def _logo_upload() -> rx.Component:
    """Build the logo picker with a thumbnail and remove button once set."""
    return rx.box(
        rx.upload(
            rx.button(rx.icon("image", size=16), "Choose image", variant="outline"),
            id=LOGO_UPLOAD_ID,
            accept={"image/*": []},
            max_files=1,
            multiple=False,
            on_drop=EditorState.handle_logo_upload(
                rx.upload_files(upload_id=LOGO_UPLOAD_ID)
            ),
            class_name="logo-upload",
        ),
        rx.cond(
            EditorState.document.company_logo != "",
            rx.box(
                rx.image(src=EditorState.document.company_logo, class_name="logo-thumb"),
                rx.button(
                    "Remove",
                    variant="ghost",
                    size="1",
                    on_click=EditorState.clear_logo,
                ),
                class_name="logo-current",
            ),
        ),
    )


def _text_input(label: str, name: str, placeholder: str) -> rx.Component:
    return _field(
        label,
        rx.input(
            value=getattr(EditorState.document, name),
            on_change=lambda value: EditorState.set_text_field(name, value),
            placeholder=placeholder,
        ),
    )


def _text_area(label: str, name: str, placeholder: str) -> rx.Component:
    return _field(
        label,
        rx.text_area(
            value=getattr(EditorState.document, name),
            on_change=lambda value: EditorState.set_text_field(name, value),
            placeholder=placeholder,
            rows="3",
        ),
    )


def _date_input(label: str, name: str, value: rx.Var) -> rx.Component:
    return _field(
        label,
        rx.input(
            type="date",
            value=value,
            on_change=lambda text: EditorState.set_date_field(name, text),
        ),
    )


def _field(label: str, control: rx.Component, class_name: str = "") -> rx.Component:
    """Build a labeled form field."""
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        class_name=f"field {class_name}".strip(),
    )
