"""
Reflex-compatible models for the Invoice Editor.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Dates are ISO strings and the logo is a
data URI, since the browser consumes both as text.
"""

import reflex as rx

from invoice_editor.models.invoice import InvoiceDocument, LineItem
from invoice_editor.preview import InvoicePreview


class LineItemModel(rx.Base):
    """Editable line item."""

    id: str = ""
    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    tax_percent: float = 0
    discount_percent: float = 0


class DocumentModel(rx.Base):
    """Editable document fields bound to the form."""

    company_name: str = ""
    company_address: str = ""
    company_logo: str = ""
    client_name: str = ""
    client_address: str = ""
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    color_theme: str = "blue"
    notes: str = ""
    items: list[LineItemModel] = []


class PreviewRowModel(rx.Base):
    """Rendered table row."""

    id: str = ""
    description: str = ""
    quantity: str = ""
    price: str = ""
    tax: str = ""
    discount: str = ""
    amount: str = ""
    striped: bool = False


class PreviewModel(rx.Base):
    """Complete preview projection for Reflex."""

    company_name: str = ""
    company_lines: list[str] = []
    logo_uri: str = ""
    has_client: bool = False
    client_name: str = ""
    client_lines: list[str] = []
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    rows: list[PreviewRowModel] = []
    subtotal: str = ""
    tax: str = ""
    discount: str = ""
    total_label: str = ""
    grand_total: str = ""
    accent_color: str = ""
    notes: str = ""


def item_to_model(item: LineItem) -> LineItemModel:
    return LineItemModel(
        id=item.id,
        description=item.description,
        quantity=item.quantity,
        unit_price=item.unit_price,
        tax_percent=item.tax_percent,
        discount_percent=item.discount_percent,
    )


def document_to_model(document: InvoiceDocument) -> DocumentModel:
    """
    Convert an InvoiceDocument to the form model.

    Args:
        document: Current invoice.

    Returns:
        DocumentModel instance.
    """
    return DocumentModel(
        company_name=document.company_name,
        company_address=document.company_address,
        company_logo=(
            document.company_logo.to_data_uri() if document.company_logo else ""
        ),
        client_name=document.client_name,
        client_address=document.client_address,
        invoice_number=document.invoice_number,
        issue_date=document.issue_date.isoformat() if document.issue_date else "",
        due_date=document.due_date.isoformat() if document.due_date else "",
        color_theme=document.color_theme.value,
        notes=document.notes,
        items=[item_to_model(item) for item in document.items],
    )


def preview_to_model(preview: InvoicePreview) -> PreviewModel:
    """Convert an InvoicePreview projection to its Reflex model."""
    client = preview.client
    return PreviewModel(
        company_name=preview.company.name,
        company_lines=list(preview.company.address_lines),
        logo_uri=preview.logo_uri or "",
        has_client=client is not None,
        client_name=client.name if client else "",
        client_lines=list(client.address_lines) if client else [],
        invoice_number=preview.invoice_number,
        issue_date=preview.issue_date,
        due_date=preview.due_date,
        rows=[
            PreviewRowModel(
                id=row.item_id,
                description=row.description,
                quantity=row.quantity,
                price=row.price,
                tax=row.tax,
                discount=row.discount,
                amount=row.amount,
                striped=row.striped,
            )
            for row in preview.rows
        ],
        subtotal=preview.totals.subtotal,
        tax=preview.totals.tax,
        discount=preview.totals.discount,
        total_label=preview.totals.total_label,
        grand_total=preview.totals.grand_total,
        accent_color=preview.accent_color,
        notes=preview.notes or "",
    )
