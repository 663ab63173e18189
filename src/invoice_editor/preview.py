"""
Read-only projection of an invoice for display and export.

build_preview turns a document and a currency into display strings. The
Reflex preview component and the PDF exporter both render this projection,
so what is exported matches what is on screen.
"""

from dataclasses import dataclass
from typing import Sequence

from invoice_editor import calculations
from invoice_editor.models.currency import Currency
from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.utils import format_date, format_quantity


@dataclass(slots=True, frozen=True)
class PartyBlock:
    """Name and address lines for the company or the client."""

    name: str
    address_lines: Sequence[str]


@dataclass(slots=True, frozen=True)
class PreviewRow:
    """One rendered table row."""

    item_id: str
    description: str
    quantity: str
    price: str
    tax: str
    discount: str
    amount: str
    striped: bool


@dataclass(slots=True, frozen=True)
class PreviewTotals:
    subtotal: str
    tax: str
    discount: str
    total_label: str
    grand_total: str


@dataclass(slots=True, frozen=True)
class InvoicePreview:
    """Everything the preview shows, already formatted."""

    company: PartyBlock
    logo_uri: str | None
    client: PartyBlock | None
    invoice_number: str
    issue_date: str
    due_date: str
    rows: Sequence[PreviewRow]
    totals: PreviewTotals
    accent_color: str
    notes: str | None
    filename: str


def _lines(text: str) -> list[str]:
    return text.splitlines() if text else []


def build_preview(document: InvoiceDocument, currency: Currency) -> InvoicePreview:
    """
    Project a document into its formatted preview.

    The client block is None when both client fields are blank after
    trimming. Rows keep document order.
    """
    rows = [
        PreviewRow(
            item_id=item.id,
            description=item.description,
            quantity=format_quantity(item.quantity),
            price=currency.format(calculations.converted_unit_price(item, currency)),
            tax=f"{format_quantity(item.tax_percent)}%",
            discount=f"{format_quantity(item.discount_percent)}%",
            amount=currency.format(calculations.line_total(item, currency)),
            striped=index % 2 == 0,
        )
        for index, item in enumerate(document.items)
    ]
    totals = calculations.compute_totals(document, currency)
    client = (
        PartyBlock(document.client_name, _lines(document.client_address))
        if document.has_client
        else None
    )
    return InvoicePreview(
        company=PartyBlock(document.company_name, _lines(document.company_address)),
        logo_uri=(
            document.company_logo.to_data_uri() if document.company_logo else None
        ),
        client=client,
        invoice_number=document.invoice_number,
        issue_date=format_date(document.issue_date),
        due_date=format_date(document.due_date),
        rows=rows,
        totals=PreviewTotals(
            subtotal=currency.format(totals.subtotal),
            tax=currency.format(totals.tax),
            discount=f"-{currency.format(totals.discount)}",
            total_label=f"TOTAL ({currency.code}):",
            grand_total=currency.format(totals.grand_total),
        ),
        accent_color=document.color_theme.color,
        notes=document.notes or None,
        filename=document.export_filename,
    )
