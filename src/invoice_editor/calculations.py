"""
Monetary computations over line items and invoice documents.

All functions are pure. Per-line helpers work in the document's base
currency except line_total, which applies the currency rate. Aggregates
apply the rate after summing base amounts, while the grand total sums
already-converted line totals. The two orders give different float
rounding when the rate is not 1, so they must not be swapped.
"""

from dataclasses import dataclass

from invoice_editor.models.currency import Currency
from invoice_editor.models.invoice import InvoiceDocument, LineItem


def line_subtotal(item: LineItem) -> float:
    """Quantity times unit price, in base currency."""
    return item.quantity * item.unit_price


def line_tax_amount(item: LineItem) -> float:
    """Tax on the line subtotal, in base currency."""
    return line_subtotal(item) * item.tax_percent / 100


def line_discount_amount(item: LineItem) -> float:
    """Discount on the line subtotal, in base currency."""
    return line_subtotal(item) * item.discount_percent / 100


def line_total(item: LineItem, currency: Currency) -> float:
    """Line subtotal plus tax minus discount, converted to the currency."""
    subtotal = line_subtotal(item)
    return (
        subtotal + line_tax_amount(item) - line_discount_amount(item)
    ) * currency.rate


def converted_unit_price(item: LineItem, currency: Currency) -> float:
    return item.unit_price * currency.rate


def invoice_subtotal(document: InvoiceDocument, currency: Currency) -> float:
    return sum(line_subtotal(item) for item in document.items) * currency.rate


def invoice_tax(document: InvoiceDocument, currency: Currency) -> float:
    return sum(line_tax_amount(item) for item in document.items) * currency.rate


def invoice_discount(document: InvoiceDocument, currency: Currency) -> float:
    return (
        sum(line_discount_amount(item) for item in document.items) * currency.rate
    )


def invoice_grand_total(document: InvoiceDocument, currency: Currency) -> float:
    """Sum of converted line totals."""
    return sum(line_total(item, currency) for item in document.items)


@dataclass(slots=True, frozen=True)
class InvoiceTotals:
    """Aggregate figures for one document in one display currency."""

    subtotal: float
    tax: float
    discount: float
    grand_total: float


def compute_totals(document: InvoiceDocument, currency: Currency) -> InvoiceTotals:
    """Bundle the four aggregates used by the totals block."""
    return InvoiceTotals(
        subtotal=invoice_subtotal(document, currency),
        tax=invoice_tax(document, currency),
        discount=invoice_discount(document, currency),
        grand_total=invoice_grand_total(document, currency),
    )
