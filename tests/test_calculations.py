"""Unit tests for line item and invoice computations."""

import pytest

from invoice_editor import calculations
from invoice_editor.models.currency import Currency
from invoice_editor.models.invoice import InvoiceDocument, LineItem


def test_single_item_figures(single_item_document, usd):
    """qty 2 x 50 with 10% tax and 5% discount totals 105."""
    item = single_item_document.items[0]

    assert calculations.line_subtotal(item) == 100
    assert calculations.line_tax_amount(item) == 10
    assert calculations.line_discount_amount(item) == 5
    assert calculations.line_total(item, usd) == 105
    assert usd.format(calculations.invoice_grand_total(single_item_document, usd)) == "$105.00"


def test_two_item_totals(two_item_document, usd):
    """Second item is 30 + 6 - 3 = 33; grand total 133."""
    second = two_item_document.items[1]

    assert calculations.line_subtotal(second) == 30
    assert calculations.line_tax_amount(second) == 6
    assert calculations.line_discount_amount(second) == 3
    assert calculations.line_total(second, usd) == 33

    totals = calculations.compute_totals(two_item_document, usd)
    assert totals.subtotal == 130
    assert totals.tax == 6
    assert totals.discount == 3
    assert usd.format(totals.grand_total) == "$133.00"


@pytest.mark.parametrize(
    "quantity,price,tax,discount,rate",
    [
        (1, 0, 0, 0, 1),
        (3, 19.99, 7.5, 0, 1),
        (2.5, 40, 0, 12.5, 1.3),
        (7, 3.33, 21, 3, 0.85),
    ],
)
def test_line_total_formula(quantity, price, tax, discount, rate):
    item = LineItem(
        id="x",
        quantity=quantity,
        unit_price=price,
        tax_percent=tax,
        discount_percent=discount,
    )
    currency = Currency("TST", "T", rate)
    base = quantity * price
    expected = (base + base * tax / 100 - base * discount / 100) * rate

    assert calculations.line_total(item, currency) == pytest.approx(expected)


def test_grand_total_is_sum_of_converted_line_totals():
    """The rate is applied per line before summing."""
    currency = Currency("TST", "T", 1.1)
    items = [
        LineItem(
            id=str(i),
            quantity=i + 1,
            unit_price=0.1 * (i + 3),
            tax_percent=7,
            discount_percent=3,
        )
        for i in range(6)
    ]
    document = InvoiceDocument(items=items)
    expected = 0.0
    for item in items:
        expected += calculations.line_total(item, currency)

    assert calculations.invoice_grand_total(document, currency) == expected


def test_rate_scales_every_aggregate(two_item_document, usd, doubled):
    base = calculations.compute_totals(two_item_document, usd)
    converted = calculations.compute_totals(two_item_document, doubled)

    assert converted.subtotal == pytest.approx(base.subtotal * 2)
    assert converted.tax == pytest.approx(base.tax * 2)
    assert converted.discount == pytest.approx(base.discount * 2)
    assert converted.grand_total == pytest.approx(base.grand_total * 2)


def test_converted_unit_price(doubled):
    item = LineItem(id="x", quantity=4, unit_price=12.5)

    assert calculations.converted_unit_price(item, doubled) == 25
    assert item.unit_price == 12.5


def test_zeroed_item_contributes_nothing(usd):
    item = LineItem(id="x", quantity=0, unit_price=0, tax_percent=0, discount_percent=0)

    assert calculations.line_total(item, usd) == 0
    assert usd.format(calculations.line_total(item, usd)) == "$0.00"
