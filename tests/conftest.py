"""
Pytest configuration for Invoice Editor tests.

Provides documents and currencies shared across test modules.
"""

from datetime import date

import pytest

from invoice_editor.models.currency import Currency, find_currency
from invoice_editor.models.invoice import InvoiceDocument, LineItem, default_document


@pytest.fixture
def usd() -> Currency:
    return find_currency("USD")


@pytest.fixture
def doubled() -> Currency:
    """Non-catalog currency with rate 2."""
    return Currency(code="DBL", symbol="D", rate=2)


@pytest.fixture
def today() -> date:
    return date(2024, 3, 1)


@pytest.fixture
def single_item_document(today) -> InvoiceDocument:
    """One item: qty 2, price 50, tax 10%, discount 5%."""
    document = default_document(today)
    document.items = [
        LineItem(
            id="a",
            description="Consulting",
            quantity=2,
            unit_price=50,
            tax_percent=10,
            discount_percent=5,
        )
    ]
    return document


@pytest.fixture
def two_item_document(today) -> InvoiceDocument:
    document = default_document(today)
    document.items = [
        LineItem(id="a", description="Setup", quantity=1, unit_price=100),
        LineItem(
            id="b",
            description="Support hours",
            quantity=3,
            unit_price=10,
            tax_percent=20,
            discount_percent=10,
        ),
    ]
    return document
