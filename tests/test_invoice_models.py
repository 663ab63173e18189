"""Unit tests for the invoice document models."""

from datetime import date

from invoice_editor.models.invoice import (
    ColorTheme,
    InvoiceDocument,
    LineItem,
    Logo,
    default_document,
    deserialize_document,
    serialize_document,
)


def test_default_document(today):
    document = default_document(today)

    assert document.company_name == "Your Company"
    assert document.client_name == "Client Name"
    assert document.invoice_number == "001"
    assert document.issue_date == today
    assert document.due_date == date(2024, 3, 31)
    assert document.color_theme is ColorTheme.BLUE
    assert document.company_logo is None
    assert len(document.items) == 1
    assert document.items[0].unit_price == 100
    assert document.items[0].tax_percent == 10


def test_export_filename():
    document = InvoiceDocument(items=[LineItem(id="1")], invoice_number="INV-42")

    assert document.export_filename == "Invoice-INV-42.pdf"


def test_has_client_ignores_whitespace():
    document = InvoiceDocument(items=[LineItem(id="1")], client_name="  ", client_address="\n")
    assert not document.has_client

    document.client_address = "Somewhere"
    assert document.has_client


def test_theme_colors_and_fallback():
    assert ColorTheme.GREEN.color == "#22c55e"
    assert ColorTheme.resolve("purple") is ColorTheme.PURPLE
    assert ColorTheme.resolve("pink") is ColorTheme.BLUE
    assert ColorTheme.resolve(None) is ColorTheme.BLUE
    assert ColorTheme.ORANGE.display_name == "Orange"


def test_logo_data_uri_round_trip():
    logo = Logo(data=b"\x89PNG\r\n\x1a\nfake", mime_type="image/png")

    uri = logo.to_data_uri()

    assert uri.startswith("data:image/png;base64,")
    assert Logo.from_data_uri(uri) == logo


def test_logo_from_invalid_uri():
    assert Logo.from_data_uri(None) is None
    assert Logo.from_data_uri("/placeholder.svg") is None
    assert Logo.from_data_uri("data:image/png,plain") is None
    assert Logo.from_data_uri("data:image/png;base64,@@@") is None


def test_document_serialization_round_trip(today):
    document = default_document(today)
    document.company_logo = Logo(data=b"logo-bytes", mime_type="image/jpeg")
    document.color_theme = ColorTheme.RED

    data = serialize_document(document)

    assert data["issue_date"] == "2024-03-01"
    assert data["color_theme"] == "red"
    assert data["company_logo"].startswith("data:image/jpeg;base64,")
    assert deserialize_document(data) == document


def test_deserialize_missing_dates():
    document = deserialize_document(
        {"items": [{"id": "1"}], "issue_date": None, "due_date": ""}
    )

    assert document.issue_date is None
    assert document.due_date is None
    assert document.items == [LineItem(id="1")]
