"""
Invoice document models and serialization helpers.

The editable invoice is a single aggregate:

    InvoiceDocument
    ├── company (name, address text, optional Logo)
    ├── client (name, address text)
    ├── metadata (number, issue/due dates, ColorTheme, notes)
    └── LineItem[] (description, quantity, price, tax %, discount %)

Serialization functions convert between the dataclasses and
JSON-compatible dictionaries so the document can live in Reflex state.
"""

import base64
import binascii
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Any, Mapping

from invoice_editor.utils import parse_date

DUE_DAYS = 30


class ColorTheme(str, Enum):
    """Accent palette for the preview. Cosmetic only."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    ORANGE = "orange"

    @property
    def color(self) -> str:
        """Hex color used for the table header and total."""
        return _THEME_COLORS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def resolve(cls, value: "str | ColorTheme | None") -> "ColorTheme":
        """Return the matching theme, falling back to blue."""
        try:
            return cls(value)
        except ValueError:
            return cls.BLUE


_THEME_COLORS = {
    ColorTheme.BLUE: "#3b82f6",
    ColorTheme.GREEN: "#22c55e",
    ColorTheme.PURPLE: "#a855f7",
    ColorTheme.RED: "#ef4444",
    ColorTheme.ORANGE: "#f97316",
}


@dataclass(slots=True, frozen=True)
class Logo:
    """Uploaded company logo kept as raw bytes with its MIME type."""

    data: bytes
    mime_type: str = "image/png"

    def to_data_uri(self) -> str:
        """Return a base64 data URI the browser can render directly."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @classmethod
    def from_data_uri(cls, uri: str | None) -> "Logo | None":
        """Decode a base64 data URI; anything else yields None."""
        if not uri or not uri.startswith("data:") or "," not in uri:
            return None
        header, payload = uri[len("data:") :].split(",", 1)
        if not header.endswith(";base64"):
            return None
        mime_type = header[: -len(";base64")] or "application/octet-stream"
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            return None
        return cls(data=data, mime_type=mime_type)


@dataclass(slots=True)
class LineItem:
    """One billable row on the invoice."""

    id: str
    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    tax_percent: float = 0
    discount_percent: float = 0


@dataclass(slots=True)
class InvoiceDocument:
    """Full editable invoice state."""

    items: list[LineItem]
    company_name: str = ""
    company_address: str = ""
    company_logo: Logo | None = None
    client_name: str = ""
    client_address: str = ""
    invoice_number: str = ""
    issue_date: date | None = None
    due_date: date | None = None
    color_theme: ColorTheme = ColorTheme.BLUE
    notes: str = ""

    @property
    def has_client(self) -> bool:
        """True when either client field has non-whitespace text."""
        return bool(self.client_name.strip() or self.client_address.strip())

    @property
    def export_filename(self) -> str:
        """Download name for the exported PDF."""
        return f"Invoice-{self.invoice_number}.pdf"


def default_document(today: date | None = None) -> InvoiceDocument:
    """Return the placeholder document a new session starts with."""
    today = today or date.today()
    return InvoiceDocument(
        company_name="Your Company",
        company_address="123 Business St, City, Country",
        client_name="Client Name",
        client_address="Client Address, City, Country",
        invoice_number="001",
        issue_date=today,
        due_date=today + timedelta(days=DUE_DAYS),
        color_theme=ColorTheme.BLUE,
        items=[
            LineItem(
                id="1",
                description="Service or Product",
                quantity=1,
                unit_price=100,
                tax_percent=10,
                discount_percent=0,
            )
        ],
        notes="Thank you for your business!",
    )


def serialize_document(document: InvoiceDocument) -> dict:
    """Convert an InvoiceDocument into a JSON serializable dictionary."""
    data = asdict(document)
    data["issue_date"] = document.issue_date.isoformat() if document.issue_date else None
    data["due_date"] = document.due_date.isoformat() if document.due_date else None
    data["color_theme"] = document.color_theme.value
    data["company_logo"] = (
        document.company_logo.to_data_uri() if document.company_logo else None
    )
    return data


def deserialize_document(payload: Mapping[str, Any]) -> InvoiceDocument:
    """Convert a dictionary structure back into an InvoiceDocument."""
    return InvoiceDocument(
        items=[LineItem(**item) for item in payload.get("items", [])],
        company_name=payload.get("company_name", ""),
        company_address=payload.get("company_address", ""),
        company_logo=Logo.from_data_uri(payload.get("company_logo")),
        client_name=payload.get("client_name", ""),
        client_address=payload.get("client_address", ""),
        invoice_number=payload.get("invoice_number", ""),
        issue_date=parse_date(payload.get("issue_date")),
        due_date=parse_date(payload.get("due_date")),
        color_theme=ColorTheme.resolve(payload.get("color_theme")),
        notes=payload.get("notes", ""),
    )
