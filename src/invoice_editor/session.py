"""
Editing session for a single invoice.

InvoiceSession owns the InvoiceDocument and the active Currency and applies
the mutations the editor form sends. It also tracks the active view and
the PDF export status as explicit states. Everything here is synchronous
and free of UI dependencies; the Reflex state serializes a session with
to_dict/from_dict between events.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping
from uuid import uuid4

from invoice_editor.lib import logs
from invoice_editor.models.common import ExportStatus, ViewMode
from invoice_editor.models.currency import DEFAULT_CURRENCY, Currency, find_currency
from invoice_editor.models.invoice import (
    ColorTheme,
    InvoiceDocument,
    LineItem,
    Logo,
    default_document,
    deserialize_document,
    serialize_document,
)
from invoice_editor.utils import parse_number

LOG = logs.logger(__file__)

_DOCUMENT_FIELDS = frozenset(f.name for f in fields(InvoiceDocument))
_NUMERIC_ITEM_FIELDS = frozenset(
    {"quantity", "unit_price", "tax_percent", "discount_percent"}
)


def new_line_item() -> LineItem:
    """Return a blank item with a fresh id."""
    return LineItem(
        id=uuid4().hex,
        description="",
        quantity=1,
        unit_price=0,
        tax_percent=0,
        discount_percent=0,
    )


@dataclass
class InvoiceSession:
    """
    Controller for one user's invoice and display settings.

    Attributes:
        document: The invoice being edited.
        currency: Active display currency from the catalog.
        view: Pane shown on narrow layouts.
        export_status: Progress of the current or last export.
    """

    document: InvoiceDocument = field(default_factory=default_document)
    currency: Currency = DEFAULT_CURRENCY
    view: ViewMode = ViewMode.EDIT
    export_status: ExportStatus = ExportStatus.IDLE

    def update(self, **changes: Any) -> InvoiceDocument:
        """
        Shallow-merge the given fields into the document.

        Items are replaced wholesale when passed. Unknown field names raise
        TypeError since they can only come from a coding mistake.
        """
        unknown = set(changes) - _DOCUMENT_FIELDS
        if unknown:
            raise TypeError(f"Unknown invoice fields: {sorted(unknown)}")
        if "color_theme" in changes:
            changes["color_theme"] = ColorTheme.resolve(changes["color_theme"])
        self.document = replace(self.document, **changes)
        return self.document

    def update_item(self, item_id: str, field_name: str, value: Any) -> bool:
        """
        Apply an edit to one item field.

        Numeric fields go through silent-zero parsing. Returns False when
        no item has the id.
        """
        if field_name != "description" and field_name not in _NUMERIC_ITEM_FIELDS:
            raise TypeError(f"Unknown line item field: {field_name}")
        if not any(item.id == item_id for item in self.document.items):
            return False
        if field_name == "description":
            coerced = "" if value is None else str(value)
        else:
            coerced = parse_number(value)
        items = [
            replace(item, **{field_name: coerced}) if item.id == item_id else item
            for item in self.document.items
        ]
        self.update(items=items)
        return True

    def add_item(self) -> LineItem:
        """Append a blank item and return it."""
        item = new_line_item()
        self.update(items=[*self.document.items, item])
        return item

    def remove_item(self, item_id: str) -> bool:
        """Remove an item unless it is the only one left."""
        if len(self.document.items) <= 1:
            return False
        items = [item for item in self.document.items if item.id != item_id]
        if len(items) == len(self.document.items):
            return False
        self.update(items=items)
        return True

    def set_currency(self, code: str) -> bool:
        """Switch to a catalog currency; unknown codes are ignored."""
        currency = find_currency(code)
        if currency is None:
            LOG.debug("Ignoring unknown currency code: %s", code)
            return False
        self.currency = currency
        return True

    def set_theme(self, theme_id: str) -> bool:
        """Switch the accent theme; unknown ids are ignored."""
        try:
            theme = ColorTheme(theme_id)
        except ValueError:
            return False
        self.update(color_theme=theme)
        return True

    def set_logo(self, data: bytes, mime_type: str) -> Logo:
        logo = Logo(data=data, mime_type=mime_type or "application/octet-stream")
        self.update(company_logo=logo)
        return logo

    def clear_logo(self) -> None:
        self.update(company_logo=None)

    def set_view(self, view: ViewMode | str) -> None:
        self.view = ViewMode(view)

    def begin_export(self) -> bool:
        """Enter IN_PROGRESS unless an export is already running."""
        if self.export_status.busy:
            return False
        self.export_status = ExportStatus.IN_PROGRESS
        return True

    def finish_export(self, succeeded: bool) -> None:
        self.export_status = (
            ExportStatus.SUCCEEDED if succeeded else ExportStatus.FAILED
        )

    def abort_export(self) -> None:
        """Return to IDLE when there was nothing to export."""
        self.export_status = ExportStatus.IDLE

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "document": serialize_document(self.document),
            "currency": self.currency.code,
            "view": self.view.value,
            "export_status": self.export_status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "InvoiceSession":
        """Deserialize a session; missing data yields a fresh session."""
        if not data:
            return cls()
        document = deserialize_document(data.get("document") or {})
        if not document.items:
            document.items = [new_line_item()]
        return cls(
            document=document,
            currency=find_currency(data.get("currency")) or DEFAULT_CURRENCY,
            view=ViewMode(data.get("view", ViewMode.EDIT.value)),
            export_status=ExportStatus(
                data.get("export_status", ExportStatus.IDLE.value)
            ),
        )
