"""
Reflex state management for the Invoice Editor.

EditorState keeps one serialized InvoiceSession per browser session. Each
event handler rebuilds the session, applies one mutation and stores the
result, so the editing rules live in invoice_editor.session rather than
in UI code. The PDF export runs as a background event.
"""

import asyncio
from typing import Any, AsyncGenerator

import reflex as rx

from invoice_editor.lib import logs
from invoice_editor.models.common import ExportStatus, ViewMode
from invoice_editor.models.reflex_models import (
    DocumentModel,
    PreviewModel,
    document_to_model,
    preview_to_model,
)
from invoice_editor.preview import build_preview
from invoice_editor.services import get_exporter
from invoice_editor.session import InvoiceSession
from invoice_editor.utils import parse_date

LOG = logs.logger(__file__)

APP_TITLE = "Invoice Generator"

TEXT_FIELDS = frozenset(
    {
        "company_name",
        "company_address",
        "client_name",
        "client_address",
        "invoice_number",
        "notes",
    }
)
DATE_FIELDS = frozenset({"issue_date", "due_date"})

EXPORT_FAILED_MESSAGE = "Failed to generate PDF. Please try again."


class EditorState(rx.State):
    """
    Main application state for the Invoice Editor.

    Holds the serialized session and exposes computed views of it for the
    form, the preview and the toolbar.
    """

    session_data: dict[str, Any] = {}

    def _session(self) -> InvoiceSession:
        return InvoiceSession.from_dict(self.session_data)

    def _store(self, session: InvoiceSession) -> None:
        self.session_data = session.to_dict()

    @rx.var
    def document(self) -> DocumentModel:
        """Form-bound view of the invoice."""
        session = InvoiceSession.from_dict(self.session_data)
        return document_to_model(session.document)

    @rx.var
    def preview(self) -> PreviewModel:
        """Formatted preview with all computed figures."""
        session = InvoiceSession.from_dict(self.session_data)
        return preview_to_model(build_preview(session.document, session.currency))

    @rx.var
    def currency_code(self) -> str:
        return InvoiceSession.from_dict(self.session_data).currency.code

    @rx.var
    def view(self) -> str:
        return InvoiceSession.from_dict(self.session_data).view.value

    @rx.var
    def is_exporting(self) -> bool:
        status = InvoiceSession.from_dict(self.session_data).export_status
        return status is ExportStatus.IN_PROGRESS

    @rx.var
    def can_remove_items(self) -> bool:
        """Removal is disabled while only one item remains."""
        return len(InvoiceSession.from_dict(self.session_data).document.items) > 1

    @rx.event
    def on_load(self):
        """Start a fresh session on first page load; reloads keep the invoice."""
        if not self.session_data:
            LOG.info("Starting new invoice session")
            self._store(InvoiceSession())
            return
        session = self._session()
        if session.export_status.busy:
            LOG.warning("Clearing export left in progress by a previous page")
            session.abort_export()
            self._store(session)

    @rx.event
    def set_text_field(self, name: str, value: str):
        """Merge a free-text field edit into the document."""
        if name not in TEXT_FIELDS:
            LOG.warning("Ignoring edit to unknown text field: %s", name)
            return
        session = self._session()
        session.update(**{name: value})
        self._store(session)

    @rx.event
    def set_date_field(self, name: str, value: str):
        """Merge an issue/due date edit; unparsable text clears the date."""
        if name not in DATE_FIELDS:
            LOG.warning("Ignoring edit to unknown date field: %s", name)
            return
        session = self._session()
        session.update(**{name: parse_date(value)})
        self._store(session)

    @rx.event
    def update_item(self, item_id: str, field: str, value: str):
        session = self._session()
        session.update_item(item_id, field, value)
        self._store(session)

    @rx.event
    def add_item(self):
        session = self._session()
        item = session.add_item()
        LOG.debug("Added line item %s", item.id)
        self._store(session)

    @rx.event
    def remove_item(self, item_id: str):
        session = self._session()
        if session.remove_item(item_id):
            self._store(session)

    @rx.event
    def set_currency(self, code: str):
        session = self._session()
        if session.set_currency(code):
            self._store(session)

    @rx.event
    def set_theme(self, theme_id: str):
        session = self._session()
        if session.set_theme(theme_id):
            self._store(session)

    @rx.event
    def set_view(self, view: str):
        session = self._session()
        session.set_view(ViewMode(view))
        self._store(session)

    @rx.event
    async def handle_logo_upload(self, files: list[rx.UploadFile]):
        """
        Store the first uploaded image as the company logo.

        Args:
            files: Files dropped on or picked from the logo upload area.
        """
        if not files:
            return
        upload = files[0]
        data = await upload.read()
        mime_type = upload.content_type or "application/octet-stream"
        session = self._session()
        session.set_logo(data, mime_type)
        self._store(session)
        LOG.info("Logo uploaded: %s (%s bytes)", mime_type, len(data))

    @rx.event
    def clear_logo(self):
        session = self._session()
        session.clear_logo()
        self._store(session)

    @rx.event(background=True)
    async def export_pdf(self) -> AsyncGenerator:
        """
        Export the current preview as a PDF download.

        Only one export runs per session; triggers while one is in flight
        are ignored. Failures are reported with a toast and leave the
        invoice untouched. However the task ends, the session is not left
        IN_PROGRESS.
        """
        async with self:
            session = self._session()
            if not session.begin_export():
                LOG.info("Export already in progress; ignoring trigger")
                return
            preview = build_preview(session.document, session.currency)
            self._store(session)

        try:
            yield rx.toast.info(
                "Generating PDF",
                description="Please wait while we prepare your invoice...",
            )

            try:
                result = await asyncio.get_running_loop().run_in_executor(
                    None, get_exporter().export, preview
                )
            except Exception:
                LOG.error("PDF generation failed", exc_info=True)
                async with self:
                    session = self._session()
                    session.finish_export(False)
                    self._store(session)
                yield rx.toast.error("Error", description=EXPORT_FAILED_MESSAGE)
                return

            async with self:
                session = self._session()
                if result is None:
                    session.abort_export()
                else:
                    session.finish_export(True)
                self._store(session)

            if result is None:
                return
            LOG.info("Exported %s (%s bytes)", result.filename, len(result.data))
            yield rx.toast.success(
                "PDF Generated",
                description="Your invoice has been successfully exported as a PDF.",
            )
            yield rx.download(data=result.data, filename=result.filename)
        finally:
            async with self:
                session = self._session()
                if session.export_status.busy:
                    LOG.warning("Export interrupted before completing")
                    session.finish_export(False)
                    self._store(session)
