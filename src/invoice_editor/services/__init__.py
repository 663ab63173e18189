"""
Exporter factory for the Invoice Editor.

This module provides the get_exporter() factory function that returns the
InvoiceExporter implementation selected by configuration.

Available Implementations:
- pdf: Pillow raster of the preview on an A4 page (reportlab)

The exporter is cached at the module level, so the same instance serves
every session. Configure via the INVOICE_EDITOR_EXPORTER environment
variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_editor.lib import logs
from invoice_editor.services.export_service import ExportResult, InvoiceExporter
from invoice_editor.services.export_service_pdf import PdfInvoiceExporter

LOG = logs.logger(__file__)

_EXPORTER_REGISTRY: Dict[str, Callable[[], InvoiceExporter]] = {
    "pdf": lambda: PdfInvoiceExporter(),
}


@cache
def get_exporter(kind: str | None = None) -> InvoiceExporter:
    """Return the configured exporter implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_EDITOR_EXPORTER", "pdf")).lower()
    LOG.info("get_exporter - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _EXPORTER_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown exporter kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = ["ExportResult", "InvoiceExporter", "PdfInvoiceExporter", "get_exporter"]
