"""
Abstract base class defining the invoice export contract.

An exporter works in two steps, mirroring a screen capture followed by
file encoding:

1. capture(): rasterize an InvoicePreview into a PIL image
2. encode(): package that image into the downloadable file bytes

Implementations:
- PdfInvoiceExporter: Pillow raster placed on an A4 page with reportlab
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image

from invoice_editor.lib import logs
from invoice_editor.preview import InvoicePreview

LOG = logs.logger(__file__)


@dataclass(slots=True, frozen=True)
class ExportResult:
    """File produced by an export, ready for download."""

    filename: str
    data: bytes
    media_type: str = "application/pdf"


class InvoiceExporter(ABC):
    """
    Abstract base class for invoice exporters.

    Subclasses implement capture() and encode(); export() chains them.
    Errors from either step propagate to the caller.
    """

    @abstractmethod
    def capture(self, preview: InvoicePreview) -> Image.Image:
        """
        Rasterize the preview.

        Args:
            preview: Formatted invoice projection.
        """

    @abstractmethod
    def encode(self, image: Image.Image, title: str = "") -> bytes:
        """
        Package a captured image into file bytes.

        Args:
            image: Output of capture().
            title: Document title stored in the file metadata.
        """

    def export(self, preview: InvoicePreview | None) -> ExportResult | None:
        """
        Capture and encode a preview.

        Returns:
            ExportResult, or None when there is no preview to capture.
        """
        if preview is None:
            LOG.debug("Export skipped: no preview surface")
            return None
        image = self.capture(preview)
        LOG.info("Captured preview %sx%s for %s", image.width, image.height, preview.filename)
        data = self.encode(image, title=preview.filename)
        return ExportResult(filename=preview.filename, data=data)
