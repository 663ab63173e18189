"""
PDF implementation of InvoiceExporter.

The preview is drawn onto a Pillow image at a scale factor (the capture
step), then the image is placed on a single A4 portrait page with
reportlab (the encode step). Placement fills the page width, keeps the
aspect ratio, clamps to the page height, centers horizontally and starts
at the top edge.
"""

import io
import os
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from invoice_editor.lib import logs
from invoice_editor.models.invoice import Logo
from invoice_editor.preview import InvoicePreview
from invoice_editor.services.export_service import InvoiceExporter

LOG = logs.logger(__file__)

PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0

# Preview width in CSS pixels (210mm at 96 dpi)
_BASE_WIDTH = 794
_PADDING = 24
_ROW_HEIGHT = 28
_LINE_HEIGHT = 18
_LOGO_BOX = (200, 80)
_PANEL_WIDTH = 260
_PANEL_HEIGHT = 12 + 26 + 3 * _LINE_HEIGHT + 12
_META_LABEL_WIDTH = 120
# Company block shares the header row with the metadata panel
_COMPANY_WIDTH = _BASE_WIDTH - 2 * _PADDING - _PANEL_WIDTH - 24

# Column spans out of 12, matching the on-screen table
_COLUMNS = (
    ("Description", 5, "left"),
    ("Qty", 1, "center"),
    ("Price", 2, "right"),
    ("Tax", 1, "right"),
    ("Disc", 1, "right"),
    ("Amount", 2, "right"),
)

_WHITE = "#ffffff"
_TEXT = "#111827"
_MUTED = "#4b5563"
_PANEL = "#f3f4f6"
_STRIPE = "#f9fafb"
_BORDER = "#e5e7eb"

_SCALE = float(os.getenv("INVOICE_EDITOR_EXPORT_SCALE", "2"))


@dataclass(slots=True, frozen=True)
class Placement:
    """Image rectangle on the page, in millimetres from the top-left corner."""

    x: float
    y: float
    width: float
    height: float


def place_on_page(
    image_width: float,
    image_height: float,
    page_width: float = PAGE_WIDTH_MM,
    page_height: float = PAGE_HEIGHT_MM,
) -> Placement:
    """
    Fit an image onto the page.

    The image is scaled to the page width. When that makes it taller than
    the page, the height is clamped and the width shrunk to keep the aspect
    ratio, and the result is centered horizontally.
    """
    scaled_height = image_height * page_width / image_width
    height = min(scaled_height, page_height)
    width = image_width * height / image_height
    return Placement(x=(page_width - width) / 2, y=0.0, width=width, height=height)


class PdfInvoiceExporter(InvoiceExporter):
    """Exports the preview as a single-page A4 PDF."""

    def __init__(self, scale: float | None = None) -> None:
        """
        Args:
            scale: Raster scale factor; defaults to INVOICE_EDITOR_EXPORT_SCALE.
        """
        self.scale = scale if scale is not None else _SCALE

    def capture(self, preview: InvoicePreview) -> Image.Image:
        return _PreviewPainter(preview, self.scale).paint()

    def encode(self, image: Image.Image, title: str = "") -> bytes:
        page_width, page_height = A4
        placement = place_on_page(
            image.width,
            image.height,
            page_width / mm,
            page_height / mm,
        )
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        if title:
            pdf.setTitle(title)
        pdf.drawImage(
            ImageReader(image.convert("RGB")),
            placement.x * mm,
            page_height - (placement.y + placement.height) * mm,
            width=placement.width * mm,
            height=placement.height * mm,
        )
        pdf.showPage()
        pdf.save()
        return buffer.getvalue()


class _PreviewPainter:
    """
    Draws an InvoicePreview onto a Pillow canvas, top to bottom.

    Free text is wrapped to its column before the canvas is allocated, and
    the canvas height is summed from those same lines.
    """

    def __init__(self, preview: InvoicePreview, scale: float) -> None:
        self.preview = preview
        self.scale = scale
        self.width = self._px(_BASE_WIDTH)
        self.fonts = {
            "small": self._font(12),
            "body": self._font(14),
            "heading": self._font(16),
            "title": self._font(18),
        }
        self.measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))

        company_width = self._px(_COMPANY_WIDTH)
        usable = self.width - 2 * self._px(_PADDING)
        company = preview.company
        self.company_name_lines = self._wrap(company.name, "heading", company_width)
        self.company_lines = self._wrap_all(company.address_lines, "small", company_width)
        client = preview.client
        self.client_name_lines = self._wrap(client.name, "heading", usable) if client else []
        self.client_lines = self._wrap_all(client.address_lines, "small", usable) if client else []
        self.note_lines = self._wrap(preview.notes, "small", usable) if preview.notes else []

        self.image = Image.new("RGB", (self.width, self._estimate_height()), _WHITE)
        self.draw = ImageDraw.Draw(self.image)
        self.y = self._px(_PADDING)

    def paint(self) -> Image.Image:
        self._header()
        self._client()
        self._table()
        self._totals()
        self._notes()
        bottom = min(self.y + self._px(_PADDING), self.image.height)
        return self.image.crop((0, 0, self.width, bottom))

    def _px(self, value: float) -> int:
        return int(round(value * self.scale))

    def _font(self, size: int) -> ImageFont.ImageFont:
        return ImageFont.load_default(size=self._px(size))

    def _estimate_height(self) -> int:
        """Sum the vertical steps the painter takes."""
        px = self._px
        heading_step = px(_LINE_HEIGHT + 4)
        line_step = px(_LINE_HEIGHT)
        company = (
            px(_LOGO_BOX[1])
            + px(16)
            + len(self.company_name_lines) * heading_step
            + len(self.company_lines) * line_step
        )
        height = 2 * px(_PADDING) + max(company, px(_PANEL_HEIGHT)) + px(24)
        if self.preview.client is not None:
            height += (
                line_step
                + len(self.client_name_lines) * heading_step
                + len(self.client_lines) * line_step
                + px(24)
            )
        height += (len(self.preview.rows) + 1) * px(_ROW_HEIGHT) + px(12)
        height += 4 * heading_step
        if self.note_lines:
            height += 2 * px(12) + line_step + len(self.note_lines) * line_step
        return height

    def _wrap(self, text: str, font: str, width: int) -> list[str]:
        """
        Break text into lines no wider than width.

        Lines break at spaces; a single word wider than the column is split
        by characters.
        """
        font_obj = self.fonts[font]

        def fits(candidate: str) -> bool:
            return self.measure.textlength(candidate, font=font_obj) <= width

        lines = []
        for paragraph in text.splitlines() or [""]:
            line = ""
            for word in paragraph.split(" "):
                candidate = f"{line} {word}" if line else word
                if fits(candidate):
                    line = candidate
                    continue
                if line:
                    lines.append(line)
                while not fits(word):
                    cut = len(word) - 1
                    while cut > 1 and not fits(word[:cut]):
                        cut -= 1
                    lines.append(word[:cut])
                    word = word[cut:]
                line = word
            lines.append(line)
        return lines

    def _wrap_all(self, texts, font: str, width: int) -> list[str]:
        return [line for text in texts for line in self._wrap(text, font, width)]

    def _text(self, x: int, text: str, font: str = "body", fill: str = _TEXT) -> None:
        self.draw.text((x, self.y), text, font=self.fonts[font], fill=fill)

    def _header(self) -> None:
        left = self._px(_PADDING)
        top = self.y
        logo = self._logo()
        if logo is not None:
            self.image.paste(logo, (left, self.y), logo if logo.mode == "RGBA" else None)
            self.y += logo.height + self._px(16)
        for line in self.company_name_lines:
            self._text(left, line, "heading")
            self.y += self._px(_LINE_HEIGHT + 4)
        for line in self.company_lines:
            self._text(left, line, "small", _MUTED)
            self.y += self._px(_LINE_HEIGHT)
        left_bottom = self.y

        # Metadata panel on the right
        panel_width = self._px(_PANEL_WIDTH)
        panel_left = self.width - self._px(_PADDING) - panel_width
        panel_bottom = top + self._px(_PANEL_HEIGHT)
        self.draw.rounded_rectangle(
            (panel_left, top, panel_left + panel_width, panel_bottom),
            radius=self._px(6),
            fill=_PANEL,
        )
        self.y = top + self._px(12)
        inner = panel_left + self._px(12)
        value_left = inner + self._px(_META_LABEL_WIDTH)
        value_width = panel_left + panel_width - self._px(12) - value_left
        self._text(inner, "INVOICE", "title")
        self.y += self._px(26)
        for label, value in (
            ("Invoice Number:", self.preview.invoice_number),
            ("Invoice Date:", self.preview.issue_date),
            ("Due Date:", self.preview.due_date),
        ):
            self._text(inner, label, "small")
            self._text(value_left, self._fit(value, value_width, "small"), "small")
            self.y += self._px(_LINE_HEIGHT)
        self.y = max(left_bottom, panel_bottom) + self._px(24)

    def _logo(self) -> Image.Image | None:
        logo = Logo.from_data_uri(self.preview.logo_uri)
        if logo is None:
            return None
        try:
            image = Image.open(io.BytesIO(logo.data))
            image.load()
        except (UnidentifiedImageError, OSError):
            LOG.warning("Logo could not be decoded (%s); skipping", logo.mime_type)
            return None
        image = image.convert("RGBA")
        image.thumbnail((self._px(_LOGO_BOX[0]), self._px(_LOGO_BOX[1])))
        return image

    def _client(self) -> None:
        if self.preview.client is None:
            return
        left = self._px(_PADDING)
        self._text(left, "Bill To:", "small", _MUTED)
        self.y += self._px(_LINE_HEIGHT)
        for line in self.client_name_lines:
            self._text(left, line, "heading")
            self.y += self._px(_LINE_HEIGHT + 4)
        for line in self.client_lines:
            self._text(left, line, "small", _MUTED)
            self.y += self._px(_LINE_HEIGHT)
        self.y += self._px(24)

    def _column_bounds(self) -> list[tuple[int, int]]:
        left = self._px(_PADDING)
        usable = self.width - 2 * left
        bounds = []
        cursor = left
        for _, span, _ in _COLUMNS:
            width = usable * span // 12
            bounds.append((cursor, cursor + width))
            cursor += width
        return bounds

    def _cell(self, bounds: tuple[int, int], text: str, align: str, font: str, fill: str) -> None:
        start, end = bounds
        pad = self._px(8)
        text = self._fit(text, end - start - 2 * pad, font)
        length = self.measure.textlength(text, font=self.fonts[font])
        if align == "right":
            x = end - pad - length
        elif align == "center":
            x = start + (end - start - length) / 2
        else:
            x = start + pad
        self.draw.text((x, self.y + self._px(7)), text, font=self.fonts[font], fill=fill)

    def _fit(self, text: str, width: int, font: str) -> str:
        """Truncate a single-line cell with an ellipsis."""
        font_obj = self.fonts[font]
        if self.measure.textlength(text, font=font_obj) <= width:
            return text
        while text and self.measure.textlength(text + "...", font=font_obj) > width:
            text = text[:-1]
        return text + "..."

    def _table(self) -> None:
        bounds = self._column_bounds()
        left, right = bounds[0][0], bounds[-1][1]
        row_height = self._px(_ROW_HEIGHT)
        self.draw.rounded_rectangle(
            (left, self.y, right, self.y + row_height),
            radius=self._px(6),
            fill=self.preview.accent_color,
        )
        for column, (label, _, align) in zip(bounds, _COLUMNS):
            self._cell(column, label, align, "small", _WHITE)
        self.y += row_height
        for row in self.preview.rows:
            if row.striped:
                self.draw.rectangle((left, self.y, right, self.y + row_height), fill=_STRIPE)
            values = (row.description, row.quantity, row.price, row.tax, row.discount, row.amount)
            for column, value, (_, _, align) in zip(bounds, values, _COLUMNS):
                self._cell(column, value, align, "small", _TEXT)
            self.y += row_height
            self.draw.line((left, self.y, right, self.y), fill=_BORDER, width=max(1, self._px(1)))
        self.y += self._px(12)

    def _totals(self) -> None:
        totals = self.preview.totals
        right = self.width - self._px(_PADDING)
        label_right = self.width // 2 + (right - self.width // 2) // 2
        for label, value, font, fill in (
            ("Subtotal:", totals.subtotal, "small", _TEXT),
            ("Tax:", totals.tax, "small", _TEXT),
            ("Discount:", totals.discount, "small", _TEXT),
            (totals.total_label, totals.grand_total, "body", self.preview.accent_color),
        ):
            font_obj = self.fonts[font]
            self.draw.text(
                (label_right - self.measure.textlength(label, font=font_obj), self.y),
                label,
                font=font_obj,
                fill=fill,
            )
            self.draw.text(
                (right - self.measure.textlength(value, font=font_obj), self.y),
                value,
                font=font_obj,
                fill=fill,
            )
            self.y += self._px(_LINE_HEIGHT + 4)

    def _notes(self) -> None:
        if not self.note_lines:
            return
        left = self._px(_PADDING)
        self.y += self._px(12)
        self.draw.line(
            (left, self.y, self.width - left, self.y),
            fill=_BORDER,
            width=max(1, self._px(1)),
        )
        self.y += self._px(12)
        self._text(left, "Notes:", "small")
        self.y += self._px(_LINE_HEIGHT)
        for line in self.note_lines:
            self._text(left, line, "small", _MUTED)
            self.y += self._px(_LINE_HEIGHT)
