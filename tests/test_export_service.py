"""Unit tests for the PDF exporter and the exporter factory."""

import io

import pytest
from PIL import Image

from invoice_editor.models.invoice import Logo
from invoice_editor.preview import build_preview
from invoice_editor.services import get_exporter
from invoice_editor.services.export_service import ExportResult
from invoice_editor.services.export_service_pdf import (
    _COMPANY_WIDTH,
    PdfInvoiceExporter,
    _PreviewPainter,
    place_on_page,
)


@pytest.fixture
def exporter() -> PdfInvoiceExporter:
    return PdfInvoiceExporter(scale=1)


def _png_bytes(size=(40, 20)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, "#ff0000").save(buffer, format="PNG")
    return buffer.getvalue()


def test_wide_image_fills_page_width():
    placement = place_on_page(1000, 500)

    assert placement.width == pytest.approx(210)
    assert placement.height == pytest.approx(105)
    assert placement.x == pytest.approx(0)
    assert placement.y == 0


def test_tall_image_is_clamped_and_centered():
    placement = place_on_page(100, 1000)

    assert placement.height == pytest.approx(297)
    assert placement.width == pytest.approx(29.7)
    assert placement.x == pytest.approx(90.15)
    assert placement.y == 0


def test_a4_shaped_image_fills_page():
    placement = place_on_page(210, 297)

    assert placement.width == pytest.approx(210)
    assert placement.height == pytest.approx(297)
    assert placement.x == pytest.approx(0)


def test_export_without_preview(exporter):
    assert exporter.export(None) is None


def test_export_produces_pdf(exporter, two_item_document, usd):
    result = exporter.export(build_preview(two_item_document, usd))

    assert isinstance(result, ExportResult)
    assert result.filename == "Invoice-001.pdf"
    assert result.media_type == "application/pdf"
    assert result.data.startswith(b"%PDF")


def test_capture_uses_preview_width(two_item_document, usd):
    preview = build_preview(two_item_document, usd)

    single = PdfInvoiceExporter(scale=1).capture(preview)
    double = PdfInvoiceExporter(scale=2).capture(preview)

    assert single.width == 794
    assert double.width == 1588
    assert single.height > 0


def test_capture_with_logo_and_notes(exporter, single_item_document, usd):
    single_item_document.company_logo = Logo(data=_png_bytes(), mime_type="image/png")
    single_item_document.notes = "Paid by transfer.\nThank you!"

    image = exporter.capture(build_preview(single_item_document, usd))

    assert image.width == 794


def test_undecodable_logo_is_skipped(exporter, single_item_document, usd):
    single_item_document.company_logo = Logo(data=b"not an image", mime_type="image/png")

    result = exporter.export(build_preview(single_item_document, usd))

    assert result.data.startswith(b"%PDF")


def test_long_description_is_truncated(exporter, single_item_document, usd):
    single_item_document.items[0].description = "Consulting " * 40

    image = exporter.capture(build_preview(single_item_document, usd))

    assert image.width == 794


def _fits(painter, lines, font, width) -> bool:
    return all(
        painter.measure.textlength(line, font=painter.fonts[font]) <= width
        for line in lines
    )


def test_long_notes_wrap_to_page_width(single_item_document, usd):
    notes = "Payment is due within thirty days of the invoice date. " * 3
    single_item_document.notes = notes

    painter = _PreviewPainter(build_preview(single_item_document, usd), scale=1)
    usable = painter.width - 2 * 24

    assert len(painter.note_lines) > 1
    assert _fits(painter, painter.note_lines, "small", usable)
    assert " ".join(painter.note_lines).split() == notes.split()


def test_long_addresses_wrap(single_item_document, usd):
    single_item_document.company_address = "Unit 4, " * 30
    single_item_document.client_address = "Building " + "X" * 200

    painter = _PreviewPainter(build_preview(single_item_document, usd), scale=2)
    usable = painter.width - 2 * painter._px(24)

    assert len(painter.company_lines) > 1
    assert _fits(painter, painter.company_lines, "small", painter._px(_COMPANY_WIDTH))
    assert len(painter.client_lines) > 1
    assert _fits(painter, painter.client_lines, "small", usable)
    assert "".join(painter.client_lines).count("X") == 200


def test_canvas_holds_every_painted_line(single_item_document, usd):
    single_item_document.notes = "\r".join(f"Line {index}" for index in range(40))
    single_item_document.company_logo = Logo(data=_png_bytes((400, 400)), mime_type="image/png")

    painter = _PreviewPainter(build_preview(single_item_document, usd), scale=1)
    image = painter.paint()

    assert len(painter.note_lines) == 40
    assert painter.y + 24 <= painter.image.height
    assert image.height == painter.y + 24


def test_capture_failure_propagates(single_item_document, usd):
    class BrokenExporter(PdfInvoiceExporter):
        def capture(self, preview):
            raise RuntimeError("capture failed")

    with pytest.raises(RuntimeError):
        BrokenExporter(scale=1).export(build_preview(single_item_document, usd))


def test_get_exporter():
    get_exporter.cache_clear()

    assert isinstance(get_exporter("pdf"), PdfInvoiceExporter)
    assert get_exporter("PDF") is not None
    with pytest.raises(ValueError):
        get_exporter("docx")


def test_get_exporter_reads_environment(monkeypatch):
    get_exporter.cache_clear()
    monkeypatch.setenv("INVOICE_EDITOR_EXPORTER", "pdf")

    try:
        assert isinstance(get_exporter(), PdfInvoiceExporter)
    finally:
        get_exporter.cache_clear()


def test_get_exporter_rejects_unknown_environment_value(monkeypatch):
    get_exporter.cache_clear()
    monkeypatch.setenv("INVOICE_EDITOR_EXPORTER", "docx")

    try:
        with pytest.raises(ValueError, match="docx"):
            get_exporter()
    finally:
        get_exporter.cache_clear()
