import asyncio
import io
import time

import pypdf
import pytest
from PIL import Image

import document_loader
from document_loader import DocumentLoader
from services.extraction_service import ExtractionService
from utils.exceptions import ExtractionError, UnsupportedFileTypeError


def make_pdf_bytes(pages: int = 2) -> bytes:
    writer = pypdf.PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def make_png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (20, 20), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.mark.parametrize(
    "mime_type, supported",
    [
        ("application/pdf", True),
        ("image/png", True),
        ("image/jpeg", True),
        ("text/plain", False),
        ("application/msword", False),
        ("", False),
        (None, False),
    ],
)
def test_is_supported(mime_type, supported):
    assert DocumentLoader.is_supported(mime_type) is supported


def test_unsupported_type_is_rejected_before_decoding(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("decoder should not run")

    monkeypatch.setattr(DocumentLoader, "_load_pdf", staticmethod(fail))
    monkeypatch.setattr(DocumentLoader, "_load_image", staticmethod(fail))

    with pytest.raises(UnsupportedFileTypeError):
        DocumentLoader.load_document(b"hello", "text/plain")


def test_pdf_pages_are_read():
    text = DocumentLoader.load_document(make_pdf_bytes(pages=2), "application/pdf")
    assert text.count("\n") == 2


def test_empty_pdf_raises_extraction_error():
    with pytest.raises(ExtractionError):
        DocumentLoader.load_document(b"", "application/pdf")


def test_image_goes_through_ocr(monkeypatch):
    calls = {}

    def fake_image_to_string(image, lang, timeout):
        calls["size"] = image.size
        calls["lang"] = lang
        calls["timeout"] = timeout
        return "The sky is blue."

    monkeypatch.setattr(
        document_loader.pytesseract, "image_to_string", fake_image_to_string
    )
    text = DocumentLoader.load_document(make_png_bytes(), "image/png", "deu")
    assert text == "The sky is blue."
    assert calls == {"size": (20, 20), "lang": "deu", "timeout": 0}


def test_unreadable_image_raises_extraction_error():
    with pytest.raises(ExtractionError):
        DocumentLoader.load_document(b"not an image", "image/png")


def test_extraction_service_returns_text(settings, monkeypatch):
    monkeypatch.setattr(
        DocumentLoader, "_load_pdf", staticmethod(lambda data: "extracted")
    )
    service = ExtractionService(settings)
    assert asyncio.run(service.extract_text(b"%PDF", "application/pdf")) == "extracted"


def test_extraction_service_rejects_unsupported_type(settings):
    service = ExtractionService(settings)
    with pytest.raises(UnsupportedFileTypeError):
        asyncio.run(service.extract_text(b"data", "text/csv"))


def test_extraction_service_times_out(settings, monkeypatch):
    def slow(data):
        time.sleep(0.5)
        return "late"

    monkeypatch.setattr(DocumentLoader, "_load_pdf", staticmethod(slow))
    service = ExtractionService(settings.model_copy(update={"extraction_timeout": 0.05}))
    with pytest.raises(ExtractionError, match="timed out"):
        asyncio.run(service.extract_text(b"%PDF", "application/pdf"))


def test_extraction_timeout_bounds_the_ocr_process(settings, monkeypatch):
    calls = {}

    def fake_image_to_string(image, lang, timeout):
        calls["lang"] = lang
        calls["timeout"] = timeout
        return "ocr text"

    monkeypatch.setattr(
        document_loader.pytesseract, "image_to_string", fake_image_to_string
    )
    service = ExtractionService(settings.model_copy(update={"extraction_timeout": 7}))
    assert asyncio.run(service.extract_text(make_png_bytes(), "image/png")) == "ocr text"
    assert calls == {"lang": "eng", "timeout": 7}


def test_killed_ocr_process_raises_extraction_error(monkeypatch):
    def timed_out(image, lang, timeout):
        raise RuntimeError("Tesseract process timeout")

    monkeypatch.setattr(document_loader.pytesseract, "image_to_string", timed_out)
    with pytest.raises(ExtractionError, match="timeout"):
        DocumentLoader.load_document(make_png_bytes(), "image/png", timeout=1)
