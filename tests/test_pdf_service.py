"""Tests for PDF service."""

import io

import pytest

from app.fintelligence.services.pdf_service import PDFExtractionError, PDFService


class TestPDFService:
    """Tests for PDFService class."""

    def test_init_default_values(self):
        service = PDFService()
        assert service.page_separator == "\n"

    def test_extract_empty_file_raises_error(self):
        service = PDFService()
        with pytest.raises(PDFExtractionError) as exc_info:
            service.extract_text(b"")
        assert "Empty" in str(exc_info.value)

    def test_extract_invalid_pdf_raises_error(self):
        service = PDFService()
        with pytest.raises(PDFExtractionError) as exc_info:
            service.extract_text(b"This is not a PDF")
        assert "does not start" in str(exc_info.value)

    def test_extract_corrupted_pdf_raises_error(self):
        """A PDF header followed by garbage fails inside pdfplumber."""
        service = PDFService()
        with pytest.raises(PDFExtractionError):
            service.extract_text(b"%PDF-1.4\nnothing useful here")

    def test_extract_single_page(self, sample_pdf_bytes: bytes):
        text = PDFService().extract_text(sample_pdf_bytes)
        assert "Checking balance" in text
        assert "5400.00" in text

    def test_extract_accepts_file_like_object(self, sample_pdf_bytes: bytes):
        text = PDFService().extract_text(io.BytesIO(sample_pdf_bytes))
        assert "1200.00" in text

    def test_extract_joins_pages_in_order(self, make_pdf):
        pdf_bytes = make_pdf("First page", "Second page", "Third page")
        text = PDFService(page_separator="\n---\n").extract_text(pdf_bytes)

        assert text.index("First") < text.index("Second") < text.index("Third")
        assert text.count("\n---\n") == 2

    def test_extract_stops_after_max_chars(self, make_pdf):
        pdf_bytes = make_pdf("First page", "Second page", "Third page")
        text = PDFService().extract_text(pdf_bytes, max_chars=5)

        assert "First" in text
        assert "Second" not in text
