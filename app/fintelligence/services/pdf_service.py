"""
PDF text extraction service using pdfplumber.

Turns an uploaded statement into plain text for the prompt builders.
"""

import io
import logging
from typing import BinaryIO

import pdfplumber

logger = logging.getLogger(__name__)


class PDFExtractionError(Exception):
    """Raised when text cannot be extracted from a PDF."""

    pass


class PDFService:
    """
    Service for PDF text extraction.

    Uses pdfplumber (backed by pdfminer.six) to read the text layer of each
    page. Scanned documents without a text layer yield an empty string.
    """

    def __init__(self, page_separator: str = "\n"):
        """
        Initialize the PDF service.

        Args:
            page_separator: String placed between the text of consecutive pages.
        """
        self.page_separator = page_separator

    def extract_text(
        self,
        file_bytes: bytes | BinaryIO,
        max_chars: int | None = None,
    ) -> str:
        """
        Extract the plain text of a PDF.

        Args:
            file_bytes: PDF file as bytes or file-like object.
            max_chars: Stop reading further pages once this many characters
                have been collected. None reads every page.

        Returns:
            The text of all read pages joined by ``page_separator``.

        Raises:
            PDFExtractionError: If the file is empty, not a PDF, or unreadable.
        """
        if hasattr(file_bytes, "read"):
            pdf_bytes = file_bytes.read()
        else:
            pdf_bytes = file_bytes

        if not pdf_bytes:
            raise PDFExtractionError("Empty PDF file provided")

        if not pdf_bytes[:4] == b"%PDF":
            raise PDFExtractionError(
                "Invalid PDF file: does not start with PDF header"
            )

        try:
            page_texts: list[str] = []
            collected = 0
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                for page in pdf.pages:
                    text = page.extract_text() or ""
                    page_texts.append(text)
                    collected += len(text) + len(self.page_separator)
                    if max_chars is not None and collected >= max_chars:
                        break
        except Exception as e:
            logger.exception("Unexpected error during PDF text extraction")
            raise PDFExtractionError(f"PDF text extraction failed: {e}") from e

        text = self.page_separator.join(page_texts)
        logger.info(
            "Extracted %d characters from %d page(s)", len(text), len(page_texts)
        )
        return text
