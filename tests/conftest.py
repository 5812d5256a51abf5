"""Pytest configuration and fixtures."""

import json
from types import SimpleNamespace
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient

from app.fintelligence.main import app
from app.fintelligence.routers.dependencies import get_ai_service
from app.fintelligence.services.ai import AIService


class FakeCompletions:
    """Stands in for ``client.chat.completions`` and records every call."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.reply: str | None = "{}"
        self.error: Exception | None = None

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Minimal OpenAI client double exposing ``chat.completions.create``."""

    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.completions.calls

    def reply_with(self, content: Any) -> None:
        """Set the next completion text; dicts are sent as JSON."""
        if isinstance(content, dict):
            content = json.dumps(content)
        self.completions.reply = content

    def fail_with(self, error: Exception) -> None:
        self.completions.error = error

    def sent_text(self) -> str:
        """All message contents of every call, joined."""
        return "\n".join(
            message["content"] for call in self.calls for message in call["messages"]
        )


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def ai_service(fake_openai: FakeOpenAI) -> AIService:
    return AIService(fake_openai, model="gpt-4o", max_prompt_chars=8000)


@pytest.fixture
def client(ai_service: AIService) -> Generator[TestClient, None, None]:
    """Create a test client whose AI service talks to the fake client."""
    app.dependency_overrides[get_ai_service] = lambda: ai_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(*page_texts: str) -> bytes:
    """
    Build a small, valid PDF with one line of Helvetica text per page.

    Object offsets in the xref table are computed so strict parsers accept it.
    """
    page_count = len(page_texts)
    page_ids = [4 + 2 * i for i in range(page_count)]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, page_texts):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({_escape_pdf_text(text)}) Tj ET".encode(
            "latin-1"
        )
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    output = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(output))
        output += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_position = len(output)
    output += b"xref\n0 %d\n" % (len(objects) + 1)
    output += b"0000000000 65535 f \n"
    for offset in offsets:
        output += b"%010d 00000 n \n" % offset
    output += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    output += b"startxref\n%d\n%%%%EOF\n" % xref_position
    return output


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Factory fixture building PDFs from page texts."""
    return build_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A one-page bank statement."""
    return build_pdf("Checking balance 1200.00 Savings balance 5400.00")


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Create invalid (non-PDF) file bytes for testing."""
    return b"This is not a PDF file"
