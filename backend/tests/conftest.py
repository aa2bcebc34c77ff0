"""Shared fixtures: a fake Gemini handle and a tiny hand-built PDF."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_gemini_client
from main import app
from services.exceptions import GenerationFailure


class FakeGeminiClient:
    """Stands in for GeminiClient; records every prompt it receives."""

    def __init__(self, reply: str = "Profession: Engineer. Score: 82.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.is_configured = True

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF that draws `text` in Helvetica."""
    stream = b"BT /F1 14 Tf 72 720 Td (%s) Tj ET" % text.encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream),
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n%s\nendobj\n" % (number, body)
    xref_at = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


@pytest.fixture
def sample_pdf() -> bytes:
    return make_pdf("John Doe, Software Engineer")


@pytest.fixture
def fake_gemini() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def failing_gemini() -> FakeGeminiClient:
    return FakeGeminiClient(error=GenerationFailure("429 RESOURCE_EXHAUSTED quota exceeded for key AIza-secret"))


@pytest.fixture
def crashing_gemini() -> FakeGeminiClient:
    """A substitute client that fails outside the error taxonomy."""
    return FakeGeminiClient(error=RuntimeError("boom secret"))


@pytest.fixture
def client(fake_gemini):
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def pdf_factory():
    return make_pdf
