import io

import pdfplumber
from fastapi.concurrency import run_in_threadpool

from services.exceptions import ExtractionFailure


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, trimmed at both ends."""
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise ExtractionFailure(f"Could not parse PDF: {e}") from e
    return "\n".join(pages).strip()


async def extract_text_async(pdf_bytes: bytes) -> str:
    """Run extract_text off the event loop; pdfplumber is blocking."""
    return await run_in_threadpool(extract_text, pdf_bytes)
