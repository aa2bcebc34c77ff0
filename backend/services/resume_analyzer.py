"""Orchestrator: extract resume text, build the mode prompt, ask Gemini.

All-or-nothing per request. Extraction failure stops the pipeline before any
generation call is made.
"""

import logging

from config import settings
from models.requests import AnalysisMode
from services import pdf_parser, prompt_builder
from services.exceptions import AnalysisFailure, GenerationFailure
from services.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


async def analyze(
    pdf_bytes: bytes,
    job_description: str,
    analysis_option: str | None,
    client: GeminiClient,
    max_field_chars: int | None = None,
) -> str:
    """Run one analysis and return the generated text."""
    resume_text = await pdf_parser.extract_text_async(pdf_bytes)

    mode = AnalysisMode.from_option(analysis_option)
    logger.info(
        "Analyzing resume: mode=%s resume_chars=%d jd_chars=%d",
        mode.value, len(resume_text), len(job_description),
    )
    if settings.log_resume_text:
        logger.debug("Extracted resume text:\n%s", resume_text)

    prompt = prompt_builder.build_analysis_prompt(
        resume_text, job_description, mode, max_field_chars=max_field_chars
    )
    try:
        return await client.generate_text(prompt)
    except AnalysisFailure:
        raise
    except Exception as e:
        raise GenerationFailure(f"Generation client error: {e}") from e
