"""Prompt templates for the three analysis modes."""

from models.requests import AnalysisMode

QUICK_SCAN_INSTRUCTIONS = """You are ResumeChecker, an expert in resume analysis. Provide a quick scan of the following resume:

1. Identify the most suitable profession for this resume.
2. List 3 key strengths of the resume.
3. Suggest 2 quick improvements.
4. Give an overall ATS score out of 100."""

DETAILED_ANALYSIS_INSTRUCTIONS = """You are ResumeChecker, an expert in resume analysis. Provide a detailed analysis of the following resume:

1. Identify the most suitable profession for this resume.
2. List 5 strengths of the resume.
3. Suggest 3-5 areas for improvement with specific recommendations.
4. Rate the following aspects out of 10: Impact, Brevity, Style, Structure, Skills.
5. Provide a brief review of each major section (e.g., Summary, Experience, Education).
6. Give an overall ATS score out of 100 with a breakdown of the scoring."""

ATS_OPTIMIZATION_INSTRUCTIONS = """You are ResumeChecker, an expert in ATS optimization. Analyze the following resume and provide optimization suggestions:

1. Identify keywords from the job description that should be included in the resume.
2. Suggest reformatting or restructuring to improve ATS readability.
3. Recommend changes to improve keyword density without keyword stuffing.
4. Provide 3-5 bullet points on how to tailor this resume for the specific job description.
5. Give an ATS compatibility score out of 100 and explain how to improve it."""

# (instructions, label used in front of the job description)
_TEMPLATES: dict[AnalysisMode, tuple[str, str]] = {
    AnalysisMode.QUICK_SCAN: (QUICK_SCAN_INSTRUCTIONS, "Job description (if provided)"),
    AnalysisMode.DETAILED_ANALYSIS: (DETAILED_ANALYSIS_INSTRUCTIONS, "Job description (if provided)"),
    AnalysisMode.ATS_OPTIMIZATION: (ATS_OPTIMIZATION_INSTRUCTIONS, "Job description"),
}


def truncate_field(text: str, max_chars: int | None = None) -> str:
    """Length policy for interpolated values. None means no cap."""
    if max_chars is None or len(text) <= max_chars:
        return text
    return text[:max_chars]


def build_analysis_prompt(
    resume_text: str,
    job_description: str,
    mode: AnalysisMode | str | None,
    max_field_chars: int | None = None,
) -> str:
    """Build the prompt for one analysis request.

    Values are substituted verbatim (no escaping). Unknown modes use the
    ATS Optimization template.
    """
    instructions, jd_label = _TEMPLATES[AnalysisMode.from_option(mode)]
    return f"""{instructions}

Resume text: {truncate_field(resume_text, max_field_chars)}
{jd_label}: {truncate_field(job_description, max_field_chars)}
"""
