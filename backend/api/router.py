from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_gemini_client
from api.validation import validate_resume_upload
from config import settings
from models.requests import DEFAULT_ANALYSIS_OPTION
from models.responses import AnalysisResponse, ErrorResponse, HealthResponse
from services import resume_analyzer
from services.gemini_client import GeminiClient

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(client: GeminiClient = Depends(get_gemini_client)):
    return HealthResponse(status="ok", gemini_configured=client.is_configured)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    resume: UploadFile | None = File(None),
    job_description: str = Form("", alias="jobDescription"),
    analysis_option: str = Form(DEFAULT_ANALYSIS_OPTION, alias="analysisOption"),
    client: GeminiClient = Depends(get_gemini_client),
):
    upload = validate_resume_upload(resume)
    content = await upload.read()

    analysis = await resume_analyzer.analyze(
        content,
        job_description or "",
        analysis_option or DEFAULT_ANALYSIS_OPTION,
        client,
        max_field_chars=settings.prompt_field_max_chars,
    )
    return AnalysisResponse(analysis=analysis)
