from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    analysis: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
