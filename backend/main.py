import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.router import router
from api.validation import upload_error_from_validation
from config import settings
from services.exceptions import AnalysisFailure, ResumeAnalyzerError
from services.gemini_client import GeminiClient

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.gemini_client = GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        temperature=settings.gemini_temperature,
        max_output_tokens=settings.gemini_max_output_tokens,
    )
    logger.info("Gemini model: %s", settings.gemini_model)
    yield
    await app.state.gemini_client.aclose()


app = FastAPI(
    title="Resume Analyzer API",
    description="PDF resume analysis backed by Google Gemini",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumeAnalyzerError)
async def resume_analyzer_error_handler(request: Request, exc: ResumeAnalyzerError):
    if isinstance(exc, AnalysisFailure):
        logger.error("Resume analysis failed: %s", exc.detail, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    error = upload_error_from_validation(exc.errors())
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error during resume analysis", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": AnalysisFailure.message})


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
