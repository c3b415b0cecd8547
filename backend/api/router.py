from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError

from api.dependencies import get_pipeline
from config import settings
from models.requests import AnalyzeRequest
from models.responses import ErrorResponse, SkillAnalysisResult
from services import pdf_parser
from services.pipeline.errors import ValidationFailure
from services.pipeline.orchestrator import SkillGapPipeline

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "firecrawl_configured": bool(settings.firecrawl_api_key),
    }


@router.post("/api/analyze", response_model=SkillAnalysisResult, responses=_ERROR_RESPONSES)
async def analyze(
    body: AnalyzeRequest,
    pipeline: SkillGapPipeline = Depends(get_pipeline),
):
    return await pipeline.run_analysis(body)


@router.post("/api/analyze/upload", response_model=SkillAnalysisResult, responses=_ERROR_RESPONSES)
async def analyze_upload(
    job_title: str = Form(""),
    resume_file: UploadFile = File(...),
    pipeline: SkillGapPipeline = Depends(get_pipeline),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise ValidationFailure("Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ValidationFailure(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception as e:
        raise ValidationFailure("Could not parse PDF file") from e

    if not resume_text:
        raise ValidationFailure("No text could be extracted from PDF")

    try:
        request = AnalyzeRequest(job_title=job_title, resume_text=resume_text)
    except ValidationError as e:
        raise ValidationFailure("Resume or job title too long") from e
    return await pipeline.run_analysis(request)
