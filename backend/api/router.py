from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_resume_pipeline, require_api_key
from config import settings
from models.requests import MatchSummaryRequest
from models.responses import ClassifyPortfolioResult, MatchSummaryResult, OcrResumeResult
from models.schemas import ModelInfo
from services.pipeline.orchestrator import ResumePipeline
from services.text_extractor import EXTENSION_FORMATS, IMAGE_EXTENSIONS, file_extension

router = APIRouter()
ai_router = APIRouter(prefix="/api/v1/ai", tags=["ai"], dependencies=[Depends(require_api_key)])
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def _read_upload(upload: UploadFile, allowed: frozenset[str] | set[str]) -> bytes:
    """Validate extension and size of an upload and return its content."""
    ext = file_extension(upload.filename or "")
    if ext not in allowed:
        raise HTTPException(status_code=400, detail=f"Unsupported file format: {ext or '(none)'}")

    content = await upload.read()
    if not content:
        raise HTTPException(status_code=400, detail="File not provided or empty")
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )
    return content


@router.get("/")
async def root():
    return {
        "name": "Resume Match API",
        "version": "1.0.0",
        "endpoints": {"docs": "/docs", "health": "/health", "ai": ai_router.prefix},
    }


@router.get("/health")
async def health():
    return {"status": "ok"}


@ai_router.post("/ocr-resume", response_model=OcrResumeResult)
@limiter.limit(settings.rate_limit)
async def ocr_resume(
    request: Request,
    file: UploadFile = File(...),
    pipeline: ResumePipeline = Depends(get_resume_pipeline),
):
    content = await _read_upload(file, set(EXTENSION_FORMATS))
    return await pipeline.extract_resume(content, file.filename or "")


@ai_router.post("/classify-portfolio", response_model=ClassifyPortfolioResult)
@limiter.limit(settings.rate_limit)
async def classify_portfolio(
    request: Request,
    file: UploadFile = File(...),
    pipeline: ResumePipeline = Depends(get_resume_pipeline),
):
    content = await _read_upload(file, IMAGE_EXTENSIONS)
    return await pipeline.detect_regions(content, file.filename or "")


@ai_router.post("/match-summary", response_model=MatchSummaryResult)
@limiter.limit(settings.rate_limit)
async def match_summary(
    request: Request,
    body: MatchSummaryRequest,
    pipeline: ResumePipeline = Depends(get_resume_pipeline),
):
    return pipeline.match(body.resume_text, body.job_description, body.candidate_id)


@ai_router.get("/models", response_model=list[ModelInfo])
async def models(pipeline: ResumePipeline = Depends(get_resume_pipeline)):
    return pipeline.list_models()


router.include_router(ai_router)
