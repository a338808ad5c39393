"""Shared dependencies for API routes."""

import secrets

from fastapi import HTTPException, Request

from config import settings
from services.pipeline.orchestrator import ResumePipeline, get_pipeline


def get_resume_pipeline() -> ResumePipeline:
    return get_pipeline()


async def require_api_key(request: Request) -> None:
    """Reject requests without the configured API key header."""
    if not settings.require_api_key:
        return
    provided = request.headers.get(settings.api_key_header)
    if not provided:
        raise HTTPException(
            status_code=401,
            detail=f"API key missing. Use the {settings.api_key_header} header",
        )
    if not secrets.compare_digest(provided, settings.api_key):
        raise HTTPException(status_code=401, detail="Invalid API key")
