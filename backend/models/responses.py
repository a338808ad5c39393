from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from models.schemas import (
    DetectedRegion,
    DocumentFormat,
    ResumeFields,
    SectionFlags,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OcrResumeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    fields: ResumeFields = ResumeFields()
    classification: SectionFlags = SectionFlags()
    source_format: DocumentFormat = DocumentFormat.PLAIN_TEXT
    degraded: bool = False
    processed_at: datetime = Field(default_factory=_utcnow)


class MatchSummaryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate_id: str | None = None
    compatibility_score: int = Field(default=0, ge=0, le=100)
    relevant_features: list[str] = Field(default=[], max_length=10)
    summary: str = ""
    suggestions: list[str] = []
    processed_at: datetime = Field(default_factory=_utcnow)


class ClassifyPortfolioResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    detected_objects: list[DetectedRegion] = []
    degraded: bool = False
    processed_at: datetime = Field(default_factory=_utcnow)


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
