"""Pydantic contracts passed between pipeline stages."""

from models.schemas.detection import BoundingBox, DetectedRegion
from models.schemas.document import Document, DocumentFormat
from models.schemas.model_info import ModelInfo
from models.schemas.resume_extracted import (
    ExtractedField,
    ExtractedSkill,
    ResumeFields,
    SectionFlags,
)

__all__ = [
    "BoundingBox",
    "DetectedRegion",
    "Document",
    "DocumentFormat",
    "ExtractedField",
    "ExtractedSkill",
    "ModelInfo",
    "ResumeFields",
    "SectionFlags",
]
