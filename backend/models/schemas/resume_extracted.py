"""Structured fields and section flags extracted from a resume."""

from pydantic import BaseModel, ConfigDict, Field


class ExtractedField(BaseModel):
    """A single extracted value with the fixed confidence of its rule."""
    model_config = ConfigDict(frozen=True)

    value: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ExtractedSkill(BaseModel):
    """A vocabulary skill found in the resume text."""
    model_config = ConfigDict(frozen=True)

    name: str
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ResumeFields(BaseModel):
    """Contact fields plus skills, every field present even when nothing matched."""
    model_config = ConfigDict(frozen=True)

    name: ExtractedField = ExtractedField()
    email: ExtractedField = ExtractedField()
    phone: ExtractedField = ExtractedField()
    skills: list[ExtractedSkill] = []


class SectionFlags(BaseModel):
    """Which resume sections are mentioned in the text."""
    model_config = ConfigDict(frozen=True)

    has_experience: bool = False
    has_education: bool = False
    has_certifications: bool = False
    overall_confidence: float = 0.0
