"""Rule-based extraction of contact fields and skills from resume text.

Every rule reports a fixed confidence rather than one computed from the
strength of the match. The skill vocabulary and the confidences are injected,
so alternate tables can be used without touching the rules.
"""

import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from models.schemas import ExtractedField, ExtractedSkill, ResumeFields

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Optional "(11) " style area code, then 4-5 digits, optional hyphen, 4 digits
PHONE_RE = re.compile(r"(\(?\d{2}\)?\s?)?(\d{4,5}-?\d{4})")

MAX_NAME_LENGTH = 50

DEFAULT_SKILLS: tuple[str, ...] = (
    "C#", ".NET", "ASP.NET", "JavaScript", "Python",
    "SQL", "Azure", "Docker", "React", "Angular",
)


class FieldConfidence(BaseModel):
    """Confidence reported for each extraction rule."""
    model_config = ConfigDict(frozen=True)

    email: float = Field(default=0.99, ge=0.0, le=1.0)
    phone: float = Field(default=0.85, ge=0.0, le=1.0)
    name: float = Field(default=0.75, ge=0.0, le=1.0)
    skill: float = Field(default=0.90, ge=0.0, le=1.0)


class FieldExtractor:
    """Finds email, phone, name and vocabulary skills in raw text."""

    def __init__(
        self,
        skills: Sequence[str] = DEFAULT_SKILLS,
        confidence: FieldConfidence | None = None,
    ) -> None:
        # Drop case-insensitive duplicates, keeping vocabulary order
        seen: set[str] = set()
        vocabulary: list[str] = []
        for skill in skills:
            key = skill.casefold()
            if skill and key not in seen:
                seen.add(key)
                vocabulary.append(skill)
        self.skills: tuple[str, ...] = tuple(vocabulary)
        self.confidence = confidence or FieldConfidence()

    def extract(self, text: str) -> ResumeFields:
        return ResumeFields(
            name=self._extract_name(text),
            email=self._extract_pattern(EMAIL_RE, text, self.confidence.email),
            phone=self._extract_pattern(PHONE_RE, text, self.confidence.phone),
            skills=self._extract_skills(text),
        )

    @staticmethod
    def _extract_pattern(pattern: re.Pattern, text: str, confidence: float) -> ExtractedField:
        match = pattern.search(text)
        if match is None:
            return ExtractedField()
        return ExtractedField(value=match.group(), confidence=confidence)

    def _extract_name(self, text: str) -> ExtractedField:
        """Take the first non-blank line, if it is short enough to be a name.

        Lines are split on ``\\n`` only and measured before stripping.
        """
        for line in text.split("\n"):
            if not line.strip():
                continue
            if len(line) < MAX_NAME_LENGTH:
                return ExtractedField(value=line.strip(), confidence=self.confidence.name)
            break
        return ExtractedField()

    def _extract_skills(self, text: str) -> list[ExtractedSkill]:
        folded = text.casefold()
        return [
            ExtractedSkill(name=skill, confidence=self.confidence.skill)
            for skill in self.skills
            if skill.casefold() in folded
        ]


_default_extractor = FieldExtractor()


def extract_fields(text: str) -> ResumeFields:
    """Extract resume fields using the default vocabulary and confidences."""
    return _default_extractor.extract(text)
