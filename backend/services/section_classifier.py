"""Resume section detection by keyword presence.

A flag is set when any keyword of its table appears anywhere in the text,
not only in a heading. English and Portuguese keywords are recognised.
"""

from collections.abc import Mapping, Sequence

from models.schemas import SectionFlags

DEFAULT_SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "experience": ("experience", "work", "experiência", "trabalho"),
    "education": ("education", "training", "educação", "formação", "graduação"),
    "certifications": (
        "certificate", "certification", "certificado", "certificação", "certificações",
    ),
}

DEFAULT_OVERALL_CONFIDENCE = 0.88


class SectionClassifier:
    def __init__(
        self,
        keywords: Mapping[str, Sequence[str]] | None = None,
        overall_confidence: float = DEFAULT_OVERALL_CONFIDENCE,
    ) -> None:
        table = keywords if keywords is not None else DEFAULT_SECTION_KEYWORDS
        self.keywords: dict[str, tuple[str, ...]] = {
            section: tuple(k.casefold() for k in words if k)
            for section, words in table.items()
        }
        self.overall_confidence = overall_confidence

    def _mentions(self, section: str, folded: str) -> bool:
        return any(k in folded for k in self.keywords.get(section, ()))

    def classify(self, text: str) -> SectionFlags:
        folded = text.casefold()
        return SectionFlags(
            has_experience=self._mentions("experience", folded),
            has_education=self._mentions("education", folded),
            has_certifications=self._mentions("certifications", folded),
            overall_confidence=self.overall_confidence,
        )


_default_classifier = SectionClassifier()


def classify_sections(text: str) -> SectionFlags:
    return _default_classifier.classify(text)
