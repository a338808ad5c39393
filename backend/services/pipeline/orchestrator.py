"""Pipeline orchestrator: wires extraction, scoring and detection per request.

Flow:
    extract_resume(bytes, filename)
      ├─ resolve_format(filename)         → DocumentFormat (or UnsupportedFormatError)
      ├─ TextExtractor.extract()          → Document       (fallback policy on failure)
      ├─ FieldExtractor.extract()         → ResumeFields
      └─ SectionClassifier.classify()     → SectionFlags   → OcrResumeResult

    match(resume_text, job_text)
      ├─ tokenize() both texts
      ├─ compatibility_score / relevant_features / match_summary
      └─ generate_suggestions()           → MatchSummaryResult

    detect_regions(bytes, filename)
      ├─ ImageDecoder.decode()            → (width, height) (fallback policy on failure)
      └─ region_detector.detect_regions() → ClassifyPortfolioResult

Collaborator calls run in the default executor and are awaited once, without
retry. If the awaiting task is cancelled, none of the core steps run.
"""

import asyncio
import logging

from config import settings
from models.responses import ClassifyPortfolioResult, MatchSummaryResult, OcrResumeResult
from models.schemas import Document, ModelInfo
from services import model_catalog, region_detector
from services.compatibility import compatibility_score, match_summary, relevant_features
from services.errors import ExtractionError, UnsupportedFormatError, ValidationError
from services.field_extractor import FieldConfidence, FieldExtractor
from services.image_decoder import PillowImageDecoder
from services.pipeline.base import ImageDecoder, TextExtractor
from services.pipeline.fallback import FallbackPolicy
from services.section_classifier import SectionClassifier
from services.suggestions import generate_suggestions
from services.text_extractor import (
    DefaultTextExtractor,
    IMAGE_EXTENSIONS,
    file_extension,
    resolve_format,
)
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)


class ResumePipeline:
    """Composes the core components around the external collaborators.

    Holds only configuration; every call is independent of the others.
    """

    def __init__(
        self,
        text_extractor: TextExtractor | None = None,
        image_decoder: ImageDecoder | None = None,
        field_extractor: FieldExtractor | None = None,
        section_classifier: SectionClassifier | None = None,
        resume_fallback: FallbackPolicy = FallbackPolicy.PLACEHOLDER,
        portfolio_fallback: FallbackPolicy = FallbackPolicy.PLACEHOLDER,
        placeholder_text: str = "",
    ) -> None:
        self.text_extractor = text_extractor or DefaultTextExtractor()
        self.image_decoder = image_decoder or PillowImageDecoder()
        self.field_extractor = field_extractor or FieldExtractor()
        self.section_classifier = section_classifier or SectionClassifier()
        self.resume_fallback = FallbackPolicy(resume_fallback)
        self.portfolio_fallback = FallbackPolicy(portfolio_fallback)
        self.placeholder_text = placeholder_text

    @classmethod
    def from_settings(cls) -> "ResumePipeline":
        confidence = FieldConfidence(
            email=settings.email_confidence,
            phone=settings.phone_confidence,
            name=settings.name_confidence,
            skill=settings.skill_confidence,
        )
        return cls(
            text_extractor=DefaultTextExtractor(tesseract_lang=settings.tesseract_lang),
            field_extractor=FieldExtractor(settings.skill_vocabulary, confidence),
            section_classifier=SectionClassifier(overall_confidence=settings.section_confidence),
            resume_fallback=settings.resume_fallback,
            portfolio_fallback=settings.portfolio_fallback,
            placeholder_text=settings.placeholder_text,
        )

    async def extract_resume(self, data: bytes, filename: str) -> OcrResumeResult:
        """Extract text from an uploaded resume and analyse it."""
        fmt = resolve_format(filename)
        logger.info("Starting resume extraction: %s (%s)", filename, fmt.value)

        loop = asyncio.get_running_loop()
        degraded = False
        try:
            text = await loop.run_in_executor(None, self.text_extractor.extract, data, fmt)
        except ExtractionError as e:
            if self.resume_fallback is FallbackPolicy.PROPAGATE:
                logger.error("Text extraction failed for %s: %s", filename, e)
                raise
            logger.warning("Text extraction failed for %s, using placeholder: %s", filename, e)
            text = self.placeholder_text
            degraded = True

        document = Document(text=text, source_format=fmt)
        result = OcrResumeResult(
            text=document.text,
            fields=self.field_extractor.extract(document.text),
            classification=self.section_classifier.classify(document.text),
            source_format=document.source_format,
            degraded=degraded,
        )
        logger.info("Resume extraction finished: %d characters", len(document.text))
        return result

    def match(
        self,
        resume_text: str,
        job_description: str,
        candidate_id: str | None = None,
    ) -> MatchSummaryResult:
        """Score a resume against a job description."""
        if not resume_text or not resume_text.strip():
            raise ValidationError("Resume text is required")
        if not job_description or not job_description.strip():
            raise ValidationError("Job description is required")

        logger.info("Computing match for candidate: %s", candidate_id or "-")
        resume_tokens = tokenize(resume_text)
        job_tokens = tokenize(job_description)

        score = compatibility_score(resume_tokens, job_tokens)
        result = MatchSummaryResult(
            candidate_id=candidate_id,
            compatibility_score=score,
            relevant_features=relevant_features(resume_tokens, job_tokens),
            summary=match_summary(score),
            suggestions=generate_suggestions(resume_tokens, job_tokens),
        )
        logger.info("Match computed. Score: %d", score)
        return result

    async def detect_regions(self, data: bytes, filename: str) -> ClassifyPortfolioResult:
        """Guess logo and certificate regions in a portfolio image."""
        ext = file_extension(filename)
        if ext not in IMAGE_EXTENSIONS:
            raise UnsupportedFormatError(ext)
        logger.info("Starting region detection: %s", filename)

        loop = asyncio.get_running_loop()
        try:
            width, height = await loop.run_in_executor(None, self.image_decoder.decode, data)
        except ExtractionError as e:
            if self.portfolio_fallback is FallbackPolicy.PROPAGATE:
                logger.error("Image decoding failed for %s: %s", filename, e)
                raise
            logger.warning("Image decoding failed for %s, returning placeholder: %s", filename, e)
            return ClassifyPortfolioResult(
                detected_objects=[
                    region_detector.fallback_region("Unknown", region_detector.UNKNOWN_SCORE)
                ],
                degraded=True,
            )

        regions = region_detector.detect_regions(width, height)
        logger.info("Detection finished. %d regions detected", len(regions))
        return ClassifyPortfolioResult(detected_objects=regions)

    def list_models(self) -> list[ModelInfo]:
        return model_catalog.list_models()


_pipeline: ResumePipeline | None = None


def get_pipeline() -> ResumePipeline:
    """Return the process-wide pipeline built from settings."""
    global _pipeline
    if _pipeline is None:
        _pipeline = ResumePipeline.from_settings()
    return _pipeline
