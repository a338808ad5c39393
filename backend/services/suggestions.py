"""Improvement suggestions derived from job keywords missing in the resume."""

from collections.abc import Sequence

from services.tokenizer import token_index

MAX_MISSING_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 5

GENERIC_SUGGESTIONS: tuple[str, ...] = (
    "Emphasize quantifiable results in previous projects",
    "Include relevant certifications if available",
)


def missing_keywords(
    resume_tokens: Sequence[str],
    job_tokens: Sequence[str],
    limit: int = MAX_MISSING_KEYWORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> list[str]:
    """Job tokens absent from the resume, in job-description order."""
    resume = token_index(resume_tokens)
    missing: list[str] = []
    for key, original in token_index(job_tokens).items():
        if len(missing) >= limit:
            break
        if key not in resume and len(original) >= min_length:
            missing.append(original)
    return missing


def generate_suggestions(resume_tokens: Sequence[str], job_tokens: Sequence[str]) -> list[str]:
    """Return at least the generic suggestions, led by a missing-keyword hint."""
    suggestions: list[str] = []
    missing = missing_keywords(resume_tokens, job_tokens)
    if missing:
        suggestions.append(f"Consider highlighting experience with: {', '.join(missing)}")
    suggestions.extend(GENERIC_SUGGESTIONS)
    return suggestions
