"""Lexical compatibility between a resume and a job description.

The score is the share of distinct job-description tokens that also appear
in the resume (case-insensitive). It measures recall of the job terms, so it
is asymmetric: swapping the two documents generally changes the result.
"""

from collections.abc import Sequence

from services.tokenizer import token_index

MAX_RELEVANT_FEATURES = 10
MIN_FEATURE_LENGTH = 4


def compatibility_score(resume_tokens: Sequence[str], job_tokens: Sequence[str]) -> int:
    """Return 0-100: percentage of distinct job tokens present in the resume."""
    job = token_index(job_tokens)
    if not job:
        return 0
    resume = token_index(resume_tokens)
    common = sum(1 for key in job if key in resume)
    return min(100, max(0, round(100 * common / len(job))))


def relevant_features(
    resume_tokens: Sequence[str],
    job_tokens: Sequence[str],
    limit: int = MAX_RELEVANT_FEATURES,
    min_length: int = MIN_FEATURE_LENGTH,
) -> list[str]:
    """Shared tokens of at least min_length characters, in resume order."""
    job = token_index(job_tokens)
    features: list[str] = []
    for key, original in token_index(resume_tokens).items():
        if len(features) >= limit:
            break
        if key in job and len(original) >= min_length:
            features.append(original)
    return features


def match_summary(score: int) -> str:
    return (
        f"The candidate shows {score}% compatibility with the position. "
        "Key strengths include relevant experience and technical skills aligned "
        "with the role. The resume demonstrates knowledge of the main areas requested."
    )
