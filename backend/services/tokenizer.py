"""Word tokenization shared by every scoring and suggestion step."""

import re
from collections.abc import Iterable

_WORD_RE = re.compile(r"\w+")


def tokenize(text: str) -> list[str]:
    """Return every maximal run of word characters in order, case preserved."""
    if not text:
        return []
    return _WORD_RE.findall(text)


def token_index(tokens: Iterable[str]) -> dict[str, str]:
    """Build a case-insensitive token set.

    Keys are casefolded tokens, values the first spelling seen. Insertion
    order follows first occurrence, which fixes the iteration order used by
    relevant features and suggestions.
    """
    index: dict[str, str] = {}
    for token in tokens:
        index.setdefault(token.casefold(), token)
    return index
