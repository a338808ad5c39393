"""Abstract collaborators the pipeline depends on.

The pipeline never reads files itself: text extraction and image decoding are
delegated to these interfaces so tests can substitute in-memory fakes.
"""

from abc import ABC, abstractmethod

from models.schemas import DocumentFormat


class TextExtractor(ABC):
    """Turns uploaded bytes into raw text.

    Subclasses must implement:
        - extract(data, fmt): return text or raise ExtractionError
    """

    name: str = ""

    @abstractmethod
    def extract(self, data: bytes, fmt: DocumentFormat) -> str:
        """Return the text layer (or OCR output) of the document."""


class ImageDecoder(ABC):
    """Reads pixel dimensions of an uploaded image."""

    name: str = ""

    @abstractmethod
    def decode(self, data: bytes) -> tuple[int, int]:
        """Return (width, height) or raise ExtractionError."""
