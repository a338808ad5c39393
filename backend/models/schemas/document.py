"""Source documents handed to the extraction pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DocumentFormat(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    PLAIN_TEXT = "plain-text"


class Document(BaseModel):
    """Raw text of one uploaded file, discarded after the request."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    source_format: DocumentFormat = DocumentFormat.PLAIN_TEXT
