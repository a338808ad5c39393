"""Text extraction from uploaded resumes: PDF text layer, image OCR, plain text."""

import io
import logging
from pathlib import PurePath

import pdfplumber
import pytesseract
from PIL import Image

from models.schemas import DocumentFormat
from services.errors import ExtractionError, UnsupportedFormatError
from services.pipeline.base import TextExtractor

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".tiff", ".bmp"})

EXTENSION_FORMATS: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".txt": DocumentFormat.PLAIN_TEXT,
    **{ext: DocumentFormat.IMAGE for ext in IMAGE_EXTENSIONS},
}

# PDFs with less text than this are probably scanned images
MIN_PDF_TEXT_LENGTH = 50


def file_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lower()


def resolve_format(filename: str) -> DocumentFormat:
    """Map a file name to its document format by extension."""
    ext = file_extension(filename)
    try:
        return EXTENSION_FORMATS[ext]
    except KeyError:
        raise UnsupportedFormatError(ext) from None


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    text = "\n".join(p for p in pages if p.strip()).strip()
    if len(text) < MIN_PDF_TEXT_LENGTH:
        logger.info("PDF yielded %d characters, it is probably image-based", len(text))
    return text


def extract_text_image(image_bytes: bytes, lang: str = "eng") -> str:
    """Run Tesseract OCR over an image."""
    with Image.open(io.BytesIO(image_bytes)) as image:
        text = pytesseract.image_to_string(image, lang=lang)
    logger.info("OCR extracted %d characters", len(text))
    return text


def extract_text_plain(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class DefaultTextExtractor(TextExtractor):
    """pdfplumber for PDFs, pytesseract for images, UTF-8 for plain text."""

    name = "default"

    def __init__(self, tesseract_lang: str = "eng") -> None:
        self.tesseract_lang = tesseract_lang

    def extract(self, data: bytes, fmt: DocumentFormat) -> str:
        try:
            if fmt is DocumentFormat.PDF:
                return extract_text_pdf(data)
            if fmt is DocumentFormat.IMAGE:
                return extract_text_image(data, self.tesseract_lang)
            return extract_text_plain(data)
        except Exception as e:
            raise ExtractionError(f"Could not extract text from {fmt.value} document: {e}") from e
