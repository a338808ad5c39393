"""Exceptions raised by the resume pipeline.

Field, section, scoring and suggestion logic never raises; these cover the
request-level failures around it.
"""


class PipelineError(Exception):
    """Base class for all pipeline failures."""


class UnsupportedFormatError(PipelineError):
    """The file extension does not map to a supported document format."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension or '(none)'}")


class ExtractionError(PipelineError):
    """A text extractor or image decoder could not read the input."""


class ValidationError(PipelineError):
    """Required text input is missing or blank."""
