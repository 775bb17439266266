"""Exception hierarchy raised by the document pipeline."""

from __future__ import annotations

from typing import Optional


class LegalScanError(Exception):
    """Base class for all pipeline errors."""


class ExtractionError(LegalScanError):
    """A PDF byte stream or URL could not be turned into text.

    Callers may retry with the same input; the pipeline never retries itself.
    """


class UnsupportedFormatError(LegalScanError):
    """The input kind is recognised but not implemented (e.g. ``.docx``)."""


class UnsupportedSourceError(LegalScanError, ValueError):
    """An unknown source type was passed to the processor."""


class DocumentProcessingFailed(LegalScanError):
    """Single failure surface of :meth:`DocumentProcessor.process`."""

    def __init__(self, message: str, original: Optional[BaseException] = None) -> None:
        super().__init__(f"Document processing failed: {message}")
        self.original = original


__all__ = [
    "DocumentProcessingFailed",
    "ExtractionError",
    "LegalScanError",
    "UnsupportedFormatError",
    "UnsupportedSourceError",
]
