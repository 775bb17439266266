"""Segment legal documents into addressable pages, sentences and words.

The package turns PDF bytes or a URL into an
:class:`~legalscan.models.document.AugmentedDocument` annotated with
keyword-based threats and dictionary-based complex terms.
"""

from .errors import (
    DocumentProcessingFailed,
    ExtractionError,
    LegalScanError,
    UnsupportedFormatError,
    UnsupportedSourceError,
)
from .ids import generate_id, parse_reference
from .models.document import (
    AugmentedDocument,
    ComplexTerm,
    Page,
    Sentence,
    Severity,
    Threat,
    ThreatCategory,
    Word,
)
from .pipeline.processor import DocumentProcessor, PdfSource, SourceType, UrlSource

__all__ = [
    "AugmentedDocument",
    "ComplexTerm",
    "DocumentProcessingFailed",
    "DocumentProcessor",
    "ExtractionError",
    "LegalScanError",
    "Page",
    "PdfSource",
    "Sentence",
    "Severity",
    "SourceType",
    "Threat",
    "ThreatCategory",
    "UnsupportedFormatError",
    "UnsupportedSourceError",
    "UrlSource",
    "Word",
    "generate_id",
    "parse_reference",
]
