"""Document processing entry point.

``DocumentProcessor.process`` runs extraction, segmentation, threat
classification and complex-term matching in sequence and returns one
:class:`~legalscan.models.document.AugmentedDocument`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from legalscan.errors import DocumentProcessingFailed, UnsupportedSourceError
from legalscan.glossary.matcher import ComplexTermsIdentifier
from legalscan.ids import generate_id
from legalscan.ingestion.pdf import extract_pdf_pages
from legalscan.ingestion.url import UrlExtractor
from legalscan.models.document import AugmentedDocument, Page
from legalscan.text.pages import (
    DEFAULT_SENTENCES_PER_PAGE,
    pages_from_flat_text,
    pages_from_texts,
)
from legalscan.threats.analyzer import ThreatAnalyzer

logger = logging.getLogger(__name__)


class SourceType(str, Enum):
    PDF = "pdf"
    URL = "url"


@dataclass(frozen=True)
class PdfSource:
    """PDF bytes; processed in paginated mode."""

    data: bytes


@dataclass(frozen=True)
class UrlSource:
    """A remote document or web page; processed in chunked mode."""

    url: str


Source = Union[PdfSource, UrlSource]


def make_source(value: Union[bytes, str], source_type: Union[SourceType, str]) -> Source:
    """Wrap raw input in the source variant named by ``source_type``."""

    try:
        kind = SourceType(source_type)
    except ValueError:
        raise UnsupportedSourceError(f"Unsupported document type: {source_type!r}") from None
    if kind is SourceType.PDF:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("PDF input must be bytes")
        return PdfSource(bytes(value))
    if kind is SourceType.URL:
        if not isinstance(value, str):
            raise TypeError("URL input must be a string")
        return UrlSource(value)
    raise UnsupportedSourceError(f"Unsupported document type: {source_type!r}")


def new_document_id() -> str:
    return generate_id("doc", time.time_ns())


class DocumentProcessor:
    """Compose extractors, segmentation and both annotators.

    Each processor owns its keyword and term registries; pass instances in to
    share or customise them.  ``close`` releases the default URL extractor
    only; injected components are closed by whoever created them.
    """

    def __init__(
        self,
        *,
        threat_analyzer: Optional[ThreatAnalyzer] = None,
        terms_identifier: Optional[ComplexTermsIdentifier] = None,
        url_extractor: Optional[UrlExtractor] = None,
        sentences_per_page: int = DEFAULT_SENTENCES_PER_PAGE,
    ) -> None:
        self.threat_analyzer = threat_analyzer or ThreatAnalyzer()
        self.terms_identifier = terms_identifier or ComplexTermsIdentifier()
        self._owns_url_extractor = url_extractor is None
        self.url_extractor = url_extractor if url_extractor is not None else UrlExtractor()
        self.sentences_per_page = sentences_per_page

    def close(self) -> None:
        if self._owns_url_extractor:
            self.url_extractor.close()

    def __enter__(self) -> "DocumentProcessor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def process(
        self,
        value: Union[bytes, str],
        source_type: Union[SourceType, str],
        document_id: Optional[str] = None,
    ) -> AugmentedDocument:
        """Process PDF bytes (``"pdf"``) or a URL (``"url"``).

        Every failure, including an unknown ``source_type``, surfaces as
        :class:`DocumentProcessingFailed` with the original exception chained.
        """

        try:
            source = make_source(value, source_type)
        except Exception as exc:
            raise DocumentProcessingFailed(str(exc), exc) from exc
        return self.process_source(source, document_id)

    def process_source(self, source: Source, document_id: Optional[str] = None) -> AugmentedDocument:
        doc_id = document_id or new_document_id()
        try:
            pages = self._extract_pages(source)
            threats = self.threat_analyzer.analyze_threats(pages)
            complex_terms = self.terms_identifier.identify_complex_terms(pages)
        except Exception as exc:
            raise DocumentProcessingFailed(str(exc), exc) from exc

        logger.info(
            "Processed document %s: %d pages, %d threats, %d complex terms",
            doc_id,
            len(pages),
            len(threats),
            len(complex_terms),
        )
        return AugmentedDocument(
            document_id=doc_id,
            pages=tuple(pages),
            threats=tuple(threats),
            complex_terms=tuple(complex_terms),
        )

    def _extract_pages(self, source: Source) -> List[Page]:
        if isinstance(source, PdfSource):
            pdf = extract_pdf_pages(source.data)
            logger.info("Processed %d actual PDF pages", pdf.total_pages)
            return pages_from_texts(pdf.pages)
        if isinstance(source, UrlSource):
            text = self.url_extractor.extract_text(source.url)
            return pages_from_flat_text(text, self.sentences_per_page)
        raise UnsupportedSourceError(f"Unsupported document source: {type(source).__name__}")


__all__ = [
    "DocumentProcessor",
    "PdfSource",
    "Source",
    "SourceType",
    "UrlSource",
    "make_source",
    "new_document_id",
]
