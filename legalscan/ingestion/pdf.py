"""Per-page text extraction from PDF bytes using pdfminer."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import List, Tuple

from pdfminer.high_level import extract_pages
from pdfminer.layout import LAParams, LTPage, LTTextContainer

from legalscan.errors import ExtractionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdfText:
    """Raw text of each physical page, in page order."""

    pages: Tuple[str, ...]
    total_pages: int


def _page_text(page: LTPage) -> str:
    parts = [element.get_text() for element in page if isinstance(element, LTTextContainer)]
    return "".join(parts).strip()


def extract_pdf_pages(data: bytes) -> PdfText:
    """Decode ``data`` into one text string per physical page.

    Pages without extractable text (scans, blank pages) are kept as empty
    strings so page numbering follows the source document.
    """

    if not data:
        raise ExtractionError("PDF text extraction failed: empty document")
    logger.debug("Extracting text from PDF (%d bytes)", len(data))
    pages: List[str] = []
    try:
        for layout in extract_pages(io.BytesIO(data), laparams=LAParams()):
            text = _page_text(layout)
            if not text:
                logger.warning("No extractable text on PDF page %d", len(pages) + 1)
            else:
                logger.debug("Page %d preview: %r", len(pages) + 1, text[:100])
            pages.append(text)
    except Exception as exc:
        raise ExtractionError(f"PDF text extraction failed: {exc}") from exc
    logger.info("Extracted text from %d PDF pages", len(pages))
    return PdfText(pages=tuple(pages), total_pages=len(pages))


__all__ = ["PdfText", "extract_pdf_pages"]
