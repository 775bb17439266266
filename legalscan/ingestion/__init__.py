"""Source extractors: PDF bytes and URLs to raw text."""

from .pdf import PdfText, extract_pdf_pages
from .url import UrlExtractor, UrlKind, classify_url, render_visible_text

__all__ = [
    "PdfText",
    "UrlExtractor",
    "UrlKind",
    "classify_url",
    "extract_pdf_pages",
    "render_visible_text",
]
