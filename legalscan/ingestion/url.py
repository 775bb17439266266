"""Text extraction from URLs.

Document URLs (by path suffix) are downloaded with ``requests`` and handed to
the PDF extractor; anything else is rendered in headless Chromium through
Playwright and its visible text is read once the network is idle.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlparse

import requests

from legalscan.config import env_positive_float
from legalscan.errors import ExtractionError, UnsupportedFormatError
from legalscan.ingestion.pdf import extract_pdf_pages

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_TIMEOUT = env_positive_float("LEGALSCAN_DOWNLOAD_TIMEOUT", 30.0)
DEFAULT_RENDER_TIMEOUT = env_positive_float("LEGALSCAN_RENDER_TIMEOUT", 30.0)
DEFAULT_USER_AGENT = os.environ.get("LEGALSCAN_USER_AGENT", "legalscan/0.1")

PDF_SUFFIXES = (".pdf",)
LEGACY_DOCUMENT_SUFFIXES = (".doc", ".docx")
PAGE_SEPARATOR = "\n\n"

Renderer = Callable[[str, float], str]


class UrlKind(str, Enum):
    PDF = "pdf"
    LEGACY_DOCUMENT = "legacy_document"
    WEB_PAGE = "web_page"


def classify_url(url: str) -> UrlKind:
    """Classify ``url`` by the suffix of its path.

    Raises :class:`ExtractionError` for strings that are not absolute URLs.
    """

    parsed = urlparse(url or "")
    if not parsed.scheme or not parsed.netloc:
        raise ExtractionError(f"Failed to extract text from URL: invalid URL {url!r}")
    path = parsed.path.lower()
    if path.endswith(PDF_SUFFIXES):
        return UrlKind.PDF
    if path.endswith(LEGACY_DOCUMENT_SUFFIXES):
        return UrlKind.LEGACY_DOCUMENT
    return UrlKind.WEB_PAGE


def render_visible_text(url: str, timeout: float = DEFAULT_RENDER_TIMEOUT) -> str:
    """Render ``url`` in headless Chromium and return ``document.body.innerText``."""

    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    try:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(headless=True)
            try:
                page = browser.new_page(user_agent=DEFAULT_USER_AGENT)
                page.goto(url, wait_until="networkidle", timeout=timeout * 1000)
                text = page.evaluate("() => document.body ? document.body.innerText : ''")
            finally:
                browser.close()
    except PlaywrightError as exc:
        raise ExtractionError(f"Failed to extract text from URL: {exc}") from exc
    return text or ""


class UrlExtractor:
    """Turn a URL into a single text blob."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        renderer: Optional[Renderer] = None,
        *,
        download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT,
        render_timeout: float = DEFAULT_RENDER_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.renderer = renderer or render_visible_text
        self.download_timeout = download_timeout
        self.render_timeout = render_timeout
        self.user_agent = user_agent

    def close(self) -> None:
        """Close the HTTP session if this extractor created it.

        An injected session belongs to the caller and is left open.
        """

        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "UrlExtractor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def extract_text(self, url: str) -> str:
        """Return the text behind ``url``.

        PDF pages are joined with blank lines, so page boundaries are lost.
        """

        kind = classify_url(url)
        logger.debug("Classified %s as %s", url, kind.value)
        if kind is UrlKind.LEGACY_DOCUMENT:
            raise UnsupportedFormatError(
                "DOC/DOCX file processing from URL is not yet supported. "
                "Please upload the file directly."
            )
        if kind is UrlKind.PDF:
            pdf = extract_pdf_pages(self.download(url))
            return PAGE_SEPARATOR.join(pdf.pages)
        text = self.renderer(url, self.render_timeout)
        logger.info("Rendered %s (%d characters)", url, len(text))
        return text

    def download(self, url: str) -> bytes:
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.download_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ExtractionError(f"Failed to extract text from URL: {exc}") from exc
        body = response.content
        logger.info("Downloaded %s (%d bytes)", url, len(body))
        return body


__all__ = [
    "DEFAULT_DOWNLOAD_TIMEOUT",
    "DEFAULT_RENDER_TIMEOUT",
    "PAGE_SEPARATOR",
    "UrlExtractor",
    "UrlKind",
    "classify_url",
    "render_visible_text",
]
