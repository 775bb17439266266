from __future__ import annotations

import pytest
import requests

from legalscan.errors import ExtractionError, UnsupportedFormatError
from legalscan.ingestion.url import PAGE_SEPARATOR, UrlExtractor, UrlKind, classify_url
from legalscan.text.sentences import normalise_whitespace


class RecordingRenderer:
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list = []

    def __call__(self, url: str, timeout: float) -> str:
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.mark.parametrize(
    "url,kind",
    [
        ("https://example.com/files/Lease.PDF", UrlKind.PDF),
        ("https://example.com/a.pdf?download=1", UrlKind.PDF),
        ("https://example.com/contract.docx", UrlKind.LEGACY_DOCUMENT),
        ("http://example.com/old.doc", UrlKind.LEGACY_DOCUMENT),
        ("https://example.com/terms", UrlKind.WEB_PAGE),
        ("https://example.com/pdf/terms.html", UrlKind.WEB_PAGE),
    ],
)
def test_classify_url(url: str, kind: UrlKind) -> None:
    assert classify_url(url) is kind


@pytest.mark.parametrize("url", ["", "not a url", "/relative/path.pdf"])
def test_classify_url_rejects_invalid_urls(url: str) -> None:
    with pytest.raises(ExtractionError):
        classify_url(url)


def test_pdf_url_is_downloaded_and_pages_joined(
    make_pdf, dummy_session_factory, dummy_response_factory
) -> None:
    session = dummy_session_factory(
        dummy_response_factory(make_pdf(["Page one text.", "Page two text."]))
    )
    renderer = RecordingRenderer()
    extractor = UrlExtractor(session=session, renderer=renderer, download_timeout=5)

    text = extractor.extract_text("https://example.com/docs/lease.pdf")

    assert PAGE_SEPARATOR in text
    first, second = text.split(PAGE_SEPARATOR)
    assert normalise_whitespace(first) == "Page one text."
    assert normalise_whitespace(second) == "Page two text."
    assert session.calls[0]["url"] == "https://example.com/docs/lease.pdf"
    assert session.calls[0]["timeout"] == 5
    assert "User-Agent" in session.calls[0]["headers"]
    assert renderer.calls == []


def test_legacy_documents_are_rejected_without_download(dummy_session_factory) -> None:
    session = dummy_session_factory()
    extractor = UrlExtractor(session=session, renderer=RecordingRenderer())
    with pytest.raises(UnsupportedFormatError):
        extractor.extract_text("https://example.com/contract.docx")
    assert session.calls == []


def test_web_pages_are_rendered(dummy_session_factory) -> None:
    session = dummy_session_factory()
    renderer = RecordingRenderer("Terms of Service. You must be 18.")
    extractor = UrlExtractor(session=session, renderer=renderer, render_timeout=12)
    assert extractor.extract_text("https://example.com/terms") == "Terms of Service. You must be 18."
    assert renderer.calls == [("https://example.com/terms", 12)]
    assert session.calls == []


def test_download_failures_wrap_the_cause(dummy_session_factory, dummy_response_factory) -> None:
    session = dummy_session_factory(dummy_response_factory(b"", status_code=404))
    extractor = UrlExtractor(session=session, renderer=RecordingRenderer())
    with pytest.raises(ExtractionError) as excinfo:
        extractor.extract_text("https://example.com/missing.pdf")
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_network_errors_wrap_the_cause(dummy_session_factory) -> None:
    session = dummy_session_factory(error=requests.ConnectionError("connection refused"))
    extractor = UrlExtractor(session=session, renderer=RecordingRenderer())
    with pytest.raises(ExtractionError, match="connection refused"):
        extractor.extract_text("https://example.com/lease.pdf")


def test_downloaded_garbage_is_an_extraction_error(
    dummy_session_factory, dummy_response_factory
) -> None:
    session = dummy_session_factory(dummy_response_factory(b"<html>not a pdf</html>"))
    extractor = UrlExtractor(session=session, renderer=RecordingRenderer())
    with pytest.raises(ExtractionError):
        extractor.extract_text("https://example.com/fake.pdf")


def test_close_releases_only_an_owned_session(
    monkeypatch: pytest.MonkeyPatch, dummy_session_factory
) -> None:
    closed: list = []
    with UrlExtractor(renderer=RecordingRenderer()) as extractor:
        monkeypatch.setattr(extractor.session, "close", lambda: closed.append("owned"))
    assert closed == ["owned"]

    session = dummy_session_factory()
    UrlExtractor(session=session, renderer=RecordingRenderer()).close()
    assert session.closed is False
