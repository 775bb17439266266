from __future__ import annotations

from typing import Callable, Sequence

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "ci",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("ci")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(page_texts: Sequence[str]) -> bytes:
    """Return a minimal PDF with one Helvetica text page per entry.

    Lines of a page text are drawn one below the other; an empty entry gives
    a page without text.
    """

    count = len(page_texts)
    kids = " ".join(f"{4 + 2 * index} 0 R" for index in range(count))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode("latin-1"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for index, text in enumerate(page_texts):
        ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
        for line in text.splitlines():
            ops.append(f"({_escape(line)}) Tj T*")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * index} 0 R >>"
            ).encode("latin-1")
        )
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def make_pdf() -> Callable[[Sequence[str]], bytes]:
    return build_pdf


class DummyResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code
        self.headers: dict = {}

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class DummySession:
    """Records ``get`` calls and replays a canned response or error."""

    def __init__(self, response: DummyResponse | None = None, error: Exception | None = None):
        self.response = response or DummyResponse()
        self.error = error
        self.calls: list = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def dummy_session_factory():
    return DummySession


@pytest.fixture
def dummy_response_factory():
    return DummyResponse
