"""Tests for source ingestion."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from markmind.config import Settings
from markmind.models.source import SourceKind
from markmind.sources import SourceError, load_file, load_text, load_url
from markmind.sources.web import FetchedPage

ARTICLE_HTML = """\
<html>
<head><title>Freshwater Lakes</title></head>
<body>
<nav><a href="/">Home</a></nav>
<article>
<h1>Freshwater Lakes</h1>
<p>Freshwater lakes hold most of the liquid surface fresh water on the planet, and their
ecosystems depend on seasonal mixing of warm and cold layers of water throughout the year.</p>
<p>Lake turnover brings oxygen to deep water and nutrients to the surface, which supports
plankton blooms that feed fish populations during spring and autumn.</p>
</article>
</body>
</html>
"""


class FakeFetcher:
    def __init__(self, page: FetchedPage | None = None, error: Exception | None = None) -> None:
        self.page = page
        self.error = error

    def fetch(self, url: str) -> FetchedPage:
        if self.error is not None:
            raise self.error
        assert self.page is not None
        return self.page


def test_load_text() -> None:
    doc = load_text("some notes")

    assert doc.kind is SourceKind.TEXT
    assert doc.content == "some notes"


def test_load_text_truncates() -> None:
    doc = load_text("x" * 2000, max_chars=1000)

    assert doc.content.endswith("[TRUNCATED]")
    assert doc.content.startswith("x" * 1000)


def test_load_text_rejects_blank() -> None:
    with pytest.raises(SourceError):
        load_text(" \n\t")


def test_load_file_text(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("Line one\nLine two\n", encoding="utf-8")

    doc = load_file(path)
    assert doc.kind is SourceKind.FILE
    assert doc.content == "Line one\nLine two\n"
    assert doc.title == "notes"
    assert doc.origin == str(path)


def test_load_file_rejects_unsupported_and_empty(tmp_path: Path) -> None:
    docx = tmp_path / "notes.docx"
    docx.write_bytes(b"PK")
    with pytest.raises(SourceError, match="Unsupported file type"):
        load_file(docx)

    empty = tmp_path / "empty.md"
    empty.write_text("\n\n", encoding="utf-8")
    with pytest.raises(SourceError, match="empty"):
        load_file(empty)


def test_load_file_corrupt_pdf(tmp_path: Path) -> None:
    pdf = tmp_path / "broken.pdf"
    pdf.write_bytes(b"this is not a pdf")

    with pytest.raises(SourceError):
        load_file(pdf)


def test_load_url_without_fetching() -> None:
    doc = load_url(" https://example.com/post ", Settings(fetch_urls=False))

    assert doc.kind is SourceKind.URL
    assert doc.content == "https://example.com/post"


def test_load_url_fetches_readable_text() -> None:
    page = FetchedPage(
        url="https://example.com/lakes",
        content=ARTICLE_HTML.encode("utf-8"),
        content_type="text/html; charset=utf-8",
    )
    doc = load_url("https://example.com/lakes", Settings(fetch_urls=True), fetcher=FakeFetcher(page))  # type: ignore[arg-type]

    assert doc.kind is SourceKind.WEB_PAGE
    assert doc.origin == "https://example.com/lakes"
    assert "Lake turnover brings oxygen" in doc.content


def test_load_url_plain_text_page() -> None:
    page = FetchedPage(url="https://example.com/a.txt", content=b"plain words", content_type="text/plain")
    doc = load_url("https://example.com/a.txt", Settings(), fetcher=FakeFetcher(page))  # type: ignore[arg-type]

    assert doc.content == "plain words"


def test_load_url_errors() -> None:
    settings = Settings(fetch_urls=True)

    with pytest.raises(SourceError):
        load_url("", settings)

    with pytest.raises(SourceError, match="Could not fetch"):
        load_url("https://example.com", settings, fetcher=FakeFetcher(error=httpx.ConnectError("boom")))  # type: ignore[arg-type]

    image = FetchedPage(url="https://example.com/x.png", content=b"\x89PNG", content_type="image/png")
    with pytest.raises(SourceError, match="Unsupported content type"):
        load_url("https://example.com/x.png", settings, fetcher=FakeFetcher(image))  # type: ignore[arg-type]
