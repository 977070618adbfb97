"""URL sources: fetch over HTTP and reduce the page to readable text."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup
from readability import Document

from markmind.config import Settings
from markmind.logging import get_logger
from markmind.models.source import SourceDocument, SourceKind
from markmind.sources.errors import EMPTY_SOURCE_MESSAGE, SourceError
from markmind.sources.text import truncate

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    """Fetched page payload."""

    url: str
    content: bytes
    content_type: str | None


class PageFetcher:
    """Fetch pages over HTTP."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL (synchronous)."""

        with httpx.Client(
            timeout=httpx.Timeout(self._settings.http_timeout_s),
            headers={"User-Agent": self._settings.http_user_agent},
            follow_redirects=True,
        ) as client:
            resp = client.get(url)
            resp.raise_for_status()
        return FetchedPage(
            url=str(resp.url),
            content=resp.content,
            content_type=resp.headers.get("content-type"),
        )


class PageParser:
    """Parse fetched HTML pages into cleaned text."""

    def parse_html(self, html: str) -> tuple[str | None, str]:
        """Return `(title, text)` for an HTML page."""

        try:
            doc = Document(html)
            title = doc.short_title() or None
            content_html = doc.summary(html_partial=True)
            soup = BeautifulSoup(content_html, "lxml")
            text = soup.get_text("\n", strip=True)
        except Exception as e:
            logger.warning("Readability failed, falling back to full page text: %s", e)
            soup = BeautifulSoup(html, "lxml")
            title = soup.title.get_text(strip=True) if soup.title else None
            text = soup.get_text("\n", strip=True)

        return title, self._normalize_text(text)

    @staticmethod
    def _normalize_text(text: str) -> str:
        return "\n".join([line.strip() for line in text.splitlines() if line.strip()])


def load_url(
    url: str,
    settings: Settings,
    *,
    fetcher: PageFetcher | None = None,
    parser: PageParser | None = None,
) -> SourceDocument:
    """Turn a URL into a source document.

    With `settings.fetch_urls` disabled the URL itself is the content and the model is asked
    to resolve it.

    Raises:
        SourceError: Blank URL, fetch failure, or a page without readable text.
    """

    url = url.strip()
    if not url:
        raise SourceError(EMPTY_SOURCE_MESSAGE)
    if not settings.fetch_urls:
        return SourceDocument(kind=SourceKind.URL, content=url, origin=url)

    fetcher = fetcher or PageFetcher(settings)
    parser = parser or PageParser()
    try:
        page = fetcher.fetch(url)
    except httpx.HTTPError as e:
        logger.exception("Failed to fetch url=%s", url)
        raise SourceError(f"Could not fetch {url}: {e}") from e

    if page.content_type and "html" not in page.content_type and not page.content_type.startswith("text/"):
        raise SourceError(f"Unsupported content type for {url}: {page.content_type}")

    html = page.content.decode("utf-8", errors="replace")
    if page.content_type and page.content_type.startswith("text/plain"):
        title, text = None, html
    else:
        title, text = parser.parse_html(html)
    if not text.strip():
        raise SourceError(EMPTY_SOURCE_MESSAGE)

    logger.info("Loaded web source url=%s chars=%d", page.url, len(text))
    return SourceDocument(
        kind=SourceKind.WEB_PAGE,
        content=truncate(text, max_chars=settings.max_source_chars),
        origin=page.url,
        title=title,
    )
