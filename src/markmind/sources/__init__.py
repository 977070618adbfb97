"""Source ingestion: turn text, files and URLs into a :class:`SourceDocument`."""

from __future__ import annotations

from markmind.sources.errors import SourceError
from markmind.sources.files import load_file
from markmind.sources.web import load_url
from markmind.sources.text import load_text

__all__ = [
    "SourceError",
    "load_file",
    "load_text",
    "load_url",
]
