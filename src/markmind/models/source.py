"""Source document models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SourceKind(str, Enum):
    """Where a source string came from. Values are used verbatim in prompts and the HTTP API."""

    FILE = "file content"
    URL = "URL"
    TEXT = "direct text"
    WEB_PAGE = "web page content"


class SourceDocument(BaseModel):
    """Raw source text handed to the model, tagged with its origin."""

    kind: SourceKind
    content: str
    origin: str | None = None
    title: str | None = None
