"""Export artifact models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ExportKind(str, Enum):
    """Downloadable representations of a mind map."""

    INTERACTIVE = "interactive"
    OUTLINE = "outline"
    SVG = "svg"
    MARKDOWN = "markdown"
    TEXT = "text"
    WORD = "word"


class ExportArtifact(BaseModel):
    """A rendered export, ready to be written to disk or sent as a download."""

    kind: ExportKind
    filename: str
    media_type: str
    content: str
