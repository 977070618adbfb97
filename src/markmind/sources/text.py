"""Plain text sources."""

from __future__ import annotations

from markmind.models.source import SourceDocument, SourceKind
from markmind.sources.errors import EMPTY_SOURCE_MESSAGE, SourceError


def truncate(text: str, *, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "\n\n[TRUNCATED]"


def load_text(text: str, *, kind: SourceKind = SourceKind.TEXT, max_chars: int = 100_000) -> SourceDocument:
    """Wrap user-provided text.

    Raises:
        SourceError: The text is blank.
    """

    if not text.strip():
        raise SourceError(EMPTY_SOURCE_MESSAGE)
    return SourceDocument(kind=kind, content=truncate(text, max_chars=max_chars))
