"""File sources (plain text and PDF)."""

from __future__ import annotations

from pathlib import Path

from pypdf import PdfReader

from markmind.logging import get_logger
from markmind.models.source import SourceDocument, SourceKind
from markmind.sources.errors import EMPTY_SOURCE_MESSAGE, SourceError
from markmind.sources.text import truncate

logger = get_logger(__name__)

TEXT_SUFFIXES = frozenset({".txt", ".md", ".markdown"})


def extract_pdf_text(path: Path) -> str:
    """Extract text from a PDF, one line per page.

    Raises:
        SourceError: The PDF is corrupted or protected.
    """

    try:
        reader = PdfReader(str(path))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        logger.exception("Failed to parse pdf path=%s", path)
        raise SourceError("Error parsing PDF file. It may be corrupted or protected.") from e
    return "".join(" ".join(text.split()) + "\n" for text in pages)


def load_file(path: Path, *, max_chars: int = 100_000) -> SourceDocument:
    """Read a `.txt`/`.md` or `.pdf` file into a source document.

    Raises:
        SourceError: Unsupported type, unreadable file, or no text.
    """

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = extract_pdf_text(path)
    elif suffix in TEXT_SUFFIXES:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError(f"Error reading file: {path.name}") from e
    else:
        raise SourceError("Unsupported file type. Please upload a PDF or TXT file.")

    if not text.strip():
        raise SourceError(EMPTY_SOURCE_MESSAGE)

    logger.info("Loaded file source path=%s chars=%d", path, len(text))
    return SourceDocument(
        kind=SourceKind.FILE,
        content=truncate(text, max_chars=max_chars),
        origin=str(path),
        title=path.stem,
    )
