"""Export packaging: render a mind map into a named, typed download."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from markmind.logging import get_logger
from markmind.models.export import ExportArtifact, ExportKind
from markmind.outline.title import extract_title
from markmind.render import (
    DEFAULT_RUNTIME,
    MarkmapRuntime,
    render_interactive_bundle,
    render_outline_page,
    render_word_document,
)

logger = get_logger(__name__)


class ExportError(RuntimeError):
    pass


@dataclass(frozen=True)
class ExportFormat:
    """Filename suffix and media type of one export kind."""

    suffix: str
    media_type: str


EXPORT_FORMATS: dict[ExportKind, ExportFormat] = {
    ExportKind.INTERACTIVE: ExportFormat(".html", "text/html"),
    ExportKind.OUTLINE: ExportFormat("_outline.html", "text/html"),
    ExportKind.SVG: ExportFormat(".svg", "image/svg+xml"),
    ExportKind.MARKDOWN: ExportFormat(".md", "text/markdown"),
    ExportKind.TEXT: ExportFormat(".txt", "text/plain"),
    ExportKind.WORD: ExportFormat(".doc", "application/vnd.ms-word"),
}

# Kinds that can be produced from markdown alone.
MARKDOWN_EXPORTS: tuple[ExportKind, ...] = tuple(k for k in ExportKind if k is not ExportKind.SVG)


def export_filename(kind: ExportKind, title: str) -> str:
    """Download filename for a sanitized title."""

    return f"{title}{EXPORT_FORMATS[kind].suffix}"


def build_export(
    kind: ExportKind,
    markdown: str,
    *,
    svg: str | None = None,
    runtime: MarkmapRuntime = DEFAULT_RUNTIME,
) -> ExportArtifact:
    """Render one export.

    Args:
        kind: Export kind.
        markdown: Dialect markdown.
        svg: Serialized SVG of the rendered map; required for :attr:`ExportKind.SVG` only.
        runtime: Visualization runtime for interactive bundles.

    Returns:
        The artifact, named after the mind map title.

    Raises:
        ExportError: SVG export requested without SVG content.
    """

    title = extract_title(markdown)
    renderers: dict[ExportKind, Callable[[], str]] = {
        ExportKind.INTERACTIVE: lambda: render_interactive_bundle(markdown, title, runtime=runtime),
        ExportKind.OUTLINE: lambda: render_outline_page(markdown),
        ExportKind.MARKDOWN: lambda: markdown,
        ExportKind.TEXT: lambda: markdown,
        ExportKind.WORD: lambda: render_word_document(markdown),
    }

    if kind is ExportKind.SVG:
        if not svg:
            raise ExportError("SVG export needs the rendered mind map; no SVG content was provided.")
        content = svg
    else:
        content = renderers[kind]()

    fmt = EXPORT_FORMATS[kind]
    logger.debug("Built %s export (%d chars)", kind.value, len(content))
    return ExportArtifact(
        kind=kind,
        filename=export_filename(kind, title),
        media_type=fmt.media_type,
        content=content,
    )


def write_export(artifact: ExportArtifact, out_dir: Path) -> Path:
    """Write an artifact under `out_dir` and return its path."""

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / artifact.filename
    path.write_text(artifact.content, encoding="utf-8")
    logger.info("Wrote %s export to %s", artifact.kind.value, path)
    return path
