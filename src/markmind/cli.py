"""CLI entrypoints for markmind."""

from __future__ import annotations

import uuid
from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from markmind.config import Settings, load_settings
from markmind.exports import MARKDOWN_EXPORTS, ExportError, build_export, write_export
from markmind.generator import GenerationError, MindMapGenerator
from markmind.llm.client import LLMClient
from markmind.logging import configure_logging, get_logger, request_context, set_stage
from markmind.models.export import ExportKind
from markmind.models.outline import OutlineNode
from markmind.models.source import SourceDocument
from markmind.outline import COLLAPSIBLE_BULLET_OFFSET, build_tree, parse_lines, strip_front_matter
from markmind.render import MarkmapRuntime
from markmind.sources import SourceError, load_file, load_text, load_url

app = typer.Typer(add_completion=False, help="Turn text, files and web pages into mind maps")
logger = get_logger(__name__)


def _load_source(settings: Settings, text: str, file: Path | None, url: str | None) -> SourceDocument:
    given = [x for x in (text, file, url) if x]
    if len(given) != 1:
        raise typer.BadParameter("Provide exactly one of TEXT, --file or --url.")
    if file is not None:
        return load_file(file, max_chars=settings.max_source_chars)
    if url:
        return load_url(url, settings)
    return load_text(text, max_chars=settings.max_source_chars)


@app.command()
def generate(
    text: str = typer.Argument(
        "",
        help="Text to turn into a mind map. Omit when using --file or --url.",
        show_default=False,
    ),
    file: Path | None = typer.Option(None, "--file", "-f", help="PDF, TXT or Markdown file"),
    url: str | None = typer.Option(None, "--url", "-u", help="Web page URL"),
    output: Path = typer.Option(Path("mindmap.md"), "--output", "-o", help="Output markdown file"),
) -> None:
    """Generate markmap markdown from a source with the configured model."""

    settings = load_settings()
    configure_logging(settings.log_level)

    with request_context(request_id=uuid.uuid4().hex[:8], stage="ingest"):
        logger.info("CLI generate requested")
        try:
            source = _load_source(settings, text, file, url)
            set_stage("generate")
            generator = MindMapGenerator(LLMClient(settings), temperature=settings.llm_temperature)
            markdown = generator.generate(source)
        except (SourceError, GenerationError, ValueError) as e:
            typer.echo(f"Failed to generate mind map: {e}", err=True)
            raise typer.Exit(code=1) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown + "\n", encoding="utf-8")
    typer.echo(str(output))


@app.command("export")
def export_cmd(
    markdown_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markmap markdown file"),
    kinds: list[ExportKind] | None = typer.Option(
        None,
        "--kind",
        "-k",
        help="Export kind (repeatable). Defaults to every kind except svg.",
    ),
    out_dir: Path | None = typer.Option(None, "--out-dir", "-d", help="Output directory"),
    svg: Path | None = typer.Option(None, "--svg", help="Rendered SVG to package for the svg kind"),
) -> None:
    """Export a mind map to one or more download formats."""

    settings = load_settings()
    configure_logging(settings.log_level)

    markdown = markdown_file.read_text(encoding="utf-8")
    svg_content = svg.read_text(encoding="utf-8") if svg is not None else None
    runtime = MarkmapRuntime.from_cdn(settings.markmap_version)
    target = out_dir if out_dir is not None else settings.output_dir

    with request_context(request_id=uuid.uuid4().hex[:8], stage="export"):
        for kind in kinds or list(MARKDOWN_EXPORTS):
            try:
                artifact = build_export(kind, markdown, svg=svg_content, runtime=runtime)
            except ExportError as e:
                raise typer.BadParameter(str(e)) from e
            typer.echo(str(write_export(artifact, target)))


def _add_branch(parent: Tree, node: OutlineNode) -> None:
    branch = parent.add(Text(node.content))
    for child in node.children:
        _add_branch(branch, child)


@app.command()
def tree(
    markdown_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markmap markdown file"),
) -> None:
    """Print the outline structure of a mind map."""

    markdown = markdown_file.read_text(encoding="utf-8")
    root = Tree(markdown_file.name)
    lines = parse_lines(
        strip_front_matter(markdown),
        bullet_offset=COLLAPSIBLE_BULLET_OFFSET,
        relative_to_heading=True,
    )
    for node in build_tree(lines):
        _add_branch(root, node)
    Console().print(root)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload (dev)"),
) -> None:
    """Start the HTTP API (generation and export endpoints)."""

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Serving markmind API on %s:%d", host, port)

    uvicorn.run(
        "markmind.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
