"""FastAPI app: generation and export endpoints."""

from __future__ import annotations

import uuid

from fastapi import Depends, FastAPI, HTTPException, Response
from pydantic import BaseModel, ConfigDict, Field

from markmind import __version__
from markmind.config import Settings, load_settings
from markmind.exports import ExportError, build_export
from markmind.generator import GenerationError, MindMapGenerator
from markmind.llm.client import LLMClient
from markmind.logging import configure_logging, get_logger, request_context, set_stage
from markmind.models.export import ExportKind
from markmind.models.source import SourceDocument, SourceKind
from markmind.render import MarkmapRuntime
from markmind.sources import SourceError, load_text, load_url

logger = get_logger(__name__)


class GenerateRequest(BaseModel):
    """Generation request. Field names match the browser client."""

    model_config = ConfigDict(populate_by_name=True)

    source_content: str = Field(alias="sourceContent")
    source_type: SourceKind = Field(alias="sourceType")


class GenerateResponse(BaseModel):
    markdown: str


class ExportRequest(BaseModel):
    markdown: str
    svg: str | None = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    runtime = MarkmapRuntime.from_cdn(settings.markmap_version)

    app = FastAPI(
        title="markmind",
        version=__version__,
        docs_url=None if settings.app_env == "prod" else "/docs",
    )

    def get_generator() -> MindMapGenerator:
        try:
            llm = LLMClient(settings)
        except ValueError as e:
            logger.error("LLM client is not configured: %s", e)
            raise HTTPException(status_code=500, detail=f"Configuration Error: {e}") from e
        return MindMapGenerator(llm, temperature=settings.llm_temperature)

    app.state.get_generator = get_generator

    def load_source(req: GenerateRequest) -> SourceDocument:
        if req.source_type in (SourceKind.URL, SourceKind.WEB_PAGE):
            return load_url(req.source_content, settings)
        return load_text(req.source_content, kind=req.source_type, max_chars=settings.max_source_chars)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/generate")
    def generate(
        req: GenerateRequest,
        generator: MindMapGenerator = Depends(get_generator),
    ) -> GenerateResponse:
        with request_context(request_id=uuid.uuid4().hex[:8], stage="ingest"):
            logger.info("API generate requested", extra={"source_type": req.source_type.value})
            try:
                source = load_source(req)
                set_stage("generate")
                markdown = generator.generate(source)
            except SourceError as e:
                raise HTTPException(status_code=400, detail=str(e)) from e
            except GenerationError as e:
                raise HTTPException(status_code=500, detail=f"Failed to generate mind map: {e}") from e
        return GenerateResponse(markdown=markdown)

    @app.post("/export/{kind}")
    def export(kind: ExportKind, req: ExportRequest) -> Response:
        with request_context(request_id=uuid.uuid4().hex[:8], stage="export"):
            logger.info("API export requested", extra={"kind": kind.value})
            try:
                artifact = build_export(kind, req.markdown, svg=req.svg, runtime=runtime)
            except ExportError as e:
                raise HTTPException(status_code=400, detail=str(e)) from e
        return Response(
            content=artifact.content,
            media_type=artifact.media_type,
            headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
        )

    return app
