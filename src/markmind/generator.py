"""Mind map generation: source text in, dialect markdown out."""

from __future__ import annotations

import asyncio
import re

from markmind.llm.client import LLMClient
from markmind.logging import get_logger, log_exception
from markmind.models.source import SourceDocument
from markmind.prompts import MINDMAP_SYSTEM_PROMPT, build_user_prompt
from markmind.sources.errors import EMPTY_SOURCE_MESSAGE

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"\A```[\w-]*[ \t]*\n(?P<body>.*?)\n?```\s*\Z", re.DOTALL)


class GenerationError(RuntimeError):
    pass


def strip_code_fence(text: str) -> str:
    """Remove a code fence wrapping the whole reply, if the model added one anyway."""

    cleaned = text.strip()
    m = _FENCE_RE.match(cleaned)
    if m:
        return m.group("body").strip()
    return cleaned


class MindMapGenerator:
    """Ask the model to restructure a source into markmap markdown."""

    def __init__(self, llm: LLMClient, *, temperature: float = 0.2) -> None:
        self._llm = llm
        self._temperature = temperature

    def generate(self, source: SourceDocument) -> str:
        """Generate dialect markdown for a source (synchronous).

        Raises:
            GenerationError: The source is blank, the provider call failed, or the reply was empty.
        """

        if not source.content.strip():
            raise GenerationError(EMPTY_SOURCE_MESSAGE)

        user = build_user_prompt(kind=source.kind, content=source.content, origin=source.origin)

        logger.info("Generating mind map kind=%s chars=%d", source.kind.value, len(source.content))
        try:
            raw = self._llm.complete(
                system=MINDMAP_SYSTEM_PROMPT, user=user, temperature=self._temperature
            )
        except Exception as e:
            log_exception(logger, "Mind map generation failed", kind=source.kind.value)
            raise GenerationError("Failed to generate mind map from the source content.") from e

        markdown = strip_code_fence(raw)
        if not markdown:
            raise GenerationError("The model returned an empty mind map.")
        return markdown

    async def generate_async(self, source: SourceDocument) -> str:
        """Async variant of :meth:`generate`.

        Offloads the blocking LLM call to a thread so it does not block the event loop.
        """

        return await asyncio.to_thread(self.generate, source)
