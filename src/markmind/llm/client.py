"""Chat client for mind map generation.

Talks to any OpenAI-compatible Chat Completions endpoint through the `openai` SDK. The
defaults point at Gemini's compatibility endpoint, so switching provider is a matter of
`MARKMIND_OPENAI_BASE_URL` / `MARKMIND_OPENAI_MODEL`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from openai import OpenAI

from markmind.config import Settings
from markmind.logging import get_logger

logger = get_logger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    """A chat message."""

    role: Role
    content: str


class LLMClient:
    """One-shot instruction + source completions."""

    def __init__(self, settings: Settings) -> None:
        if not settings.openai_api_key:
            raise ValueError(
                "Missing MARKMIND_OPENAI_API_KEY. "
                "Set it in environment variables or a .env file."
            )
        self._model = settings.openai_model
        self._client = OpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.openai_timeout_s,
            max_retries=settings.openai_max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    @staticmethod
    def build_messages(*, system: str, user: str) -> list[ChatMessage]:
        """Instruction turn followed by the source turn."""

        return [ChatMessage(role="system", content=system), ChatMessage(role="user", content=user)]

    def complete(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        """Run one completion.

        Args:
            system: Instructions (output format, dialect rules).
            user: Source context and content.
            temperature: Sampling temperature.

        Returns:
            Assistant reply, stripped; empty when the provider sent no content.
        """

        messages = self.build_messages(system=system, user=user)
        resp = self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": m.role, "content": m.content} for m in messages],
            temperature=temperature,
        )
        if resp.usage is not None:
            logger.info(
                "Completion model=%s prompt_tokens=%d completion_tokens=%d",
                self._model,
                resp.usage.prompt_tokens,
                resp.usage.completion_tokens,
            )
        choice = resp.choices[0] if resp.choices else None
        if choice is None or not choice.message or choice.message.content is None:
            logger.warning("Completion model=%s returned no content", self._model)
            return ""
        return choice.message.content.strip()
