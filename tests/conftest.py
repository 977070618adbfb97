"""Shared fixtures."""

from __future__ import annotations

import pytest

from markmind.llm.client import ChatMessage, LLMClient

SAMPLE_MARKDOWN = """\
---
title: My Plan
markmap:
  colorFreezeLevel: 2
  initialExpandLevel: 2
---
# Root
## Branch A
- leaf 1
- leaf 2
## Branch B
"""


class FakeLLM:
    """Stands in for LLMClient: returns a canned reply and records the request."""

    def __init__(self, reply: str = SAMPLE_MARKDOWN, *, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    def complete(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        self.calls.append(LLMClient.build_messages(system=system, user=user))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture()
def sample_markdown() -> str:
    return SAMPLE_MARKDOWN


@pytest.fixture()
def fake_llm() -> FakeLLM:
    return FakeLLM()
