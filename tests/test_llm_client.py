"""Tests for the chat client."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from markmind.config import Settings
from markmind.llm.client import LLMClient


class _StubCompletions:
    def __init__(self, response: Any) -> None:
        self.response = response
        self.kwargs: dict[str, Any] = {}

    def create(self, **kwargs: Any) -> Any:
        self.kwargs = kwargs
        return self.response


def _client_with(response: Any) -> tuple[LLMClient, _StubCompletions]:
    client = LLMClient(Settings(openai_api_key="sk-test", openai_model="test-model"))
    completions = _StubCompletions(response)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))  # type: ignore[assignment]
    return client, completions


def _response(content: str | None, *, usage: bool = True) -> SimpleNamespace:
    return SimpleNamespace(
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=34) if usage else None,
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
    )


def test_missing_api_key() -> None:
    """It should refuse to build a client without credentials, naming the variable."""

    with pytest.raises(ValueError, match="MARKMIND_OPENAI_API_KEY"):
        LLMClient(Settings(openai_api_key=None))


def test_complete_sends_system_then_user_turn() -> None:
    client, completions = _client_with(_response("  # Root\n- a\n"))

    reply = client.complete(system="rules", user="source text", temperature=0.1)

    assert reply == "# Root\n- a"
    assert completions.kwargs["model"] == "test-model"
    assert completions.kwargs["temperature"] == 0.1
    assert completions.kwargs["messages"] == [
        {"role": "system", "content": "rules"},
        {"role": "user", "content": "source text"},
    ]


def test_complete_without_content() -> None:
    """It should return an empty string when the provider sends no content."""

    client, _ = _client_with(_response(None, usage=False))
    assert client.complete(system="s", user="u") == ""

    client, _ = _client_with(SimpleNamespace(usage=None, choices=[]))
    assert client.complete(system="s", user="u") == ""


def test_build_messages() -> None:
    messages = LLMClient.build_messages(system="s", user="u")

    assert [(m.role, m.content) for m in messages] == [("system", "s"), ("user", "u")]
