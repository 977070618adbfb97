"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `MARKMIND_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """markmind settings.

    All fields are environment-configurable. Prefix is `MARKMIND_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKMIND_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # LLM (any OpenAI-compatible endpoint; defaults target Gemini)
    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/"
    )
    openai_model: str = Field(default="gemini-2.5-flash")
    openai_timeout_s: float = Field(default=120.0)
    openai_max_retries: int = Field(default=2, ge=0, le=10)
    llm_temperature: float = Field(default=0.2, ge=0.0, le=2.0)

    # Sources
    fetch_urls: bool = Field(default=True)
    max_source_chars: int = Field(default=100_000, ge=1000, le=2_000_000)

    # Networking
    http_timeout_s: float = Field(default=30.0)
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    )

    # Exports
    markmap_version: str = Field(default="0.17.0")
    output_dir: Path = Field(default=Path("."))


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("MARKMIND_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
