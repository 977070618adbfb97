"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("markmind_request_id", default="-")
_stage_var: contextvars.ContextVar[str] = contextvars.ContextVar("markmind_stage", default="-")

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s %(levelname)s req=%(request_id)s stage=%(stage)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
_NOISY_LOGGERS = ("httpx", "httpcore", "openai")


class _ContextFilter(logging.Filter):
    """Inject request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        record.stage = _stage_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(*, request_id: str, stage: str | None = None) -> Any:
    """Temporarily bind request context for structured logging.

    Args:
        request_id: Request identifier (one per CLI command or HTTP call).
        stage: Optional pipeline stage (ingest, generate, export).
    """

    token_request = _request_id_var.set(request_id)
    token_stage = _stage_var.set(stage or _stage_var.get())
    try:
        yield
    finally:
        _request_id_var.reset(token_request)
        _stage_var.reset(token_stage)


def set_stage(stage: str) -> None:
    """Update current stage in context."""

    _stage_var.set(stage)


def _ensure_context(handler: logging.Handler) -> None:
    if not any(isinstance(f, _ContextFilter) for f in handler.filters):
        handler.addFilter(_ContextFilter())
    handler.setFormatter(_FORMATTER)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Safe to call repeatedly (every CLI command and every `create_app` does): the root logger
    keeps a single RichHandler carrying a single context filter.

    Args:
        level: Logging level name.
    """

    root = logging.getLogger()
    root.setLevel(level)

    handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    if not handlers:
        handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
        root.addHandler(handler)
        handlers = [handler]
    for h in handlers:
        _ensure_context(h)

    # Request-level chatter from the HTTP and model SDKs only at DEBUG.
    noisy_level = logging.DEBUG if root.level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)
