"""Tests for logging configuration."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from markmind.logging import _ContextFilter, configure_logging, request_context


def _rich_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


def test_configure_logging_is_idempotent() -> None:
    """Repeated calls keep one RichHandler with one context filter."""

    for _ in range(5):
        configure_logging("INFO")

    handlers = _rich_handlers()
    assert len(handlers) == 1
    assert sum(isinstance(f, _ContextFilter) for f in handlers[0].filters) == 1


def test_context_filter_stamps_request_and_stage() -> None:
    record = logging.LogRecord("markmind.test", logging.INFO, __file__, 1, "msg", None, None)

    with request_context(request_id="abc123", stage="export"):
        assert _ContextFilter().filter(record)

    assert record.request_id == "abc123"  # type: ignore[attr-defined]
    assert record.stage == "export"  # type: ignore[attr-defined]


def test_sdk_loggers_quiet_unless_debug() -> None:
    configure_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG

    configure_logging("INFO")
