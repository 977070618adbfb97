"""Outline parsing for the markmap markdown dialect."""

from __future__ import annotations

from markmind.outline.parser import (
    COLLAPSIBLE_BULLET_OFFSET,
    NESTED_LIST_BULLET_OFFSET,
    build_tree,
    parse_lines,
    split_front_matter,
    strip_front_matter,
)
from markmind.outline.title import DEFAULT_TITLE, display_title, extract_title, sanitize_title

__all__ = [
    "COLLAPSIBLE_BULLET_OFFSET",
    "DEFAULT_TITLE",
    "NESTED_LIST_BULLET_OFFSET",
    "build_tree",
    "display_title",
    "extract_title",
    "parse_lines",
    "sanitize_title",
    "split_front_matter",
    "strip_front_matter",
]
