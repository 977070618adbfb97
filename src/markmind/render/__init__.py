"""Format renderers for dialect markdown."""

from __future__ import annotations

from markmind.render.bundle import DEFAULT_RUNTIME, MarkmapRuntime, escape_script_content, render_interactive_bundle
from markmind.render.collapsible import render_collapsible, render_outline_page
from markmind.render.nested_list import render_nested_list
from markmind.render.word import render_word_document

__all__ = [
    "DEFAULT_RUNTIME",
    "MarkmapRuntime",
    "escape_script_content",
    "render_collapsible",
    "render_interactive_bundle",
    "render_nested_list",
    "render_outline_page",
    "render_word_document",
]
