"""Title extraction.

The sanitized title doubles as the document banner and the download filename stem, so both
are always derived from :func:`extract_title`.
"""

from __future__ import annotations

import re

from markmind.outline.parser import normalize_newlines

DEFAULT_TITLE = "mind_map"

# A leading block counts even when unclosed (a truncated model reply); it then ends at the
# first heading or at end of input.
_LEADING_BLOCK_RE = re.compile(
    r"\A\s*^---[ \t]*\n(?P<body>.*?)(?:^---[ \t]*$|^#|\Z)",
    re.DOTALL | re.MULTILINE,
)
_TITLE_FIELD_RE = re.compile(r"^title[ \t]*:[ \t]*(?P<value>.*?)[ \t]*$", re.MULTILINE)
_UNSAFE_CHARS_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATOR_RUN_RE = re.compile(r"[\s-]+")


def sanitize_title(raw: str) -> str:
    """Make a title safe for filenames.

    Characters outside word/space/hyphen are dropped and runs of whitespace or hyphens become
    a single underscore. Returns an empty string when nothing survives.
    """

    cleaned = _UNSAFE_CHARS_RE.sub("", raw.strip())
    return _SEPARATOR_RUN_RE.sub("_", cleaned)


def extract_title(markdown: str) -> str:
    """Read the `title:` field of the leading front-matter block, closed or not.

    Args:
        markdown: Dialect markdown.

    Returns:
        Sanitized title, or :data:`DEFAULT_TITLE` if there is no front matter, no title
        field, or the title sanitizes to nothing.
    """

    block = _LEADING_BLOCK_RE.match(normalize_newlines(markdown))
    if not block:
        return DEFAULT_TITLE
    m = _TITLE_FIELD_RE.search(block.group("body"))
    if not m:
        return DEFAULT_TITLE
    return sanitize_title(m.group("value")) or DEFAULT_TITLE


def display_title(title: str) -> str:
    """Human-readable form of a sanitized title."""

    return title.replace("_", " ")
