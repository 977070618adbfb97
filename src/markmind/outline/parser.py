"""Line filtering and tree building for dialect markdown.

The dialect is a small subset of markdown: an optional front-matter block, ATX headings and
`-` bullets indented in 2-space steps. Only headings and bullets carry structure; every other
line is dropped. Nothing in here raises on malformed input: irregular indentation simply
degrades to best-effort nesting.
"""

from __future__ import annotations

import re

from markmind.models.outline import LineKind, OutlineLine, OutlineNode

# Bullets sit this many levels below absolute indentation depth in the nested-list form,
# so `- item` at column 0 lands level with `##` branches.
NESTED_LIST_BULLET_OFFSET = 2
# In the collapsible form, bullets sit this many levels below their enclosing heading.
COLLAPSIBLE_BULLET_OFFSET = 1

INDENT_UNIT = 2

_FRONT_MATTER_RE = re.compile(
    r"\A\s*^---[ \t]*\n(?P<body>.*?)^---[ \t]*$\n?",
    re.DOTALL | re.MULTILINE,
)
_HEADING_MARKER_RE = re.compile(r"^#+")
_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
_BULLET_PREFIX_RE = re.compile(r"^-+\s*")


def normalize_newlines(markdown: str) -> str:
    """Unify line endings and drop a leading byte-order mark."""

    return markdown.removeprefix("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def split_front_matter(markdown: str) -> tuple[str | None, str]:
    """Split a leading `---` ... `---` block from the rest of the document.

    Args:
        markdown: Dialect markdown.

    Returns:
        `(front_matter_body, remainder)`. The body is `None` when the document does not start
        with a closed front-matter block, in which case the remainder is the whole input.
    """

    text = normalize_newlines(markdown)
    m = _FRONT_MATTER_RE.match(text)
    if not m:
        return None, text
    return m.group("body"), text[m.end():]


def strip_front_matter(markdown: str) -> str:
    """Drop the leading front-matter block, if any."""

    return split_front_matter(markdown)[1]


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def parse_lines(
    markdown: str,
    *,
    bullet_offset: int = NESTED_LIST_BULLET_OFFSET,
    relative_to_heading: bool = False,
) -> list[OutlineLine]:
    """Filter dialect markdown down to its structural lines.

    Heading level is the number of leading `#`. Bullet level is
    `indent // 2 + bullet_offset`, plus the level of the nearest preceding heading when
    `relative_to_heading` is set.

    Lines that are neither headings nor bullets, and lines whose content is empty once the
    marker is stripped (a bare `#`, a `---` rule), are skipped.

    Args:
        markdown: Dialect markdown.
        bullet_offset: Levels added to a bullet's indentation depth.
        relative_to_heading: Count bullet levels from the enclosing heading.

    Returns:
        Structural lines in input order.
    """

    out: list[OutlineLine] = []
    heading_level = 0
    for raw in normalize_newlines(markdown).split("\n"):
        trimmed = raw.strip()
        if trimmed.startswith("#"):
            kind = LineKind.HEADING
            level = len(_HEADING_MARKER_RE.match(trimmed).group(0))  # type: ignore[union-attr]
            content = _HEADING_PREFIX_RE.sub("", trimmed).strip()
        elif trimmed.startswith("-"):
            kind = LineKind.BULLET
            level = _indent_width(raw) // INDENT_UNIT + bullet_offset
            # Heading-relative: `## B` then `- c` puts c at 2 + 1, below B. An absolute
            # offset of 1 would make c a sibling of B and B a leaf.
            if relative_to_heading:
                level += heading_level
            content = _BULLET_PREFIX_RE.sub("", trimmed).strip()
        else:
            continue

        if not content:
            continue
        if kind is LineKind.HEADING:
            heading_level = level
        out.append(OutlineLine(raw_text=raw, kind=kind, level=level, content=content))
    return out


def build_tree(lines: list[OutlineLine]) -> list[OutlineNode]:
    """Build the outline forest from structural lines.

    A node becomes a child of the nearest preceding node with a strictly lower level; nodes
    with no such ancestor are roots. Sibling order follows input order.
    """

    roots: list[OutlineNode] = []
    stack: list[OutlineNode] = []
    for line in lines:
        node = OutlineNode(content=line.content, level=line.level)
        while stack and stack[-1].level >= node.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots
