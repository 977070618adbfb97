"""Collapsible `<details>` outline rendering."""

from __future__ import annotations

from string import Template

from markmind.outline.parser import COLLAPSIBLE_BULLET_OFFSET, parse_lines, strip_front_matter
from markmind.outline.title import display_title, extract_title

_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Outline: $title</title>
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; line-height: 1.6; color: #333; max-width: 800px; margin: 2rem auto; padding: 0 1rem; background-color: #fdfdfd; }
    h1 { color: #111; border-bottom: 1px solid #eee; padding-bottom: 0.5rem; }
    details { margin-left: 20px; border-left: 1px solid #e0e0e0; padding-left: 15px; margin-top: 5px; }
    summary { cursor: pointer; font-weight: 500; padding: 4px 8px; border-radius: 4px; list-style-position: inside; }
    summary:hover { background-color: #f0f0f0; }
    .leaf { margin-left: 20px; padding: 4px 8px; }
  </style>
</head>
<body>
  <h1>$title</h1>
  $body
</body>
</html>
"""
)


def render_collapsible(markdown: str) -> str:
    """Render dialect markdown as nested disclosure widgets.

    A line is a branch iff the next structural line is strictly deeper; branches open a
    single `<details open>` no matter how far the next line jumps, leaves become
    `<p class="leaf">`. Open containers close while the incoming level is at or above them.

    Args:
        markdown: Dialect markdown.

    Returns:
        HTML fragment with every container expanded, empty for input without structure.
    """

    lines = parse_lines(
        strip_front_matter(markdown),
        bullet_offset=COLLAPSIBLE_BULLET_OFFSET,
        relative_to_heading=True,
    )

    parts: list[str] = []
    stack: list[int] = []
    for index, line in enumerate(lines):
        while stack and line.level <= stack[-1]:
            parts.append("</details>")
            stack.pop()

        has_children = index + 1 < len(lines) and lines[index + 1].level > line.level
        if has_children:
            parts.append(f"<details open><summary>{line.content}</summary>")
            stack.append(line.level)
        else:
            parts.append(f'<p class="leaf">{line.content}</p>')

    parts.append("</details>" * len(stack))
    return "".join(parts)


def render_outline_page(markdown: str) -> str:
    """Wrap :func:`render_collapsible` in a standalone HTML page."""

    title = display_title(extract_title(markdown))
    return _PAGE_TEMPLATE.substitute(title=title, body=render_collapsible(markdown))
