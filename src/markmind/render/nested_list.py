"""Nested `<ul>` rendering."""

from __future__ import annotations

from markmind.outline.parser import NESTED_LIST_BULLET_OFFSET, parse_lines, strip_front_matter


def render_nested_list(markdown: str) -> str:
    """Render dialect markdown as a bare nested unordered list.

    Level is treated as absolute nesting depth: a jump from level 1 to level 3 opens two
    lists, a drop from 3 to 1 closes two. Every line becomes one `<li>`.

    Args:
        markdown: Dialect markdown.

    Returns:
        HTML fragment, empty for input without headings or bullets.
    """

    lines = parse_lines(strip_front_matter(markdown), bullet_offset=NESTED_LIST_BULLET_OFFSET)

    parts: list[str] = []
    # Every open container closes with </ul>, so the stack of closers is just its depth.
    depth = 0
    for line in lines:
        if line.level > depth:
            parts.append("<ul>" * (line.level - depth))
        elif line.level < depth:
            parts.append("</ul>" * (depth - line.level))
        parts.append(f"<li>{line.content}</li>")
        depth = line.level
    parts.append("</ul>" * depth)
    return "".join(parts)
