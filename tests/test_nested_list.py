"""Tests for the nested-list renderer."""

from __future__ import annotations

import re

from markmind.outline import parse_lines
from markmind.render import render_nested_list


def test_nested_list_example(sample_markdown: str) -> None:
    """Bullets under `##` share its level; everything sits two lists deep under Root."""

    assert render_nested_list(sample_markdown) == (
        "<ul><li>Root</li>"
        "<ul><li>Branch A</li><li>leaf 1</li><li>leaf 2</li><li>Branch B</li></ul>"
        "</ul>"
    )


def test_nested_list_indented_bullets() -> None:
    md = "# R\n## B\n- a\n  - b\n    - c\n- d\n"
    assert render_nested_list(md) == (
        "<ul><li>R</li><ul><li>B</li><li>a</li>"
        "<ul><li>b</li><ul><li>c</li></ul></ul>"
        "<li>d</li></ul></ul>"
    )


def test_nested_list_opens_one_list_per_level_jumped() -> None:
    assert render_nested_list("# R\n### deep\n") == "<ul><li>R</li><ul><ul><li>deep</li></ul></ul></ul>"
    assert render_nested_list("- first\n") == "<ul><ul><li>first</li></ul></ul>"


def test_nested_list_skips_empty_items() -> None:
    assert render_nested_list("# R\n- \n-\n## \n- a\n") == "<ul><li>R</li><ul><li>a</li></ul></ul>"


def test_nested_list_balanced_and_deterministic() -> None:
    md = "# R\n## A\n- x\n      - deep\n  - mid\n## B\n### C\n- y\n"
    out = render_nested_list(md)

    assert out.count("<ul>") == out.count("</ul>")
    assert out.count("<li>") == 8
    assert render_nested_list(md) == out


def test_nested_list_empty_input() -> None:
    assert render_nested_list("") == ""
    assert render_nested_list("just prose\n\n") == ""


def test_nested_list_depth_matches_line_level() -> None:
    """Each item sits exactly as many lists deep as its line's level."""

    md = "# R\n### deep\n## B\n- a\n    - c\n  - b\n# S\n- t\n"
    out = render_nested_list(md)
    expected = [ln.level for ln in parse_lines(md)]

    depth = 0
    seen: list[int] = []
    for token in re.findall(r"</?ul>|<li>", out):
        if token == "<ul>":
            depth += 1
        elif token == "</ul>":
            depth -= 1
        else:
            seen.append(depth)

    assert seen == expected == [1, 3, 2, 2, 4, 3, 1, 2]
    assert depth == 0
