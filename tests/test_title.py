"""Tests for title extraction."""

from __future__ import annotations

from markmind.outline import DEFAULT_TITLE, display_title, extract_title, sanitize_title


def test_extract_title_from_front_matter(sample_markdown: str) -> None:
    assert extract_title(sample_markdown) == "My_Plan"


def test_extract_title_minimal_block() -> None:
    assert extract_title("---\ntitle: My Plan\n---\n# Root\n") == "My_Plan"
    assert extract_title("\n---\ntitle: AI Mind Map Generator\n---\n") == "AI_Mind_Map_Generator"


def test_extract_title_falls_back_to_default() -> None:
    """No front matter, no title field, or nothing left after sanitizing."""

    assert extract_title("# Root\n## Branch\n") == DEFAULT_TITLE
    assert extract_title("") == DEFAULT_TITLE
    assert extract_title("---\nmarkmap:\n  colorFreezeLevel: 2\n---\n# R\n") == DEFAULT_TITLE
    assert extract_title("---\ntitle: !!!\n---\n") == DEFAULT_TITLE
    assert extract_title("# Root\ntitle: Not front matter\n") == DEFAULT_TITLE


def test_sanitize_title() -> None:
    assert sanitize_title("Q&A -- Review!") == "QA_Review"
    assert sanitize_title('  "Quoted  title"  ') == "Quoted_title"
    assert sanitize_title("a/b\\c") == "abc"


def test_display_title() -> None:
    assert display_title("My_Plan") == "My Plan"


def test_extract_title_unclosed_front_matter() -> None:
    """A truncated reply without the closing delimiter still yields its title."""

    assert extract_title("---\ntitle: My Plan\nmarkmap:\n  colorFreezeLevel: 2\n") == "My_Plan"
    assert extract_title("---\ntitle: My Plan\n# Root\n## Branch\n") == "My_Plan"
    assert extract_title("---\n# Root\ntitle: Body line\n") == DEFAULT_TITLE


def test_extract_title_ignores_byte_order_mark() -> None:
    assert extract_title("\ufeff---\ntitle: My Plan\n---\n# R\n") == "My_Plan"
