"""Standalone interactive markmap page.

The page embeds the dialect markdown verbatim and lets the markmap runtime build the tree in
the browser; nothing is parsed on this side.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from string import Template

from markmind.outline.title import display_title

_SCRIPT_CLOSE_RE = re.compile(r"</(script)", re.IGNORECASE)

_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>$title</title>
  <style>
    body, html, #mindmap { width: 100%; height: 100%; margin: 0; padding: 0; overflow: hidden; }
    @media print {
        @page { size: A4 landscape; }
    }
  </style>
$scripts
</head>
<body>
  <svg id="mindmap" style="width: 100%; height: 100%"></svg>
  <script type="text/template">$markdown</script>
  <script>
    const { Transformer, Markmap } = window.$namespace;
    const transformer = new Transformer();
    const { root } = transformer.transform(document.querySelector('script[type="text/template"]').textContent);
    Markmap.create('#mindmap', null, root);
  </script>
</body>
</html>
"""
)


@dataclass(frozen=True)
class MarkmapRuntime:
    """Handle on the browser visualization runtime a bundle links against.

    Attributes:
        script_urls: Scripts to load, in order (d3 first, then markmap).
        namespace: Global the runtime registers its `Transformer`/`Markmap` under.
    """

    script_urls: tuple[str, ...]
    namespace: str = "markmap"

    @classmethod
    def from_cdn(cls, version: str = "0.17.0", *, d3_version: str = "7") -> "MarkmapRuntime":
        """Runtime served from jsDelivr."""

        return cls(
            script_urls=(
                f"https://cdn.jsdelivr.net/npm/d3@{d3_version}",
                f"https://cdn.jsdelivr.net/npm/markmap-lib@{version}",
                f"https://cdn.jsdelivr.net/npm/markmap-view@{version}",
            )
        )

    def script_tags(self) -> str:
        return "\n".join(f'  <script src="{url}"></script>' for url in self.script_urls)


DEFAULT_RUNTIME = MarkmapRuntime.from_cdn()


def escape_script_content(text: str) -> str:
    """Neutralize `</script` so embedded text cannot close its container early."""

    return _SCRIPT_CLOSE_RE.sub(r"<\\/\1", text)


def render_interactive_bundle(
    markdown: str,
    title: str,
    *,
    runtime: MarkmapRuntime = DEFAULT_RUNTIME,
) -> str:
    """Render a self-contained interactive mind map page.

    Args:
        markdown: Dialect markdown, embedded as-is apart from script-close escaping.
        title: Sanitized title (see :func:`markmind.outline.extract_title`).
        runtime: Visualization runtime to link against.

    Returns:
        Complete HTML document.
    """

    return _PAGE_TEMPLATE.substitute(
        title=display_title(title),
        scripts=runtime.script_tags(),
        markdown=escape_script_content(markdown),
        namespace=runtime.namespace,
    )
