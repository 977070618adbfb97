"""HTML-as-Word document rendering."""

from __future__ import annotations

from string import Template

from markmind.outline.title import display_title, extract_title
from markmind.render.nested_list import render_nested_list

_DOCUMENT_TEMPLATE = Template(
    """<html xmlns:o="urn:schemas-microsoft-com:office:office" xmlns:w="urn:schemas-microsoft-com:office:word" xmlns="http://www.w3.org/TR/REC-html40">
<head>
  <meta charset="utf-8">
  <title>$title</title>
  <style>
    @page {
      size: A4 landscape;
      margin: 2cm;
    }
    body {
      font-family: Calibri, sans-serif;
      font-size: 11pt;
    }
    h1 {
      color: #333;
    }
    ul {
      list-style-type: disc;
      margin-left: 20px;
    }
    ul ul {
      list-style-type: circle;
    }
    ul ul ul {
      list-style-type: square;
    }
  </style>
</head>
<body>
  <h1>$title</h1>
  $body
</body>
</html>
"""
)


def render_word_document(markdown: str) -> str:
    """Render a Word-compatible document: title banner plus the nested list."""

    title = display_title(extract_title(markdown))
    return _DOCUMENT_TEMPLATE.substitute(title=title, body=render_nested_list(markdown))
