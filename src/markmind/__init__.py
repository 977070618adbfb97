"""markmind: turn text, files and web pages into exportable mind maps."""

from __future__ import annotations

__version__ = "0.1.0"
