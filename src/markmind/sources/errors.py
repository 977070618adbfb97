from __future__ import annotations


class SourceError(RuntimeError):
    """A source could not be turned into usable text."""


EMPTY_SOURCE_MESSAGE = "Source is empty or could not be read. Please check the file, URL or text input."
