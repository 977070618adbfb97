"""Pydantic models used across the project."""

from __future__ import annotations

from markmind.models.export import ExportArtifact, ExportKind
from markmind.models.outline import LineKind, OutlineLine, OutlineNode
from markmind.models.source import SourceDocument, SourceKind

__all__ = [
    "ExportArtifact",
    "ExportKind",
    "LineKind",
    "OutlineLine",
    "OutlineNode",
    "SourceDocument",
    "SourceKind",
]
