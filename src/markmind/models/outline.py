"""Outline models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class LineKind(str, Enum):
    """Structural kind of a dialect line."""

    HEADING = "heading"
    BULLET = "bullet"


@dataclass(frozen=True)
class OutlineLine:
    """A single candidate line of dialect markdown.

    `level` is already resolved with the bullet offset of the renderer that asked for it.
    """

    raw_text: str
    kind: LineKind
    level: int
    content: str


class OutlineNode(BaseModel):
    """Structured outline node.

    The virtual root (level 0) is never materialised: parsers return the forest of its children.
    """

    content: str
    level: int = Field(ge=1)

    children: list["OutlineNode"] = Field(default_factory=list)

    def walk(self) -> list["OutlineNode"]:
        """Return this node and all descendants in document order."""

        out: list[OutlineNode] = [self]
        for child in self.children:
            out.extend(child.walk())
        return out
