"""
Host Boundary Types

Plain value types exchanged with the window manager hosting the layouts.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntFlag


class WindowEdges(IntFlag):
    """Window edge flags."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    ALL = TOP | BOTTOM | LEFT | RIGHT


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def edges_within(self, outer: "Area") -> WindowEdges:
        """Return the edges of this area that lie on the border of ``outer``."""
        edges = WindowEdges.NONE
        if self.y == outer.y:
            edges |= WindowEdges.TOP
        if self.bottom == outer.bottom:
            edges |= WindowEdges.BOTTOM
        if self.x == outer.x:
            edges |= WindowEdges.LEFT
        if self.right == outer.right:
            edges |= WindowEdges.RIGHT
        return edges
