"""
Host Objects

Minimal window and output records the layouts operate on. A host window
manager either uses these directly or supplies objects with the same
attributes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .protocol import Area


class WindowState(Enum):
    """Placement state of a window."""

    NORMAL = auto()
    TILED = auto()
    FLOATING = auto()
    FULLSCREEN = auto()


@dataclass(eq=False)
class Window:
    """Represents a managed window.

    Identity is the ``object_id``; ``geometry`` and ``state`` are written by
    the layout during a pass.
    """

    object_id: int
    title: Optional[str] = None
    app_id: Optional[str] = None
    geometry: Optional[Area] = None
    state: WindowState = WindowState.NORMAL

    def __hash__(self):
        return hash(self.object_id)

    def __eq__(self, other):
        if not isinstance(other, Window):
            return NotImplemented
        return self.object_id == other.object_id


@dataclass(eq=False)
class Output:
    """Represents an output (monitor) and its usable area."""

    object_id: int
    name: str = ""
    area: Area = field(default_factory=Area)

    def __hash__(self):
        return hash(self.object_id)

    def __eq__(self, other):
        if not isinstance(other, Output):
            return NotImplemented
        return self.object_id == other.object_id
