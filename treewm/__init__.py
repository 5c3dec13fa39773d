"""
treewm

A tree-based dynamic tiling layout engine for Python window managers.

This package provides:
- A persistent tree of nested horizontal/vertical groups, reconciled
  against the host's window list on every layout pass
- Split actions that give a window its own nested group
- A layout manager driven by Pypubsub events

Example usage:
    from pubsub import pub
    from treewm import LayoutManager, LayoutConfig, Output, Window, Area, topics

    manager = LayoutManager(bus=pub, config=LayoutConfig(gap=8))
    output = Output(1, "DP-1", Area(0, 0, 1920, 1080))
    pub.sendMessage(topics.OUTPUT_CREATED, output=output)
    pub.sendMessage(topics.FOCUSED_OUTPUT_CHANGED, output=output)
    pub.sendMessage(topics.WINDOW_CREATED, window=Window(10))
    geometry = manager.calculate_layout(output)
"""

__version__ = "0.1.0"

from .protocol import Area, WindowEdges
from .objects import Window, Output, WindowState
from .config import LayoutConfig, parse_direction
from . import topics

from .layouts import (
    Layout,
    LayoutGeometry,
    LayoutDirection,
    Workspace,
    LayoutManager,
    DynamicLayout,
    LayoutNode,
    Leaf,
    LayoutError,
    SplitOutcome,
)

__all__ = [
    # Boundary types
    "Area",
    "WindowEdges",
    "Window",
    "Output",
    "WindowState",
    # Configuration
    "LayoutConfig",
    "parse_direction",
    # Events
    "topics",
    # Layouts
    "Layout",
    "LayoutGeometry",
    "LayoutDirection",
    "Workspace",
    "LayoutManager",
    "DynamicLayout",
    "LayoutNode",
    "Leaf",
    "LayoutError",
    "SplitOutcome",
]
