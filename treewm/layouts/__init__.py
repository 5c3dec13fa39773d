"""
Layout System

Provides the dynamic tree layout and layout management.
"""

from .layout_base import (
    Layout,
    LayoutGeometry,
    LayoutDirection,
    Workspace,
    LayoutManager,
)
from .layout_dynamic import (
    DynamicLayout,
    LayoutNode,
    Leaf,
    LayoutError,
    SplitOutcome,
    WindowQueue,
)
from .layout_utils import split_weighted, split_area_weighted

__all__ = [
    # Base classes
    "Layout",
    "LayoutGeometry",
    "LayoutDirection",
    "Workspace",
    "LayoutManager",
    # Dynamic layout
    "DynamicLayout",
    "LayoutNode",
    "Leaf",
    "LayoutError",
    "SplitOutcome",
    "WindowQueue",
    # Helpers
    "split_weighted",
    "split_area_weighted",
]
