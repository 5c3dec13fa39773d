"""
Layout Configuration

Settings seeded into each dynamic layout root.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union

from .layouts.layout_base import LayoutDirection


def parse_direction(direction: Union[str, LayoutDirection]) -> LayoutDirection:
    """
    Parse a split direction.

    Accepts:
    - A LayoutDirection member
    - A string: "horizontal" / "vertical" (case-insensitive), or the
      shorthands "h" / "v"

    Returns:
    - The matching LayoutDirection
    """
    if isinstance(direction, LayoutDirection):
        return direction
    if isinstance(direction, str):
        name = direction.strip().lower()
        if name in ("horizontal", "h"):
            return LayoutDirection.HORIZONTAL
        if name in ("vertical", "v"):
            return LayoutDirection.VERTICAL
        raise ValueError(
            f"Invalid direction: {direction!r}. Use 'horizontal' or 'vertical'"
        )
    raise ValueError(
        f"Invalid direction type: {type(direction)}. Use a string or LayoutDirection"
    )


@dataclass
class LayoutConfig:
    """Dynamic layout configuration."""

    # Spacing between sibling windows, in pixels
    gap: int = 4

    # Split direction of the root group
    direction: Union[str, LayoutDirection] = LayoutDirection.HORIZONTAL

    def __post_init__(self):
        """Normalise the direction and validate the gap."""
        self.direction = parse_direction(self.direction)
        if isinstance(self.gap, bool) or not isinstance(self.gap, int):
            raise ValueError(f"Invalid gap type: {type(self.gap)}. Use an int")
        if self.gap < 0:
            raise ValueError(f"Invalid gap: {self.gap}. Must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in ("gap", "direction")}
        return cls(**known)
