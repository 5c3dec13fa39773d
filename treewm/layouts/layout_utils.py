"""
Layout Utilities

Helpers for dividing an area between weighted parts.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from ..protocol import Area


def split_weighted(
    begin: int, length: int, weights: Sequence[float], gap: int = 0
) -> List[Tuple[int, int]]:
    """
    Split a line into weighted parts separated by ``gap``.

    Part boundaries are floored cumulative offsets, so the parts plus the
    gaps cover ``length`` exactly.

    Returns:
        List of (begin, length) tuples, one per weight
    """
    n = len(weights)
    if n == 0:
        return []

    total = sum(weights)
    if total <= 0:
        raise ValueError(f"Weights must sum to a positive value, got {total}")

    # Gaps wider than the line leave zero-length parts, all inside the line
    usable = max(0, length - (n - 1) * gap)
    parts = []
    acc = 0.0
    for i, weight in enumerate(weights):
        start = int(usable * acc // total)
        acc += weight
        end = usable if i == n - 1 else int(usable * acc // total)
        offset = min(start + i * gap, length)
        parts.append((begin + offset, min(end - start, length - offset)))
    return parts


def split_area_weighted(
    area: Area, weights: Sequence[float], gap: int = 0, horizontal: bool = False
) -> List[Area]:
    """
    Split an area into weighted parts along one axis.

    Args:
        area: Area to split
        weights: Relative size of each part
        gap: Spacing between consecutive parts
        horizontal: Split along x (parts side by side) instead of y

    Returns:
        One Area per weight; the cross-axis dimension is unchanged
    """
    if horizontal:
        return [
            Area(x, area.y, width, area.height)
            for x, width in split_weighted(area.x, area.width, weights, gap)
        ]
    return [
        Area(area.x, y, area.width, height)
        for y, height in split_weighted(area.y, area.height, weights, gap)
    ]
