"""
Dynamic Layout

Tree-based tiling layout. Windows live as leaves in nested horizontal and
vertical groups; the tree persists across layout passes and is reconciled
against the host's window list on every pass. Splitting a window's slot
creates a new nested group that later windows are inserted into.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    List,
    Optional,
    Sequence,
    Union,
    TYPE_CHECKING,
)

from .layout_base import Layout, LayoutGeometry, LayoutDirection
from .layout_utils import split_area_weighted
from .. import topics
from ..objects import WindowState
from ..protocol import Area

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from ..objects import Window

log = logging.getLogger(__name__)

WindowId = Hashable
EventSink = Callable[..., None]


class LayoutError(RuntimeError):
    """The layout tree and the window list disagree in a way a pass cannot absorb."""


class SplitOutcome(Enum):
    """Result of a split request on a subtree."""

    NOT_FOUND = auto()
    HANDLED = auto()
    REPLACE_ME = auto()  # Window is alone in this group; the caller must replace it


@dataclass(frozen=True)
class Leaf:
    """A single window slot."""

    window_id: WindowId


class WindowQueue:
    """
    Cursor over a private copy of a window id sequence.

    One queue is shared by reference through a whole recursive walk, each
    leaf consuming from the front. ``prepare`` and ``apply`` need their own
    queue each.
    """

    def __init__(self, window_ids: Sequence[WindowId], emit: Optional[EventSink] = None):
        self._ids = list(window_ids)
        self._pos = 0
        self._emit = emit

    def __len__(self) -> int:
        return len(self._ids) - self._pos

    def peek(self) -> Optional[WindowId]:
        """Return the id at the front of the queue, or None when exhausted."""
        if self._pos < len(self._ids):
            return self._ids[self._pos]
        return None

    def pop(self) -> WindowId:
        if self._pos >= len(self._ids):
            raise LayoutError("Window queue exhausted")
        window_id = self._ids[self._pos]
        self._pos += 1
        return window_id

    def emit(self, topic: str, **data: Any):
        if self._emit is not None:
            self._emit(topic, **data)


class LayoutNode:
    """
    A group of child nodes split along one axis.

    Children are ``LayoutNode`` groups or ``Leaf`` windows, in on-screen
    order along ``direction``. Every child gets an equal share of the area.
    """

    def __init__(
        self,
        direction: LayoutDirection = LayoutDirection.HORIZONTAL,
        gap: int = 0,
        children: Optional[List[Union["LayoutNode", Leaf]]] = None,
    ):
        self.direction = direction
        self.gap = gap
        self.children: List[Union[LayoutNode, Leaf]] = (
            children if children is not None else []
        )

    def __repr__(self) -> str:
        return (
            f"LayoutNode({self.direction.name.lower()}, gap={self.gap}, "
            f"children={self.children!r})"
        )

    def prepare(
        self,
        tiles: Union[WindowQueue, Sequence[WindowId]],
        top_level: bool = True,
    ):
        """
        Reconcile this subtree with the window list.

        Leaves matching the front of ``tiles`` consume it and keep their
        place, other leaves are dropped, and nested groups left empty are
        removed. At the top level, ids never matched are appended as new
        leaves at the end of this group.
        """
        queue = tiles if isinstance(tiles, WindowQueue) else WindowQueue(tiles)

        kept: List[Union[LayoutNode, Leaf]] = []
        for child in self.children:
            if isinstance(child, LayoutNode):
                child.prepare(queue, top_level=False)
                if child.children:
                    kept.append(child)
            elif len(queue) > 0 and child.window_id == queue.peek():
                queue.pop()
                kept.append(child)
            else:
                log.debug("Dropping window %r from layout", child.window_id)
                queue.emit(topics.LAYOUT_NODE_REMOVED, window_id=child.window_id)
        self.children = kept

        if top_level:
            while len(queue) > 0:
                window_id = queue.pop()
                log.debug("Appending window %r to layout", window_id)
                self.children.append(Leaf(window_id))
                queue.emit(topics.LAYOUT_NODE_ADDED, window_id=window_id)

    def apply(
        self, area: Area, tiles: Union[WindowQueue, Sequence[WindowId]]
    ) -> List[Area]:
        """
        Partition ``area`` between the leaves of this subtree.

        Returns one Area per leaf in depth-first order, which matches the
        order of ``tiles`` once ``prepare`` has run in the same pass.
        """
        queue = tiles if isinstance(tiles, WindowQueue) else WindowQueue(tiles)
        if area.width < 0 or area.height < 0:
            raise ValueError(f"Invalid area: {area}")

        part_areas = split_area_weighted(
            area,
            [1.0] * len(self.children),
            self.gap,
            horizontal=self.direction == LayoutDirection.HORIZONTAL,
        )

        rects: List[Area] = []
        for child, part in zip(self.children, part_areas):
            if isinstance(child, LayoutNode):
                rects.extend(child.apply(part, queue))
                continue

            if len(queue) == 0:
                raise LayoutError(
                    f"No window left for leaf {child.window_id!r}; was prepare() skipped?"
                )
            actual = queue.pop()
            if actual != child.window_id:
                log.warning(
                    "apply: unexpected window id %r, expected %r",
                    actual,
                    child.window_id,
                )
                queue.emit(
                    topics.LAYOUT_MISMATCH, expected=child.window_id, actual=actual
                )
            rects.append(part)
        return rects

    def split(self, direction: LayoutDirection, window_id: WindowId) -> SplitOutcome:
        """
        Put ``window_id`` alone in a new group of ``direction``.

        Returns REPLACE_ME when the window is the only child of this group,
        so that the caller replaces the whole group instead of nesting.
        """
        for i, child in enumerate(self.children):
            if isinstance(child, LayoutNode):
                outcome = child.split(direction, window_id)
                if outcome == SplitOutcome.HANDLED:
                    return outcome
                if outcome == SplitOutcome.REPLACE_ME:
                    self.replace_child(i, direction, window_id)
                    return SplitOutcome.HANDLED
            elif child.window_id == window_id:
                if len(self.children) == 1:
                    return SplitOutcome.REPLACE_ME
                self.replace_child(i, direction, window_id)
                return SplitOutcome.HANDLED
        return SplitOutcome.NOT_FOUND

    def replace_child(self, index: int, direction: LayoutDirection, window_id: WindowId):
        self.children[index] = LayoutNode(direction, self.gap, [Leaf(window_id)])

    def insert_after(self, current_id: WindowId, new_id: WindowId) -> bool:
        """
        Insert a leaf for ``new_id`` right after ``current_id``, in the same group.

        Returns False when ``current_id`` is not in the tree or ``new_id``
        already is.
        """
        if new_id in self.leaf_ids():
            log.debug("Window %r already in layout", new_id)
            return False
        return self._insert_after(current_id, new_id)

    def _insert_after(self, current_id: WindowId, new_id: WindowId) -> bool:
        for i, child in enumerate(self.children):
            if isinstance(child, LayoutNode):
                if child._insert_after(current_id, new_id):
                    return True
            elif child.window_id == current_id:
                self.children.insert(i + 1, Leaf(new_id))
                return True
        return False

    def leaf_ids(self) -> List[WindowId]:
        """Window ids of all leaves, depth-first."""
        ids: List[WindowId] = []
        for child in self.children:
            if isinstance(child, LayoutNode):
                ids.extend(child.leaf_ids())
            else:
                ids.append(child.window_id)
        return ids

    def set_gap(self, gap: int):
        """Set the gap of this group and every nested group."""
        self.gap = gap
        for child in self.children:
            if isinstance(child, LayoutNode):
                child.set_gap(gap)

    def dump(self, depth: int = 0) -> str:
        """Render the subtree as indented text, one node per line."""
        lines = [f"{'  ' * depth}[{self.direction.name.lower()}]"]
        for child in self.children:
            if isinstance(child, LayoutNode):
                lines.append(child.dump(depth + 1))
            else:
                lines.append(f"{'  ' * (depth + 1)}{child.window_id}")
        return "\n".join(lines)


class DynamicLayout(Layout):
    """
    Tree tiling layout, the owner of one LayoutNode tree.

    One instance per output; trees are never shared.
    """

    ID = "DynamicLayout"
    NAME = "dynamic"

    def __init__(self, config: Optional["LayoutConfig"] = None, bus=None):
        """Initialize the layout with an empty root group.

        Args:
            config: Seeds the root direction and gap
            bus: Event bus for diagnostics (anything with ``sendMessage``);
                defaults to Pypubsub's ``pub``
        """
        if config is None:
            from ..config import LayoutConfig

            config = LayoutConfig()
        if bus is None:
            from pubsub import pub

            bus = pub

        self.config = config
        self.bus = bus
        self.root = LayoutNode(config.direction, config.gap)

    @property
    def name(self) -> str:
        return self.NAME

    def __repr__(self) -> str:
        return f"DynamicLayout({self.root!r})"

    def _emit(self, topic: str, **data: Any):
        self.bus.sendMessage(topic, **data)

    def apply_layout(self, area: Area, windows: Sequence["Window"]) -> List[Area]:
        """
        Reconcile the tree with ``windows`` and compute their geometry.

        Marks every window as tiled. Returns one Area per window, in the
        order of ``windows``. Failures are logged and re-raised.
        """
        try:
            window_ids = [window.object_id for window in windows]
            if len(set(window_ids)) != len(window_ids):
                raise ValueError(f"Duplicate window ids in layout pass: {window_ids}")

            for window in windows:
                window.state = WindowState.TILED

            self._emit(
                topics.LAYOUT_PASS_STARTED, layout_id=self.ID, window_ids=window_ids
            )
            log.debug("Layout before pass:\n%s", self.root.dump())

            self.root.prepare(WindowQueue(window_ids, self._emit))
            rects = self.root.apply(area, WindowQueue(window_ids, self._emit))

            log.debug("Layout after pass:\n%s", self.root.dump())
            self._emit(
                topics.LAYOUT_PASS_FINISHED, layout_id=self.ID, rect_count=len(rects)
            )
            return rects
        except Exception:
            log.exception("Layout pass failed")
            raise

    def request_split(self, direction: LayoutDirection, current_window: "Window") -> bool:
        """
        Split the slot of ``current_window`` into a new group.

        Returns False only when the window is not part of the tree.
        """
        window_id = current_window.object_id
        outcome = self.root.split(direction, window_id)
        if outcome == SplitOutcome.REPLACE_ME:
            # The root cannot be replaced by its owner, wrap its only leaf instead
            self.root.replace_child(0, direction, window_id)
            outcome = SplitOutcome.HANDLED

        handled = outcome == SplitOutcome.HANDLED
        if not handled:
            log.debug("Split requested for unknown window %r", window_id)
        self._emit(
            topics.LAYOUT_SPLIT,
            window_id=window_id,
            direction=direction.name.lower(),
            handled=handled,
        )
        log.debug("Layout after split:\n%s", self.root.dump())
        return handled

    def notify_new_window(self, current_window: "Window", new_window: "Window") -> bool:
        """
        Place ``new_window`` right after ``current_window``.

        When the current window is not in the tree, the new window is picked
        up by the next layout pass instead.
        """
        if self.root.insert_after(current_window.object_id, new_window.object_id):
            return True
        log.debug(
            "Window %r not placed after %r, the next pass reconciles it",
            new_window.object_id,
            current_window.object_id,
        )
        return False

    def reconfigure(self, config: "LayoutConfig"):
        """Apply a new configuration to the existing tree."""
        self.config = config
        self.root.direction = config.direction
        self.root.set_gap(config.gap)

    # Layout interface
    def calculate(
        self,
        windows: List["Window"],
        area: Area,
        focused_window: Optional["Window"] = None,
    ) -> Dict["Window", LayoutGeometry]:
        rects = self.apply_layout(area, windows)

        result = {}
        for window, rect in zip(windows, rects):
            window.geometry = rect
            result[window] = LayoutGeometry(
                rect.x, rect.y, rect.width, rect.height, rect.edges_within(area)
            )
        return result

    def execute_action(self, action: str, current_window: Optional["Window"]) -> bool:
        if action == topics.CMD_SPLIT_HORIZONTAL:
            direction = LayoutDirection.HORIZONTAL
        elif action == topics.CMD_SPLIT_VERTICAL:
            direction = LayoutDirection.VERTICAL
        else:
            return False

        # No focused window: the split is still consumed, nothing to split
        if current_window is not None:
            self.request_split(direction, current_window)
        return True

    def handle_new_window(self, current_window: "Window", new_window: "Window") -> bool:
        return self.notify_new_window(current_window, new_window)
