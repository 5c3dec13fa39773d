"""
Window Layout Base Classes

Provides the Layout interface and shared layout infrastructure.
"""

from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Dict, TYPE_CHECKING

from pubsub import pub

from ..protocol import Area, WindowEdges

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from ..objects import Window, Output

log = logging.getLogger(__name__)


@dataclass
class LayoutGeometry:
    """Calculated geometry for a window in a layout."""

    x: int
    y: int
    width: int
    height: int
    tiled_edges: WindowEdges = WindowEdges.NONE


class LayoutDirection(Enum):
    """Split direction for layouts."""

    HORIZONTAL = auto()  # Windows arranged left-to-right
    VERTICAL = auto()  # Windows arranged top-to-bottom


class Layout(ABC):
    """Abstract base class for window layouts."""

    @abstractmethod
    def calculate(
        self,
        windows: List["Window"],
        area: Area,
        focused_window: Optional["Window"] = None,
    ) -> Dict["Window", LayoutGeometry]:
        """
        Calculate window positions and sizes.

        Args:
            windows: List of windows to layout
            area: Available area for the layout
            focused_window: Currently focused window (optional)

        Returns:
            Dictionary mapping windows to their calculated geometry
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    def execute_action(self, action: str, current_window: Optional["Window"]) -> bool:
        """
        Handle a layout command.

        Returns:
            True if the layout handled the action, False to let the caller
            run its default handler
        """
        return False

    def handle_new_window(self, current_window: "Window", new_window: "Window") -> bool:
        """Called when ``new_window`` appears right after ``current_window``."""
        return False


@dataclass
class Workspace:
    """Represents a workspace containing windows."""

    name: str
    windows: List["Window"] = field(default_factory=list)
    layout: Optional[Layout] = None
    focused_window: Optional["Window"] = None

    def add_window(self, window: "Window", after: Optional["Window"] = None) -> bool:
        """Add a window to the workspace, right after ``after`` if given.

        Returns False if the window was already there.
        """
        if window in self.windows:
            return False
        if after is not None and after in self.windows:
            self.windows.insert(self.windows.index(after) + 1, window)
        else:
            self.windows.append(window)
        if self.focused_window is None:
            self.focused_window = window
        return True

    def remove_window(self, window: "Window"):
        """Remove a window from the workspace."""
        if window in self.windows:
            idx = self.windows.index(window)
            self.windows.remove(window)
            if self.focused_window == window:
                if self.windows:
                    self.focused_window = self.windows[min(idx, len(self.windows) - 1)]
                else:
                    self.focused_window = None


class LayoutManager:
    """
    Manages one workspace and one dynamic layout per output.

    This component subscribes to window/output lifecycle events, focus
    notifications and the split commands.

    Responsibilities:
    - Keep each output's window list in host order
    - Tell the layout where new windows appear
    - CMD_SPLIT_HORIZONTAL / CMD_SPLIT_VERTICAL: split the focused window
    """

    def __init__(self, bus, config: Optional["LayoutConfig"] = None):
        from ..config import LayoutConfig

        self.bus = bus
        self.config = config or LayoutConfig()
        self.outputs: Dict[int, "Output"] = {}
        self.workspaces: Dict[int, Workspace] = {}  # output_id -> Workspace
        self.window_output: Dict[int, int] = {}  # window_id -> output_id

        self.focused_output: Optional["Output"] = None

        if os.getenv("TREEWM_DEBUG"):
            self.bus.subscribe(self.debug_event_logger, self.bus.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        from .. import topics

        # Notification events
        self.bus.subscribe(self._on_window_created, topics.WINDOW_CREATED)
        self.bus.subscribe(self._on_window_closed, topics.WINDOW_CLOSED)
        self.bus.subscribe(self._on_output_created, topics.OUTPUT_CREATED)
        self.bus.subscribe(self._on_output_removed, topics.OUTPUT_REMOVED)

        # Focus state
        self.bus.subscribe(self._on_focus_changed, topics.FOCUS_CHANGED)
        self.bus.subscribe(
            self._on_focused_output_changed, topics.FOCUSED_OUTPUT_CHANGED
        )

        # Layout command events
        self.bus.subscribe(self._on_split_horizontal, topics.CMD_SPLIT_HORIZONTAL)
        self.bus.subscribe(self._on_split_vertical, topics.CMD_SPLIT_VERTICAL)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        log.debug("EVENT: %s | %s", topic.getName(), data_str)

    def _on_output_created(self, output: "Output"):
        """Handle OUTPUT_CREATED event."""
        self.add_output(output)

    def _on_output_removed(self, output: "Output"):
        """Handle OUTPUT_REMOVED event."""
        self.remove_output(output)

    def _on_window_created(self, window: "Window"):
        """Handle WINDOW_CREATED event."""
        self.add_window(window, self.focused_output)

    def _on_window_closed(self, window: "Window"):
        """Handle WINDOW_CLOSED event."""
        self.remove_window(window)

    def _on_focus_changed(self, window: Optional["Window"]):
        """Track the focused window of its workspace."""
        if window is None:
            return
        workspace = self.get_window_workspace(window)
        if workspace:
            workspace.focused_window = window

    def _on_focused_output_changed(self, output: Optional["Output"]):
        """Track focused output from FocusManager."""
        self.focused_output = output

    def add_output(self, output: "Output"):
        """Add an output with its own workspace and layout tree."""
        from .layout_dynamic import DynamicLayout

        self.outputs[output.object_id] = output
        self.workspaces[output.object_id] = Workspace(
            name=output.name or str(output.object_id),
            layout=DynamicLayout(self.config, bus=self.bus),
        )

    def remove_output(self, output: "Output"):
        """Remove an output, discarding its layout tree."""
        if output.object_id in self.outputs:
            del self.outputs[output.object_id]
            del self.workspaces[output.object_id]
            self.window_output = {
                wid: oid
                for wid, oid in self.window_output.items()
                if oid != output.object_id
            }
            if self.focused_output == output:
                self.focused_output = None

    def add_window(self, window: "Window", output: Optional["Output"] = None):
        """Add a window after the focused window of the output's workspace."""
        if output is None:
            # Use first available output
            if not self.outputs:
                return
            output = next(iter(self.outputs.values()))

        workspace = self.workspaces.get(output.object_id)
        if workspace is None:
            return

        current = workspace.focused_window
        added = workspace.add_window(window, after=current)
        self.window_output[window.object_id] = output.object_id
        if added and current is not None and workspace.layout is not None:
            workspace.layout.handle_new_window(current, window)

    def remove_window(self, window: "Window"):
        """Remove a window; the layout drops its leaf on the next pass."""
        output_id = self.window_output.pop(window.object_id, None)
        if output_id is not None and output_id in self.workspaces:
            self.workspaces[output_id].remove_window(window)

    def get_window_workspace(self, window: "Window") -> Optional[Workspace]:
        """Get the workspace containing a window."""
        output_id = self.window_output.get(window.object_id)
        if output_id is None:
            return None
        return self.workspaces.get(output_id)

    def get_workspace(self, output: "Output") -> Optional[Workspace]:
        """Get the workspace of an output."""
        return self.workspaces.get(output.object_id)

    def calculate_layout(self, output: "Output") -> Dict["Window", LayoutGeometry]:
        """Calculate the layout for an output."""
        workspace = self.get_workspace(output)
        if workspace is None or workspace.layout is None:
            return {}

        return workspace.layout.calculate(
            workspace.windows, output.area, workspace.focused_window
        )

    # Command event handlers
    def _run_action(self, action: str):
        if self.focused_output is None:
            return
        workspace = self.get_workspace(self.focused_output)
        if workspace is None or workspace.layout is None:
            return
        if not workspace.layout.execute_action(action, workspace.focused_window):
            log.debug("Layout %s ignored %s", workspace.layout.name, action)

    def _on_split_horizontal(self):
        """Handle CMD_SPLIT_HORIZONTAL command."""
        from .. import topics

        self._run_action(topics.CMD_SPLIT_HORIZONTAL)

    def _on_split_vertical(self):
        """Handle CMD_SPLIT_VERTICAL command."""
        from .. import topics

        self._run_action(topics.CMD_SPLIT_VERTICAL)
