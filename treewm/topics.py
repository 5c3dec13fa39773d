"""
Event Topics for treewm

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Window lifecycle events
WINDOW_CREATED = "window.created"
"""Published when a new window is created by the host. Params: window"""

WINDOW_CLOSED = "window.closed"
"""Published when a window is closed/destroyed. Params: window"""

# Output (monitor) events
OUTPUT_CREATED = "output.created"
"""Published when a new output (monitor) is connected. Params: output"""

OUTPUT_REMOVED = "output.removed"
"""Published when an output (monitor) is disconnected. Params: output"""

# Focus state notifications
FOCUS_CHANGED = "focus.changed"
"""Published when window focus changes. Params: window (or None)"""

FOCUSED_OUTPUT_CHANGED = "focus.output_changed"
"""Published when output focus changes. Params: output (or None)"""

# Layout commands (triggered by keybinds or IPC)
CMD_SPLIT_HORIZONTAL = "cmd.split_horizontal"
"""Command: Split the focused window's slot into a new horizontal group."""

CMD_SPLIT_VERTICAL = "cmd.split_vertical"
"""Command: Split the focused window's slot into a new vertical group."""

# Layout diagnostics (published by DynamicLayout)
LAYOUT_PASS_STARTED = "layout.pass_started"
"""Published before a layout pass. Params: layout_id, window_ids"""

LAYOUT_PASS_FINISHED = "layout.pass_finished"
"""Published after a successful layout pass. Params: layout_id, rect_count"""

LAYOUT_NODE_ADDED = "layout.node_added"
"""Published when reconciliation appends a leaf. Params: window_id"""

LAYOUT_NODE_REMOVED = "layout.node_removed"
"""Published when reconciliation drops a leaf. Params: window_id"""

LAYOUT_MISMATCH = "layout.mismatch"
"""Published when a leaf does not match the expected window. Params: expected, actual"""

LAYOUT_SPLIT = "layout.split"
"""Published after a split request. Params: window_id, direction, handled"""
