"""
Unit tests for workspace and layout management.
"""

import pytest
from treewm import topics
from treewm.config import LayoutConfig
from treewm.layouts import DynamicLayout, LayoutDirection, LayoutManager, Workspace
from treewm.objects import Output, Window
from treewm.protocol import Area


@pytest.mark.unit
class TestWorkspace:
    """Test workspace window management."""

    def test_create_workspace(self):
        ws = Workspace("test")

        assert ws.name == "test"
        assert ws.layout is None
        assert len(ws.windows) == 0
        assert ws.focused_window is None

    def test_add_window(self, mock_window):
        ws = Workspace("test")
        window = mock_window(object_id=1)

        ws.add_window(window)

        assert ws.windows == [window]
        assert ws.focused_window == window

    def test_add_window_after_current(self, mock_window):
        ws = Workspace("test")
        w1, w2, w3 = (mock_window(object_id=i) for i in range(1, 4))
        ws.add_window(w1)
        ws.add_window(w2)

        ws.add_window(w3, after=w1)

        assert ws.windows == [w1, w3, w2]

    def test_add_window_twice(self, mock_window):
        ws = Workspace("test")
        window = mock_window(object_id=1)

        assert ws.add_window(window) is True
        assert ws.add_window(window) is False

        assert ws.windows == [window]

    def test_remove_focused_window_moves_focus(self, mock_window):
        ws = Workspace("test")
        w1, w2, w3 = (mock_window(object_id=i) for i in range(1, 4))
        for window in (w1, w2, w3):
            ws.add_window(window)
        ws.focused_window = w2

        ws.remove_window(w2)

        assert ws.windows == [w1, w3]
        assert ws.focused_window == w3

    def test_remove_last_window(self, mock_window):
        ws = Workspace("test")
        window = mock_window(object_id=1)
        ws.add_window(window)

        ws.remove_window(window)

        assert ws.windows == []
        assert ws.focused_window is None


@pytest.mark.unit
class TestLayoutManager:
    """Test LayoutManager event handling."""

    @pytest.fixture
    def output(self):
        return Output(object_id=100, name="DP-1", area=Area(0, 0, 100, 100))

    @pytest.fixture
    def manager(self, clean_bus, output):
        manager = LayoutManager(bus=clean_bus, config=LayoutConfig(gap=0))
        clean_bus.sendMessage(topics.OUTPUT_CREATED, output=output)
        clean_bus.sendMessage(topics.FOCUSED_OUTPUT_CHANGED, output=output)
        return manager

    def test_output_gets_own_layout(self, manager, output, clean_bus):
        other = Output(object_id=200, name="HDMI-1", area=Area(100, 0, 100, 100))
        clean_bus.sendMessage(topics.OUTPUT_CREATED, output=other)

        first = manager.get_workspace(output).layout
        second = manager.get_workspace(other).layout

        assert isinstance(first, DynamicLayout)
        assert first is not second
        assert first.root is not second.root

    def test_window_created_on_focused_output(self, manager, output, clean_bus):
        window = Window(object_id=1)

        clean_bus.sendMessage(topics.WINDOW_CREATED, window=window)

        assert manager.get_workspace(output).windows == [window]
        assert manager.get_window_workspace(window) is manager.get_workspace(output)

    def test_calculate_layout_assigns_geometry(self, manager, output, clean_bus):
        w1, w2 = Window(object_id=1), Window(object_id=2)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w1)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w2)

        result = manager.calculate_layout(output)

        assert set(result) == {w1, w2}
        assert w1.geometry == Area(0, 0, 50, 100)
        assert w2.geometry == Area(50, 0, 50, 100)

    def test_split_command_then_new_window(self, manager, output, clean_bus):
        w1, w2 = Window(object_id=1), Window(object_id=2)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w1)
        manager.calculate_layout(output)
        clean_bus.sendMessage(topics.FOCUS_CHANGED, window=w1)

        clean_bus.sendMessage(topics.CMD_SPLIT_VERTICAL)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w2)
        manager.calculate_layout(output)

        layout = manager.get_workspace(output).layout
        group = layout.root.children[0]
        assert group.direction == LayoutDirection.VERTICAL
        assert group.leaf_ids() == [1, 2]
        assert w1.geometry == Area(0, 0, 100, 50)
        assert w2.geometry == Area(0, 50, 100, 50)

    def test_repeated_window_created_not_duplicated(self, manager, output, clean_bus):
        w1, w2 = Window(object_id=1), Window(object_id=2)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w1)
        manager.calculate_layout(output)
        clean_bus.sendMessage(topics.FOCUS_CHANGED, window=w1)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w2)

        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w2)

        workspace = manager.get_workspace(output)
        assert workspace.windows == [w1, w2]
        assert workspace.layout.root.leaf_ids() == [1, 2]

    def test_closed_window_leaves_layout(self, manager, output, clean_bus):
        w1, w2 = Window(object_id=1), Window(object_id=2)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w1)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=w2)
        manager.calculate_layout(output)

        clean_bus.sendMessage(topics.WINDOW_CLOSED, window=w1)
        result = manager.calculate_layout(output)

        assert set(result) == {w2}
        assert w2.geometry == Area(0, 0, 100, 100)
        assert manager.get_window_workspace(w1) is None

    def test_split_without_focused_output_is_ignored(self, clean_bus):
        manager = LayoutManager(bus=clean_bus)

        clean_bus.sendMessage(topics.CMD_SPLIT_HORIZONTAL)

        assert manager.workspaces == {}

    def test_output_removed_discards_layout(self, manager, output, clean_bus):
        window = Window(object_id=1)
        clean_bus.sendMessage(topics.WINDOW_CREATED, window=window)

        clean_bus.sendMessage(topics.OUTPUT_REMOVED, output=output)

        assert manager.get_workspace(output) is None
        assert manager.calculate_layout(output) == {}
        assert manager.focused_output is None
