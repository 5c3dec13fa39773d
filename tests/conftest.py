"""
Shared pytest fixtures for treewm tests.
"""

import pytest
from pubsub import pub

from treewm.protocol import Area


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a compositor")


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, object_id=1, title="test"):
            self.object_id = object_id
            self.title = title
            self.geometry = None
            self.state = None

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockWindow({self.object_id})"

    return MockWindow


@pytest.fixture
def recording_bus():
    """Bus stand-in that records every published message."""

    class RecordingBus:
        def __init__(self):
            self.messages = []

        def sendMessage(self, topic, **data):
            self.messages.append((topic, data))

        def topics(self, name):
            return [data for topic, data in self.messages if topic == name]

    return RecordingBus()


@pytest.fixture
def clean_bus():
    """The global Pypubsub bus, with all listeners removed afterwards."""
    yield pub
    pub.unsubAll()


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def square_area():
    """100x100 area for exact split tests."""
    return Area(0, 0, 100, 100)
