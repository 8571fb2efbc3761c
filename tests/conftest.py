import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from async_ui.core.config import set_config
from async_ui.core.events import EventChannel
from async_ui.ui.binding import listener_slots


@pytest.fixture(autouse=True)
def reset_binding_state():
    """Fresh in-memory config and empty listener slots for every test."""
    set_config(None)
    yield
    listener_slots.clear()
    set_config(None)


@pytest.fixture
def channel():
    return EventChannel(name="test")
