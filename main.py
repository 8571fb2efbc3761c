"""
Demo: a people editor driven entirely through the binding layer.

Model -> widgets goes through apply_updates(); widgets -> model arrives as
events on an EventChannel consumed by an asyncio task on the qasync loop.
"""
import asyncio
import sys

from PySide6.QtWidgets import (
    QApplication, QLabel, QLineEdit, QListView, QMainWindow, QPushButton,
    QScrollArea, QVBoxLayout, QWidget,
)
from loguru import logger

from async_ui.core.config import ConfigManager, set_config
from async_ui.core.events import EventChannel, EventKind
from async_ui.core.logging import setup_logging_from
from async_ui.ui.binding import apply_updates, bind, unbind


def build_window() -> QMainWindow:
    window = QMainWindow()
    window.setObjectName("main-window")

    panel = QWidget()
    panel.setObjectName("panel")
    layout = QVBoxLayout(panel)

    people = QListView()
    people.setObjectName("people-list")
    name = QLineEdit()
    name.setObjectName("name-field")
    add = QPushButton()
    add.setObjectName("add-button")
    status = QLabel()
    status.setObjectName("status-label")
    for widget in (people, name, add, status):
        layout.addWidget(widget)

    scroll = QScrollArea()
    scroll.setObjectName("scroll")
    scroll.setWidgetResizable(True)
    scroll.setWidget(panel)
    window.setCentralWidget(scroll)
    return window


def render(state: dict) -> dict:
    """Widget updates for the current model state."""
    selected = state["selected"]
    current = state["people"][selected] if selected is not None else ""
    return {
        "main-window": {"title": f"People ({len(state['people'])})"},
        "people-list": {"items": state["people"], "selection": [] if selected is None else [selected]},
        "name-field": {"text": current, "enabled": selected is not None},
        "add-button": {"text": "Add person"},
        "status-label": {"text": f"Selected: {current or '-'}"},
    }


async def run(window: QMainWindow, channel: EventChannel):
    state = {"people": ["Ada", "Grace", "Linus"], "selected": 0}
    apply_updates(window, render(state))
    bind(window, channel)
    window.show()

    async for event in channel:
        logger.info(f"{event.source}: {event.kind.value} {event.payload!r}")
        if event.kind is EventKind.CLOSE:
            break
        if event.kind is EventKind.SELECTION:
            state["selected"] = event.payload[0] if event.payload else None
        elif event.kind is EventKind.TEXT and state["selected"] is not None:
            state["people"][state["selected"]] = event.payload
        elif event.kind is EventKind.ACTION:
            state["people"].append(f"Person {len(state['people']) + 1}")
            state["selected"] = len(state["people"]) - 1
        apply_updates(window, render(state))

    unbind(window)
    channel.close()


if __name__ == "__main__":
    import qasync

    config = ConfigManager(sys.argv[1] if len(sys.argv) > 1 else None)
    set_config(config)
    setup_logging_from(config.data.general)

    app = QApplication(sys.argv)
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    with loop:
        channel = EventChannel(maxsize=config.data.binding.channel_maxsize)
        window = build_window()
        loop.run_until_complete(run(window, channel))
