"""
Listener wiring per widget type.

bind(widget, channel) attaches the listeners that turn user interaction into
events on channel and walks into child widgets. Widgets without a
registered behaviour (and non-widgets) are left alone.
"""
from typing import List

from PySide6.QtCore import QObject
from PySide6.QtWidgets import (
    QAbstractScrollArea, QAbstractSlider, QAbstractSpinBox, QCalendarWidget,
    QComboBox, QDialog, QLineEdit, QListView, QMainWindow, QMenuBar,
    QPlainTextEdit, QPushButton, QScrollArea, QTabBar, QTableView, QTextEdit,
    QToolBar, QToolButton, QWidget,
)
from loguru import logger

from async_ui.core.events import Channel
from .listeners import ActionListener, CloseListener, SelectionListener, TextListener
from .registry import TypeRegistry
from .slots import listener_slots
from .thread_guard import ui_thread

_binders = TypeRegistry("bind", default=lambda component, channel: None)
register_binder = _binders.register


def child_widgets(component) -> List[QWidget]:
    """Direct child widgets in child order, excluding separate windows."""
    return [
        child for child in component.children()
        if isinstance(child, QWidget) and not child.isWindow()
    ]


def _attach(component, listener) -> None:
    previous = listener_slots.get(component)
    if previous is not None:
        previous.detach()
        if isinstance(previous, QObject):
            previous.deleteLater()
    listener.attach()
    listener_slots.put(component, listener)
    logger.debug(f"Bound {type(listener).__name__} to '{component.objectName()}'")


@register_binder(QWidget)
def _bind_container(component, channel: Channel) -> None:
    for child in child_widgets(component):
        _binders(child, channel)


@register_binder(
    QAbstractSpinBox, QComboBox, QAbstractSlider, QAbstractScrollArea,
    QTabBar, QToolBar, QMenuBar, QCalendarWidget,
)
def _bind_composite(component, channel: Channel) -> None:
    # Built from private child widgets (line edits, buttons, scroll bars)
    # that must not report as if the user had used them directly.
    logger.trace(f"No listeners for {type(component).__name__} '{component.objectName()}'")


@register_binder(QPushButton, QToolButton)
def _bind_button(component, channel: Channel) -> None:
    _attach(component, ActionListener(component, channel))


@register_binder(QMainWindow)
def _bind_main_window(component, channel: Channel) -> None:
    _attach(component, CloseListener(component, channel))
    content = component.centralWidget()
    if content is not None:
        _binders(content, channel)


@register_binder(QDialog)
def _bind_dialog(component, channel: Channel) -> None:
    _attach(component, CloseListener(component, channel))
    _bind_container(component, channel)


@register_binder(QListView, QTableView)
def _bind_item_view(component, channel: Channel) -> None:
    _attach(component, SelectionListener(component, channel))


@register_binder(QScrollArea)
def _bind_scroll_area(component, channel: Channel) -> None:
    view = component.widget()
    if view is not None:
        _binders(view, channel)


@register_binder(QLineEdit, QPlainTextEdit, QTextEdit)
def _bind_text(component, channel: Channel) -> None:
    _attach(component, TextListener(component, channel))


@ui_thread
def bind(component, channel: Channel) -> None:
    """Attach listeners to component and its descendants, pushing events onto channel."""
    _binders(component, channel)


@ui_thread
def unbind(component) -> int:
    """
    Detach every listener bind() attached in component's tree.

    Returns:
        Number of listeners detached.
    """
    if not isinstance(component, QWidget):
        return 0
    count = 0
    for widget in [component, *component.findChildren(QWidget)]:
        listener = listener_slots.pop(widget)
        if listener is not None:
            listener.detach()
            count += 1
    logger.debug(f"Unbound {count} listener(s) under '{component.objectName()}'")
    return count
