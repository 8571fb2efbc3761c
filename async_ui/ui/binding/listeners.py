"""
Listener objects attached to widgets by bind().

Every listener is created once per bind() call, remembers what it is
connected to, and can be detached and reattached any number of times. The
suppression protocol relies on that to hide programmatic writes.
"""
from typing import Any, Optional, Protocol

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QLineEdit
from loguru import logger
from shiboken6 import isValid

from async_ui.core.events import Channel, EventAction, EventKind
from .emission import emit
from .selection import selection_bounds, to_range


class Listener(Protocol):
    """Narrow interface used by bind(), unbind() and the suppression protocol."""

    attached: bool

    def attach(self) -> None:
        ...

    def detach(self) -> None:
        ...


def widget_text(widget) -> str:
    """Full text content of a QLineEdit, QPlainTextEdit or QTextEdit."""
    if isinstance(widget, QLineEdit):
        return widget.text()
    return widget.toPlainText()


class SignalListener:
    """
    Base for listeners backed by a Qt signal.

    Subclasses return the bound signal (or None) from _signal() and react in
    _on_signal(). The signal is looked up again on every attach(), so a
    listener follows a replaced selection model.
    """

    def __init__(self, component, channel: Channel):
        self.component = component
        self.channel = channel
        self.attached = False
        self._connected: Optional[Any] = None

    def _signal(self):
        raise NotImplementedError

    def _on_signal(self, *args) -> None:
        raise NotImplementedError

    def attach(self) -> None:
        if self.attached:
            return
        self._connected = self._signal()
        if self._connected is not None:
            self._connected.connect(self._on_signal)
        self.attached = True

    def detach(self) -> None:
        if not self.attached:
            return
        # A destroyed widget already dropped its connections
        if self._connected is not None and isValid(self.component):
            self._connected.disconnect(self._on_signal)
        self._connected = None
        self.attached = False

    @property
    def source(self) -> str:
        return self.component.objectName()


class ActionListener(SignalListener):
    """Button click -> :action."""

    def _signal(self):
        return self.component.clicked

    def _on_signal(self, *args) -> None:
        emit(self.channel, self.source, EventKind.ACTION)


class SelectionListener(SignalListener):
    """Item view selection change -> :selection :update [indices]."""

    def _signal(self):
        # A view without a model has no selection model yet; the listener
        # connects on the first reattach after one is installed.
        selection_model = self.component.selectionModel()
        if selection_model is None:
            return None
        return selection_model.selectionChanged

    def _on_signal(self, *args) -> None:
        # Qt only reports committed selections
        min_index, max_index = selection_bounds(self.component.selectionModel())
        self.value_changed(min_index, max_index, adjusting=False)

    def value_changed(self, min_index: int, max_index: int, adjusting: bool) -> None:
        """Report a native (min, max) range unless it is an intermediate state."""
        if adjusting:
            return
        emit(
            self.channel,
            self.source,
            EventKind.SELECTION,
            EventAction.UPDATE,
            to_range(min_index, max_index),
        )


class TextListener(SignalListener):
    """Any content change of a text widget -> :text :update <full text>."""

    def _signal(self):
        return self.component.textChanged

    def _on_signal(self, *args) -> None:
        emit(
            self.channel,
            self.source,
            EventKind.TEXT,
            EventAction.UPDATE,
            widget_text(self.component),
        )


class CloseListener(QObject):
    """
    Window close request -> :close.

    Installed as an event filter on the window. Only spontaneous close events
    (sent by the window system on behalf of the user) are reported; close()
    called from code is not. The event itself is passed through untouched.

    The window is reached through parent() only. The listener is a child of
    the window, so a Python reference back to it would keep both alive.
    """

    def __init__(self, component, channel: Channel):
        super().__init__(component)
        self.channel = channel
        self.attached = False

    @property
    def component(self):
        if not isValid(self):
            return None
        return self.parent()

    def attach(self) -> None:
        component = self.component
        if not self.attached and component is not None:
            component.installEventFilter(self)
            self.attached = True

    def detach(self) -> None:
        component = self.component
        if self.attached and component is not None:
            component.removeEventFilter(self)
        self.attached = False

    def eventFilter(self, watched, event) -> bool:
        if event.type() == QEvent.Type.Close and watched is self.component:
            if event.spontaneous():
                emit(self.channel, watched.objectName(), EventKind.CLOSE)
            else:
                logger.trace(f"Programmatic close of '{watched.objectName()}' ignored")
        return False
