"""
Feedback suppression.

A programmatic write into a bound widget would otherwise fire the widget's
own listener and push an event echoing the update. The writes here detach the
listener stored in the widget's slot, mutate, and reattach the same instance.
Everything runs on the UI thread, so nothing else can fire in between.
"""
from contextlib import contextmanager

from PySide6.QtCore import QItemSelectionModel
from PySide6.QtWidgets import QLineEdit
from loguru import logger

from .listeners import widget_text
from .slots import ListenerSlots, listener_slots
from .thread_guard import ui_thread


@contextmanager
def suppressed(component, slots: ListenerSlots = listener_slots):
    """Detach the component's listener for the duration of the block."""
    listener = slots.get(component)
    if listener is None or not listener.attached:
        yield
        return
    listener.detach()
    try:
        yield
    finally:
        listener.attach()


@ui_thread
def set_selection(view, index: int) -> None:
    """Select exactly row `index` of an item view without reporting it."""
    model = view.model()
    if model is None:
        logger.debug(f"'{view.objectName()}' has no model, selection {index} dropped")
        return
    with suppressed(view):
        target = model.index(index, 0)
        flags = QItemSelectionModel.SelectionFlag.ClearAndSelect | QItemSelectionModel.SelectionFlag.Rows
        selection_model = view.selectionModel()
        selection_model.select(target, flags)
        selection_model.setCurrentIndex(target, QItemSelectionModel.SelectionFlag.NoUpdate)


def caret_position(widget) -> int:
    if isinstance(widget, QLineEdit):
        return widget.cursorPosition()
    return widget.textCursor().position()


def set_caret_position(widget, position: int) -> None:
    if isinstance(widget, QLineEdit):
        widget.setCursorPosition(position)
        return
    cursor = widget.textCursor()
    cursor.setPosition(position)
    widget.setTextCursor(cursor)


@ui_thread
def set_text(widget, text) -> bool:
    """
    Silently replace the text of a text widget.

    Skipped while the widget has input focus so text the user is typing is
    never overwritten. The caret keeps its position, clamped to the new text.

    Returns:
        True if the text was written.
    """
    if widget.hasFocus():
        logger.debug(f"'{widget.objectName()}' has focus, text update skipped")
        return False
    text = "" if text is None else str(text)
    position = caret_position(widget)
    with suppressed(widget):
        if isinstance(widget, QLineEdit):
            widget.setText(text)
        else:
            widget.setPlainText(text)
    set_caret_position(widget, min(len(widget_text(widget)), position))
    return True
