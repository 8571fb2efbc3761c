"""
Property setters per widget type.

setter_fns(widget) returns a fresh dict mapping property name to a one
argument function applying a formatted value to the widget. Properties a
widget type does not support are simply absent from the dict.

    setters = setter_fns(name_field)
    setters["text"]("Alice")      # silent, no :text event
    setters["enabled"](None)      # None counts as False
"""
import functools
from typing import Any, Callable, Dict

from PySide6.QtWidgets import (
    QDialog, QLabel, QLineEdit, QListView, QListWidget, QMainWindow,
    QPlainTextEdit, QPushButton, QTableView, QTableWidget, QTableWidgetItem,
    QTextEdit, QToolButton, QWidget,
)

from async_ui.ui.models.items_model import ItemListModel, ItemTableModel
from .registry import TypeRegistry
from .suppression import set_selection, set_text, suppressed
from .thread_guard import ui_thread

SetterMap = Dict[str, Callable[[Any], None]]

_setters = TypeRegistry("setter_fns", default=lambda component: {})
register_setters = _setters.register


def _as_text(value) -> str:
    return "" if value is None else str(value)


def _first_index(selection) -> int:
    """First requested index; an empty request selects row 0."""
    if not selection:
        return 0
    return selection[0]


@ui_thread
def set_list_items(view, items) -> None:
    """Replace the data shown by a list view and refresh its visible rows."""
    items = list(items or [])
    with suppressed(view):
        if isinstance(view, QListWidget):
            view.clear()
            view.addItems([_as_text(item) for item in items])
            return
        model = view.model()
        if not isinstance(model, ItemListModel):
            model = ItemListModel(parent=view)
            view.setModel(model)
        model.set_items(items)


@ui_thread
def set_table_items(view, items) -> None:
    """Replace the rows of a table view and redraw it completely."""
    rows = list(items or [])
    with suppressed(view):
        if isinstance(view, QTableWidget):
            view.clearContents()
            view.setRowCount(len(rows))
            view.setColumnCount(max((len(row) for row in rows), default=0))
            for r, row in enumerate(rows):
                for c, value in enumerate(row):
                    view.setItem(r, c, QTableWidgetItem(_as_text(value)))
        else:
            model = view.model()
            if not isinstance(model, ItemTableModel):
                model = ItemTableModel(parent=view)
                view.setModel(model)
            model.set_items(rows)
    view.viewport().update()


def _common_setters(component) -> SetterMap:
    return {
        "enabled": lambda value: component.setEnabled(False if value is None else bool(value)),
        "visible": lambda value: component.setVisible(False if value is None else bool(value)),
    }


@register_setters(QWidget)
def _container_setters(component) -> SetterMap:
    return _common_setters(component)


@register_setters(QPushButton, QToolButton, QLabel)
def _text_setters(component) -> SetterMap:
    setters = _common_setters(component)
    setters["text"] = lambda value: component.setText(_as_text(value))
    return setters


@register_setters(QMainWindow, QDialog)
def _window_setters(component) -> SetterMap:
    setters = _common_setters(component)
    setters["title"] = lambda value: component.setWindowTitle(_as_text(value))
    return setters


@register_setters(QListView)
def _list_setters(component) -> SetterMap:
    setters = _common_setters(component)
    setters["selection"] = lambda value: set_selection(component, _first_index(value))
    setters["items"] = functools.partial(set_list_items, component)
    return setters


@register_setters(QTableView)
def _table_setters(component) -> SetterMap:
    setters = _common_setters(component)
    setters["selection"] = lambda value: set_selection(component, _first_index(value))
    setters["items"] = functools.partial(set_table_items, component)
    return setters


@register_setters(QLineEdit, QPlainTextEdit, QTextEdit)
def _text_input_setters(component) -> SetterMap:
    setters = _common_setters(component)
    setters["editable"] = lambda value: component.setReadOnly(not value)
    setters["text"] = functools.partial(set_text, component)
    return setters


@ui_thread
def setter_fns(component) -> SetterMap:
    """Setters supported by component's type; {} for non-widgets. Each setter checks the thread too."""
    return {name: ui_thread(setter) for name, setter in _setters(component).items()}
