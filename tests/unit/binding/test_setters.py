"""
Unit Tests for property setters.

Tests for:
- setter_fns() property sets per widget type
- Common, text, title and editable setters
- items writes into list and table views
"""
import pytest
from PySide6.QtCore import QObject
from PySide6.QtWidgets import (
    QDialog, QLabel, QLineEdit, QListView, QListWidget, QMainWindow,
    QPlainTextEdit, QPushButton, QTableView, QTableWidget, QTextEdit, QWidget,
)

from async_ui.ui.binding import bind, setter_fns
from async_ui.ui.models import ItemListModel, ItemTableModel


SUPPORTED = [
    (QWidget, set()),
    (QPushButton, {"text"}),
    (QLabel, {"text"}),
    (QMainWindow, {"title"}),
    (QDialog, {"title"}),
    (QListView, {"selection", "items"}),
    (QListWidget, {"selection", "items"}),
    (QTableView, {"selection", "items"}),
    (QTableWidget, {"selection", "items"}),
    (QLineEdit, {"editable", "text"}),
    (QPlainTextEdit, {"editable", "text"}),
    (QTextEdit, {"editable", "text"}),
]


# =============================================================================
# Setter maps
# =============================================================================

class TestSetterMap:
    """Tests for which properties each widget type exposes."""

    @pytest.mark.parametrize("widget_cls, extra", SUPPORTED)
    def test_supported_types_expose_expected_properties(self, qapp, widget_cls, extra):
        setters = setter_fns(widget_cls())

        assert set(setters) == {"enabled", "visible"} | extra

    def test_unsupported_types_get_empty_map(self, qapp):
        """Test that non-widgets get an empty map."""
        assert setter_fns(QObject()) == {}
        assert setter_fns(object()) == {}

    def test_setter_map_is_built_fresh(self, qapp):
        """Test that every call returns a new dict."""
        label = QLabel()

        assert setter_fns(label) is not setter_fns(label)


# =============================================================================
# Scalar properties
# =============================================================================

class TestScalarSetters:
    """Tests for enabled, visible, text, title and editable."""

    @pytest.mark.parametrize("prop", ["enabled", "visible"])
    def test_none_means_false(self, qapp, qtbot, prop):
        """Test that None switches enabled/visible off."""
        button = QPushButton()
        qtbot.addWidget(button)
        button.show()

        setter_fns(button)[prop](None)

        if prop == "enabled":
            assert button.isEnabled() is False
        else:
            assert button.isVisible() is False

    def test_enabled_true(self, qapp):
        button = QPushButton()
        button.setEnabled(False)

        setter_fns(button)["enabled"](True)

        assert button.isEnabled()

    def test_text_and_title(self, qapp):
        """Test text on buttons and labels, title on windows."""
        button, label, window = QPushButton(), QLabel(), QMainWindow()

        setter_fns(button)["text"]("Save")
        setter_fns(label)["text"]("Ready")
        setter_fns(window)["title"]("Editor")

        assert button.text() == "Save"
        assert label.text() == "Ready"
        assert window.windowTitle() == "Editor"

    def test_editable(self, qapp):
        field = QLineEdit()
        setters = setter_fns(field)

        setters["editable"](False)
        assert field.isReadOnly()

        setters["editable"](True)
        assert not field.isReadOnly()


# =============================================================================
# List items
# =============================================================================

class TestListItems:
    """Tests for items writes into list views."""

    def test_list_items_installs_model(self, qapp, channel):
        """Test that a view without a model gets an ItemListModel, silently."""
        view = QListView()
        bind(view, channel)

        setter_fns(view)["items"](["Ada", "Grace"])

        assert isinstance(view.model(), ItemListModel)
        assert view.model().items == ["Ada", "Grace"]
        assert channel.drain() == []

    def test_list_items_reuse_model(self, qapp):
        """Test that an existing ItemListModel is updated in place."""
        view = QListView()
        model = ItemListModel(["a"])
        view.setModel(model)

        setter_fns(view)["items"](["b", "c"])

        assert view.model() is model
        assert model.rowCount() == 2

    def test_list_widget_items(self, qapp, channel):
        view = QListWidget()
        view.addItems(["old"])
        view.setCurrentRow(0)
        bind(view, channel)

        setter_fns(view)["items"](["x", "y", "z"])

        assert [view.item(i).text() for i in range(view.count())] == ["x", "y", "z"]
        assert channel.drain() == []


# =============================================================================
# Table items
# =============================================================================

class TestTableItems:
    """Tests for items writes into table views."""

    def test_table_items(self, qapp, channel):
        """Test that a plain table view gets an ItemTableModel, silently."""
        view = QTableView()
        bind(view, channel)

        setter_fns(view)["items"]([("Ada", 36), ("Grace", 85)])

        model = view.model()
        assert isinstance(model, ItemTableModel)
        assert model.rowCount() == 2
        assert model.columnCount() == 2
        assert model.index(1, 1).data() == "85"
        assert channel.drain() == []

    def test_table_widget_items(self, qapp):
        view = QTableWidget()

        setter_fns(view)["items"]([("Ada", 36), ("Grace", 85, "x")])

        assert view.rowCount() == 2
        assert view.columnCount() == 3
        assert view.item(1, 0).text() == "Grace"

    def test_table_widget_shrinks_to_new_rows(self, qapp):
        """Test that narrower rows drop the columns left over from a wider write."""
        view = QTableWidget()
        setters = setter_fns(view)

        setters["items"]([("Ada", 36, "London"), ("Grace", 85, "NYC")])
        setters["items"]([("Linus", 54)])

        assert view.rowCount() == 1
        assert view.columnCount() == 2
        assert view.item(0, 1).text() == "54"

    def test_table_widget_emptied(self, qapp):
        """Test that an empty write leaves no rows and no columns."""
        view = QTableWidget()
        setters = setter_fns(view)

        setters["items"]([("a", "b")])
        setters["items"](None)

        assert view.rowCount() == 0
        assert view.columnCount() == 0
