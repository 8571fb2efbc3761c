from unittest.mock import MagicMock

from PySide6.QtCore import Qt

from async_ui.ui.models import ItemListModel, ItemTableModel


def test_list_same_length_refreshes_range(qapp):
    model = ItemListModel(["a", "b", "c"])
    changed, reset = MagicMock(), MagicMock()
    model.dataChanged.connect(changed)
    model.modelReset.connect(reset)

    model.set_items(["x", "y", "z"])

    assert changed.call_count == 1
    reset.assert_not_called()
    assert model.index(2).data() == "z"


def test_list_new_length_resets(qapp):
    model = ItemListModel(["a"])
    reset = MagicMock()
    model.modelReset.connect(reset)

    model.set_items(["a", "b"])

    reset.assert_called_once()
    assert model.rowCount() == 2


def test_list_formatter_and_raw_item(qapp):
    model = ItemListModel([{"name": "Ada"}], formatter=lambda person: person["name"])

    index = model.index(0)
    assert index.data() == "Ada"
    assert index.data(ItemListModel.ItemRole) == {"name": "Ada"}


def test_table_rows_as_sequences(qapp):
    model = ItemTableModel([("Ada", 36), ("Grace",)])

    assert model.columnCount() == 2
    assert model.index(0, 1).data() == "36"
    assert model.index(1, 1).data() == ""


def test_table_rows_as_mappings(qapp):
    model = ItemTableModel([{"name": "Ada", "age": 36}], headers=["name", "age"])

    assert model.columnCount() == 2
    assert model.index(0, 1).data() == "36"
    assert model.headerData(0, Qt.Horizontal) == "name"


def test_table_set_items_resets(qapp):
    model = ItemTableModel([("a",)])
    reset = MagicMock()
    model.modelReset.connect(reset)

    model.set_items([("b",), ("c",)])

    reset.assert_called_once()
    assert model.rowCount() == 2
