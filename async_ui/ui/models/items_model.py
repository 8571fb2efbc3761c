from PySide6.QtCore import QAbstractListModel, QAbstractTableModel, Qt, QModelIndex
from typing import Any, Callable, List, Mapping, Optional, Sequence


class ItemListModel(QAbstractListModel):
    """
    Backing data of a bound list view.

    set_items() replaces the data. With an unchanged row count only the
    visible range is refreshed (dataChanged); otherwise the model is reset.
    """

    ItemRole = Qt.UserRole + 1

    def __init__(self, items: Optional[Sequence[Any]] = None,
                 formatter: Callable[[Any], str] = str, parent=None):
        super().__init__(parent)
        self._items: List[Any] = list(items or [])
        self._formatter = formatter

    @property
    def items(self) -> List[Any]:
        return list(self._items)

    def set_items(self, items: Optional[Sequence[Any]]):
        items = list(items or [])
        if items and len(items) == len(self._items):
            self._items = items
            self.dataChanged.emit(self.index(0), self.index(len(items) - 1))
        else:
            self.beginResetModel()
            self._items = items
            self.endResetModel()

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._items):
            return None
        item = self._items[index.row()]
        if role == Qt.DisplayRole:
            return self._formatter(item)
        if role == self.ItemRole:
            return item
        return None


class ItemTableModel(QAbstractTableModel):
    """
    Backing data of a bound table view.

    Rows are sequences of cell values, or mappings looked up by header name.
    set_items() always resets the model.
    """

    ItemRole = Qt.UserRole + 1

    def __init__(self, items: Optional[Sequence[Any]] = None,
                 headers: Optional[Sequence[str]] = None, parent=None):
        super().__init__(parent)
        self._items: List[Any] = list(items or [])
        self._headers: List[str] = list(headers or [])

    @property
    def items(self) -> List[Any]:
        return list(self._items)

    def set_items(self, items: Optional[Sequence[Any]]):
        self.beginResetModel()
        self._items = list(items or [])
        self.endResetModel()

    def set_headers(self, headers: Sequence[str]):
        self.beginResetModel()
        self._headers = list(headers)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._items)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        if self._headers:
            return len(self._headers)
        return max((len(row) for row in self._items if not isinstance(row, Mapping)), default=0)

    def _cell(self, row: Any, column: int) -> Any:
        if isinstance(row, Mapping):
            if column >= len(self._headers):
                return None
            return row.get(self._headers[column])
        if column >= len(row):
            return None
        return row[column]

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._items):
            return None
        row = self._items[index.row()]
        if role == Qt.DisplayRole:
            value = self._cell(row, index.column())
            return "" if value is None else str(value)
        if role == self.ItemRole:
            return row
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal and section < len(self._headers):
            return self._headers[section]
        return super().headerData(section, orientation, role)
