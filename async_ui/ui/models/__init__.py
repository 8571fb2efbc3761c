from .items_model import ItemListModel, ItemTableModel

__all__ = ["ItemListModel", "ItemTableModel"]
