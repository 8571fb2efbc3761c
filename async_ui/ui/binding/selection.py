"""
Selection helpers shared by the selection setter and the selection listener.
"""
from typing import List, Tuple

from PySide6.QtCore import QItemSelectionModel


def to_range(min_index: int, max_index: int) -> List[int]:
    """
    Convert a native (min, max) selection pair into the indices it spans.

    -1 as min_index means "no selection" and yields [].

        >>> to_range(2, 4)
        [2, 3, 4]
    """
    if min_index == -1:
        return []
    return list(range(min_index, max_index + 1))


def selection_bounds(selection_model: QItemSelectionModel) -> Tuple[int, int]:
    """Lowest and highest selected row, or (-1, -1) when nothing is selected."""
    rows = {index.row() for index in selection_model.selectedIndexes()}
    if not rows:
        return -1, -1
    return min(rows), max(rows)


def selected_range(view) -> List[int]:
    """Current selection of an item view as a contiguous index list."""
    return to_range(*selection_bounds(view.selectionModel()))
