"""
Apply model state to a bound widget tree by widget name.

    apply_updates(main_window, {
        "name-field": {"text": "Alice", "enabled": True},
        "people-list": {"items": people, "selection": [0]},
    })
"""
from typing import Any, List, Mapping, Optional, Tuple

from PySide6.QtWidgets import QWidget
from loguru import logger

from .setters import setter_fns
from .thread_guard import ui_thread


def find_component(root, name: str) -> Optional[QWidget]:
    """root itself or the first descendant widget whose objectName is name."""
    if root.objectName() == name:
        return root
    return root.findChild(QWidget, name)


@ui_thread
def apply_updates(root, updates: Mapping[str, Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Route {component name: {property: value}} through setter_fns.

    Unknown names and unsupported properties are logged and skipped.

    Returns:
        (name, property) pairs that were applied, in order.
    """
    applied: List[Tuple[str, str]] = []
    for name, properties in updates.items():
        component = find_component(root, name)
        if component is None:
            logger.warning(f"No component named '{name}' under '{root.objectName()}'")
            continue
        setters = setter_fns(component)
        for prop, value in properties.items():
            setter = setters.get(prop)
            if setter is None:
                logger.warning(f"{type(component).__name__} '{name}' has no '{prop}' property")
                continue
            setter(value)
            applied.append((name, prop))
    return applied
