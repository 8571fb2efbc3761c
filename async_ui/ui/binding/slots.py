"""
ListenerSlots - side table holding the primary listener of each widget.

Written by bind() when a listener is attached and read by the suppression
protocol around programmatic writes. Entries are keyed by the address of the
underlying C++ object, so transient Python wrappers of the same widget share
one slot, and they are dropped when Qt destroys the widget.
"""
import functools
from typing import Any, Dict, Optional

from loguru import logger
from shiboken6 import getCppPointer


def _key(component) -> int:
    return getCppPointer(component)[0]


class ListenerSlots:
    """One listener slot per widget."""

    def __init__(self):
        self._slots: Dict[int, Any] = {}

    def get(self, component) -> Optional[Any]:
        return self._slots.get(_key(component))

    def put(self, component, listener) -> None:
        """Store listener, replacing any previous one."""
        key = _key(component)
        previous = self._slots.get(key)
        if previous is None:
            component.destroyed.connect(functools.partial(self._forget, key))
        elif previous is not listener:
            logger.debug(f"Replacing listener on '{component.objectName()}'")
        self._slots[key] = listener

    def pop(self, component) -> Optional[Any]:
        return self._slots.pop(_key(component), None)

    def clear(self) -> None:
        """Detach and drop every stored listener."""
        listeners = list(self._slots.values())
        self._slots.clear()
        for listener in listeners:
            listener.detach()

    def _forget(self, key: int, *_):
        self._slots.pop(key, None)

    def __contains__(self, component) -> bool:
        return _key(component) in self._slots

    def __len__(self) -> int:
        return len(self._slots)


listener_slots = ListenerSlots()
