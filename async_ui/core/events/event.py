"""
Event records produced by widget listeners.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class EventKind(str, Enum):
    """What the user did."""
    ACTION = "action"
    SELECTION = "selection"
    TEXT = "text"
    CLOSE = "close"


class EventAction(str, Enum):
    """Optional qualifier of an event kind."""
    UPDATE = "update"


@dataclass(frozen=True)
class Event:
    """
    Immutable snapshot of one user interaction.

    Attributes:
        source: objectName of the widget that fired
        kind: EventKind
        action: EventAction or None
        payload: selection indices (tuple), full text (str) or None
    """
    source: str
    kind: EventKind
    action: Optional[EventAction] = None
    payload: Any = None


def make_event(
    source: str,
    kind: Union[EventKind, str],
    action: Union[EventAction, str, None] = None,
    payload: Any = None,
) -> Event:
    """
    Build an Event from (source, kind, action?, payload?).

    Strings are accepted for kind/action and converted to their enums.
    List payloads are frozen into tuples so the record stays immutable.
    """
    if isinstance(payload, list):
        payload = tuple(payload)
    return Event(
        source=source,
        kind=EventKind(kind),
        action=EventAction(action) if action is not None else None,
        payload=payload,
    )
