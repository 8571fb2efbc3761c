from typing import Any, Optional

from loguru import logger

from async_ui.core.events import Channel, Event, EventAction, EventKind, make_event


def emit(
    channel: Channel,
    source: str,
    kind: EventKind,
    action: Optional[EventAction] = None,
    payload: Any = None,
) -> Event:
    """Build an event and push it onto channel. Called from listener callbacks only."""
    event = make_event(source, kind, action, payload)
    logger.debug(f"emit {event.kind.value} from '{source}': {event.payload!r}")
    channel.push(event)
    return event
