"""
Event System - outbound user interaction records.

Provides:
- Event / make_event: immutable record built inside widget listeners
- EventChannel: asyncio queue the listeners push onto

Usage:
    from async_ui.core.events import EventChannel

    channel = EventChannel()
    bind(main_window, channel)

    async for event in channel:
        handle(event)
"""
from .event import Event, EventKind, EventAction, make_event
from .channel import Channel, EventChannel, ChannelClosedError


__all__ = [
    "Event",
    "EventKind",
    "EventAction",
    "make_event",
    "Channel",
    "EventChannel",
    "ChannelClosedError",
]
