"""
async_ui - two-way binding between Qt widget trees and asyncio event channels.

Outbound: setter_fns(widget) gives property setters that write model state
into a widget without echoing it back as a user event.
Inbound: bind(widget, channel) forwards user interaction as Event records.
"""
from async_ui.core.events import Event, EventKind, EventAction, make_event, EventChannel
from async_ui.ui.binding import bind, unbind, setter_fns, apply_updates

__all__ = [
    "Event",
    "EventKind",
    "EventAction",
    "make_event",
    "EventChannel",
    "bind",
    "unbind",
    "setter_fns",
    "apply_updates",
]
