"""
Binding Package - two-way binding between Qt widgets and an event channel.

Provides:
- setter_fns(): property setters per widget (model -> widget, no echo)
- bind() / unbind(): listeners per widget tree (widget -> channel)
- suppressed(): detach/mutate/reattach around programmatic writes
- apply_updates(): name-addressed updates through setter_fns()
"""
from .bind import bind, unbind, register_binder, child_widgets
from .setters import setter_fns, register_setters, SetterMap
from .suppression import suppressed, set_selection, set_text
from .selection import to_range, selection_bounds, selected_range
from .slots import ListenerSlots, listener_slots
from .listeners import (
    Listener,
    ActionListener,
    CloseListener,
    SelectionListener,
    TextListener,
)
from .thread_guard import UiThreadError, assert_ui_thread, ui_thread
from .updates import apply_updates, find_component

__all__ = [
    # Wiring
    "bind",
    "unbind",
    "register_binder",
    "child_widgets",

    # Setters
    "setter_fns",
    "register_setters",
    "SetterMap",
    "apply_updates",
    "find_component",

    # Suppression
    "suppressed",
    "set_selection",
    "set_text",
    "ListenerSlots",
    "listener_slots",

    # Selection
    "to_range",
    "selection_bounds",
    "selected_range",

    # Listeners
    "Listener",
    "ActionListener",
    "CloseListener",
    "SelectionListener",
    "TextListener",

    # Threading
    "UiThreadError",
    "assert_ui_thread",
    "ui_thread",
]
