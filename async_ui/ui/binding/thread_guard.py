"""
UI thread guard.

All setters, listeners and bind() calls must run on the thread that owns the
QApplication. The detach/mutate/reattach window relies on it instead of locks.
"""
import functools

from PySide6.QtCore import QCoreApplication, QThread

from async_ui.core.config import get_config


class UiThreadError(Exception):
    """Raised when a binding operation runs off the UI thread."""
    pass


def assert_ui_thread() -> None:
    """Raise UiThreadError unless called on the QApplication thread (if enabled)."""
    if not get_config().data.binding.enforce_ui_thread:
        return
    app = QCoreApplication.instance()
    if app is None:
        return
    if QThread.currentThread() is not app.thread():
        raise UiThreadError(
            f"Binding operation called from {QThread.currentThread()!r}; "
            f"marshal it onto the UI thread"
        )


def ui_thread(func):
    """Decorator running assert_ui_thread() before func."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        assert_ui_thread()
        return func(*args, **kwargs)
    return wrapper
