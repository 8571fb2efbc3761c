"""
EventChannel - asyncio queue carrying events from the Qt thread to consumers.

Listeners only ever call push(), which never suspends. Consumers await get()
or iterate with `async for` on the same (qasync) event loop.
"""
import asyncio
from typing import AsyncIterator, Protocol, runtime_checkable

from loguru import logger

from .event import Event


class ChannelClosedError(Exception):
    """Raised when pushing onto a closed channel or reading a drained one."""
    pass


@runtime_checkable
class Channel(Protocol):
    """Anything the binding layer can push events onto."""

    def push(self, event: Event) -> None:
        ...


_CLOSED = object()


class EventChannel:
    """
    FIFO event channel backed by asyncio.Queue.

    Args:
        maxsize: 0 for unbounded. A full bounded channel raises
            asyncio.QueueFull from push().
        name: Used in log messages only.
    """

    def __init__(self, maxsize: int = 0, name: str = "events"):
        self.name = name
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self._pushed = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pushed(self) -> int:
        """Total number of events accepted since creation."""
        return self._pushed

    def push(self, event: Event) -> None:
        """Enqueue one event without blocking."""
        if self._closed:
            raise ChannelClosedError(f"Channel '{self.name}' is closed")
        self._queue.put_nowait(event)
        self._pushed += 1

    async def get(self) -> Event:
        """
        Wait for the next event.

        Raises:
            ChannelClosedError: channel closed and drained.
        """
        if self._closed and self._queue.empty():
            raise ChannelClosedError(f"Channel '{self.name}' is closed")
        item = await self._queue.get()
        if item is _CLOSED:
            raise ChannelClosedError(f"Channel '{self.name}' is closed")
        return item

    def get_nowait(self) -> Event:
        """Return the next event or raise asyncio.QueueEmpty."""
        item = self._queue.get_nowait()
        if item is _CLOSED:
            raise asyncio.QueueEmpty()
        return item

    def drain(self) -> list:
        """Remove and return every queued event."""
        events = []
        while True:
            try:
                events.append(self.get_nowait())
            except asyncio.QueueEmpty:
                return events

    def close(self) -> None:
        """Stop accepting events; iteration ends once queued events are consumed."""
        if self._closed:
            return
        self._closed = True
        # Wakes a consumer blocked on an empty queue. A full queue has no
        # blocked consumers, so the marker can be dropped.
        try:
            self._queue.put_nowait(_CLOSED)
        except asyncio.QueueFull:
            pass
        logger.debug(f"Channel '{self.name}' closed")

    def __aiter__(self) -> AsyncIterator[Event]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Event]:
        while True:
            try:
                yield await self.get()
            except ChannelClosedError:
                return
