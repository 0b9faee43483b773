"""Application events and the bus carrying them to the main loop.

Commands publish through an ``EventSender``; the loop polls the bus
without blocking, applying at most one event per tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from queue import Empty, Queue

logger = logging.getLogger(__name__)


class StatusLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    """One status-bar message."""

    text: str = ""
    level: StatusLevel = StatusLevel.INFO

    @classmethod
    def info(cls, text: str) -> Status:
        return cls(text, StatusLevel.INFO)

    @classmethod
    def warning(cls, text: str) -> Status:
        return cls(text, StatusLevel.WARNING)

    @classmethod
    def error(cls, text: str) -> Status:
        return cls(text, StatusLevel.ERROR)


@dataclass(frozen=True)
class CloseEvent:
    """Request a clean application exit."""


@dataclass(frozen=True)
class ShowDialogEvent:
    title: str
    body: str


@dataclass(frozen=True)
class SetStatusEvent:
    status: Status


@dataclass(frozen=True)
class SetWorkspaceEvent:
    path: str


AppEvent = CloseEvent | ShowDialogEvent | SetStatusEvent | SetWorkspaceEvent


class BusClosedError(Exception):
    """Raised when sending to, or draining, a closed event bus."""


class EventBus:
    """Unbounded multi-producer, single-consumer event channel."""

    def __init__(self) -> None:
        self._queue: Queue[AppEvent] = Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def sender(self) -> EventSender:
        """Return a producer handle bound to this bus."""
        return EventSender(self)

    def publish(self, event: AppEvent) -> None:
        if self._closed:
            raise BusClosedError(f"cannot publish {type(event).__name__}: event bus is closed")
        self._queue.put(event)
        logger.debug("Published %r", event)

    def poll(self) -> AppEvent | None:
        """Return the next pending event without blocking.

        Returns ``None`` when nothing is pending. Once the bus is closed and
        drained, raises ``BusClosedError``.
        """
        try:
            return self._queue.get_nowait()
        except Empty:
            if self._closed:
                raise BusClosedError("event bus is closed") from None
            return None

    def pending(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        """Stop accepting events; queued ones can still be drained."""
        self._closed = True


class EventSender:
    """Producer handle given to command handlers."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus

    def send(self, event: AppEvent) -> None:
        self._bus.publish(event)
