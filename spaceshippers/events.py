"""A small publish/subscribe bus for game events such as log messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable


class EventKind(Enum):
    """Kinds of events that game systems announce."""

    LOG = auto()
    UPDATE_UI = auto()


@dataclass(frozen=True)
class Event:
    """An event of some kind, carrying a text payload."""

    kind: EventKind
    payload: str = ""


Listener = Callable[[Event], None]


class EventBus:
    """Delivers fired events to every subscribed listener, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, callback: Listener) -> None:
        """Register a callback; subscribing the same callback twice has no effect."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        """Remove a callback. Raises ValueError if it was never subscribed."""
        try:
            self._listeners.remove(callback)
        except ValueError:
            raise ValueError("callback is not subscribed") from None

    def fire(self, event: Event) -> None:
        """Deliver an event to all listeners."""
        for listener in list(self._listeners):
            listener(event)

    def fire_log(self, message: str) -> Event:
        """Fire a space-log message and return the event that was sent."""
        event = Event(EventKind.LOG, message)
        self.fire(event)
        return event

    def fire_ui_update(self, tag: str) -> Event:
        """Fire a request for the UI element named by tag to refresh."""
        event = Event(EventKind.UPDATE_UI, tag)
        self.fire(event)
        return event