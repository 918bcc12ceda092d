"""The communications system: scanning for messages and transmissions."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .events import EventBus
from .person import Person

HOUR = 60 * 60
MAILBOX_CAPACITY = 100


@dataclass
class CommMessage:
    """A received message; date is in space time."""

    title: str
    sender: Person
    date: int
    message: str


_BIRTHDAY = (
    "Mom",
    "Happy Birthday",
    "Glad to find you out there, don't know your frequency exactly. "
    "Anyways, Happy Birthday son. Love you!",
)
_CONTEST = (
    "1781.2 NOVA-FM",
    "You have won!",
    "By transdimensional FM radio scanning, we've determined that you are our "
    "10 billionth listener! That is great!",
)
_GARBLED = (
    "Unknown",
    "--indecipherable--",
    "--there is a message here, but it is too faint or corrupted to decode--",
)


class CommSystem:
    """Scans for transmissions every ``freq`` ticks, catching one with some chance."""

    def __init__(self, rng: random.Random | None = None, events: EventBus | None = None) -> None:
        self.freq = HOUR
        self.range = 1_000_000
        self.sensitivity = 5
        self.inbox: list[CommMessage] = []
        self.transmissions: list[CommMessage] = []
        self.stats: dict = {}
        self._rng = rng or random.Random()
        self.events = events

    def update(self, tick: int) -> None:
        if tick % self.freq != 0:
            return
        if self._rng.randrange(100) < self.sensitivity:
            self.add_random_transmission(tick)

    def add_random_transmission(self, tick: int) -> CommMessage:
        """Receive a random message or transmission and return it."""
        roll = self._rng.randrange(100)
        if roll < 1:
            (sender, title, text), box, tag, note = (
                _BIRTHDAY, self.inbox, "inbox",
                "A new message has been received! Check your inbox.",
            )
        elif roll < 10:
            (sender, title, text), box, tag, note = (
                _CONTEST, self.transmissions, "transmissions",
                "A transmission has been decoded.",
            )
        else:
            (sender, title, text), box, tag, note = (
                _GARBLED, self.transmissions, "transmissions",
                "A garbled transmission was intercepted.",
            )

        message = CommMessage(title, Person.contact(sender), tick, text)
        if len(box) < MAILBOX_CAPACITY:
            box.append(message)
        if self.events is not None:
            self.events.fire_ui_update(tag)
            self.events.fire_log(note)
        return message