"""Items that can be held in a ship's storage system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class StorageType(Enum):
    """Which kind of storage an item needs."""

    GENERAL = auto()
    LIQUID = auto()
    GAS = auto()


NO_DESCRIPTION = "This item has no description. It is non-descript."


@dataclass
class Item:
    """A storable item; its amount is its volume in litres."""

    name: str
    description: str = ""
    volume: float = 0.0
    storage_type: StorageType = StorageType.GENERAL

    @property
    def amount(self) -> float:
        return self.volume

    @amount.setter
    def amount(self, value: float) -> None:
        self.volume = value

    def change_amount(self, delta: float) -> None:
        """Change the volume by delta, never going below zero."""
        self.volume = max(self.volume + delta, 0.0)

    def describe(self) -> str:
        """Return the description, or a stock text when there is none."""
        return self.description or NO_DESCRIPTION