"""Life support: keeping each room's air at target conditions."""

from __future__ import annotations

from typing import Any

from .gas import GasType
from .room import Room


class LifeSupportSystem:
    """Watches room atmospheres against target pressure, O2, temperature and CO2."""

    def __init__(self, ship: Any) -> None:
        self.ship = ship
        self.stats: dict = {}
        self.target_pressure = 101.0
        self.target_o2 = 21.0
        self.target_temp = 288.0
        self.target_co2 = 0.0
        self.rooms_to_scrub: list[Room] = []

    def rooms_needing_scrubbing(self) -> list[Room]:
        """Rooms whose CO2 partial pressure is above the target."""
        return [
            room for room in self.ship.rooms
            if room.atmo.partial_pressure(GasType.CO2) > self.target_co2
        ]

    def update(self, tick: int) -> None:
        """Record which rooms currently have too much CO2."""
        self.rooms_to_scrub = self.rooms_needing_scrubbing()