"""The ship's sub-light engines."""

from __future__ import annotations

from typing import Any, Protocol

from .events import EventBus
from .item import Item, StorageType
from .navigation import CoursePhase
from .roomtemplates import StatType

FUEL = "Fuel"


class FuelStore(Protocol):
    """Storage the engines draw fuel from."""

    def item_volume(self, name: str) -> float: ...

    def remove(self, item: Item) -> None: ...


class PropulsionSystem:
    """Burns fuel to speed the ship up or slow it down, and moves it each tick.

    ``stats`` maps ship statistics to the totals contributed by the ship's rooms.
    """

    def __init__(self, ship: Any, events: EventBus | None = None) -> None:
        self.ship = ship
        self.events = events
        self.stats: dict[StatType, int] = {}
        self.thrust = 0.0
        self.fuel_use = 0.0
        self.firing = False
        self.repair_state = 100
        self.update_engine_stats()

    def update_engine_stats(self) -> None:
        """Read thrust (m/s^2) and fuel use per tick from the stats."""
        self.thrust = float(self.stats.get(StatType.SUBLIGHT_THRUST, 0))
        self.fuel_use = float(self.stats.get(StatType.SUBLIGHT_FUELUSE, 0))

    def _burn(self) -> None:
        self.ship.storage.remove(
            Item(name=FUEL, storage_type=StorageType.LIQUID, volume=self.fuel_use)
        )

    def update(self, tick: int) -> None:
        self.update_engine_stats()
        ship = self.ship

        if self.firing and ship.destination is not None:
            if ship.storage.item_volume(FUEL) - self.fuel_use < 0:
                self.firing = False
                if self.events is not None:
                    self.events.fire_log("Out of fuel! What a catastrophe!")
            else:
                phase = ship.navigation.current_course.phase
                if phase is CoursePhase.ACCEL:
                    ship.velocity.r += self.thrust
                    self._burn()
                elif phase is CoursePhase.BRAKE:
                    ship.velocity.r -= self.thrust
                    self._burn()

        step = ship.velocity.to_rect()
        if step:
            ship.coords.move_local(step.x, step.y)
            if self.events is not None:
                self.events.fire_ui_update("ship move")
                self.events.fire_ui_update("ship status")