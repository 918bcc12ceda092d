"""The player's ship: its rooms, crew and systems."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Any

from .comms import CommSystem
from .crew import Crewman, Stat
from .events import EventBus
from .grid import Coord, Rect, TileMap, TileType
from .lifesupport import LifeSupportSystem
from .location import Coordinates, CoordResolution, Locatable, Location, LocationType, PolarVec
from .navigation import Course, NavigationSystem
from .propulsion import PropulsionSystem
from .room import Room
from .roomtemplates import StatType

SHIP_MAP_SIZE = 100

SHIP_DESCRIPTION = (
    "This is your ship! Look at it's heroic hull valiantly floating amongst the stars. "
    "One could almost weep."
)

_STAT_SYSTEMS: dict[StatType, str] = {
    StatType.SUBLIGHT_THRUST: "propulsion",
    StatType.SUBLIGHT_FUELUSE: "propulsion",
    StatType.SUBLIGHT_POWER: "propulsion",
    StatType.FTL_THRUST: "propulsion",
    StatType.FTL_FUELUSE: "propulsion",
    StatType.FTL_POWER: "propulsion",
    StatType.CO2_SCRUBRATE: "life_support",
    StatType.LS_MODULE_CAP: "life_support",
    StatType.GENERAL_STORAGE: "storage",
    StatType.GAS_STORAGE: "storage",
    StatType.LIQUID_STORAGE: "storage",
}


class Ship(Location):
    """A ship is a location too, though you cannot travel to it: you are on it.

    ``storage`` is the system holding fuel and cargo; it is optional, but the
    engines need it to fire.
    """

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(
        self,
        name: str,
        galaxy: Any = None,
        *,
        rng: random.Random | None = None,
        events: EventBus | None = None,
        storage: Any = None,
    ) -> None:
        super().__init__(
            name=name,
            description=SHIP_DESCRIPTION,
            location_type=LocationType.SHIP,
            explored=True,
            known=True,
            coords=Coordinates.centered(CoordResolution.LOCAL),
        )
        self._rng = rng or random.Random()
        self.events = events

        self.crew: list[Crewman] = []
        self.rooms: list[Room] = []

        self.engine = PropulsionSystem(self, events)
        self.navigation = NavigationSystem(self, galaxy, events)
        self.comms = CommSystem(rng=self._rng, events=events)
        self.life_support = LifeSupportSystem(self)
        self.storage = storage

        self.systems: dict[str, Any] = {
            "propulsion": self.engine,
            "navigation": self.navigation,
            "comms": self.comms,
            "life_support": self.life_support,
        }
        if storage is not None:
            self.systems["storage"] = storage

        self.hull = Stat(100)
        self.velocity = PolarVec()
        self.ship_map = TileMap(SHIP_MAP_SIZE, SHIP_MAP_SIZE)

        self.x = self.y = self.width = self.height = 0
        self.volume = 0

        self.current_location: Locatable | None = None
        self.destination: Locatable | None = None

    def setup(self, galaxy: Any) -> None:
        """Rebuild the ship map, room connections and crew placement, e.g. after loading."""
        self.ship_map = TileMap(SHIP_MAP_SIZE, SHIP_MAP_SIZE)
        for i, room in enumerate(self.rooms):
            for other in self.rooms[i + 1:]:
                self.connect_rooms(room, other)
            self.draw_room(room)
        self.calc_bounds()

        for crewman in self.crew:
            if crewman.current_task is not None:
                crewman.current_task.set_worker(crewman)
            crewman.ship = self
            self.ship_map.add_entity(crewman, crewman.position)

        self.engine.ship = self
        self.navigation.ship = self
        self.navigation.galaxy = galaxy

    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def compile_stats(self) -> None:
        """Total every room's stats into the systems they belong to."""
        totals: dict[str, dict[StatType, int]] = {name: {} for name in self.systems}
        for room in self.rooms:
            for room_stat in room.stats:
                system = _STAT_SYSTEMS.get(room_stat.stat)
                if system in totals:
                    bucket = totals[system]
                    bucket[room_stat.stat] = bucket.get(room_stat.stat, 0) + room_stat.modifier
        for name, system in self.systems.items():
            system.stats = totals[name]
        self.engine.update_engine_stats()

    def set_location(self, location: Locatable) -> None:
        self.current_location = location
        self.coords = replace(location.coords, resolution=CoordResolution.LOCAL)

    def add_room(self, pos: Coord, room: Room) -> None:
        """Place a room and connect it to its neighbours.

        Raises ValueError if it overlaps an existing room by more than a wall.
        """
        room.pos = pos
        if not self.check_room_valid_add(room):
            raise ValueError("Invalid room add attempt: " + room.name)

        self.rooms.append(room)
        for existing in self.rooms:
            self.connect_rooms(existing, room)

        self.draw_room(room)
        self.calc_bounds()
        self.compile_stats()

    def remove_room(self, room: Room) -> None:
        """Take a room off the ship; rooms not on the ship are ignored."""
        if room not in self.rooms:
            return
        self.rooms.remove(room)

        for cursor in room.bounds().intersection(self.ship_map.bounds).coords():
            self.ship_map.set_tile(cursor, TileType.NONE)

        for neighbour in room.connected:
            neighbour.remove_connection(room)
            self.draw_room(neighbour)

        self.calc_bounds()
        self.compile_stats()

    def check_room_valid_add(self, room: Room) -> bool:
        """Whether a room overlaps no existing room by more than a shared wall."""
        for existing in self.rooms:
            shared = room.bounds().intersection(existing.bounds())
            if shared.w >= 2 and shared.h >= 2:
                return False
        return True

    def _free_tile(self, coord: Coord) -> bool:
        return self.ship_map.tile(coord).passable and self.ship_map.entity_at(coord) is None

    def add_crewman(self, crewman: Crewman) -> None:
        """Bring a crewman aboard, standing at a random free spot in a random room."""
        if not any(
            self._free_tile(c) for room in self.rooms for c in room.bounds().coords()
        ):
            raise ValueError("the ship has no free space for a crewman")

        self.crew.append(crewman)
        crewman.ship = self
        while True:
            area = self._rng.choice(self.rooms).bounds()
            pos = Coord(
                self._rng.randrange(area.x, area.x + area.w),
                self._rng.randrange(area.y, area.y + area.h),
            )
            if self._free_tile(pos):
                self.ship_map.add_entity(crewman, pos)
                return

    def connect_rooms(self, first: Room, second: Room) -> None:
        first.add_connection(second)
        second.add_connection(first)

    def draw_room(self, room: Room) -> None:
        room.room_map.copy_to(self.ship_map, room.pos)

    def calc_bounds(self) -> None:
        """Work out the bounding box of all rooms and the total floor area."""
        if not self.rooms:
            self.x = self.y = self.width = self.height = 0
            self.volume = 0
            return

        boxes = [room.bounds() for room in self.rooms]
        self.x = min(b.x for b in boxes)
        self.y = min(b.y for b in boxes)
        self.width = max(b.x + b.w for b in boxes) - self.x
        self.height = max(b.y + b.h for b in boxes) - self.y
        self.volume = sum((b.w - 2) * (b.h - 2) for b in boxes)

    def set_course(self, location: Locatable, course: Course) -> None:
        """Head for a location; local destinations start the engines on the course."""
        self.destination = location
        if location.coords.resolution == CoordResolution.LOCAL:
            self.navigation.current_course = course
            self.engine.firing = True

    def speed(self) -> int:
        return int(self.velocity.r)

    def update(self, space_time: int) -> None:
        for system in list(self.systems.values()):
            system.update(space_time)
        for room in self.rooms:
            room.update(space_time)
        for crewman in self.crew:
            crewman.update(space_time)

    def room_at(self, coord: Coord) -> Room | None:
        """The first room covering a point on the ship map, or None."""
        for room in self.rooms:
            if room.bounds().contains(coord):
                return room
        return None