"""Rooms (ship modules): their tile layout, atmosphere and connections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .gas import GasMixture
from .grid import Coord, Rect, TileMap, TileType

if TYPE_CHECKING:
    from .roomtemplates import RoomStat, RoomType

ROOM_HEIGHT_METRES = 3


@dataclass(eq=False)
class Room:
    """A rectangular module with walls around its edge and floor inside."""

    name: str
    room_type: RoomType | None
    width: int
    height: int
    description: str = "a room"
    rotated: bool = False
    pos: Coord = Coord()
    stats: list[RoomStat] = field(default_factory=list)
    room_map: TileMap = field(init=False)
    atmo: GasMixture = field(init=False)
    connected: list[Room] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.rebuild_map()
        self.atmo = GasMixture()
        self.atmo.init_standard_atmosphere(float(self.volume() * 1000))

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def bounds(self) -> Rect:
        """The room's rectangle in ship space."""
        return Rect(self.pos.x, self.pos.y, self.width, self.height)

    def rebuild_map(self) -> None:
        """Lay out the room's tiles: walls on the perimeter, floor inside."""
        self.room_map = TileMap(self.width, self.height)
        area = self.room_map.bounds
        for cursor in area.coords():
            tile = TileType.WALL if area.on_perimeter(cursor) else TileType.FLOOR
            self.room_map.set_tile(cursor, tile)

    def rotate(self) -> None:
        self.width, self.height = self.height, self.width
        self.rotated = not self.rotated
        self.rebuild_map()

    def add_connection(self, other: Room) -> None:
        """Connect to a room sharing a wall, putting a door in the middle of it.

        Rooms that overlap by more than a wall's thickness are not connected.
        """
        if other is self or other in self.connected:
            return

        shared = other.bounds().intersection(self.bounds())
        if shared.w != 1 and shared.h != 1:
            return

        origin = shared.pos - self.pos
        if shared.w == 1 and shared.h >= 3:
            if shared.h % 2 == 0:
                self.room_map.set_tile(origin + Coord(0, shared.h // 2 - 1), TileType.DOOR)
            self.room_map.set_tile(origin + Coord(0, shared.h // 2), TileType.DOOR)
        elif shared.h == 1 and shared.w >= 3:
            if shared.w % 2 == 0:
                self.room_map.set_tile(origin + Coord(shared.w // 2 - 1, 0), TileType.DOOR)
            self.room_map.set_tile(origin + Coord(shared.w // 2, 0), TileType.DOOR)

        self.connected.append(other)

    def remove_connection(self, other: Room) -> None:
        """Disconnect from a room and wall over the doors. Raises ValueError if not connected."""
        try:
            self.connected.remove(other)
        except ValueError:
            raise ValueError(f"{self.name} is not connected to {other.name}") from None

        for cursor in self.bounds().intersection(other.bounds()).coords():
            self.room_map.set_tile(cursor - self.pos, TileType.WALL)

    def status(self) -> str:
        return self.name + ": Status OKAY FOR NOW"

    def volume(self) -> int:
        """Interior volume in cubic metres."""
        return (self.width - 2) * (self.height - 2) * ROOM_HEIGHT_METRES

    def update(self, space_time: int) -> None:
        """Advance one tick. Rooms hold no time-dependent state, so nothing changes."""
        return None