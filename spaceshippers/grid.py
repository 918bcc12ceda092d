"""Integer grid geometry and tile maps for laying out ship rooms."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


@dataclass(frozen=True)
class Coord:
    """A point on an integer grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def step(self, direction: Coord) -> Coord:
        """The neighbouring point one step in a direction."""
        return self + direction


DIRECTIONS: tuple[Coord, ...] = (Coord(0, -1), Coord(1, 0), Coord(0, 1), Coord(-1, 0))


def random_direction(rng: random.Random | None = None) -> Coord:
    """Pick one of the four cardinal directions."""
    return (rng or random).choice(DIRECTIONS)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle: top-left corner (x, y) and size (w, h)."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def pos(self) -> Coord:
        return Coord(self.x, self.y)

    @property
    def size(self) -> tuple[int, int]:
        return self.w, self.h

    def intersection(self, other: Rect) -> Rect:
        """The overlapping area, or an empty rectangle if there is none."""
        x1, y1 = max(self.x, other.x), max(self.y, other.y)
        x2 = min(self.x + self.w, other.x + other.w)
        y2 = min(self.y + self.h, other.y + other.h)
        if x2 <= x1 or y2 <= y1:
            return Rect()
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def contains(self, coord: Coord) -> bool:
        return self.x <= coord.x < self.x + self.w and self.y <= coord.y < self.y + self.h

    def on_perimeter(self, coord: Coord) -> bool:
        """Whether a point lies on the outermost ring of the rectangle."""
        if not self.contains(coord):
            return False
        return coord.x in (self.x, self.x + self.w - 1) or coord.y in (self.y, self.y + self.h - 1)

    def coords(self) -> Iterator[Coord]:
        """Every point inside, row by row."""
        for y in range(self.y, self.y + self.h):
            for x in range(self.x, self.x + self.w):
                yield Coord(x, y)

    def center(self) -> Coord:
        return Coord(self.x + self.w // 2, self.y + self.h // 2)


class TileType(Enum):
    """Kinds of tile, and whether a person can stand on them."""

    NONE = ("none", False)
    FLOOR = ("floor", True)
    WALL = ("wall", False)
    DOOR = ("door", True)

    def __init__(self, label: str, passable: bool) -> None:
        self.label = label
        self.passable = passable


class TileMap:
    """A rectangular map of tiles that can also hold entities.

    Entities are expected to have a writable ``position`` attribute, which the
    map keeps in step with where they stand.
    """

    def __init__(self, width: int, height: int, fill: TileType = TileType.NONE) -> None:
        self.width = width
        self.height = height
        self._tiles: dict[Coord, TileType] = {c: fill for c in self.bounds.coords()}
        self._entities: dict[Coord, Any] = {}

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def tile(self, coord: Coord) -> TileType:
        """The tile at a point; points outside the map are empty space."""
        return self._tiles.get(coord, TileType.NONE)

    def set_tile(self, coord: Coord, tile: TileType) -> None:
        if not self.bounds.contains(coord):
            raise IndexError(f"{coord} is outside the map")
        self._tiles[coord] = tile

    def copy_to(self, other: TileMap, offset: Coord) -> None:
        """Draw the non-empty tiles of this map onto another at an offset, clipping."""
        for coord, tile in self._tiles.items():
            if tile is TileType.NONE:
                continue
            dest = coord + offset
            if other.bounds.contains(dest):
                other.set_tile(dest, tile)

    def add_entity(self, entity: Any, coord: Coord) -> None:
        if not self.bounds.contains(coord):
            raise IndexError(f"{coord} is outside the map")
        if coord in self._entities:
            raise ValueError(f"{coord} is already occupied")
        self._entities[coord] = entity
        entity.position = coord

    def move_entity(self, source: Coord, destination: Coord) -> None:
        """Move the entity standing at source to destination."""
        entity = self._entities.get(source)
        if entity is None:
            raise KeyError(f"no entity at {source}")
        if not self.bounds.contains(destination):
            raise IndexError(f"{destination} is outside the map")
        if destination in self._entities:
            raise ValueError(f"{destination} is already occupied")
        del self._entities[source]
        self._entities[destination] = entity
        entity.position = destination

    def entity_at(self, coord: Coord) -> Any | None:
        return self._entities.get(coord)