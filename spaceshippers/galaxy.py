"""The galaxy: a grid of sectors, each holding sub-sectors that may contain star systems."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Any

from .grid import Rect
from .location import (
    SECTOR_MAX,
    Coordinates,
    CoordResolution,
    Locatable,
    Location,
    LocationType,
)

GAL_DENSE = 100
GAL_NORMAL = 70
GAL_SPARSE = 50

GAL_MIN_RADIUS = 5
GAL_MAX_RADIUS = 12

SECTOR_DESCRIPTION = "Sectors are 1000x1000 lightyears! Wow!"


def _sector_name(density: int) -> str:
    if density == 0:
        return "Non-Galactic Space"
    if density < 10:
        return "The Void Zone"
    if density < 30:
        return "Outworlder Space"
    if density < 75:
        return "Main Space Zone Area"
    return "Galactic Core Space"


@dataclass(eq=False)
class SubSector(Location):
    """A cell within a sector; it may hold a star system."""

    star_system: Any = None

    def has_star(self) -> bool:
        return self.star_system is not None


class Sector(Location):
    """One cell of the galaxy map, with a star density from 0 to 100."""

    def __init__(self, x: int, y: int, density: int) -> None:
        super().__init__(
            name=_sector_name(density),
            description=SECTOR_DESCRIPTION,
            location_type=LocationType.SECTOR,
            explored=False,
            known=True,
            coords=Coordinates.for_sector(x, y),
        )
        self.density = max(density, 0)
        self.sub_sectors: dict[tuple[int, int], SubSector] = {}

    def proper_name(self) -> str:
        """The sector's name made from its coordinates, such as "3-4"."""
        x, y = self.coords.coord_strings()
        return f"{x}-{y}"

    def sub_sector(self, coord: tuple[int, int]) -> SubSector | None:
        """The sub-sector at a position, or None if it has not been generated."""
        return self.sub_sectors.get(tuple(coord))

    def generate_sub_sector(self, coord: tuple[int, int]) -> SubSector:
        """Create the sub-sector at a position, or return the one already there."""
        key = (coord[0], coord[1])
        existing = self.sub_sectors.get(key)
        if existing is not None:
            return existing
        coords = replace(self.coords, resolution=CoordResolution.SUBSECTOR, sub_sector=key)
        sub = SubSector(coords=coords)
        self.sub_sectors[key] = sub
        return sub


class Galaxy:
    """A square galaxy of sectors whose density falls off away from the centre."""

    def __init__(
        self,
        name: str,
        radius: int,
        density_factor: int,
        rng: random.Random | None = None,
        space_time: int = 0,
    ) -> None:
        self.name = name
        self.width = self.height = SECTOR_MAX
        self.radius = radius
        self.space_time = space_time
        self._rng = rng or random.Random()

        centre = SECTOR_MAX // 2
        self.sectors: list[Sector] = []
        for y in range(self.height):
            for x in range(self.width):
                dist = math.sqrt((x - centre) ** 2 + (y - centre) ** 2) + self._rng.random() * 2
                density = density_factor - int(density_factor * dist / radius)
                density = min(max(density, 0), density_factor)
                self.sectors.append(Sector(x, y, density))

    def dims(self) -> tuple[int, int]:
        return self.width, self.height

    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def sector(self, coord: tuple[int, int]) -> Sector | None:
        """The sector at (x, y), or None if that is outside the galaxy."""
        x, y = coord
        if not (0 <= x < SECTOR_MAX and 0 <= y < SECTOR_MAX):
            return None
        return self.sectors[y * self.width + x]

    def location(self, coords: Coordinates) -> Locatable | None:
        """The most specific known place containing a coordinate."""
        sector = self.sector(coords.sector)
        if coords.resolution == CoordResolution.SECTOR or sector is None:
            return sector

        sub = sector.sub_sector(coords.sub_sector)
        if coords.resolution == CoordResolution.SUBSECTOR:
            return sub
        if sub is None or not sub.has_star():
            return sub

        star = sub.star_system
        if star.coords.star_coord != coords.star_coord:
            return sub
        for place in star.locations():
            if coords.is_in(place):
                return place
        return star

    def star_system(self, coords: Coordinates) -> Any:
        """The star system around a local coordinate, or None."""
        if coords.resolution != CoordResolution.LOCAL:
            return None
        sector = self.sector(coords.sector)
        if sector is None:
            return None
        sub = sector.sub_sector(coords.sub_sector)
        return sub.star_system if sub is not None else None

    def generate_random_sub_sector(self) -> SubSector:
        """Create a sub-sector at a random spot in a random non-empty sector."""
        populated = [s for s in self.sectors if s.density != 0]
        if not populated:
            raise ValueError("the galaxy has no populated sectors")
        sector = self._rng.choice(populated)
        coord = (self._rng.randrange(SECTOR_MAX), self._rng.randrange(SECTOR_MAX))
        return sector.generate_sub_sector(coord)