"""Places in the galaxy and the nested coordinate system that addresses them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Protocol

METERS_PER_LY = 9.461e15
LY_PER_SECTOR = 1000

SECTOR_MAX = 25
SUBSECTOR_MAX = 1000
STARSYSTEM_MAX = 1000
LOCAL_MAX = METERS_PER_LY / 1000

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class LocationType(Enum):
    NONE = "No location!"
    SECTOR = "Sector"
    STARSYSTEM = "Star System"
    STAR = "Star"
    PLANET = "Planet"
    MOON = "Moon"
    ANOMALY = "Anomaly"
    SHIP = "Ship"

    def __str__(self) -> str:
        return self.value


class CoordResolution(IntEnum):
    """How deep a coordinate goes, from sector down to local metres."""

    SECTOR = 0
    SUBSECTOR = auto()
    STARSYSTEM = auto()
    LOCAL = auto()


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __bool__(self) -> bool:
        return self.x != 0 or self.y != 0

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def to_polar(self) -> PolarVec:
        return PolarVec(self.mag(), math.atan2(self.y, self.x))


@dataclass
class PolarVec:
    r: float = 0.0
    phi: float = 0.0

    def to_rect(self) -> Vec2:
        return Vec2(self.r * math.cos(self.phi), self.r * math.sin(self.phi))


def _cycle_clamp(value: int, low: int, high: int) -> tuple[int, int]:
    """Wrap value into [low, high]; also return how many times it wrapped (signed)."""
    span = high - low + 1
    overflow, offset = divmod(value - low, span)
    return low + offset, overflow


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return sign + "".join(reversed(digits))


def _sub(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] - b[0], a[1] - b[1])


class Locatable(Protocol):
    """Anything a ship can travel to."""

    name: str
    description: str
    location_type: LocationType
    explored: bool
    known: bool
    coords: Coordinates
    visit_distance: float
    visit_speed: float

    def locations(self) -> list[Locatable]: ...


@dataclass
class GalVec:
    """The vector between two points in the galaxy, with its length in light years."""

    sector: tuple[int, int] = (0, 0)
    sub_sector: tuple[int, int] = (0, 0)
    star_coord: tuple[int, int] = (0, 0)
    local: Vec2 = field(default_factory=Vec2)
    distance: float = 0.0


@dataclass
class Coordinates:
    """A point in the galaxy: sector, subsector, star coordinate and local metres."""

    sector: tuple[int, int] = (0, 0)
    sub_sector: tuple[int, int] = (0, 0)
    star_coord: tuple[int, int] = (0, 0)
    local: Vec2 = field(default_factory=Vec2)
    resolution: CoordResolution = CoordResolution.SECTOR

    @classmethod
    def centered(cls, resolution: CoordResolution) -> Coordinates:
        """A coordinate at the centre of the galaxy at every level."""
        return cls(
            sector=(SECTOR_MAX // 2, SECTOR_MAX // 2),
            sub_sector=(SUBSECTOR_MAX // 2, SUBSECTOR_MAX // 2),
            star_coord=(STARSYSTEM_MAX // 2, STARSYSTEM_MAX // 2),
            local=Vec2(LOCAL_MAX / 2, LOCAL_MAX / 2),
            resolution=resolution,
        )

    @classmethod
    def for_sector(cls, x: int, y: int) -> Coordinates:
        """A sector-resolution coordinate for sector (x, y), centred within it."""
        coords = cls.centered(CoordResolution.SECTOR)
        coords.sector = (x, y)
        return coords

    def coord_strings(self) -> tuple[str, str]:
        """Strings of the form SECTOR:SUBSECTOR:STAR:LOCAL, down to this resolution."""
        xs, ys = [str(self.sector[0])], [str(self.sector[1])]
        if self.resolution >= CoordResolution.SUBSECTOR:
            xs.append(str(self.sub_sector[0]))
            ys.append(str(self.sub_sector[1]))
        if self.resolution >= CoordResolution.STARSYSTEM:
            xs.append(_base36(self.star_coord[0]))
            ys.append(_base36(self.star_coord[1]))
        if self.resolution >= CoordResolution.LOCAL:
            xs.append(_base36(int(self.local.x)))
            ys.append(_base36(int(self.local.y)))
        return ":".join(xs), ":".join(ys)

    def is_in(self, location: Locatable | None) -> bool:
        """Whether this point lies inside a location.

        For two local points this means being within the location's visit distance.
        """
        if location is None:
            return False
        other = location.coords
        if other.resolution > self.resolution:
            return False
        if self.sector != other.sector:
            return False
        if other.resolution == CoordResolution.SECTOR:
            return True
        if self.sub_sector != other.sub_sector:
            return False
        if other.resolution == CoordResolution.SUBSECTOR:
            return True
        if self.star_coord != other.star_coord:
            return False
        if other.resolution == CoordResolution.STARSYSTEM:
            return True
        return self.calc_vector(other).distance * METERS_PER_LY <= location.visit_distance

    def move(self, dx: int, dy: int, resolution: CoordResolution) -> None:
        """Move by (dx, dy) at the given level, carrying overflow upwards."""
        if resolution > self.resolution:
            return
        if resolution == CoordResolution.LOCAL:
            self.move_local(float(dx), float(dy))
        elif resolution == CoordResolution.STARSYSTEM:
            self._move_star_system(dx, dy)
        elif resolution == CoordResolution.SUBSECTOR:
            self._move_sub_sector(dx, dy)
        else:
            self._move_sector(dx, dy)

    def move_local(self, dx: float, dy: float) -> None:
        """Move by (dx, dy) metres within the star system, keeping fractions."""
        x_frac = (self.local.x - math.trunc(self.local.x)) + (dx - math.trunc(dx))
        y_frac = (self.local.y - math.trunc(self.local.y)) + (dy - math.trunc(dy))
        top = int(LOCAL_MAX) - 1
        x, odx = _cycle_clamp(int(self.local.x) + int(dx), 0, top)
        y, ody = _cycle_clamp(int(self.local.y) + int(dy), 0, top)
        self.local = Vec2(x + x_frac, y + y_frac)
        if odx or ody:
            self._move_star_system(odx, ody)

    def _move_star_system(self, dx: int, dy: int) -> None:
        x, odx = _cycle_clamp(self.star_coord[0] + dx, 0, STARSYSTEM_MAX - 1)
        y, ody = _cycle_clamp(self.star_coord[1] + dy, 0, STARSYSTEM_MAX - 1)
        self.star_coord = (x, y)
        if odx or ody:
            self._move_sub_sector(odx, ody)

    def _move_sub_sector(self, dx: int, dy: int) -> None:
        x, odx = _cycle_clamp(self.sub_sector[0] + dx, 0, SUBSECTOR_MAX - 1)
        y, ody = _cycle_clamp(self.sub_sector[1] + dy, 0, SUBSECTOR_MAX - 1)
        self.sub_sector = (x, y)
        if odx or ody:
            self._move_sector(odx, ody)

    def _move_sector(self, dx: int, dy: int) -> None:
        x = min(max(self.sector[0] + dx, 0), SECTOR_MAX - 1)
        y = min(max(self.sector[1] + dy, 0), SECTOR_MAX - 1)
        self.sector = (x, y)

    def calc_vector(self, other: Coordinates) -> GalVec:
        """The vector from this point to another, with its length in light years."""
        vec = GalVec(
            sector=_sub(other.sector, self.sector),
            sub_sector=_sub(other.sub_sector, self.sub_sector),
            star_coord=_sub(other.star_coord, self.star_coord),
            local=other.local - self.local,
        )

        def axis(i: int, local: float) -> float:
            sub = vec.sub_sector[i] + vec.star_coord[i] / STARSYSTEM_MAX
            return local / METERS_PER_LY + LY_PER_SECTOR * (vec.sector[i] + sub / SUBSECTOR_MAX)

        vec.distance = math.hypot(axis(0, vec.local.x), axis(1, vec.local.y))
        return vec


@dataclass
class Location:
    """A place: what it is, whether we know of it or have been there, and where it is."""

    name: str = ""
    description: str = ""
    location_type: LocationType = LocationType.NONE
    explored: bool = False
    known: bool = False
    coords: Coordinates = field(default_factory=Coordinates)
    visit_distance: float = 0.0
    visit_speed: float = 0.0

    def set_explored(self) -> None:
        self.explored = True

    def set_known(self) -> None:
        self.known = True

    def locations(self) -> list[Locatable]:
        """Places within this one; a plain location holds only itself."""
        return [self]