"""Templates for every kind of room, and building rooms from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .room import Room


class StatType(Enum):
    """Ship statistics a room can contribute to."""

    POWER_DRAW = auto()
    POWER_GEN = auto()
    CO2_SCRUBRATE = auto()
    LS_MODULE_CAP = auto()
    GENERAL_STORAGE = auto()
    GAS_STORAGE = auto()
    LIQUID_STORAGE = auto()
    SUBLIGHT_THRUST = auto()
    SUBLIGHT_FUELUSE = auto()
    SUBLIGHT_POWER = auto()
    FTL_THRUST = auto()
    FTL_FUELUSE = auto()
    FTL_POWER = auto()


@dataclass(frozen=True)
class RoomStat:
    """An amount a room adds to one ship statistic."""

    stat: StatType
    modifier: int


class RoomType(Enum):
    BRIDGE = auto()
    COCKPIT = auto()
    CORRIDOR = auto()
    ENGINE_SMALL = auto()
    ENGINE_MEDIUM = auto()
    ENGINE_LARGE = auto()
    CARGOBAY = auto()
    QUARTERS = auto()
    COMMONAREA = auto()
    LABORATORY = auto()
    MEDBAY = auto()
    LASERTURRET = auto()


@dataclass(frozen=True)
class RoomTemplate:
    """Default data for a kind of room. Size limits only apply to resizable rooms."""

    name: str
    description: str
    room_type: RoomType
    width: int
    height: int
    resizable: bool = False
    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    stats: tuple[RoomStat, ...] = ()


def _stats(**modifiers: int) -> tuple[RoomStat, ...]:
    return tuple(RoomStat(StatType[name], value) for name, value in modifiers.items())


ROOM_TEMPLATES: dict[RoomType, RoomTemplate] = {
    t.room_type: t
    for t in (
        RoomTemplate(
            "Bridge",
            "A large module that acts as the command centre of the ship. Home of The Captain's Chair.",
            RoomType.BRIDGE, 7, 9,
            stats=_stats(POWER_DRAW=10, CO2_SCRUBRATE=5, LS_MODULE_CAP=10,
                         GENERAL_STORAGE=100, GAS_STORAGE=1000),
        ),
        RoomTemplate(
            "Cockpit",
            "A small module with a pilot's chair and the ship's controls.",
            RoomType.COCKPIT, 4, 3,
            stats=_stats(POWER_DRAW=7, GENERAL_STORAGE=50, GAS_STORAGE=250),
        ),
        RoomTemplate(
            "Corridor",
            "A place to walk and have Sorkin-esque conversations.",
            RoomType.CORRIDOR, 12, 4,
            resizable=True, min_width=6, max_width=15, min_height=3, max_height=5,
        ),
        RoomTemplate(
            "Engine Room - Small",
            "A small engine room, with small sub-light engines.",
            RoomType.ENGINE_SMALL, 3, 5,
            stats=_stats(SUBLIGHT_THRUST=10, SUBLIGHT_FUELUSE=2, SUBLIGHT_POWER=30,
                         POWER_GEN=10, GENERAL_STORAGE=1000, LIQUID_STORAGE=1000),
        ),
        RoomTemplate(
            "Engine Room - Medium",
            "A medium sized engine room, with decent sub-light engines.",
            RoomType.ENGINE_MEDIUM, 5, 8,
            stats=_stats(SUBLIGHT_THRUST=25, SUBLIGHT_FUELUSE=3, SUBLIGHT_POWER=50,
                         POWER_GEN=20, GENERAL_STORAGE=150, LIQUID_STORAGE=15000),
        ),
        RoomTemplate(
            "Engine Room - Large",
            "A large engine room, with both sub-light and FTL engines",
            RoomType.ENGINE_LARGE, 7, 9,
            stats=_stats(POWER_GEN=25, SUBLIGHT_THRUST=40, SUBLIGHT_FUELUSE=8,
                         SUBLIGHT_POWER=60, FTL_THRUST=500, FTL_FUELUSE=10, FTL_POWER=150,
                         GENERAL_STORAGE=20, LIQUID_STORAGE=20000),
        ),
        RoomTemplate(
            "Cargo Bay",
            "A module for storing large things, or many medium things, or lots and lots of small things.",
            RoomType.CARGOBAY, 8, 8,
            stats=_stats(POWER_DRAW=2, GENERAL_STORAGE=40, GAS_STORAGE=5000,
                         LIQUID_STORAGE=40000),
        ),
        RoomTemplate(
            "Crew Quarters",
            "A place for the crew to sleep and do other personal things ;)",
            RoomType.QUARTERS, 6, 6,
            stats=_stats(POWER_DRAW=4, GENERAL_STORAGE=25),
        ),
        RoomTemplate(
            "Common Area",
            "A central area for crew to congregate, work, and relax",
            RoomType.COMMONAREA, 9, 7,
            stats=_stats(POWER_DRAW=5, GENERAL_STORAGE=40),
        ),
        RoomTemplate(
            "Laboratory",
            "A module filled to the brim with beakers and titration tubes and microscopes and... small probes?",
            RoomType.LABORATORY, 7, 7,
            stats=_stats(POWER_DRAW=8, GENERAL_STORAGE=50, GAS_STORAGE=1000),
        ),
        RoomTemplate(
            "Medbay",
            "A room for doctors and their professional kin to heal the wounded.",
            RoomType.MEDBAY, 5, 5,
            stats=_stats(POWER_DRAW=8, GENERAL_STORAGE=100),
        ),
        RoomTemplate(
            "Laser Turret",
            "A bona-fide laser gun, for blowing up things with a laser.",
            RoomType.LASERTURRET, 3, 3,
            stats=_stats(POWER_DRAW=1),
        ),
    )
}


def new_room_from_template(template: RoomTemplate) -> Room:
    """Build a room at the template's default size."""
    return Room(
        template.name,
        template.room_type,
        template.width,
        template.height,
        description=template.description,
        stats=list(template.stats),
    )


def create_room_from_template(
    room_type: RoomType,
    rotate: bool = False,
    dims: tuple[int, int] | None = None,
) -> Room:
    """Build a room of a given type.

    For resizable rooms, dims (width, height) sets a custom size clamped to the
    template's limits; a zero in either slot keeps the default for that side.
    """
    template = ROOM_TEMPLATES[room_type]
    room = new_room_from_template(template)

    if template.resizable and dims is not None:
        width, height = dims
        room.width = (
            template.width if width == 0
            else min(max(width, template.min_width), template.max_width)
        )
        room.height = (
            template.height if height == 0
            else min(max(height, template.min_height), template.max_height)
        )
        room.rebuild_map()

    if rotate:
        room.rotate()

    return room