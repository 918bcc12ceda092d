import random

import pytest

from spaceshippers.crew import Crewman
from spaceshippers.grid import Coord, Rect, TileType
from spaceshippers.location import Coordinates, CoordResolution, Location, LocationType
from spaceshippers.navigation import Course
from spaceshippers.roomtemplates import RoomType, create_room_from_template
from spaceshippers.ship import Ship


def make_ship():
    return Ship("Testy", None, rng=random.Random(4))


def two_room_ship():
    ship = make_ship()
    first = create_room_from_template(RoomType.QUARTERS)
    second = create_room_from_template(RoomType.QUARTERS)
    ship.add_room(Coord(0, 0), first)
    ship.add_room(Coord(first.width - 1, 0), second)
    return ship, first, second


def test_new_ship_defaults():
    ship = make_ship()
    assert ship.location_type is LocationType.SHIP
    assert ship.coords.resolution is CoordResolution.LOCAL
    assert ship.explored and ship.known
    assert ship.hull.value == 100
    assert ship.bounds() == Rect(0, 0, 0, 0)
    assert ship.speed() == 0


def test_adjacent_rooms_connect_with_door():
    ship, first, second = two_room_ship()
    assert second in first.connected
    assert first in second.connected
    column = first.width - 1
    doors = [y for y in range(first.height) if ship.ship_map.tile(Coord(column, y)) is TileType.DOOR]
    assert doors
    assert all(0 < y < first.height - 1 for y in doors)


def test_overlapping_room_rejected():
    ship, first, second = two_room_ship()
    extra = create_room_from_template(RoomType.MEDBAY)
    with pytest.raises(ValueError):
        ship.add_room(Coord(1, 1), extra)
    assert ship.rooms == [first, second]
    assert not ship.check_room_valid_add(extra)


def test_bounds_and_volume_cover_rooms():
    ship, first, second = two_room_ship()
    box = ship.bounds()
    for room in (first, second):
        b = room.bounds()
        assert box.contains(Coord(b.x, b.y))
        assert box.contains(Coord(b.x + b.w - 1, b.y + b.h - 1))
    assert ship.volume == sum((r.width - 2) * (r.height - 2) for r in (first, second))


def test_compile_stats_sets_engine_figures():
    ship = make_ship()
    ship.add_room(Coord(10, 10), create_room_from_template(RoomType.ENGINE_SMALL))
    assert ship.engine.thrust == 10.0
    assert ship.engine.fuel_use == 2.0


def test_remove_room_erases_and_walls_doors():
    ship, first, second = two_room_ship()
    ship.remove_room(second)
    assert ship.rooms == [first]
    assert first.connected == []
    column = first.width - 1
    assert all(ship.ship_map.tile(Coord(column, y)) is TileType.WALL for y in range(first.height))
    far = second.bounds()
    assert ship.ship_map.tile(Coord(far.x + far.w - 1, far.y + 2)) is TileType.NONE
    assert ship.bounds() == first.bounds()


def test_remove_unknown_room_is_ignored():
    ship, first, second = two_room_ship()
    ship.remove_room(create_room_from_template(RoomType.MEDBAY))
    assert ship.rooms == [first, second]


def test_room_at():
    ship, first, second = two_room_ship()
    assert ship.room_at(Coord(1, 1)) is first
    b = second.bounds()
    assert ship.room_at(Coord(b.x + b.w - 2, 1)) is second
    assert ship.room_at(Coord(90, 90)) is None


def test_add_crewman_places_on_floor():
    ship, first, second = two_room_ship()
    crewman = Crewman(rng=random.Random(2))
    ship.add_crewman(crewman)
    assert crewman.ship is ship
    assert ship.crew == [crewman]
    assert ship.ship_map.entity_at(crewman.position) is crewman
    assert ship.ship_map.tile(crewman.position).passable
    assert ship.room_at(crewman.position) in (first, second)


def test_add_crewman_without_rooms_fails():
    ship = make_ship()
    with pytest.raises(ValueError):
        ship.add_crewman(Crewman(rng=random.Random(2)))
    assert ship.crew == []


def test_setup_rebuilds_map_and_crew():
    ship, first, second = two_room_ship()
    crewman = Crewman(rng=random.Random(2))
    ship.add_crewman(crewman)
    galaxy = object()
    ship.setup(galaxy)
    assert ship.ship_map.entity_at(crewman.position) is crewman
    assert ship.navigation.galaxy is galaxy
    assert ship.ship_map.tile(Coord(1, 1)) is TileType.FLOOR


def test_set_course_local_starts_engines():
    ship = make_ship()
    target = Location(name="Buoy", coords=Coordinates.centered(CoordResolution.LOCAL))
    course = Course(distance=5.0)
    ship.set_course(target, course)
    assert ship.destination is target
    assert ship.navigation.current_course is course
    assert ship.engine.firing


def test_set_course_far_away_does_not_fire():
    ship = make_ship()
    target = Location(name="Far", coords=Coordinates.for_sector(1, 1))
    ship.set_course(target, Course())
    assert ship.destination is target
    assert not ship.engine.firing


def test_set_location_makes_local_coords():
    ship = make_ship()
    place = Location(name="Sector", coords=Coordinates.for_sector(3, 4))
    ship.set_location(place)
    assert ship.current_location is place
    assert ship.coords.sector == (3, 4)
    assert ship.coords.resolution is CoordResolution.LOCAL
    assert place.coords.resolution is CoordResolution.SECTOR


def test_speed_truncates():
    ship = make_ship()
    ship.velocity.r = 12.7
    assert ship.speed() == 12


def test_update_advances_crew():
    ship, first, second = two_room_ship()
    crewman = Crewman(rng=random.Random(2))
    ship.add_crewman(crewman)
    start = crewman.awakeness.value
    ship.update(1)
    assert crewman.awakeness.value == start - 1
    assert ship.coords == Coordinates.centered(CoordResolution.LOCAL)