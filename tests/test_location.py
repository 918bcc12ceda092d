import dataclasses
import math

import pytest

from spaceshippers.location import (
    LOCAL_MAX,
    LY_PER_SECTOR,
    METERS_PER_LY,
    SECTOR_MAX,
    STARSYSTEM_MAX,
    SUBSECTOR_MAX,
    Coordinates,
    CoordResolution,
    Location,
    LocationType,
    PolarVec,
    Vec2,
)


def test_centered_is_in_middle():
    c = Coordinates.centered(CoordResolution.LOCAL)
    assert c.sector == (SECTOR_MAX // 2, SECTOR_MAX // 2)
    assert c.sub_sector == (SUBSECTOR_MAX // 2, SUBSECTOR_MAX // 2)
    assert c.star_coord == (STARSYSTEM_MAX // 2, STARSYSTEM_MAX // 2)
    assert c.local == Vec2(LOCAL_MAX / 2, LOCAL_MAX / 2)
    assert c.resolution is CoordResolution.LOCAL


def test_for_sector():
    c = Coordinates.for_sector(3, 7)
    assert c.sector == (3, 7)
    assert c.resolution is CoordResolution.SECTOR
    assert c.coord_strings() == ("3", "7")


def test_coord_strings_subsector_has_two_parts():
    c = Coordinates.centered(CoordResolution.SUBSECTOR)
    xs, ys = c.coord_strings()
    assert xs.split(":") == [str(c.sector[0]), str(c.sub_sector[0])]
    assert len(ys.split(":")) == 2


def test_coord_strings_local_are_base36():
    c = Coordinates.centered(CoordResolution.LOCAL)
    xs, _ = c.coord_strings()
    parts = xs.split(":")
    assert len(parts) == 4
    assert int(parts[2], 36) == c.star_coord[0]
    assert int(parts[3], 36) == int(c.local.x)


def test_move_ignored_above_resolution():
    c = Coordinates.for_sector(3, 3)
    c.move(1, 1, CoordResolution.SUBSECTOR)
    assert c.sub_sector == Coordinates.for_sector(3, 3).sub_sector


def test_move_sector_clamps():
    c = Coordinates.for_sector(0, SECTOR_MAX - 1)
    c.move(-1, 1, CoordResolution.SECTOR)
    assert c.sector == (0, SECTOR_MAX - 1)


def test_subsector_overflow_carries_to_sector():
    c = Coordinates.centered(CoordResolution.SUBSECTOR)
    before = dataclasses.replace(c)
    c.move(SUBSECTOR_MAX, 0, CoordResolution.SUBSECTOR)
    assert c.sector == (before.sector[0] + 1, before.sector[1])
    assert c.sub_sector == before.sub_sector


def test_move_local_keeps_fraction():
    c = Coordinates.centered(CoordResolution.LOCAL)
    c.move_local(1.5, 0)
    assert c.local.x == pytest.approx(LOCAL_MAX / 2 + 1.5)
    assert c.local.y == LOCAL_MAX / 2


def test_move_local_wraps_into_next_star_coord():
    c = Coordinates.centered(CoordResolution.LOCAL)
    c.local = Vec2(LOCAL_MAX - 1, 0.0)
    before_star = c.star_coord
    c.move_local(1, 0)
    assert c.local.x == 0
    assert c.star_coord == (before_star[0] + 1, before_star[1])


def test_move_local_wraps_backwards():
    c = Coordinates.centered(CoordResolution.LOCAL)
    c.local = Vec2(0.0, 0.0)
    before_star = c.star_coord
    c.move_local(-1, 0)
    assert c.local.x == int(LOCAL_MAX) - 1
    assert c.star_coord == (before_star[0] - 1, before_star[1])


def test_calc_vector_same_point_is_zero():
    c = Coordinates.centered(CoordResolution.LOCAL)
    assert c.calc_vector(c).distance == 0


def test_calc_vector_sector_distance():
    a = Coordinates.for_sector(0, 0)
    b = Coordinates.for_sector(3, 4)
    vec = a.calc_vector(b)
    assert vec.sector == (3, 4)
    assert vec.distance == pytest.approx(5 * LY_PER_SECTOR)


def test_calc_vector_is_symmetric():
    a = Coordinates.centered(CoordResolution.LOCAL)
    b = dataclasses.replace(a)
    b.move(3, -2, CoordResolution.STARSYSTEM)
    b.move_local(1e9, 2e9)
    assert a.calc_vector(b).distance == pytest.approx(b.calc_vector(a).distance)


def test_is_in_none_is_false():
    assert Coordinates.centered(CoordResolution.LOCAL).is_in(None) is False


def test_is_in_sector():
    sector = Location(name="S", coords=Coordinates.for_sector(12, 12))
    inside = Coordinates.centered(CoordResolution.LOCAL)
    outside = Coordinates.for_sector(1, 1)
    assert inside.is_in(sector)
    assert not outside.is_in(sector)


def test_is_in_finer_location_from_coarse_point_is_false():
    local_place = Location(coords=Coordinates.centered(CoordResolution.LOCAL), visit_distance=1e6)
    coarse = Coordinates.centered(CoordResolution.SECTOR)
    assert not coarse.is_in(local_place)


def test_is_in_local_uses_visit_distance():
    planet = Location(
        name="P",
        location_type=LocationType.PLANET,
        coords=Coordinates.centered(CoordResolution.LOCAL),
        visit_distance=1e6,
    )
    near = dataclasses.replace(planet.coords)
    near.move_local(1000, 0)
    far = dataclasses.replace(planet.coords)
    far.move_local(2e6, 0)
    assert near.is_in(planet)
    assert not far.is_in(planet)


def test_location_type_str():
    planet = Location(name="P", location_type=LocationType.PLANET)
    nowhere = Location(name="N")
    assert str(planet.location_type) == "Planet"
    assert str(nowhere.location_type) == "No location!"


def test_location_flags_and_locations():
    loc = Location(name="Somewhere")
    loc.set_explored()
    loc.set_known()
    assert loc.explored and loc.known
    assert loc.locations() == [loc]


def test_vec2_polar_round_trip():
    v = Vec2(3.0, -7.0)
    back = v.to_polar().to_rect()
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)
    assert v.to_polar().r == pytest.approx(v.mag())


def test_polar_zero_rect_is_falsy():
    assert not PolarVec(0.0, math.pi / 3).to_rect()
    assert PolarVec(1.0, 0.0).to_rect()


def test_centered_local_is_half_a_thousandth_light_year():
    c = Coordinates.centered(CoordResolution.LOCAL)
    assert c.local.x * 2 == pytest.approx(METERS_PER_LY / 1000)
    assert c.local.y * 2 == pytest.approx(METERS_PER_LY / 1000)