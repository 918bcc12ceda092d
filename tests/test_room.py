import pytest

from spaceshippers.gas import GasType
from spaceshippers.grid import Coord, TileType
from spaceshippers.room import Room


def _tiles(room, kind):
    return [c for c in room.room_map.bounds.coords() if room.room_map.tile(c) is kind]


def test_new_room_layout():
    room = Room("Box", None, 5, 6)
    area = room.room_map.bounds
    for c in area.coords():
        expected = TileType.WALL if area.on_perimeter(c) else TileType.FLOOR
        assert room.room_map.tile(c) is expected
    assert room.description == "a room"


def test_atmosphere_is_standard_and_sized_to_room():
    room = Room("Box", None, 6, 7)
    assert room.atmo.volume == room.volume() * 1000
    assert room.atmo.pressure() == pytest.approx(101)
    assert room.atmo.partial_pressure(GasType.O2) == pytest.approx(21)


def test_volume_grows_with_size():
    assert Room("a", None, 6, 6).volume() > Room("b", None, 5, 5).volume()
    assert Room("c", None, 2, 9).volume() == 0


def test_rotate_swaps_dimensions():
    room = Room("Box", None, 4, 7)
    room.rotate()
    assert room.size() == (7, 4)
    assert room.rotated
    assert room.room_map.width == 7
    room.rotate()
    assert room.size() == (4, 7)
    assert not room.rotated


def test_bounds_follow_position():
    room = Room("Box", None, 4, 3, pos=Coord(10, 20))
    b = room.bounds()
    assert b.pos == room.pos
    assert b.size == room.size()


def test_connection_puts_single_door_on_shared_wall():
    a = Room("A", None, 5, 5)
    b = Room("B", None, 5, 5, pos=Coord(4, 0))
    a.add_connection(b)
    b.add_connection(a)
    assert a.connected == [b]
    doors_a = _tiles(a, TileType.DOOR)
    doors_b = _tiles(b, TileType.DOOR)
    assert len(doors_a) == 1 and len(doors_b) == 1
    assert doors_a[0].x == a.width - 1
    assert doors_b[0].x == 0
    assert doors_a[0] + a.pos == doors_b[0] + b.pos


def test_even_wall_gets_two_doors():
    a = Room("A", None, 6, 5)
    b = Room("B", None, 6, 5, pos=Coord(0, 4))
    a.add_connection(b)
    doors = _tiles(a, TileType.DOOR)
    assert len(doors) == 2
    assert all(d.y == a.height - 1 for d in doors)


def test_connection_ignores_self_duplicates_and_overlaps():
    a = Room("A", None, 5, 5)
    a.add_connection(a)
    assert a.connected == []
    b = Room("B", None, 5, 5, pos=Coord(4, 0))
    a.add_connection(b)
    a.add_connection(b)
    assert a.connected == [b]
    c = Room("C", None, 5, 5, pos=Coord(2, 2))
    a.add_connection(c)
    assert c not in a.connected


def test_remove_connection_restores_wall():
    a = Room("A", None, 5, 5)
    b = Room("B", None, 5, 5, pos=Coord(4, 0))
    a.add_connection(b)
    a.remove_connection(b)
    assert a.connected == []
    assert _tiles(a, TileType.DOOR) == []


def test_remove_unconnected_raises():
    a = Room("A", None, 5, 5)
    with pytest.raises(ValueError):
        a.remove_connection(Room("B", None, 5, 5))


def test_status_text():
    assert Room("Galley", None, 5, 5).status() == "Galley: Status OKAY FOR NOW"


def test_update_leaves_room_unchanged():
    room = Room("Box", None, 5, 5)
    before = room.atmo.pressure()
    room.update(100)
    assert room.atmo.pressure() == before
    assert room.size() == (5, 5)