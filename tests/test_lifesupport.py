from types import SimpleNamespace

from spaceshippers.gas import GasType
from spaceshippers.lifesupport import LifeSupportSystem
from spaceshippers.room import Room


def make_system(*rooms):
    return LifeSupportSystem(SimpleNamespace(rooms=list(rooms)))


def test_targets_are_standard_atmosphere():
    room = Room("Air", None, 5, 5)
    lss = make_system(room)
    assert lss.target_pressure == room.atmo.pressure()
    assert lss.target_o2 == room.atmo.partial_pressure(GasType.O2)
    assert lss.target_temp == room.atmo.temp
    assert lss.target_co2 == 0


def test_fresh_rooms_need_no_scrubbing():
    lss = make_system(Room("A", None, 5, 5), Room("B", None, 4, 4))
    assert lss.rooms_needing_scrubbing() == []


def test_room_with_co2_needs_scrubbing():
    clean = Room("Clean", None, 5, 5)
    stale = Room("Stale", None, 5, 5)
    stale.atmo.add_gas(GasType.CO2, 100.0)
    lss = make_system(clean, stale)
    assert lss.rooms_needing_scrubbing() == [stale]


def test_update_records_rooms_to_scrub():
    stale = Room("Stale", None, 6, 6)
    lss = make_system(stale)
    lss.update(0)
    assert lss.rooms_to_scrub == []
    stale.atmo.add_gas(GasType.CO2, 10.0)
    lss.update(1)
    assert lss.rooms_to_scrub == [stale]