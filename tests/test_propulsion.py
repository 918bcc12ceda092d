from dataclasses import dataclass, field
from types import SimpleNamespace

import pytest

from spaceshippers.events import EventBus, EventKind
from spaceshippers.item import StorageType
from spaceshippers.location import Coordinates, CoordResolution, Location, PolarVec
from spaceshippers.navigation import Course, CoursePhase
from spaceshippers.propulsion import PropulsionSystem
from spaceshippers.roomtemplates import StatType


class _Storage:
    def __init__(self, fuel):
        self.fuel = fuel
        self.removed = []

    def item_volume(self, name):
        return self.fuel if name == "Fuel" else 0.0

    def remove(self, item):
        self.removed.append(item)
        self.fuel -= item.volume


@dataclass
class _Ship:
    storage: _Storage
    phase: CoursePhase = CoursePhase.ACCEL
    coords: Coordinates = field(default_factory=lambda: Coordinates.centered(CoordResolution.LOCAL))
    velocity: PolarVec = field(default_factory=PolarVec)
    destination: object = None

    def __post_init__(self):
        self.navigation = SimpleNamespace(current_course=Course(phase=self.phase))


def make_engine(fuel=100.0, phase=CoursePhase.ACCEL, speed=0.0):
    bus = EventBus()
    seen = []
    bus.subscribe(seen.append)
    ship = _Ship(_Storage(fuel), phase=phase, velocity=PolarVec(speed, 0.0))
    ship.destination = Location(name="Dest")
    engine = PropulsionSystem(ship, events=bus)
    engine.stats = {StatType.SUBLIGHT_THRUST: 10, StatType.SUBLIGHT_FUELUSE: 2}
    engine.firing = True
    return engine, ship, seen


def test_new_engine_without_stats_has_no_thrust():
    engine = PropulsionSystem(_Ship(_Storage(0.0)))
    assert engine.thrust == 0.0
    assert engine.fuel_use == 0.0
    assert engine.firing is False


def test_engine_stats_come_from_stats():
    engine, _, _ = make_engine()
    engine.update_engine_stats()
    assert engine.thrust == 10.0
    assert engine.fuel_use == 2.0


def test_accelerating_burns_fuel():
    engine, ship, _ = make_engine()
    engine.update(0)
    assert ship.velocity.r == 10.0
    assert len(ship.storage.removed) == 1
    item = ship.storage.removed[0]
    assert item.name == "Fuel"
    assert item.volume == 2.0
    assert item.storage_type is StorageType.LIQUID


def test_braking_slows_ship():
    engine, ship, _ = make_engine(phase=CoursePhase.BRAKE, speed=50.0)
    engine.update(0)
    assert ship.velocity.r == 40.0
    assert ship.storage.fuel == 98.0


def test_coasting_keeps_speed_and_fuel():
    engine, ship, _ = make_engine(phase=CoursePhase.COAST, speed=50.0)
    engine.update(0)
    assert ship.velocity.r == 50.0
    assert ship.storage.removed == []


def test_running_out_of_fuel_stops_engine():
    engine, ship, seen = make_engine(fuel=1.0)
    engine.update(0)
    assert engine.firing is False
    assert ship.velocity.r == 0.0
    assert [e.payload for e in seen if e.kind is EventKind.LOG] == ["Out of fuel! What a catastrophe!"]


def test_not_firing_uses_no_fuel():
    engine, ship, _ = make_engine()
    engine.firing = False
    engine.update(0)
    assert ship.storage.removed == []
    assert ship.velocity.r == 0.0


def test_moving_ship_changes_coordinates():
    engine, ship, seen = make_engine(phase=CoursePhase.COAST, speed=10.0)
    before = ship.coords.local
    engine.update(0)
    assert ship.coords.local.x == pytest.approx(before.x + 10.0)
    assert ship.coords.local.y == pytest.approx(before.y)
    tags = [e.payload for e in seen if e.kind is EventKind.UPDATE_UI]
    assert tags == ["ship move", "ship status"]


def test_stationary_ship_sends_no_updates():
    engine, ship, seen = make_engine(phase=CoursePhase.COAST)
    before = ship.coords.local
    engine.update(0)
    assert ship.coords.local == before
    assert seen == []