"""Course planning and following for a ship's sub-light travel."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .events import EventBus
from .location import METERS_PER_LY, Locatable, Vec2


def _round(value: float) -> int:
    return math.floor(value + 0.5)


class CoursePhase(Enum):
    ACCEL = auto()
    COAST = auto()
    BRAKE = auto()


@dataclass
class Course:
    """A plan: accelerate, coast, then brake. Times are in ticks, distance in metres."""

    fuel_use: float = 0.0
    total_time: int = 0
    start_time: int = 0
    start_pos: Vec2 = field(default_factory=Vec2)
    accel_time: int = 0
    brake_time: int = 0
    arrival_time: int = 0
    distance: float = 0.0
    phase: CoursePhase = CoursePhase.ACCEL
    done: bool = False


class NavigationSystem:
    """Steers the ship along its course and notices arrivals."""

    def __init__(self, ship: Any, galaxy: Any, events: EventBus | None = None) -> None:
        self.ship = ship
        self.galaxy = galaxy
        self.events = events
        self.stats: dict = {}
        self.current_course = Course()

    def update(self, tick: int) -> None:
        ship = self.ship
        course = self.current_course

        if ship.engine.firing and ship.destination is not None:
            target = ship.coords.calc_vector(ship.destination.coords).local.to_polar()
            ship.velocity.phi = target.phi

            if course.phase is CoursePhase.ACCEL:
                if tick > course.accel_time:
                    course.phase = CoursePhase.BRAKE if tick > course.brake_time else CoursePhase.COAST
            elif course.phase is CoursePhase.COAST:
                if tick > course.brake_time:
                    course.phase = CoursePhase.BRAKE

        if ship.speed() > 0:
            if not ship.coords.is_in(ship.current_location):
                ship.current_location = self.galaxy.location(ship.coords)

            if ship.coords.is_in(ship.destination):
                ship.current_location = ship.destination
                if ship.velocity.r < ship.destination.visit_speed:
                    ship.destination = None
                    ship.velocity.r = 0
                    ship.engine.firing = False
                    course.done = True
                    if self.events is not None:
                        self.events.fire_log("We have arrived at " + ship.current_location.name)

    def current_progress(self) -> int:
        """Percentage of the current course completed; 0 with no destination."""
        ship = self.ship
        if ship.destination is None:
            return 0
        remaining = ship.coords.calc_vector(ship.destination.coords).distance * METERS_PER_LY
        total = self.current_course.distance
        return _round((total - remaining) / total * 100)

    def compute_straight_course(
        self, final_speed: float, burn_time: float, distance: float
    ) -> tuple[int, int, int]:
        """Accelerate, coast and brake times for a straight run, limited by burn time."""
        v_f = final_speed
        v_i = self.ship.velocity.r
        thrust = self.ship.engine.thrust

        coast = 0.0
        if burn_time < self.calc_max_burn_time(v_f, distance):
            coast = (
                2 * distance
                + (v_f * v_f + v_i * v_i) / (2 * thrust)
                - v_f * v_i / thrust
                - burn_time * (v_f + v_i)
                - thrust * burn_time * burn_time / 2
            ) / (v_f + v_i + thrust * burn_time)

        root = math.sqrt(
            (v_f * v_f + v_i * v_i) / 2 + thrust * thrust * coast * coast / 4 + thrust * distance
        ) / thrust
        brake = _round(root - v_f / thrust - coast / 2)
        accel = _round(root - v_i / thrust - coast / 2)
        return accel, _round(coast), brake

    def calc_max_burn_time(self, final_speed: float, distance: float) -> float:
        """Burn time of a course that never coasts."""
        v_i = self.ship.velocity.r
        thrust = self.ship.engine.thrust
        return (
            2 * math.sqrt((final_speed * final_speed + v_i * v_i) / 2 + thrust * distance) / thrust
            - (final_speed + v_i) / thrust
        )

    def calc_min_burn_time(self, final_speed: float) -> float:
        """Burn needed to brake down to final_speed; 0 if already slower."""
        speed = self.ship.velocity.r
        if final_speed > speed:
            return 0.0
        return (speed - final_speed) / self.ship.engine.thrust * float(self.ship.engine.fuel_use)

    def compute_course(self, destination: Locatable, fuel_to_use: float, tick: int) -> Course:
        """Plan a course to a destination using a given amount of fuel."""
        engine = self.ship.engine
        burn = fuel_to_use / engine.fuel_use
        distance = (
            self.ship.coords.calc_vector(destination.coords).local.mag() + destination.visit_distance
        )
        accel, coast, brake = self.compute_straight_course(destination.visit_speed, burn, distance)

        course = Course(start_time=tick)
        course.accel_time = tick + accel
        course.brake_time = course.accel_time + coast
        course.total_time = accel + coast + brake
        course.fuel_use = float(accel + brake) * engine.fuel_use
        course.arrival_time = tick + course.total_time
        course.distance = distance
        return course