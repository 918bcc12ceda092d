"""Crewmen: their vital stats, breathing, jobs, statuses and effects."""

from __future__ import annotations

import random
from typing import Any, Callable

from .comms import HOUR
from .crewstatus import CrewEffect, CrewStatus, EffectID, StatusID
from .events import EventBus
from .gas import GasType
from .grid import Coord, random_direction
from .person import DEFAULT_PIC, Person, PersonType

DAY = 24 * HOUR
CYCLE = 365 * DAY

SLEEP = "Sleep"

FIRST_NAMES = (
    "Armund", "Bort", "Chet", "Danzig", "Elton", "Francine", "Geralt", "Hooper",
    "Ingrid", "Jassy", "Klepta", "Liam", "Mumpy", "Ninklas", "Oliver", "Pernissa",
    "Quentin", "Rosalinda", "Shlupp", "Timmy", "Ursula", "Vivica", "Wendel",
    "Xavier", "Yuppie", "Zelda",
)
LAST_NAMES = (
    "Andleman", "Bunchlo", "Cogsworth", "Doofer", "Encelada", "Fink", "Gusto",
    "Humber", "Illiamson", "Jasprex", "Klefbom", "Lorax", "Munkleberg", "Ning",
    "Olberson", "Pinzip", "Quaker", "Ruffsborg", "Shlemko", "Thrace", "Undergarb",
    "Von Satan", "White", "Xom", "Yillian", "Zaphod",
)


class Stat:
    """An integer value kept between 0 and a maximum."""

    def __init__(self, maximum: int, value: int | None = None) -> None:
        if maximum <= 0:
            raise ValueError("a stat's maximum must be positive")
        self.maximum = maximum
        self.value = maximum
        if value is not None:
            self.set(value)

    def set(self, value: int) -> None:
        self.value = min(max(value, 0), self.maximum)

    def mod(self, delta: int) -> None:
        self.set(self.value + delta)

    def pct(self) -> int:
        """The value as a whole percentage of the maximum."""
        return self.value * 100 // self.maximum

    def is_max(self) -> bool:
        return self.value == self.maximum

    def __repr__(self) -> str:
        return f"Stat({self.value}/{self.maximum})"


JobHook = Callable[["Job"], None]


class Job:
    """A task a crewman works on; hooks run on each tick and when interrupted."""

    def __init__(
        self,
        name: str,
        on_tick: JobHook | None = None,
        on_interrupt: JobHook | None = None,
    ) -> None:
        self.name = name
        self.worker: Any = None
        self._on_tick = on_tick
        self._on_interrupt = on_interrupt

    def set_worker(self, worker: Any) -> None:
        self.worker = worker

    def on_tick(self) -> None:
        if self._on_tick is not None:
            self._on_tick(self)

    def on_interrupt(self) -> None:
        if self._on_interrupt is not None:
            self._on_interrupt(self)


def _sleep_job() -> Job:
    return Job(SLEEP)


class Crewman(Person):
    """A member of the crew, living (or not) aboard a ship."""

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(self, rng: random.Random | None = None, events: EventBus | None = None) -> None:
        self._rng = rng or random.Random()
        super().__init__(
            name="",
            ptype=PersonType.CREWMAN,
            pic=DEFAULT_PIC,
            birth_date=self._rng.randrange(30 * CYCLE),
            race="Human",
        )
        self.events = events
        self.position = Coord()
        self.updated = False
        self.hp = Stat(100)
        self.awakeness = Stat((self._rng.randrange(4) + 7) * HOUR)
        self.co2 = Stat(1_000_000, 0)
        self.dead = False
        self.current_task: Job | None = None
        self.statuses: dict[StatusID, CrewStatus] = {}
        self.effects: dict[EffectID, CrewEffect] = {}
        self.ship: Any = None
        self.randomize_name()

    def _log(self, message: str) -> None:
        if self.events is not None:
            self.events.fire_log(message)

    def randomize_name(self) -> None:
        self.name = f"{self._rng.choice(FIRST_NAMES)} {self._rng.choice(LAST_NAMES)}"

    def colour(self) -> str:
        """Foreground colour for drawing: red when dead, yellow when asleep."""
        if self.dead:
            return "red"
        if not self.is_awake():
            return "yellow"
        return "white"

    def update(self, space_time: int) -> None:
        """Advance one tick of life aboard the ship."""
        if self.dead:
            return

        if space_time % 5 == 0:
            self.breathe()

        if self.is_awake():
            self.awakeness.mod(-1)
            self.updated = True
            if self.awakeness.pct() < 10:
                self.add_status(StatusID.SLEEPY)
            if self.awakeness.value == 0:
                self.consume_job(_sleep_job())
            if space_time % 20 == 0:
                self._wander()

        if self.current_task is not None:
            self.current_task.on_tick()

        if self.co2.pct() > 20:
            self.add_status(StatusID.HIGHCO2)
            if self.co2.is_max():
                self.add_status(StatusID.CO2_POISONING)

        self.handle_effects(space_time)

        if self.hp.value == 0:
            self.dead = True
            if self.current_task is not None:
                self.current_task.on_interrupt()
                self.current_task = None
            self._log(self.name + " has died! :(")

    def _wander(self) -> None:
        if self.ship is None:
            return
        ship_map = self.ship.ship_map
        if ship_map.entity_at(self.position) is not self:
            return
        target = self.position.step(random_direction(self._rng))
        if ship_map.tile(target).passable and ship_map.entity_at(target) is None:
            ship_map.move_entity(self.position, target)

    def breathe(self) -> None:
        """Take a breath from the room's air, trading oxygen for carbon dioxide."""
        if self.ship is None:
            raise RuntimeError(f"no ship associated with crewman {self.name}")

        room = self.ship.room_at(self.position)
        if room is None:
            return

        volume = 0.7 if self.has_effect(EffectID.HEAVYBREATHING) else 0.35
        if not self.is_awake():
            volume /= 2

        breath = room.atmo.remove_volume(volume)

        co2 = breath.partial_pressure(GasType.CO2)
        if co2 > 7:
            self.co2.mod(10000)
        elif co2 > 5:
            self.co2.mod(55)
        elif co2 > 3:
            self.co2.mod(4)
        elif co2 > 1:
            if self.co2.pct() < 50:
                self.co2.mod(1)
        else:
            self.co2.mod(-10)

        o2 = breath.partial_pressure(GasType.O2)
        if o2 < 5:
            intake = breath.molar_value(GasType.O2)
            self.add_status(StatusID.NOOXYGEN)
        elif o2 < 15:
            intake = 4 * breath.volume
            self.add_status(StatusID.LOWOXYGEN)
        else:
            intake = 6 * breath.volume

        breath.remove_gas(GasType.O2, intake)
        breath.add_gas(GasType.CO2, intake)
        room.atmo.add_mixture(breath)

    def is_awake(self) -> bool:
        return not (self.current_task is not None and self.current_task.name == SLEEP)

    def consume_job(self, job: Job) -> None:
        """Drop the current job (interrupting it) and take up another."""
        if self.current_task is not None:
            self.current_task.on_interrupt()
        self.current_task = job
        job.set_worker(self)

    def has_effect(self, effect: EffectID) -> bool:
        return effect in self.effects

    def has_status(self, status: StatusID) -> bool:
        return status in self.statuses

    def add_status(self, status: StatusID) -> None:
        """Add a status with its effects, removing any statuses it replaces."""
        if self.has_status(status):
            return
        crew_status = CrewStatus.for_id(status)
        self.statuses[status] = crew_status
        self.updated = True
        for effect in crew_status.effects:
            self.add_effect(effect, status)
        for replaced in crew_status.replaces:
            self.remove_status(replaced)

    def remove_status(self, status: StatusID) -> None:
        """Remove a status; effects left with no source go too."""
        crew_status = self.statuses.pop(status, None)
        if crew_status is None:
            return
        self.updated = True
        for effect_id in crew_status.effects:
            effect = self.effects.get(effect_id)
            if effect is None:
                continue
            effect.remove_source(status)
            if not effect.sources:
                del self.effects[effect_id]

    def add_effect(self, effect: EffectID, status: StatusID) -> None:
        crew_effect = self.effects.get(effect)
        if crew_effect is None:
            crew_effect = CrewEffect.for_id(effect)
            self.effects[effect] = crew_effect
        crew_effect.add_source(status)
        self.updated = True

    def handle_effects(self, space_time: int) -> None:
        """Age every effect by a tick and apply what it does."""
        for effect_id, effect in list(self.effects.items()):
            effect.update()
            if effect_id is EffectID.SUFFOCATING:
                if effect.duration > 120:
                    if self.is_awake():
                        self.consume_job(_sleep_job())
                        self._log(self.name + " passed out!")
                    self.awakeness.set(0)
                    self.hp.mod(-1)
            elif effect_id is EffectID.POISONED:
                for source in effect.sources:
                    if source is StatusID.CO2_POISONING and space_time % 10 == 0:
                        self.hp.mod(-1)