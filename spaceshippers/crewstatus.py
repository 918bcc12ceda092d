"""Crew statuses and the effects they cause.

A status (such as a low-oxygen environment) causes one or more effects
(such as heavy breathing); an effect can have several status sources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class EffectID(Enum):
    HEAVYBREATHING = auto()
    SUFFOCATING = auto()
    DISORIENTED = auto()
    SLOW = auto()
    POISONED = auto()


class StatusID(Enum):
    LOWOXYGEN = auto()
    NOOXYGEN = auto()
    HIGHCO2 = auto()
    CO2_POISONING = auto()
    SLEEPY = auto()


_EFFECTS: dict[EffectID, tuple[str, str, str]] = {
    EffectID.HEAVYBREATHING: (
        "Breathing Heavily",
        "Crewman is breathing heavily, trying to catch their breath.",
        "BREATHE",
    ),
    EffectID.SUFFOCATING: (
        "Suffocating",
        "Crewman can't breathe! Get them some air!!!.",
        "SUFF",
    ),
    EffectID.DISORIENTED: (
        "Disoriented",
        "Crewman feels a bit woozy. It's so hard to focus sometimes, you know?",
        "DIZZY",
    ),
    EffectID.SLOW: (
        "Slowed",
        "Crewman is moving slowly, and won't be rushed.",
        "SLOW",
    ),
    EffectID.POISONED: (
        "Poisoned",
        "Crewman is poisoned, and is losing life.",
        "POISON",
    ),
}


@dataclass
class CrewEffect:
    """A buff or debuff on a crewman, tracking its sources and duration."""

    name: str
    description: str
    abbreviation: str
    sources: dict[StatusID, int] = field(default_factory=dict)
    duration: int = 0

    @classmethod
    def for_id(cls, effect: EffectID) -> CrewEffect:
        name, description, abbreviation = _EFFECTS[effect]
        return cls(name, description, abbreviation)

    def add_source(self, status: StatusID) -> None:
        """Add a source status; a source already present is left alone."""
        self.sources.setdefault(status, 0)

    def remove_source(self, status: StatusID) -> None:
        self.sources.pop(status, None)

    def update(self) -> None:
        """Advance one tick: every source and the effect itself age by one."""
        for status in self.sources:
            self.sources[status] += 1
        self.duration += 1


@dataclass(frozen=True)
class CrewStatus:
    """A condition affecting a crewman, and the effects it brings."""

    name: str
    description: str
    effects: tuple[EffectID, ...] = ()
    replaces: tuple[StatusID, ...] = ()

    @classmethod
    def for_id(cls, status: StatusID) -> CrewStatus:
        return _STATUSES[status]


_STATUSES: dict[StatusID, CrewStatus] = {
    StatusID.LOWOXYGEN: CrewStatus(
        "Low Oxygen Environment",
        "The Crewman is breathing air with too little oxygen. While not fatal, it makes everything harder.",
        (EffectID.HEAVYBREATHING, EffectID.DISORIENTED, EffectID.SLOW),
        (StatusID.NOOXYGEN,),
    ),
    StatusID.NOOXYGEN: CrewStatus(
        "No Oxygen Environment",
        "The Crewman is breathing air with almost no oxygen! Uh oh!",
        (EffectID.HEAVYBREATHING, EffectID.DISORIENTED, EffectID.SLOW, EffectID.SUFFOCATING),
        (StatusID.LOWOXYGEN,),
    ),
    StatusID.HIGHCO2: CrewStatus(
        "High CO2 Levels",
        "The Crewman has breathed air with too much carbon dioxide. "
        "Eventually leads to CO2 poisoning, which is bad.",
        (EffectID.SLOW,),
    ),
    StatusID.CO2_POISONING: CrewStatus(
        "Carbon Dioxide Poisoning",
        "The Crewman has respirated a fatal amount of CO2 and is dying!",
        (EffectID.HEAVYBREATHING, EffectID.DISORIENTED, EffectID.POISONED),
    ),
    StatusID.SLEEPY: CrewStatus(
        "Sleepy",
        "The Crewman needs his night-night.",
        (EffectID.SLOW,),
    ),
}