"""People: the player, crewmen and contacts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

DEFAULT_PIC = "res/art/scippie.xp"


class PersonType(Enum):
    PLAYER = auto()
    CREWMAN = auto()
    CONTACT = auto()


@dataclass
class Person:
    """Anyone with a name, a picture and a birth date in space time."""

    name: str = ""
    ptype: PersonType = PersonType.CONTACT
    pic: str = ""
    birth_date: int = 0
    race: str = ""

    @classmethod
    def contact(cls, name: str) -> Person:
        """Create a contact with the given name and the default picture."""
        return cls(name=name, ptype=PersonType.CONTACT, pic=DEFAULT_PIC)