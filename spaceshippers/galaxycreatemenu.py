"""Settings for creating a galaxy, with explanations, randomizing and previews."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from .comms import HOUR
from .crew import CYCLE, DAY
from .galaxy import (
    GAL_DENSE,
    GAL_MAX_RADIUS,
    GAL_MIN_RADIUS,
    GAL_NORMAL,
    GAL_SPARSE,
    Galaxy,
)

START_TIME = 50 * CYCLE + 80 * DAY + 8 * HOUR

RANDOM_NAMES = (
    "The Biggest Galaxy",
    "The Galaxy of Terror",
    "The Lactose Blob",
    "The Thing Fulla Stars",
    "Andromeda 2",
    "Home",
)

NAME_REQUIRED = "You must give your galaxy a name before you can continue!"


class Density(Enum):
    SPARSE = GAL_SPARSE
    NORMAL = GAL_NORMAL
    DENSE = GAL_DENSE


class Shape(Enum):
    DISK = auto()
    SPIRAL = auto()


class Size(Enum):
    SMALL = GAL_MIN_RADIUS
    MEDIUM = GAL_MIN_RADIUS + (GAL_MAX_RADIUS - GAL_MIN_RADIUS) // 2
    LARGE = GAL_MAX_RADIUS


class SettingsField(Enum):
    NAME = auto()
    DENSITY = auto()
    SHAPE = auto()
    SIZE = auto()
    RANDOMIZE = auto()
    GENERATE = auto()
    CANCEL = auto()


_EXPLANATIONS = {
    SettingsField.NAME: "GALAXY NAME:\n\nIt is believed that one of the main ways in which all sentient races of the galaxy are similar is a common desire to name and label the universe. No Galaxy is complete without a name!",
    SettingsField.DENSITY: "GALAXY DENSITY:\n\nGalaxies come in all shapes, sizes and consistencies. Some are small and dense, with stars but a stone's throw away from each. Others have stars so spread out that many sentient species decide to never even attempt inter-system travel, instead deciding to focus efforts on art and philosophy and creating better and better tofu-based meat substitutes.",
    SettingsField.SHAPE: "GALAXY SHAPE:\n\nGalaxies, like cookies, come in many different shapes. Some are globular, some are spirals, some are simple disks, and during certain times of year some are shaped like Christmas trees. (Note: currently only disk galaxies are created).",
    SettingsField.SIZE: "GALAXY SIZE:\n\nAll people need to live in a galaxy, even the very tall. Choose the largest galaxy you can afford to.",
    SettingsField.RANDOMIZE: "RANDOMIZE:\n\nIndecisive? Stunned by the marvelous array of choices before you? Let me do the work!",
    SettingsField.GENERATE: "GENERATE:\n\n If this galaxy looks good, we can then generate the galaxy and move on to Ship Selection.",
    SettingsField.CANCEL: "CANCEL:\n\n Return to the main menu, discarding everything here.",
}


@dataclass
class GalaxySettings:
    """The choices made when creating a galaxy, and the galaxy they preview."""

    name: str = ""
    density: Density = Density.SPARSE
    shape: Shape = Shape.DISK
    size: Size = Size.SMALL
    galaxy: Galaxy | None = None

    def explanation(self, field: SettingsField) -> str:
        """Help text for one of the settings or actions."""
        return _EXPLANATIONS[field]

    def randomize(self, rng: random.Random | None = None) -> Galaxy:
        """Pick a random name and random choices, then preview the result."""
        rng = rng or random.Random()
        self.name = rng.choice(RANDOM_NAMES)
        self.density = rng.choice(list(Density))
        self.shape = rng.choice(list(Shape))
        self.size = rng.choice(list(Size))
        return self.preview(rng)

    def preview(self, rng: random.Random | None = None) -> Galaxy:
        """Build a galaxy from the current settings and keep it."""
        self.galaxy = Galaxy(
            self.name, self.size.value, self.density.value, rng=rng, space_time=START_TIME
        )
        return self.galaxy

    def generate(self) -> Galaxy:
        """The galaxy to play in. Raises ValueError if it has no name."""
        if not self.name:
            raise ValueError(NAME_REQUIRED)
        if self.galaxy is None:
            self.preview()
        self.galaxy.name = self.name
        return self.galaxy