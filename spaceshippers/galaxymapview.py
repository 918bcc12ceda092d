"""A map view of the galaxy, with a local view of a star system."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

from .grid import Coord, Rect
from .location import METERS_PER_LY

LOCAL_MAX = METERS_PER_LY / 1000
MAX_LOCAL_ZOOM = 7

GLYPH_NONE = " "
GLYPH_FILL_SPARSE = "\u2591"
GLYPH_PERIOD = "."
GLYPH_OBJECT = "*"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
ORBIT_COLOUR = (0x11, 0x44, 0x11)


class ZoomLevel(Enum):
    GALAXY = auto()
    LOCAL = auto()


@dataclass(frozen=True)
class Cell:
    """What is drawn at one map position; ``source`` is the object drawn, if any."""

    glyph: str
    fore: tuple[int, int, int]
    back: tuple[int, int, int] = BLACK
    source: Any = None


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _circle_points(center: Coord, radius: int) -> Iterator[Coord]:
    if radius <= 0:
        yield center
        return
    x, y, err = radius, 0, 1 - radius
    while x >= y:
        for dx, dy in ((x, y), (y, x), (-y, x), (-x, y), (-x, -y), (-y, -x), (y, -x), (x, -y)):
            yield Coord(center.x + dx, center.y + dy)
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1


class GalaxyMapView:
    """A view of the galaxy map with a cursor and zoom into a star system."""

    def __init__(self, width: int, height: int, galaxy: Any = None) -> None:
        self.width = width
        self.height = height
        self.galaxy = galaxy
        self.cursor = Coord()
        self.highlight_pos = Coord()
        self.highlight_playing = False
        self.zoom = ZoomLevel.GALAXY
        self.local_zoom = 0
        self.local_focus: Any = None
        self.system_focus: Any = None
        self.updated = False

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def zoom_in(self) -> None:
        """Zoom from the galaxy into the local view, then further, up to a limit."""
        if self.zoom is ZoomLevel.GALAXY:
            self.zoom = ZoomLevel.LOCAL
            self.updated = True
            self.toggle_highlight()
        elif self.local_zoom < MAX_LOCAL_ZOOM:
            self.local_zoom += 1
            self.updated = True

    def zoom_out(self) -> None:
        """Zoom out of the local view, returning to the galaxy at the widest zoom."""
        if self.zoom is not ZoomLevel.LOCAL:
            return
        if self.local_zoom == 0:
            self.zoom = ZoomLevel.GALAXY
            self.toggle_highlight()
        else:
            self.local_zoom -= 1
        self.updated = True

    def local_zoom_factor(self) -> float:
        """Metres per map cell in the local view."""
        return LOCAL_MAX / self.width / 2 ** self.local_zoom

    def _focus(self) -> Any:
        if self.local_focus is not None:
            return self.local_focus
        if self.system_focus is not None:
            return self.system_focus.star
        raise ValueError("no location in focus for the local map")

    def local_map_coord(self, coords: Any) -> Coord:
        """Map position of a local coordinate, with the focus at the centre."""
        factor = self.local_zoom_factor()
        focus = self._focus().coords.local
        cam_x = focus.x - factor * self.width / 2
        cam_y = focus.y - factor * self.height / 2
        return Coord(int((coords.local.x - cam_x) / factor), int((coords.local.y - cam_y) / factor))

    def render(self) -> dict[Coord, Cell]:
        """Draw the map for the current zoom level, as cells keyed by map position."""
        self.updated = False
        if self.zoom is ZoomLevel.GALAXY:
            return self._render_galaxy()
        return self._render_local()

    def _render_galaxy(self) -> dict[Coord, Cell]:
        if self.galaxy is None:
            return {}
        cells: dict[Coord, Cell] = {}
        for cursor in self.galaxy.bounds().coords():
            sector = self.galaxy.sector((cursor.x, cursor.y))
            bright = int(255 * min(max(sector.density, 0), 100) / 100)
            glyph = GLYPH_NONE if bright == 0 else GLYPH_FILL_SPARSE
            cells[cursor] = Cell(glyph, (bright, bright, bright))
        return cells

    def _render_local(self) -> dict[Coord, Cell]:
        if self.system_focus is None:
            raise ValueError("no star system in focus for the local map")
        system = self.system_focus
        cells: dict[Coord, Cell] = {}
        star_pos = self.local_map_coord(system.star.coords)
        factor = self.local_zoom_factor()
        orbit = Cell(GLYPH_PERIOD, ORBIT_COLOUR)
        for planet in system.planets:
            for point in _circle_points(star_pos, _round(planet.o_distance / factor)):
                if self.bounds.contains(point):
                    cells[point] = orbit
            self._draw_object(cells, planet)
        self._draw_object(cells, system.star)
        return cells

    def _draw_object(self, cells: dict[Coord, Cell], obj: Any) -> None:
        if self.zoom is ZoomLevel.GALAXY:
            x, y = obj.coords.sector
            pos = Coord(x, y)
        else:
            pos = self.local_map_coord(obj.coords)
        if self.bounds.contains(pos):
            cells[pos] = Cell(getattr(obj, "glyph", GLYPH_OBJECT), WHITE, BLACK, obj)

    def toggle_highlight(self) -> None:
        """Move the highlight to the cursor and start or stop it."""
        self.highlight_pos = self.cursor
        self.highlight_playing = not self.highlight_playing

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, unless that would take it off the map."""
        new_pos = self.cursor + Coord(dx, dy)
        if self.bounds.contains(new_pos):
            self.cursor = new_pos
            self.highlight_pos = new_pos