# spaceshippers

The simulation core of a spaceship management game. It models a procedurally
generated galaxy, a ship built from rooms, the crew living aboard it and the air
they breathe, along with navigation, propulsion and communications.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `spaceshippers.events`: `EventBus` delivers `Event`s (of kind `EventKind.LOG`
  or `EventKind.UPDATE_UI`) to subscribed callbacks. Systems that are given a
  bus report log messages through `fire_log` and UI refresh requests through
  `fire_ui_update`.
- `spaceshippers.item`: `Item`, a storable thing measured in litres, with a
  `StorageType`.
- `spaceshippers.gas`: `GasMixture` holds amounts of each `GasType` (O2, CO2,
  N2) in a volume and gives `pressure()`, `partial_pressure()` and
  `molar_value()`. `remove_volume()` takes part of a mixture out as a new one;
  `add_mixture()` puts it back.
- `spaceshippers.location`: `Coordinates` address a point at sector,
  subsector, star-system or local resolution (`CoordResolution`). They can be
  moved (overflow carries into the next level up), tested with `is_in`, turned
  into strings with `coord_strings`, and measured with `calc_vector`, which
  returns a `GalVec` whose `distance` is in light years. `Location` is a plain
  place; `Vec2` and `PolarVec` are small vector types.
- `spaceshippers.grid`: `Coord`, `Rect`, `TileType` and `TileMap`, the integer
  geometry and tile maps used for ship layouts.
- `spaceshippers.room` and `spaceshippers.roomtemplates`: a `Room` has a tile
  map (walls around the edge, floor inside) and its own atmosphere; rooms that
  share a wall get a door when connected. `create_room_from_template` builds
  any `RoomType` (bridge, cockpit, corridor, engine rooms, cargo bay and so
  on); only the corridor can be resized.
- `spaceshippers.ship`: `Ship` places rooms (`add_room` raises `ValueError` on
  overlap), connects them, totals their stats into its systems with
  `compile_stats`, brings crew aboard and updates everything each tick.
- `spaceshippers.crew`: `Crewman` breathes the room's air, gets sleepy, wanders
  about, and picks up statuses and effects; `Stat` is a bounded integer value
  and `Job` a task with tick and interrupt hooks.
- `spaceshippers.crewstatus`: `CrewStatus` and `CrewEffect` definitions for
  each `StatusID` and `EffectID`.
- `spaceshippers.navigation`: `NavigationSystem.compute_course` plans an
  accelerate/coast/brake `Course` for a given amount of fuel; `update` follows
  it and notices arrival.
- `spaceshippers.propulsion`: `PropulsionSystem` burns fuel from the ship's
  storage to change speed and moves the ship each tick.
- `spaceshippers.comms`: `CommSystem` scans for messages on a schedule and
  files them in `inbox` or `transmissions`.
- `spaceshippers.lifesupport`: `LifeSupportSystem` reports the rooms whose CO2
  is above target.
- `spaceshippers.galaxy`: `Galaxy` is a 25x25 grid of `Sector`s whose density
  falls off from the centre; sectors generate `SubSector`s on demand.
- `spaceshippers.galaxymapview`: `GalaxyMapView` renders the galaxy (or a
  focused star system) to a dict of cells, with a cursor and zoom levels.
- `spaceshippers.galaxycreatemenu`: `GalaxySettings` holds the galaxy creation
  choices (`Density`, `Shape`, `Size`), gives help text for each field, can
  randomize them, previews a galaxy and generates the final one.

## Examples

Air:

```python
from spaceshippers.gas import GasMixture, GasType

air = GasMixture()
air.init_standard_atmosphere(1000)
print(air.pressure())                        # 101.0
print(air.partial_pressure(GasType.O2))      # 21.0

breath = air.remove_volume(0.35)
breath.remove_gas(GasType.O2, 2.1)
breath.add_gas(GasType.CO2, 2.1)
air.add_mixture(breath)
```

A ship with crew:

```python
from spaceshippers.crew import Crewman
from spaceshippers.events import EventBus
from spaceshippers.grid import Coord
from spaceshippers.roomtemplates import RoomType, create_room_from_template
from spaceshippers.ship import Ship

bus = EventBus()
bus.subscribe(lambda event: print(event.kind.name, event.payload))

ship = Ship("Valiant", events=bus)
ship.add_room(Coord(10, 10), create_room_from_template(RoomType.BRIDGE))
ship.add_room(Coord(16, 12), create_room_from_template(RoomType.ENGINE_SMALL))
print(ship.engine.thrust)                    # 10.0

ship.add_crewman(Crewman(events=bus))
for tick in range(100):
    ship.update(tick)
```

A galaxy:

```python
import random

from spaceshippers.galaxycreatemenu import Density, GalaxySettings, Size

settings = GalaxySettings(name="Home", density=Density.DENSE, size=Size.LARGE)
settings.preview(random.Random(1))
galaxy = settings.generate()
print(galaxy.sector((12, 12)).name)
```

## What the package does not do

- It has no screens, input handling or game loop; it is a library to drive
  from one. `GalaxyMapView.render` returns cells, not drawn output.
- It does not generate star systems, stars or planets. `SubSector.star_system`
  and `GalaxyMapView` accept any object with the expected attributes, but none
  is provided.
- It provides no storage system for fuel and cargo. `Ship` takes one through
  its `storage` argument (anything with `item_volume` and `remove`); without it
  the engines cannot fire.
- It does not save or load ships or galaxies, and keeps no record of missions
  or player progress.