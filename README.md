# isolated

Building blocks for a survival simulation set in a hostile environment:
voxel chunks, temporal level of detail, a small entity registry with
astronaut needs and metabolism, and models of human physiology. It is plain
Python with no runtime dependencies.

## Modules

- `isolated.constants` holds physical constants, reference temperatures,
  pressures, gas molecular weights and biology constants, for example
  `STEFAN_BOLTZMANN`, `WATER_FREEZE` and `MW_O2`.
- `isolated.chunk`
  - `CHUNK_SIZE` is 64. `CHUNK_CELLS` is 64³.
  - `Material` is an `IntEnum` of gases, liquids, solids and ores.
  - `material_to_string` returns a lowercase key. Unknown values give `"air"`.
  - `ChunkCoord` is a frozen, hashable coordinate.
  - `world_to_chunk` floors negative coordinates correctly.
  - `Chunk` holds per-voxel lists: `material`, `strata_age`, `temperature`,
    `density`, `pressure`, `o2_fraction` and `co2_fraction`. It also has six
    ghost faces, `ghost_temp`.
  - `Chunk.idx` gives a flat cell index. `Chunk.world_origin` gives the
    world position of the chunk's corner. `Chunk.allocate` resets every
    field to its default.
- `isolated.lod_zone_manager`
  - `LODConfig`, `ViewportBounds` and `LODZoneManager` do temporal level of
    detail.
  - The grid is split into quadrant regions. `get_region` gives a cell's
    region.
  - `should_update(x, y, step_count)` is true for cells inside the viewport.
    Viewport bounds are inclusive. For other cells it is true only when
    `step_count % num_regions` matches the cell's region.
- `isolated.color_maps`
  - `Color` is an RGBA named tuple.
  - `lerp_color` interpolates between two colours. `t` is clamped to [0, 1].
  - `pressure_to_color`, `temperature_to_color` and `oxygen_to_color` give
    overlay gradients.
- `isolated.spatial_index` has `SpatialIndex`, which buckets entities by
  (x, y) cell.
  - `insert` ignores positions outside the grid.
  - `get_entities_at` returns an empty list outside the grid.
  - `query_range` takes an inclusive rectangle and clamps it to the grid.
- `isolated.components` has the entity components: `Position`, `Velocity`,
  `Renderable`, `Astronaut`, `Path`, `Needs`, `Metabolism` and the
  `HypoxiaState` enum.
- `isolated.entity_manager`
  - `Registry` is a minimal entity-component store with these methods:
    - `create`
    - `emplace`: an entity holds at most one component of each type, so a
      second one raises `ValueError`.
    - `get`
    - `try_get`
    - `valid`
    - `destroy`: raises `KeyError` for unknown ids.
    - `clear`
    - `view(*types)`: yields `(entity, *components)`.
  - `EntityManager(seed=42)` works on a 200×200 grid and has these methods:
    - `spawn_astronaut`: the astronaut gets a seeded random colour.
    - `update(dt)`: moves entities by their velocity and rebuilds the
      spatial index.
    - `get_entity_at`: returns the closest entity within a radius in the
      cell under the point, or `None`.
    - `get_entities_in_radius`
    - `count_astronauts`

    Spatial queries only see entities indexed by the most recent `update`.
- `isolated.needs_system` has `update_needs(dt, registry, fluids)`.
  - It reads the ambient O2 fraction from `fluids`. Any object with
    `get_density(x, y, z)` and `get_species_density(name, x, y, z)` will do.
  - It then updates oxygen saturation, thirst and the hypoxia state of every
    entity with `Position` and `Needs`. Dead entities are skipped.
  - Positions are clamped to cells 0–199 on level 0.
- `isolated.metabolism_system` has `update_metabolism(dt, registry, thermal)`.
  - Each body burns at 80 W at rest or 150 W when moving faster than 0.1.
  - It subtracts kilocalories from `caloric_balance`.
  - It calls `thermal.inject_heat(x, y, z, joules)` at the body's clamped
    cell.
- `isolated.cognitive` has `CognitiveState` and `CognitiveSystem`, which
  models:
  - confusion
  - reaction time
  - fatigue
  - concussion recovery
  - the effect of sedatives, stimulants, analgesics and stress
- `isolated.hematology` has `HematologyState`, `HematologyConfig` and
  `HematologySystem`, which models:
  - erythropoietin
  - red cell production and destruction
  - altitude adaptation
  - blood loss, hemolysis, deficiencies and transfusion
- `isolated.lymphatic` has `LymphaticState`, `LymphaticConfig` and
  `LymphaticSystem`, which models:
  - Starling filtration
  - lymph flow and edema
  - lymph node inflammation
- `isolated.thermoregulation` has `ThermoState`, `Environment` and
  `ThermoregulationSystem`.
  - It computes a whole-body heat balance with convective, evaporative and
    radiative loss, sweating and shivering.
  - `step` returns a snapshot of the new state.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from isolated.chunk import Chunk, world_to_chunk
from isolated.entity_manager import EntityManager
from isolated.lod_zone_manager import LODConfig, LODZoneManager, ViewportBounds
from isolated.thermoregulation import Environment, ThermoregulationSystem

coord = world_to_chunk(-1, 70, 130)      # ChunkCoord(x=-1, y=1, z=2)
chunk = Chunk(coord)
print(chunk.world_origin())              # (-64, 64, 128)

lod = LODZoneManager(LODConfig(nx=200, ny=200, num_regions=4))
lod.set_viewport(ViewportBounds(x_min=0, x_max=50, y_min=0, y_max=50))
print(lod.should_update(150, 150, step_count=3))   # True: region 3 has its turn

manager = EntityManager()
bob = manager.spawn_astronaut(50.5, 50.5, 51, "Bob")
manager.update(0.01)
print(manager.get_entity_at(50.5, 50.5, 51) == bob)  # True

body = ThermoregulationSystem()
state = body.step(0.01, Environment(ambient_temp_c=5.0), 1.2)
print(state.core_temp_c)
```

## What this package does not do

There is no program to run: no window, no renderer, no input handling and no
main loop. The package also lacks the following:

- a fluid solver or heat-conduction engine. `update_needs` and
  `update_metabolism` take any objects that provide the methods listed above.
- chunk streaming, saving to disk or terrain generation. `Chunk` only
  stores voxel data in memory.
- a combined physiology model tying the biology systems together. Each
  model is stepped on its own.