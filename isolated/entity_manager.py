"""Entity registry and high-level entity operations."""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterator
from typing import Any, TypeVar

from isolated.color_maps import Color
from isolated.components import (
    Astronaut,
    Metabolism,
    Needs,
    Position,
    Renderable,
    Velocity,
)
from isolated.spatial_index import SpatialIndex

T = TypeVar("T")

GRID_WIDTH = 200
GRID_HEIGHT = 200


class Registry:
    """A minimal entity-component store keyed by component type."""

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._entities: dict[int, dict[type, Any]] = {}

    def create(self) -> int:
        entity = next(self._ids)
        self._entities[entity] = {}
        return entity

    def emplace(self, entity: int, component: T) -> T:
        """Attach a component; an entity holds at most one of each type."""
        components = self._entities[entity]
        kind = type(component)
        if kind in components:
            raise ValueError(f"entity {entity} already has {kind.__name__}")
        components[kind] = component
        return component

    def get(self, entity: int, component_type: type[T]) -> T:
        return self._entities[entity][component_type]

    def try_get(self, entity: int, component_type: type[T]) -> T | None:
        return self._entities.get(entity, {}).get(component_type)

    def valid(self, entity: int | None) -> bool:
        return entity in self._entities

    def destroy(self, entity: int) -> dict[type, Any]:
        """Remove an entity, returning its components; unknown ids raise KeyError."""
        if entity not in self._entities:
            raise KeyError(f"unknown entity {entity}")
        return self._entities.pop(entity)

    def clear(self) -> None:
        self._entities.clear()

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield (entity, *components) for entities holding every given type."""
        if not args:
            raise TypeError("view() needs at least one component type")
        for entity, components in list(self._entities.items()):
            if all(kind in components for kind in args):
                yield (entity, *(components[kind] for kind in args))

    def __len__(self) -> int:
        return len(self._entities)


class EntityManager:
    """Owns the registry, spawns entities and answers spatial queries."""

    def __init__(self, seed: int = 42) -> None:
        self.seed = seed
        self.init()

    def init(self) -> None:
        """Reset the registry, spatial index and spawn RNG."""
        self.registry = Registry()
        self._spatial_index = SpatialIndex(GRID_WIDTH, GRID_HEIGHT)
        self._rng = random.Random(self.seed)

    def spawn_astronaut(self, x: float, y: float, z: int, name: str = "Bob") -> int:
        entity = self.registry.create()
        self.registry.emplace(entity, Position(x, y, z))
        self.registry.emplace(entity, Velocity(0.0, 0.0))
        self.registry.emplace(entity, Astronaut(name))
        color = Color(
            self._rng.randint(100, 254),
            self._rng.randint(100, 254),
            self._rng.randint(200, 254),
            255,
        )
        self.registry.emplace(entity, Renderable("@", color))
        self.registry.emplace(entity, Needs())
        self.registry.emplace(entity, Metabolism())
        return entity

    def update(self, dt: float) -> None:
        self._update_movement(dt)
        self._update_spatial_index()

    def _update_movement(self, dt: float) -> None:
        for _, pos, vel in self.registry.view(Position, Velocity):
            pos.x += vel.dx * dt
            pos.y += vel.dy * dt

    def _update_spatial_index(self) -> None:
        self._spatial_index.clear()
        for entity, pos in self.registry.view(Position):
            self._spatial_index.insert(entity, int(pos.x), int(pos.y))

    def get_entity_at(
        self, x: float, y: float, z: int, radius: float = 0.5
    ) -> int | None:
        """Closest entity within radius in the cell under (x, y), or None."""
        found = None
        min_dist_sq = radius * radius
        for entity in self._spatial_index.get_entities_at(int(x), int(y)):
            pos = self.registry.try_get(entity, Position)
            if pos is None or pos.z != z:
                continue
            dist_sq = (pos.x - x) ** 2 + (pos.y - y) ** 2
            if dist_sq <= min_dist_sq:
                min_dist_sq = dist_sq
                found = entity
        return found

    def get_entities_in_radius(
        self, x: float, y: float, z: int, radius: float
    ) -> list[int]:
        """All indexed entities on level z within radius of (x, y)."""
        candidates = self._spatial_index.query_range(
            int(x - radius), int(y - radius), int(x + radius), int(y + radius)
        )
        r_sq = radius * radius
        result = []
        for entity in candidates:
            pos = self.registry.try_get(entity, Position)
            if pos is None or pos.z != z:
                continue
            if (pos.x - x) ** 2 + (pos.y - y) ** 2 <= r_sq:
                result.append(entity)
        return result

    def count_astronauts(self) -> int:
        return sum(1 for _ in self.registry.view(Astronaut))