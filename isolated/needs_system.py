"""Astronaut needs driven by the surrounding atmosphere."""

from __future__ import annotations

from typing import Protocol

from isolated.components import HypoxiaState, Metabolism, Needs, Position
from isolated.entity_manager import Registry

O2_CONSUMPTION_RATE = 0.05
CO2_PRODUCTION_RATE = 0.04
HYPOXIA_CONFUSED_THRESHOLD = 0.5
HYPOXIA_COLLAPSED_THRESHOLD = 0.2
HYPOXIA_DEATH_THRESHOLD = 0.05
MIN_AMBIENT_O2 = 0.16

BASE_THIRST_RATE = 0.005
RESTING_WATTS = 80.0
OVERHEAT_TEMPERATURE = 311.15  # K, 38 C

_GRID_MAX = 199


class FluidField(Protocol):
    def get_density(self, x: int, y: int, z: int) -> float: ...

    def get_species_density(self, name: str, x: int, y: int, z: int) -> float: ...


def _hypoxia_state(oxygen: float) -> HypoxiaState:
    if oxygen < HYPOXIA_DEATH_THRESHOLD:
        return HypoxiaState.DEAD
    if oxygen < HYPOXIA_COLLAPSED_THRESHOLD:
        return HypoxiaState.COLLAPSED
    if oxygen < HYPOXIA_CONFUSED_THRESHOLD:
        return HypoxiaState.CONFUSED
    return HypoxiaState.NORMAL


def update_needs(dt: float, registry: Registry, fluids: FluidField) -> None:
    """Update oxygen, thirst and hypoxia state of every living entity with Needs."""
    for entity, pos, needs in registry.view(Position, Needs):
        if needs.hypoxia_state is HypoxiaState.DEAD:
            continue

        gx = min(max(int(pos.x), 0), _GRID_MAX)
        gy = min(max(int(pos.y), 0), _GRID_MAX)
        gz = 0  # only one level is simulated

        total = fluids.get_density(gx, gy, gz)
        o2 = fluids.get_species_density("O2", gx, gy, gz)
        ambient_o2 = o2 / total if total > 0.0 else 0.0

        if ambient_o2 >= MIN_AMBIENT_O2:
            needs.oxygen = min(1.0, needs.oxygen + 0.1 * dt)
        else:
            deficit = MIN_AMBIENT_O2 - ambient_o2
            needs.oxygen = max(
                0.0, needs.oxygen - O2_CONSUMPTION_RATE * deficit * dt * 10.0
            )

        thirst_rate = BASE_THIRST_RATE
        metab = registry.try_get(entity, Metabolism)
        if metab is not None:
            thirst_rate *= metab.metabolic_rate_watts / RESTING_WATTS
            if metab.core_temperature > OVERHEAT_TEMPERATURE:
                thirst_rate *= 2.0
        needs.thirst = max(0.0, needs.thirst - thirst_rate * dt * 0.1)

        needs.hypoxia_state = _hypoxia_state(needs.oxygen)