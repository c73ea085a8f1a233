"""Metabolism: bodies burn calories and release the heat into the world."""

from __future__ import annotations

import math
from typing import Protocol

from isolated.components import Metabolism, Position, Velocity
from isolated.entity_manager import Registry

WALKING_METABOLIC_RATE = 150.0  # W
RESTING_METABOLIC_RATE = 80.0  # W
CALORIES_PER_JOULE = 0.000239006
JOULES_PER_KCAL = 4184.0
WALKING_SPEED_THRESHOLD = 0.1

_GRID_MAX = 199


class HeatSink(Protocol):
    def inject_heat(self, x: int, y: int, z: int, joules: float) -> None: ...


def update_metabolism(dt: float, registry: Registry, thermal: HeatSink) -> None:
    """Burn calories for every moving body and inject the heat into ``thermal``."""
    for _, pos, vel, metabolism in registry.view(Position, Velocity, Metabolism):
        speed = math.hypot(vel.dx, vel.dy)
        rate = (
            WALKING_METABOLIC_RATE
            if speed > WALKING_SPEED_THRESHOLD
            else RESTING_METABOLIC_RATE
        )
        metabolism.metabolic_rate_watts = rate

        joules = rate * dt
        metabolism.caloric_balance -= joules / JOULES_PER_KCAL

        gx = min(max(int(pos.x), 0), _GRID_MAX)
        gy = min(max(int(pos.y), 0), _GRID_MAX)
        thermal.inject_heat(gx, gy, 0, joules)