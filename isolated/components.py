"""Component types attached to simulation entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from isolated.color_maps import Color


@dataclass
class Position:
    """Position in the 3D grid: fractional x/y, integer z-level."""

    x: float
    y: float
    z: int


@dataclass
class Velocity:
    """Planar velocity in cells per second."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Renderable:
    """Glyph and colour used to draw an entity."""

    glyph: str
    color: Color


@dataclass
class Astronaut:
    """Marks an entity as an astronaut."""

    name: str


@dataclass
class Path:
    """Movement path made of (x, y) waypoints."""

    waypoints: list[tuple[float, float]] = field(default_factory=list)
    current_index: int = 0
    active: bool = False


class HypoxiaState(Enum):
    """Stages of oxygen deprivation."""

    NORMAL = 0  # saturation >= 0.5
    CONFUSED = 1  # 0.2 - 0.5
    COLLAPSED = 2  # 0.05 - 0.2
    DEAD = 3  # < 0.05


@dataclass
class Needs:
    """Physiological needs, each on a 0-1 scale."""

    oxygen: float = 1.0
    hunger: float = 1.0
    thirst: float = 1.0
    fatigue: float = 0.0
    hypoxia_state: HypoxiaState = HypoxiaState.NORMAL


@dataclass
class Metabolism:
    """Energy buffer and heat output of a living body."""

    caloric_balance: float = 2000.0  # kcal
    metabolic_rate_watts: float = 80.0
    core_temperature: float = 310.15  # K
    insulation: float = 0.5  # clo