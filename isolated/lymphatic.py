"""Lymphatic system: lymph flow, edema and lymph node function."""

from __future__ import annotations

import math
from dataclasses import dataclass

SECONDS_PER_DAY = 86400.0
SECONDS_PER_HOUR = 3600.0
INTERSTITIAL_PRESSURE_MMHG = 10.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class LymphaticState:
    """Fluid balance, edema and lymph node status."""

    interstitial_fluid: float = 2.5  # L
    lymph_flow_rate: float = 2.0  # L/day
    protein_concentration: float = 20.0  # g/L in lymph

    edema_volume: float = 0.0  # L of excess fluid
    edema_severity: float = 0.0  # 0-1

    arm_edema: float = 0.0
    leg_edema: float = 0.0
    pulmonary_edema: float = 0.0

    node_filtering: float = 1.0  # 0-1 immune filtering capacity
    node_inflammation: float = 0.0  # 0-1

    lymphatic_damage: float = 0.0  # 0-1 vessel damage
    lymphedema: bool = False  # chronic obstruction


@dataclass
class LymphaticConfig:
    normal_flow: float = 2.5  # L/day
    capillary_permeability: float = 0.02
    oncotic_pressure: float = 25.0  # mmHg
    hydrostatic_pressure: float = 30.0  # mmHg


class LymphaticSystem:
    """Updates lymph flow and edema from capillary forces and inflammation."""

    def __init__(self, config: LymphaticConfig | None = None) -> None:
        self.config = config if config is not None else LymphaticConfig()
        self.state = LymphaticState()
        self._capillary_leak = 0.0
        self._oncotic_deficit = 0.0
        self._filtration_rate = 0.0

    def step(
        self,
        dt: float,
        capillary_pressure: float,
        plasma_albumin: float,
        inflammation: float,
    ) -> None:
        """Advance by dt seconds.

        capillary_pressure in mmHg, plasma_albumin in g/dL, inflammation 0-1.
        """
        self._update_starling_forces(capillary_pressure, plasma_albumin)
        self._update_lymph_flow(dt, inflammation)
        self._update_edema(dt)
        self._update_node_function(inflammation)

    # Pathology

    def apply_venous_obstruction(self, severity: float) -> None:
        """Raised capillary pressure, e.g. from a thrombosis or heart failure."""
        self.state.leg_edema += severity * 0.5
        self.state.edema_volume += severity * 0.3

    def apply_lymph_node_removal(self, region: str) -> None:
        self.state.lymphatic_damage += 0.3
        if region == "arm":
            self.state.arm_edema += 0.2
            self.state.lymphedema = True

    def apply_capillary_leak(self, severity: float) -> None:
        """Rapid fluid shift, as in sepsis, burns or anaphylaxis."""
        self._capillary_leak += severity
        self.state.edema_volume += severity
        self.state.pulmonary_edema += severity * 0.3

    def apply_hypoalbuminemia(self, albumin_deficit: float) -> None:
        """Reduced oncotic pressure, as in liver failure or malnutrition."""
        self._oncotic_deficit = albumin_deficit

    # Derived values

    def has_pulmonary_edema(self) -> bool:
        return self.state.pulmonary_edema > 0.3

    def has_anasarca(self) -> bool:
        return self.state.edema_volume > 5.0

    # Internal updates

    def _update_starling_forces(self, cap_pressure: float, albumin: float) -> None:
        oncotic = albumin * 5.0 - self._oncotic_deficit * 2.0
        net_filtration = cap_pressure - INTERSTITIAL_PRESSURE_MMHG - oncotic
        net_filtration *= 1.0 + self._capillary_leak * 2.0

        permeability = self.config.capillary_permeability
        if net_filtration > 0:
            self._filtration_rate = net_filtration * permeability
        else:
            self._filtration_rate = net_filtration * permeability * 0.5

    def _update_lymph_flow(self, dt: float, inflammation: float) -> None:
        s = self.state
        flow_capacity = self.config.normal_flow * (1.0 - s.lymphatic_damage)
        flow_capacity *= 1.0 + inflammation * 0.5
        s.lymph_flow_rate = flow_capacity

        drainage = flow_capacity * dt / SECONDS_PER_DAY
        s.interstitial_fluid = max(1.0, s.interstitial_fluid - drainage)

    def _update_edema(self, dt: float) -> None:
        s = self.state
        net_fluid = (
            self._filtration_rate * dt / SECONDS_PER_HOUR
            - s.lymph_flow_rate * dt / SECONDS_PER_DAY
        )
        s.edema_volume = max(0.0, s.edema_volume + net_fluid)
        s.edema_severity = min(1.0, s.edema_volume / 5.0)

        if s.edema_volume > 2.0:
            s.leg_edema = min(1.0, (s.edema_volume - 2.0) / 3.0)

        s.pulmonary_edema *= math.exp(-dt / SECONDS_PER_HOUR)

    def _update_node_function(self, inflammation: float) -> None:
        s = self.state
        if inflammation > 0.3:
            s.node_inflammation += (inflammation - 0.3) * 0.1
        else:
            s.node_inflammation *= 0.99
        s.node_inflammation = _clamp(s.node_inflammation, 0.0, 1.0)

        s.node_filtering = max(
            0.0, 1.0 - s.node_inflammation * 0.3 - s.lymphatic_damage * 0.5
        )