"""Human thermoregulation from a whole-body heat balance."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

STEFAN_BOLTZMANN_APPROX = 5.67e-8
SKIN_EMISSIVITY = 0.97
BODY_SURFACE_M2 = 1.8
SWEAT_LATENT_HEAT = 2430.0  # J/g
BODY_THERMAL_MASS = 250000.0  # J per degree C
BASAL_HEAT_W = 80.0
MAX_SHIVERING_HEAT_W = 300.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class ThermoState:
    """Body temperatures and thermoregulatory responses."""

    core_temp_c: float = 37.0
    skin_temp_c: float = 33.0
    metabolic_heat_w: float = 80.0
    shivering_intensity: float = 0.0
    sweat_rate_ml_hr: float = 0.0
    vasodilation: float = 0.5  # 0-1
    fluid_loss_ml: float = 0.0


@dataclass
class Environment:
    """Ambient conditions around the body."""

    ambient_temp_c: float = 20.0
    humidity: float = 0.5
    wind_speed_ms: float = 0.0
    radiation_wm2: float = 0.0


class ThermoregulationSystem:
    """Integrates heat production and loss into core and skin temperature."""

    def __init__(self) -> None:
        self.state = ThermoState()

    def step(
        self, dt: float, env: Environment, metabolic_rate: float = 1.0
    ) -> ThermoState:
        """Advance by dt seconds and return a snapshot of the new state."""
        s = self.state
        s.metabolic_heat_w = BASAL_HEAT_W * metabolic_rate

        s.shivering_intensity = self.compute_shivering(s.core_temp_c)
        s.sweat_rate_ml_hr = self.compute_sweat_rate(s.core_temp_c)

        total_heat_gen = (
            s.metabolic_heat_w + s.shivering_intensity * MAX_SHIVERING_HEAT_W
        )
        net_heat = total_heat_gen - self.compute_heat_loss(env)
        s.core_temp_c += net_heat * dt / BODY_THERMAL_MASS

        target_skin = 0.7 * s.core_temp_c + 0.3 * env.ambient_temp_c
        s.skin_temp_c += (target_skin - s.skin_temp_c) * 0.1 * dt

        if s.core_temp_c > 37.5:
            s.vasodilation = min(1.0, s.vasodilation + 0.1 * dt)
        elif s.core_temp_c < 36.5:
            s.vasodilation = max(0.0, s.vasodilation - 0.1 * dt)

        s.fluid_loss_ml += s.sweat_rate_ml_hr * dt / 3600.0

        s.core_temp_c = _clamp(s.core_temp_c, 25.0, 43.0)
        s.skin_temp_c = _clamp(s.skin_temp_c, 10.0, 42.0)

        return replace(s)

    def compute_heat_loss(self, env: Environment) -> float:
        """Total convective, evaporative and radiative loss in watts."""
        s = self.state
        return (
            self._convective_loss(s.skin_temp_c, env.ambient_temp_c, env.wind_speed_ms)
            + self._evaporative_loss(s.sweat_rate_ml_hr, env.humidity)
            + self._radiative_loss(s.skin_temp_c, env.ambient_temp_c)
        )

    def compute_sweat_rate(self, core_temp: float) -> float:
        """Sweat rate in mL/hr, starting above 37 C and capped at 2000."""
        if core_temp > 37.0:
            return min(2000.0, (core_temp - 37.0) * 500.0)
        return 0.0

    def compute_shivering(self, core_temp: float) -> float:
        """Shivering intensity 0-1, starting below 36.5 C."""
        if core_temp < 36.5:
            return min(1.0, (36.5 - core_temp) * 2.0)
        return 0.0

    @staticmethod
    def _convective_loss(skin: float, ambient: float, wind: float) -> float:
        h_c = 8.3 * math.sqrt(max(0.1, wind))
        return h_c * BODY_SURFACE_M2 * (skin - ambient)

    @staticmethod
    def _evaporative_loss(sweat: float, humidity: float) -> float:
        max_evap = (1.0 - humidity) * 600.0
        actual_evap = sweat / 1000.0 * SWEAT_LATENT_HEAT
        return min(actual_evap, max_evap)

    @staticmethod
    def _radiative_loss(skin: float, ambient: float) -> float:
        t_skin_k = skin + 273.15
        t_amb_k = ambient + 273.15
        return (
            STEFAN_BOLTZMANN_APPROX
            * SKIN_EMISSIVITY
            * BODY_SURFACE_M2
            * (t_skin_k**4 - t_amb_k**4)
        )