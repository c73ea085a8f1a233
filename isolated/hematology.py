"""Hematology: red cell production and destruction, anaemia, altitude."""

from __future__ import annotations

from dataclasses import dataclass, field

SECONDS_PER_DAY = 86400.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class HematologyState:
    """Blood cell counts, production factors and pathology."""

    rbc_count: float = 5.0  # million/uL
    hemoglobin: float = 14.0  # g/dL
    hematocrit: float = 0.42  # fraction
    reticulocyte_pct: float = 1.0

    erythropoietin: float = 10.0  # mU/mL
    iron_stores: float = 1000.0  # mg
    b12_level: float = 400.0  # pg/mL
    folate_level: float = 10.0  # ng/mL

    hemolysis_rate: float = 0.0
    sickle_cell: bool = False
    thalassemia: bool = False

    def o2_capacity(self) -> float:
        """Oxygen carried per dL of blood, at 1.34 mL O2 per gram of Hb."""
        return self.hemoglobin * 1.34

    def is_anemic(self) -> bool:
        return self.hemoglobin < 12.0

    def is_polycythemic(self) -> bool:
        return self.hematocrit > 0.55


@dataclass
class HematologyConfig:
    rbc_lifespan: float = 120.0  # days
    epo_response_time: float = 7.0  # days
    altitude_adaptation: float = 14.0  # days for full adaptation


class HematologySystem:
    """Updates blood cell state from oxygenation, kidneys and altitude."""

    def __init__(self, config: HematologyConfig | None = None) -> None:
        self.config = config if config is not None else HematologyConfig()
        self.state = HematologyState()
        self._altitude_days = 0.0

    def step(
        self, dt: float, pao2: float, kidney_function: float, altitude: float
    ) -> None:
        """Advance by dt seconds; pao2 in mmHg, kidney_function 0-1, altitude in m."""
        self._update_epo(pao2, kidney_function)
        self._update_rbc_production(dt)
        self._update_rbc_destruction(dt)
        self._update_altitude_adaptation(dt, altitude)
        self._compute_indices()

    # Pathology

    def apply_blood_loss(self, volume_ml: float) -> None:
        fraction_lost = volume_ml / 5000.0
        s = self.state
        s.hemoglobin *= 1.0 - fraction_lost
        s.rbc_count *= 1.0 - fraction_lost
        s.hematocrit *= 1.0 - fraction_lost

    def apply_hemolysis(self, severity: float) -> None:
        self.state.hemolysis_rate = min(1.0, self.state.hemolysis_rate + severity)

    def apply_iron_deficiency(self, severity: float) -> None:
        self.state.iron_stores = max(0.0, self.state.iron_stores - severity * 500.0)

    def apply_b12_deficiency(self) -> None:
        self.state.b12_level *= 0.9

    def set_sickle_cell(self, trait: bool) -> None:
        self.state.sickle_cell = trait
        if trait:
            self.state.hemolysis_rate += 0.1  # chronic hemolysis

    def transfuse_prbc(self, units: float) -> None:
        """Packed red cells; each unit raises Hb by about 1 g/dL."""
        s = self.state
        s.hemoglobin += units
        s.hematocrit += units * 0.03
        s.rbc_count += units * 0.3

    # Derived values

    def oxygen_carrying_capacity(self) -> float:
        return self.state.o2_capacity()

    def anemia_severity(self) -> float:
        """0 when not anaemic, rising to 1 at 6 g/dL or below."""
        if self.state.hemoglobin >= 12.0:
            return 0.0
        return min(1.0, (12.0 - self.state.hemoglobin) / 6.0)

    # Internal updates

    def _update_epo(self, pao2: float, kidney_function: float) -> None:
        target_epo = 10.0
        if pao2 < 70.0:
            target_epo += (70.0 - pao2) / 30.0 * 50.0
        target_epo *= kidney_function
        self.state.erythropoietin += (target_epo - self.state.erythropoietin) * 0.1

    def _update_rbc_production(self, dt: float) -> None:
        s = self.state
        production_rate = s.erythropoietin / 10.0
        if s.iron_stores < 100.0:
            production_rate *= s.iron_stores / 100.0
        if s.b12_level < 200.0:
            production_rate *= s.b12_level / 200.0

        s.reticulocyte_pct = _clamp(1.0 + (production_rate - 1.0) * 2.0, 0.1, 15.0)

        daily_production = production_rate * 0.01
        s.rbc_count += daily_production * dt / SECONDS_PER_DAY
        s.hemoglobin += daily_production * 0.3 * dt / SECONDS_PER_DAY

    def _update_rbc_destruction(self, dt: float) -> None:
        s = self.state
        destruction_rate = 1.0 / self.config.rbc_lifespan
        destruction_rate += s.hemolysis_rate * 0.1

        s.rbc_count -= s.rbc_count * destruction_rate * dt / SECONDS_PER_DAY
        s.hemoglobin -= s.hemoglobin * destruction_rate * dt / SECONDS_PER_DAY

        s.rbc_count = max(1.0, s.rbc_count)
        s.hemoglobin = max(3.0, s.hemoglobin)

    def _update_altitude_adaptation(self, dt: float, altitude: float) -> None:
        s = self.state
        if altitude > 2500.0:
            self._altitude_days += dt / SECONDS_PER_DAY
            adaptation = min(1.0, self._altitude_days / self.config.altitude_adaptation)
            altitude_factor = (altitude - 2500.0) / 5000.0
            target_hct = 0.42 + altitude_factor * adaptation * 0.15
            s.hematocrit += (target_hct - s.hematocrit) * 0.01
        else:
            self._altitude_days = 0.0
            s.hematocrit += (0.42 - s.hematocrit) * 0.01

    def _compute_indices(self) -> None:
        s = self.state
        s.hematocrit = _clamp(s.rbc_count / 5.0 * 0.42, 0.1, 0.7)