"""Cognitive function: confusion, reaction time, memory and attention."""

from __future__ import annotations

import math
from dataclasses import dataclass

NORMAL_REACTION_TIME_MS = 250.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class CognitiveState:
    """Cognitive metrics; the core metrics are 1.0 when unimpaired."""

    clarity: float = 1.0
    focus: float = 1.0
    processing_speed: float = 1.0
    memory_encoding: float = 1.0
    memory_recall: float = 1.0

    # 1.0 is normal, 2.0 twice as slow
    reaction_multiplier: float = 1.0

    confusion: float = 0.0
    fatigue: float = 0.0
    stress: float = 0.0
    sedation: float = 0.0

    concussion_severity: float = 0.0
    post_concussion_days: float = 0.0

    def effective_cognition(self) -> float:
        """Overall cognitive capacity in [0, 1]."""
        base = self.clarity * self.focus * self.processing_speed
        base *= 1.0 - self.confusion * 0.8
        base *= 1.0 - self.sedation * 0.9
        base *= 1.0 - self.fatigue * 0.5
        return _clamp(base, 0.0, 1.0)

    def effective_reaction_time_ms(self) -> float:
        """Reaction time, scaled from a normal of 250 ms."""
        return NORMAL_REACTION_TIME_MS * self.reaction_multiplier


class CognitiveSystem:
    """Updates cognitive state from blood gases, glucose, temperature and trauma."""

    def __init__(self) -> None:
        self.state = CognitiveState()

    def step(
        self,
        dt: float,
        pao2: float,
        paco2: float,
        glucose: float,
        core_temp: float,
        sleep_debt: float = 0.0,
    ) -> None:
        """Advance by dt seconds.

        pao2/paco2 in mmHg, glucose in mg/dL, core_temp in degrees C,
        sleep_debt in hours.
        """
        self._update_hypoxic_effects(pao2)
        self._update_hypercapnic_effects(paco2)
        self._update_glucose_effects(glucose)
        self._update_temperature_effects(core_temp)
        self._update_fatigue(dt, sleep_debt)
        self._update_concussion_recovery(dt)
        self._compute_reaction_time()

    # Trauma

    def apply_concussion(self, severity: float) -> None:
        s = self.state
        s.concussion_severity = min(1.0, s.concussion_severity + severity)
        s.post_concussion_days = 0.0
        s.confusion += severity * 0.6
        s.memory_encoding *= 1.0 - severity * 0.5
        s.processing_speed *= 1.0 - severity * 0.4
        s.clarity *= 1.0 - severity * 0.5

    def apply_psychological_stress(self, severity: float) -> None:
        s = self.state
        s.stress = min(1.0, s.stress + severity)
        if severity < 0.3:
            # Mild stress sharpens focus
            s.focus = min(1.2, s.focus + severity * 0.3)
        else:
            s.focus *= 1.0 - (severity - 0.3) * 0.5
            s.memory_encoding *= 1.0 - (severity - 0.3) * 0.3

    # Drugs

    def apply_sedative(self, dose: float) -> None:
        s = self.state
        s.sedation = min(1.0, s.sedation + dose)
        s.reaction_multiplier += dose * 2.0
        s.clarity *= 1.0 - dose * 0.6

    def apply_stimulant(self, dose: float) -> None:
        s = self.state
        s.sedation = max(0.0, s.sedation - dose * 0.5)
        s.fatigue = max(0.0, s.fatigue - dose * 0.4)
        s.focus = min(1.5, s.focus + dose * 0.3)
        s.reaction_multiplier = max(0.8, s.reaction_multiplier - dose * 0.3)
        if dose > 0.5:
            s.focus *= 0.8  # jitteriness

    def apply_analgesic(self, dose: float) -> None:
        s = self.state
        s.sedation += dose * 0.3
        s.clarity *= 1.0 - dose * 0.2

    # Internal updates

    def _update_hypoxic_effects(self, pao2: float) -> None:
        s = self.state
        if pao2 < 60.0:
            deficit = (60.0 - pao2) / 60.0
            s.confusion += deficit * 0.3
            s.clarity *= 1.0 - deficit * 0.5
            s.processing_speed *= 1.0 - deficit * 0.4
            if pao2 < 40.0:
                s.clarity *= 0.1
                s.confusion = 1.0
        else:
            s.confusion *= 0.95

    def _update_hypercapnic_effects(self, paco2: float) -> None:
        s = self.state
        if paco2 > 50.0:
            excess = (paco2 - 50.0) / 50.0
            s.sedation += excess * 0.4
            s.confusion += excess * 0.3
            s.clarity *= 1.0 - excess * 0.4
        if paco2 < 30.0:
            deficit = (30.0 - paco2) / 30.0
            s.confusion += deficit * 0.2
            s.focus *= 1.0 - deficit * 0.3

    def _update_glucose_effects(self, glucose: float) -> None:
        s = self.state
        if glucose < 70.0:
            deficit = (70.0 - glucose) / 70.0
            s.confusion += deficit * 0.5
            s.processing_speed *= 1.0 - deficit * 0.4
            s.memory_encoding *= 1.0 - deficit * 0.3
            if glucose < 40.0:
                s.clarity *= 0.1
                s.confusion = 1.0
        if glucose > 200.0:
            excess = (glucose - 200.0) / 300.0
            s.clarity *= 1.0 - excess * 0.2
            s.focus *= 1.0 - excess * 0.2

    def _update_temperature_effects(self, temp_c: float) -> None:
        s = self.state
        if temp_c < 35.0:
            deficit = (35.0 - temp_c) / 10.0
            s.confusion += deficit * 0.4
            s.processing_speed *= 1.0 - deficit * 0.5
            s.reaction_multiplier += deficit
        if temp_c > 39.0:
            excess = (temp_c - 39.0) / 3.0
            s.confusion += excess * 0.5
            s.clarity *= 1.0 - excess * 0.4

    def _update_fatigue(self, dt: float, sleep_debt: float) -> None:
        s = self.state
        if sleep_debt > 0.0:
            s.fatigue += sleep_debt * 0.01 * dt / 3600.0
        else:
            s.fatigue *= math.exp(-dt / 7200.0)
        s.fatigue = _clamp(s.fatigue, 0.0, 1.0)

        s.focus *= 1.0 - s.fatigue * 0.4
        s.processing_speed *= 1.0 - s.fatigue * 0.3
        s.reaction_multiplier += s.fatigue * 0.5

    def _update_concussion_recovery(self, dt: float) -> None:
        s = self.state
        if s.concussion_severity <= 0.0:
            return
        s.post_concussion_days += dt / 86400.0
        recovery_rate = 0.05 if s.post_concussion_days > 7.0 else 0.1
        s.concussion_severity *= math.exp(-recovery_rate * dt / 86400.0)
        if s.concussion_severity > 0.1:
            s.memory_encoding *= 1.0 - s.concussion_severity * 0.2
            s.processing_speed *= 1.0 - s.concussion_severity * 0.3
            s.focus *= 1.0 - s.concussion_severity * 0.2

    def _compute_reaction_time(self) -> None:
        s = self.state
        multiplier = 1.0
        multiplier += s.confusion * 1.5
        multiplier += s.sedation * 2.0
        multiplier += s.fatigue * 0.8
        multiplier += s.concussion_severity
        multiplier -= (s.focus - 1.0) * 0.2
        s.reaction_multiplier = _clamp(multiplier, 0.7, 5.0)