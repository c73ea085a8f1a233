import pytest

from isolated.components import Metabolism, Position, Velocity
from isolated.entity_manager import EntityManager, Registry
from isolated.metabolism_system import (
    JOULES_PER_KCAL,
    RESTING_METABOLIC_RATE,
    WALKING_METABOLIC_RATE,
    update_metabolism,
)


class FakeThermal:
    def __init__(self):
        self.injections = []

    def inject_heat(self, x, y, z, joules):
        self.injections.append((x, y, z, joules))


def _body(reg, x=5.0, y=6.0, vel=(0.0, 0.0)):
    e = reg.create()
    reg.emplace(e, Position(x, y, 0))
    reg.emplace(e, Velocity(*vel))
    reg.emplace(e, Metabolism())
    return e


def test_resting_rate_and_heat():
    reg = Registry()
    e = _body(reg)
    thermal = FakeThermal()
    update_metabolism(2.0, reg, thermal)
    metab = reg.get(e, Metabolism)
    assert metab.metabolic_rate_watts == RESTING_METABOLIC_RATE
    assert thermal.injections == [(5, 6, 0, pytest.approx(RESTING_METABOLIC_RATE * 2.0))]


def test_walking_rate_when_moving():
    reg = Registry()
    e = _body(reg, vel=(1.0, 0.0))
    thermal = FakeThermal()
    update_metabolism(1.0, reg, thermal)
    assert reg.get(e, Metabolism).metabolic_rate_watts == WALKING_METABOLIC_RATE
    assert thermal.injections[0][3] == pytest.approx(WALKING_METABOLIC_RATE)


def test_slow_drift_counts_as_resting():
    reg = Registry()
    e = _body(reg, vel=(0.05, 0.05))
    update_metabolism(1.0, reg, FakeThermal())
    assert reg.get(e, Metabolism).metabolic_rate_watts == RESTING_METABOLIC_RATE


def test_calories_match_injected_heat():
    reg = Registry()
    e = _body(reg, vel=(0.0, 3.0))
    thermal = FakeThermal()
    update_metabolism(10.0, reg, thermal)
    burned = 2000.0 - reg.get(e, Metabolism).caloric_balance
    assert burned > 0.0
    assert burned * JOULES_PER_KCAL == pytest.approx(thermal.injections[0][3])


def test_position_clamped_to_grid():
    reg = Registry()
    _body(reg, x=-10.0, y=999.0)
    thermal = FakeThermal()
    update_metabolism(1.0, reg, thermal)
    assert thermal.injections[0][:3] == (0, 199, 0)


def test_entities_without_metabolism_ignored():
    reg = Registry()
    e = reg.create()
    reg.emplace(e, Position(1.0, 1.0, 0))
    reg.emplace(e, Velocity())
    thermal = FakeThermal()
    update_metabolism(1.0, reg, thermal)
    assert thermal.injections == []


def test_works_with_spawned_astronauts():
    em = EntityManager()
    a = em.spawn_astronaut(10.0, 10.0, 51)
    b = em.spawn_astronaut(20.0, 20.0, 51)
    thermal = FakeThermal()
    update_metabolism(1.0, em.registry, thermal)
    assert len(thermal.injections) == 2
    assert em.registry.get(a, Metabolism).caloric_balance == pytest.approx(
        em.registry.get(b, Metabolism).caloric_balance
    )
    assert em.registry.get(a, Metabolism).caloric_balance < 2000.0