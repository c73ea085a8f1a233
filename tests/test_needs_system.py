import pytest

from isolated.components import HypoxiaState, Metabolism, Needs, Position
from isolated.entity_manager import Registry
from isolated.needs_system import (
    MIN_AMBIENT_O2,
    update_needs,
)


class FakeFluids:
    def __init__(self, o2_fraction, total=1.0):
        self.o2_fraction = o2_fraction
        self.total = total
        self.queries = []

    def get_density(self, x, y, z):
        self.queries.append((x, y, z))
        return self.total

    def get_species_density(self, name, x, y, z):
        assert name == "O2"
        return self.o2_fraction * self.total


def _entity(reg, x=10.0, y=10.0, needs=None, metab=None):
    e = reg.create()
    reg.emplace(e, Position(x, y, 0))
    reg.emplace(e, needs or Needs())
    if metab is not None:
        reg.emplace(e, metab)
    return e


def test_normal_air_recovers_oxygen_capped():
    reg = Registry()
    e = _entity(reg, needs=Needs(oxygen=0.3))
    update_needs(100.0, reg, FakeFluids(0.21))
    needs = reg.get(e, Needs)
    assert needs.oxygen == 1.0
    assert needs.hypoxia_state is HypoxiaState.NORMAL


def test_recovery_partial_state_confused():
    reg = Registry()
    e = _entity(reg, needs=Needs(oxygen=0.3))
    update_needs(0.1, reg, FakeFluids(0.21))
    needs = reg.get(e, Needs)
    assert 0.3 < needs.oxygen < 0.5
    assert needs.hypoxia_state is HypoxiaState.CONFUSED


def test_low_oxygen_drains_until_dead():
    reg = Registry()
    e = _entity(reg)
    update_needs(1000.0, reg, FakeFluids(0.10))
    needs = reg.get(e, Needs)
    assert needs.oxygen == 0.0
    assert needs.hypoxia_state is HypoxiaState.DEAD


def test_drain_grows_with_deficit():
    reg = Registry()
    mild = _entity(reg)
    update_needs(1.0, reg, FakeFluids(MIN_AMBIENT_O2 - 0.01))
    reg2 = Registry()
    severe = _entity(reg2)
    update_needs(1.0, reg2, FakeFluids(MIN_AMBIENT_O2 - 0.1))
    assert reg2.get(severe, Needs).oxygen < reg.get(mild, Needs).oxygen < 1.0


def test_zero_density_counts_as_no_oxygen():
    reg = Registry()
    e = _entity(reg)
    update_needs(1.0, reg, FakeFluids(0.21, total=0.0))
    assert reg.get(e, Needs).oxygen < 1.0


def test_dead_entities_are_skipped():
    reg = Registry()
    e = _entity(reg, needs=Needs(oxygen=0.0, hypoxia_state=HypoxiaState.DEAD))
    fluids = FakeFluids(0.21)
    update_needs(10.0, reg, fluids)
    needs = reg.get(e, Needs)
    assert needs.thirst == 1.0
    assert needs.oxygen == 0.0
    assert fluids.queries == []


def test_position_clamped_to_grid():
    reg = Registry()
    _entity(reg, x=500.0, y=-3.0)
    fluids = FakeFluids(0.21)
    update_needs(1.0, reg, fluids)
    assert fluids.queries == [(199, 0, 0)]


def test_thirst_doubles_when_overheated():
    reg = Registry()
    normal = _entity(reg, metab=Metabolism())
    hot = _entity(reg, metab=Metabolism(core_temperature=312.0))
    update_needs(10.0, reg, FakeFluids(0.21))
    loss_normal = 1.0 - reg.get(normal, Needs).thirst
    loss_hot = 1.0 - reg.get(hot, Needs).thirst
    assert loss_normal > 0.0
    assert loss_hot == pytest.approx(2.0 * loss_normal)


def test_thirst_scales_with_metabolic_rate():
    reg = Registry()
    rest = _entity(reg, metab=Metabolism(metabolic_rate_watts=80.0))
    walk = _entity(reg, metab=Metabolism(metabolic_rate_watts=160.0))
    bare = _entity(reg)
    update_needs(10.0, reg, FakeFluids(0.21))
    loss_rest = 1.0 - reg.get(rest, Needs).thirst
    loss_walk = 1.0 - reg.get(walk, Needs).thirst
    loss_bare = 1.0 - reg.get(bare, Needs).thirst
    assert loss_walk == pytest.approx(2.0 * loss_rest)
    assert loss_bare == pytest.approx(loss_rest)


def test_thirst_never_negative():
    reg = Registry()
    e = _entity(reg)
    update_needs(1e7, reg, FakeFluids(0.21))
    assert reg.get(e, Needs).thirst == 0.0