import dataclasses

import pytest
from electro_sim.constants import EPSILON_0
from electro_sim.types import Capacitor
from electro_sim.core.capacitor import (
    capacitance, capacitor_charge, capacitor_energy, plate_field_strength
)


def test_parallel_plate_reference_values():
    """
    A = 0.01 m², d = 1 mm, vacuum, V = 100 V:
      C = ε₀ A / d       = 8.854187817e-11 F
      Q = C V            = 8.854187817e-9 C
      U = ½ C V²         ≈ 4.427e-7 J
      E = V / d          = 1e5 V/m
    """
    c = capacitance(0.01, 0.001, 1.0)
    assert c == pytest.approx(8.854187817e-11, rel=1e-12)
    assert capacitor_charge(c, 100.0) == pytest.approx(8.854187817e-9, rel=1e-12)
    assert capacitor_energy(c, 100.0) == pytest.approx(4.427e-7, rel=1e-3)
    assert plate_field_strength(100.0, 0.001) == pytest.approx(100000.0)


def test_dielectric_scales_capacitance():
    assert capacitance(0.01, 0.001, 4.0) == pytest.approx(4 * capacitance(0.01, 0.001))


def test_zero_distance_guard():
    assert capacitance(0.01, 0.0, 1.0) == 0.0
    assert plate_field_strength(100.0, 0.0) == 0.0


def test_capacitor_derived_fields():
    cap = Capacitor.default()
    assert cap.capacitance == pytest.approx(8.854187817e-11, rel=1e-12)
    assert cap.charge == pytest.approx(8.854187817e-9, rel=1e-12)
    assert cap.energy == pytest.approx(4.427e-7, rel=1e-3)
    assert cap.field_strength == pytest.approx(1e5)
    assert cap.vacuum_capacitance == pytest.approx(EPSILON_0 * 0.01 / 0.001)


@pytest.mark.parametrize("change", [
    {"area": 0.02},
    {"distance": 0.002},
    {"dielectric": 3.5},
    {"voltage": 250.0},
    {"area": 0.005, "voltage": 12.0},
])
def test_update_recomputes_everything(change):
    cap = Capacitor.default().update(**change)
    expected_c = capacitance(cap.area, cap.distance, cap.dielectric)
    assert cap.capacitance == pytest.approx(expected_c, rel=1e-12)
    assert cap.charge == pytest.approx(expected_c * cap.voltage, rel=1e-12)
    assert cap.energy == pytest.approx(0.5 * expected_c * cap.voltage**2, rel=1e-12)


def test_with_helpers():
    cap = Capacitor.default()
    wider = cap.with_distance(0.002)
    assert wider.capacitance == pytest.approx(cap.capacitance / 2)
    assert wider.charge == pytest.approx(cap.charge / 2)
    assert cap.with_area(0.03).capacitance == pytest.approx(3 * cap.capacitance)
    assert cap.with_dielectric(2.0).charge == pytest.approx(2 * cap.charge)
    assert cap.with_voltage(50.0).charge == pytest.approx(cap.charge / 2)
    # The original is untouched
    assert cap == Capacitor.default()


def test_derived_fields_cannot_be_set():
    cap = Capacitor.default()
    with pytest.raises(TypeError):
        cap.update(capacitance=1.0)
    with pytest.raises(TypeError):
        Capacitor(area=0.01, distance=0.001, capacitance=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cap.charge = 0.0
