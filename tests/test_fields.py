import math

import numpy as np
import pytest
from electro_sim.constants import K_COULOMB
from electro_sim.types import Charge
from electro_sim.vector import Vector3, ZERO, magnitude
from electro_sim.core.fields import (
    electric_field,
    total_field,
    electric_potential,
    total_potential,
    potential_energy_at,
    potential_grid,
    equipotential_radius,
)


def test_single_charge_field_magnitude_and_direction():
    """
    E = k q / r², away from +q, toward -q.
    """
    q = Charge("q", (0.0, 0.0, 0.0), 2e-9)
    p = Vector3(0.0, 2.0, 0.0)
    e = electric_field(q, p)
    assert e.magnitude == pytest.approx(K_COULOMB * 2e-9 / 4.0, rel=1e-14)
    assert e.field.y > 0 and e.field.x == 0.0
    assert magnitude(e.field) == pytest.approx(e.magnitude, rel=1e-12)
    assert e.position == p

    neg = q.with_charge(-2e-9)
    e_neg = electric_field(neg, p)
    assert e_neg.field.y < 0
    assert e_neg.magnitude == pytest.approx(e.magnitude)


def test_superposition_is_componentwise():
    c1 = Charge("1", (0.0, 0.0, 0.0), 1e-6)
    c2 = Charge("2", (1.0, 0.5, 0.0), -2e-6)
    p = Vector3(0.3, -0.7, 0.2)

    e1 = electric_field(c1, p).field
    e2 = electric_field(c2, p).field
    tot = total_field([c1, c2], p)

    np.testing.assert_allclose(tot.field.to_array(), (e1 + e2).to_array(), rtol=1e-12)
    assert tot.magnitude == pytest.approx(magnitude(e1 + e2), rel=1e-12)
    # Vector sum, not sum of magnitudes
    assert tot.magnitude < magnitude(e1) + magnitude(e2)


def test_dipole_midpoint_potential_zero_field_nonzero():
    """
    ±q at equal distance d: V = kq/d - kq/d = 0, |E| = 2kq/d².
    """
    q = 1e-6
    d = 1.0
    charges = [
        Charge("+", (-d, 0.0, 0.0), q),
        Charge("-", (d, 0.0, 0.0), -q),
    ]
    mid = Vector3(0.0, 0.0, 0.0)
    assert total_potential(charges, mid) == 0.0

    e = total_field(charges, mid)
    assert e.magnitude == pytest.approx(2 * K_COULOMB * q / d**2, rel=1e-12)
    # Points from + toward -
    assert e.field.x > 0


def test_field_and_potential_at_charge_are_clamped():
    q = Charge("q", (1.0, 1.0, 0.0), 5e-6)
    e = electric_field(q, q.position)
    assert e.magnitude == 0.0 and e.field == ZERO
    assert electric_potential(q, q.position) == 0.0


def test_potential_is_signed_and_additive():
    a = Charge("a", (0.0, 0.0, 0.0), 3e-9)
    b = Charge("b", (0.0, 3.0, 0.0), -1e-9)
    p = (0.0, 1.0, 0.0)
    va = electric_potential(a, p)
    vb = electric_potential(b, p)
    assert va == pytest.approx(K_COULOMB * 3e-9 / 1.0)
    assert vb == pytest.approx(-K_COULOMB * 1e-9 / 2.0)
    assert total_potential([a, b], p) == pytest.approx(va + vb)
    assert total_potential([], p) == 0.0


def test_potential_energy_of_test_charge():
    """U = q V for a 1 nC test charge at 1 m from 5 μC."""
    src = Charge("1", (0.0, 0.0, 0.0), 5e-6, fixed=True)
    u = potential_energy_at([src], (1.0, 0.0, 0.0), 1e-9)
    assert u == pytest.approx(K_COULOMB * 5e-6 * 1e-9)


def test_potential_grid_matches_pointwise():
    charges = [
        Charge("a", (0.0, 0.0, 0.0), 1e-9),
        Charge("b", (1.0, 0.5, 0.0), -2e-9),
    ]
    xs = np.linspace(-1.0, 2.0, 7)
    ys = np.linspace(-1.0, 1.0, 5)
    grid = potential_grid(charges, xs, ys)
    assert grid.shape == (5, 7)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            assert grid[j, i] == pytest.approx(total_potential(charges, (x, y, 0.0)), rel=1e-12)

    # (0, 0) is on the grid and coincides with charge a: only b contributes
    on = potential_grid(charges, [0.0], [0.0])
    assert np.isfinite(on).all()
    assert on[0, 0] == pytest.approx(electric_potential(charges[1], (0.0, 0.0, 0.0)))


def test_equipotential_radius():
    """For a lone charge V(r) = kq/r, so r = kq/V."""
    q = 1e-9
    v = K_COULOMB * q / 2.0
    r = equipotential_radius(q, v)
    assert r == pytest.approx(2.0)
    assert electric_potential(Charge("q", (0.0, 0.0, 0.0), q), (r, 0.0, 0.0)) == pytest.approx(v)

    assert equipotential_radius(-q, -v) == pytest.approx(2.0)
    assert equipotential_radius(q, -v) is None
    assert equipotential_radius(0.0, v) is None
    assert equipotential_radius(q, 0.0) == math.inf
