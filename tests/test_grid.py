import pytest
from electro_sim.types import Charge
from electro_sim.vector import Vector3, distance
from electro_sim.core.fields import total_field
from electro_sim.sampling.grid import FieldGrid, field_vector_grid


def _charges():
    return [
        Charge("1", (-50.0, 0.0, 0.0), 1e-6),
        Charge("2", (60.0, 30.0, 0.0), -1e-6),
        # Exactly on the top-right corner sample
        Charge("3", (200.0, 150.0, 0.0), 2e-6),
    ]


def test_grid_points_are_centred_and_uniform():
    grid = FieldGrid(width=400.0, height=300.0, grid_size=8)
    pts = grid.points()
    assert len(pts) == 64
    assert pts[0] == Vector3(-200.0, -150.0, 0.0)
    assert pts[-1] == Vector3(200.0, 150.0, 0.0)
    xs = sorted({p.x for p in pts})
    steps = [b - a for a, b in zip(xs, xs[1:])]
    assert steps == pytest.approx([400.0 / 7] * 7)


def test_samples_respect_exclusion_radius():
    charges = _charges()
    grid = FieldGrid(width=400.0, height=300.0)
    samples = grid.sample(charges)

    excluded = sum(
        1 for p in grid.points()
        if any(distance(p, c.position) < grid.exclusion_radius for c in charges)
    )
    print("kept", len(samples), "excluded", excluded)
    assert excluded >= 1
    assert len(samples) == grid.grid_size ** 2 - excluded

    for s in samples:
        for c in charges:
            assert distance(s.position, c.position) >= 20.0


def test_samples_are_total_field():
    charges = _charges()
    for s in field_vector_grid(charges, 400.0, 300.0):
        expected = total_field(charges, s.position)
        assert s.field == expected.field
        assert s.magnitude == expected.magnitude


def test_exclusion_radius_and_grid_size_are_configurable():
    charges = _charges()
    assert len(field_vector_grid(charges, 400.0, 300.0, exclusion_radius=0.0)) == 64
    assert len(field_vector_grid(charges, 400.0, 300.0, grid_size=3, exclusion_radius=0.0)) == 9
    # A huge radius swallows the whole region
    assert field_vector_grid(charges, 400.0, 300.0, exclusion_radius=1e6) == []
    # No charges, nothing excluded
    assert len(field_vector_grid([], 400.0, 300.0)) == 64


def test_invalid_grid_parameters():
    with pytest.raises(ValueError):
        FieldGrid(width=100.0, height=100.0, grid_size=1)
    with pytest.raises(ValueError):
        FieldGrid(width=100.0, height=100.0, exclusion_radius=-1.0)


def test_grid_from_env(monkeypatch):
    monkeypatch.setenv("ELECTRO_SIM_GRID_SIZE", "5")
    monkeypatch.setenv("ELECTRO_SIM_EXCLUSION_RADIUS", "12.5")
    grid = FieldGrid.from_env(200.0, 100.0)
    assert grid.grid_size == 5
    assert grid.exclusion_radius == 12.5

    monkeypatch.delenv("ELECTRO_SIM_GRID_SIZE")
    monkeypatch.delenv("ELECTRO_SIM_EXCLUSION_RADIUS")
    grid = FieldGrid.from_env(200.0, 100.0)
    assert grid.grid_size == 8
    assert grid.exclusion_radius == 20.0

    monkeypatch.setenv("ELECTRO_SIM_GRID_SIZE", "eight")
    with pytest.raises(ValueError):
        FieldGrid.from_env(200.0, 100.0)


def test_sample_exactly_at_exclusion_radius_is_kept():
    """
    Exclusion is strict (< radius): a corner sample 20 units from a charge
    stays in the output.
    """
    corner = Vector3(-200.0, -150.0, 0.0)
    charge = Charge("edge", (-200.0, -130.0, 0.0), 1e-6)
    assert distance(corner, charge.position) == 20.0

    samples = field_vector_grid([charge], 400.0, 300.0, exclusion_radius=20.0)
    assert corner in [s.position for s in samples]

    # Slightly larger radius drops it
    samples = field_vector_grid([charge], 400.0, 300.0, exclusion_radius=20.0 + 1e-9)
    assert corner not in [s.position for s in samples]
