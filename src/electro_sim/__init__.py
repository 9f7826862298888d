# MIT License (see LICENSE)
"""
electro_sim - Electrostatics computations for interactive physics lessons.

This package computes the numbers behind charge, field, force, potential
and capacitor visualisations. It is a library of pure functions over
immutable values: it holds no state and does no drawing.

Main entry points:
    - Vector3: Immutable 3D vector.
    - Charge: A point charge with id, position and signed charge.
    - coulomb_force, total_force_on: Forces between charges.
    - electric_field, total_field, electric_potential, total_potential.
    - Capacitor: Parallel-plate capacitor with derived quantities.
    - field_vector_grid, graph_data: Sampling for plots.
    - format_with_unit: SI-prefixed display strings.

Submodules:
    - core: Forces, fields, potential, capacitor formulas.
    - sampling: Field-vector grids and function curves.
    - units: Unit conversion and formatting.
    - atoms: Atom composition and net charge.

Example:
    from electro_sim import Charge, coulomb_force, format_with_unit

    a = Charge("a", (0.0, 0.0, 0.0), 1e-6)
    b = Charge("b", (0.1, 0.0, 0.0), -1e-6)
    f = coulomb_force(a, b)
    print(format_with_unit(f.magnitude, "N"))
"""
from .vector import Vector3
from .types import Charge, ElectricField, ForceVector, Capacitor, GraphData
from .atoms import Atom
from .core import (
    coulomb_force,
    total_force_on,
    electric_field,
    total_field,
    electric_potential,
    total_potential,
)
from .sampling import field_vector_grid, graph_data, parametric_graph_data
from .units import format_with_unit, UnknownUnitError

__all__ = [
    # Values
    "Vector3",
    "Charge",
    "ElectricField",
    "ForceVector",
    "Capacitor",
    "GraphData",
    "Atom",
    # Physics
    "coulomb_force",
    "total_force_on",
    "electric_field",
    "total_field",
    "electric_potential",
    "total_potential",
    # Sampling
    "field_vector_grid",
    "graph_data",
    "parametric_graph_data",
    # Display
    "format_with_unit",
    "UnknownUnitError",
]
