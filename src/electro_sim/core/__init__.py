# MIT License (see LICENSE)
"""
Electrostatics core.

This subpackage provides:
    - Forces: Coulomb force between pairs, net force on a charge, pair energy.
    - Fields: Field and potential of one or many charges, potential maps.
    - Capacitor: Parallel-plate capacitance, charge, energy, plate field.
    - Invariants: Total charge, net force, configuration energy.

Typical usage:
    from electro_sim.core import coulomb_force, total_field

    f = coulomb_force(a, b)
    e = total_field([a, b], (0.0, 0.5, 0.0))
"""
from .forces import coulomb_force, total_force_on, potential_energy
from .fields import (
    electric_field,
    total_field,
    electric_potential,
    total_potential,
    potential_energy_at,
    potential_grid,
    equipotential_radius,
)
from .capacitor import (
    capacitance,
    capacitor_charge,
    capacitor_energy,
    plate_field_strength,
)
from .invariants import total_charge, net_force, system_potential_energy

__all__ = [
    # Forces
    "coulomb_force",
    "total_force_on",
    "potential_energy",
    # Fields and potential
    "electric_field",
    "total_field",
    "electric_potential",
    "total_potential",
    "potential_energy_at",
    "potential_grid",
    "equipotential_radius",
    # Capacitor
    "capacitance",
    "capacitor_charge",
    "capacitor_energy",
    "plate_field_strength",
    # Invariants
    "total_charge",
    "net_force",
    "system_potential_energy",
]
