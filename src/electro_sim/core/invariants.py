# MIT License (see LICENSE)
"""
Quantities conserved or fixed by construction across a set of charges.

Used by tests and debugging helpers. For an isolated set of point charges the
internal forces come in action/reaction pairs, so their sum is zero up to
rounding, and the total charge is simply additive.
"""
from __future__ import annotations

from ..types import Charge
from ..vector import Vector3, vector_sum
from .forces import potential_energy, total_force_on


def total_charge(charges: list[Charge]) -> float:
    """
    Net charge of the set.

    Q = Σ qᵢ
    """
    return sum((c.charge for c in charges), 0.0)


def net_force(charges: list[Charge]) -> Vector3:
    """
    Sum of the forces every charge feels from the rest of the set.

    Newton's third law makes this the zero vector, within floating-point error.
    """
    return vector_sum(total_force_on(c, charges).force for c in charges)


def system_potential_energy(charges: list[Charge]) -> float:
    """
    Total electrostatic energy of the configuration.

    U = Σ_{i<j} k·qᵢ·qⱼ / rᵢⱼ
    """
    u = 0.0
    n = len(charges)
    for i in range(n):
        for j in range(i + 1, n):
            u += potential_energy(charges[i], charges[j])
    return u
