# MIT License (see LICENSE)
"""
Coulomb forces between point charges.

Implements F = k · |q₁q₂| / r² with the direction along the line joining the
charges: away from the source for like charges (repulsion), toward it for
opposite charges (attraction).

Key concepts:
- Every function returns a new ForceVector; charges are never modified.
- Coincident charges (r < MIN_DISTANCE) give a zero force rather than a
  singularity. This is a clamp, not a physical result.
- Pairwise superposition is O(N) per target and O(N²) for net_force().
"""
from __future__ import annotations
import logging

from ..constants import K_COULOMB, MIN_DISTANCE
from ..types import Charge, ForceVector
from ..vector import ZERO, distance, magnitude, normalize, scale, subtract, vector_sum

logger = logging.getLogger(__name__)


def coulomb_force(a: Charge, b: Charge) -> ForceVector:
    """
    Force exerted on charge `a` by charge `b`.

    Magnitude k·|qa·qb|/r²; direction is the unit vector from b to a,
    reversed when the charges have opposite signs.

    Args:
        a: The charge the force acts on.
        b: The source charge.

    Returns:
        ForceVector anchored at a.position. Zero when the charges coincide.
    """
    r = distance(a.position, b.position)
    if r < MIN_DISTANCE:
        logger.debug("Coincident charges %r and %r, force clamped to zero", a.id, b.id)
        return ForceVector(position=a.position, force=ZERO, magnitude=0.0)

    product = a.charge * b.charge
    force_mag = K_COULOMB * abs(product) / (r * r)

    direction = normalize(subtract(a.position, b.position))
    sign = 1.0 if product > 0 else -1.0

    return ForceVector(
        position=a.position,
        force=scale(direction, force_mag * sign),
        magnitude=force_mag,
    )


def total_force_on(target: Charge, others: list[Charge]) -> ForceVector:
    """
    Net force on `target` from every charge in `others`.

    Charges sharing target's id are skipped, so passing the full working set
    (target included) is fine. The magnitude is taken from the summed vector,
    so opposing contributions cancel.
    """
    total = vector_sum(
        coulomb_force(target, other).force
        for other in others
        if other.id != target.id
    )
    return ForceVector(position=target.position, force=total, magnitude=magnitude(total))


def potential_energy(a: Charge, b: Charge) -> float:
    """
    Electric potential energy of a pair, U = k·qa·qb / r (signed, in Joules).

    Negative for opposite charges (bound), positive for like charges.
    Zero when the charges coincide.
    """
    r = distance(a.position, b.position)
    if r < MIN_DISTANCE:
        return 0.0
    return K_COULOMB * a.charge * b.charge / r
