# MIT License (see LICENSE)
"""
Electric field and potential of point charges.

    E = k · q / r² · r̂        (vector, points away from positive charges)
    V = k · q / r             (scalar, signed)

Both obey superposition: fields add as vectors, potentials as scalars. The
same coincident-point clamp as the force functions applies: within
MIN_DISTANCE of a charge its contribution is zero.

potential_grid() is a vectorised numpy version of total_potential() used to
build potential maps for the "voltage hill" view and equipotential contours.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import K_COULOMB, MIN_DISTANCE
from ..types import Charge, ElectricField
from ..vector import Vector3, ZERO, distance, magnitude, normalize, scale, subtract, vector_sum


def electric_field(charge: Charge, point: Vector3) -> ElectricField:
    """
    Field at `point` due to a single charge.

    Args:
        charge: Source charge.
        point: Evaluation point in meters.

    Returns:
        ElectricField with magnitude k·|q|/r², pointing away from the charge
        when q > 0 and toward it when q < 0.
    """
    point = Vector3.of(point)
    r = distance(charge.position, point)
    if r < MIN_DISTANCE:
        return ElectricField(position=point, field=ZERO, magnitude=0.0)

    field_mag = K_COULOMB * abs(charge.charge) / (r * r)
    direction = normalize(subtract(point, charge.position))
    sign = 1.0 if charge.charge > 0 else -1.0

    return ElectricField(
        position=point,
        field=scale(direction, field_mag * sign),
        magnitude=field_mag,
    )


def total_field(charges: list[Charge], point: Vector3) -> ElectricField:
    """
    Superposed field of all charges at `point`.

    Sums field vectors componentwise and recomputes the magnitude from the
    sum (not the sum of magnitudes).
    """
    point = Vector3.of(point)
    total = vector_sum(electric_field(c, point).field for c in charges)
    return ElectricField(position=point, field=total, magnitude=magnitude(total))


def electric_potential(charge: Charge, point: Vector3) -> float:
    """Potential k·q/r in Volts at `point` due to one charge. Signed."""
    r = distance(charge.position, Vector3.of(point))
    if r < MIN_DISTANCE:
        return 0.0
    return K_COULOMB * charge.charge / r


def total_potential(charges: list[Charge], point: Vector3) -> float:
    """Scalar sum of the potentials of all charges at `point`."""
    point = Vector3.of(point)
    return sum((electric_potential(c, point) for c in charges), 0.0)


def potential_energy_at(charges: list[Charge], point: Vector3, test_charge: float) -> float:
    """
    Potential energy U = q·V of a test charge placed at `point`.

    Args:
        charges: Source charges.
        point: Where the test charge sits.
        test_charge: Test charge in Coulombs.
    """
    return test_charge * total_potential(charges, point)


def potential_grid(charges: list[Charge], xs, ys, z: float = 0.0) -> np.ndarray:
    """
    Total potential sampled on the grid xs × ys at height z.

    Args:
        charges: Source charges.
        xs: 1D array of x coordinates.
        ys: 1D array of y coordinates.
        z: Plane the grid lies in.

    Returns:
        Array of shape (len(ys), len(xs)); element [j, i] is the potential at
        (xs[i], ys[j], z). Points within MIN_DISTANCE of a charge receive no
        contribution from it, matching total_potential().
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    gx, gy = np.meshgrid(xs, ys)
    out = np.zeros_like(gx)

    for c in charges:
        p = c.position
        r = np.sqrt((gx - p.x) ** 2 + (gy - p.y) ** 2 + (z - p.z) ** 2)
        near = r < MIN_DISTANCE
        # Avoid the 0-division warning; masked points are zeroed below.
        contrib = K_COULOMB * c.charge / np.where(near, 1.0, r)
        out += np.where(near, 0.0, contrib)
    return out


def equipotential_radius(q: float, potential: float) -> float | None:
    """
    Radius of the equipotential sphere V = `potential` around a lone charge q.

    r = k·q / V

    Returns:
        The radius in meters; math.inf for V == 0 (reached only at infinity);
        None if no such surface exists (q == 0, or V has the opposite sign).
    """
    if q == 0:
        return None
    if potential == 0:
        return math.inf
    r = K_COULOMB * q / potential
    if r <= 0:
        return None
    return r
