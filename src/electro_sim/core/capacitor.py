# MIT License (see LICENSE)
"""
Parallel-plate capacitor formulas.

    C = ε₀ · εᵣ · A / d
    Q = C · V
    U = ½ · C · V²
    E = V / d

A zero plate separation returns 0 for C and E instead of dividing by zero.
The Capacitor type in `types` wraps these so derived values always move
together.
"""
from __future__ import annotations

from ..constants import EPSILON_0


def capacitance(area: float, distance: float, dielectric: float = 1.0) -> float:
    """Capacitance in Farads of plates of `area` m² separated by `distance` m."""
    if distance == 0:
        return 0.0
    return EPSILON_0 * dielectric * area / distance


def capacitor_charge(capacitance: float, voltage: float) -> float:
    """Stored charge Q = C·V in Coulombs."""
    return capacitance * voltage


def capacitor_energy(capacitance: float, voltage: float) -> float:
    """Stored energy U = ½·C·V² in Joules."""
    return 0.5 * capacitance * voltage * voltage


def plate_field_strength(voltage: float, distance: float) -> float:
    """Uniform field between the plates, V/d in V/m."""
    if distance == 0:
        return 0.0
    return voltage / distance
