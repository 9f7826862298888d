# MIT License (see LICENSE)
"""
Physical constants and presentation defaults used throughout the package.

Physical values use SI units. The grid defaults are tuned for the field
visualiser and carry no physical meaning; callers may override them.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Value: 8.987551787 × 10⁹ N·m²/C²
K_COULOMB: float = 8.987551787e9

# Vacuum permittivity ε₀ in F/m.
EPSILON_0: float = 8.854187817e-12

# Elementary charge in Coulombs.
ELEMENTARY_CHARGE: float = 1.602176634e-19

# Particle rest masses in kg.
ELECTRON_MASS: float = 9.10938356e-31
PROTON_MASS: float = 1.672621898e-27
NEUTRON_MASS: float = 1.674927471e-27

# Coincident-point guard. Any distance below this in a denominator yields a
# zero-valued result instead of a singularity.
MIN_DISTANCE: float = 1e-10

# Field-vector grid defaults (grid_size × grid_size samples; samples closer
# than the exclusion radius to a charge are dropped).
DEFAULT_GRID_SIZE: int = 8
DEFAULT_EXCLUSION_RADIUS: float = 20.0
