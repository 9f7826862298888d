# MIT License (see LICENSE)
"""
Value types passed between the physics core and the presentation layer.

Defines:
- Charge: a point charge with identity and position.
- ElectricField / ForceVector: a vector result anchored at a position.
- Capacitor: parallel-plate parameters with derived quantities.
- GraphData: a sampled curve ready for plotting.

All types are immutable except GraphData, whose arrays belong to the caller
once returned. Derived fields (result magnitudes, capacitor capacitance and
charge) are computed here or by the functions in `core`, never set by hand.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace

import numpy as np

from .constants import EPSILON_0
from .util import f64
from .vector import Vector3, angle_degrees


# =============================================================================
# Charges
# =============================================================================

@dataclass(frozen=True)
class Charge:
    """
    A point charge.

    Attributes:
        id: Identifier, unique within a working set of charges.
        position: Location in meters. Tuples and arrays are converted to Vector3.
        charge: Signed charge in Coulombs.
        fixed: True if the charge may not be dragged. Ignored by the physics.
    """
    id: str
    position: Vector3
    charge: float
    fixed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vector3.of(self.position))
        object.__setattr__(self, "charge", float(self.charge))

    def moved_to(self, position) -> Charge:
        """Return a copy of this charge at a new position."""
        return replace(self, position=Vector3.of(position))

    def with_charge(self, charge: float) -> Charge:
        """Return a copy of this charge with a new charge value."""
        return replace(self, charge=charge)


# =============================================================================
# Vector results
# =============================================================================

@dataclass(frozen=True)
class ElectricField:
    """
    Electric field at a point.

    Attributes:
        position: Where the field was evaluated.
        field: Field vector in N/C (equivalently V/m).
        magnitude: |field|, always >= 0.
    """
    position: Vector3
    field: Vector3
    magnitude: float

    @property
    def vector(self) -> Vector3:
        return self.field

    @property
    def angle_degrees(self) -> float:
        """Direction of the field in the xy-plane, in degrees."""
        return angle_degrees(self.field)


@dataclass(frozen=True)
class ForceVector:
    """
    Force acting on a charge.

    Attributes:
        position: Position of the charge the force acts on.
        force: Force vector in Newtons.
        magnitude: |force|, always >= 0.
    """
    position: Vector3
    force: Vector3
    magnitude: float

    @property
    def vector(self) -> Vector3:
        return self.force

    @property
    def angle_degrees(self) -> float:
        return angle_degrees(self.force)


# =============================================================================
# Capacitor
# =============================================================================

@dataclass(frozen=True)
class Capacitor:
    """
    Parallel-plate capacitor.

    Only area, distance, dielectric and voltage are inputs. Capacitance and
    charge are recomputed in __post_init__, and every update goes through
    `update()` (or the with_* helpers), which rebuilds the object. There is
    no way to hold a capacitance that disagrees with the current plates.

        C = ε₀ · εᵣ · A / d
        Q = C · V

    Attributes:
        area: Plate area in m².
        distance: Plate separation in m.
        dielectric: Relative permittivity εᵣ (1.0 for vacuum).
        voltage: Potential difference in Volts.
        capacitance: Derived, Farads.
        charge: Derived, Coulombs.
    """
    area: float
    distance: float
    dielectric: float = 1.0
    voltage: float = 0.0
    capacitance: float = field(init=False)
    charge: float = field(init=False)

    def __post_init__(self) -> None:
        # core imports this module, so import lazily.
        from .core.capacitor import capacitance, capacitor_charge

        c = capacitance(self.area, self.distance, self.dielectric)
        object.__setattr__(self, "capacitance", c)
        object.__setattr__(self, "charge", capacitor_charge(c, self.voltage))

    @classmethod
    def default(cls) -> Capacitor:
        """Builder starting point: 0.01 m² plates, 1 mm apart, vacuum, 100 V."""
        return cls(area=0.01, distance=0.001, dielectric=1.0, voltage=100.0)

    @property
    def energy(self) -> float:
        """Stored energy U = ½ C V² in Joules."""
        from .core.capacitor import capacitor_energy

        return capacitor_energy(self.capacitance, self.voltage)

    @property
    def field_strength(self) -> float:
        """Uniform field between the plates E = V / d in V/m."""
        from .core.capacitor import plate_field_strength

        return plate_field_strength(self.voltage, self.distance)

    @property
    def vacuum_capacitance(self) -> float:
        """Capacitance the same plates would have without a dielectric."""
        if self.distance == 0:
            return 0.0
        return EPSILON_0 * self.area / self.distance

    def update(self, **changes) -> Capacitor:
        """
        Return a new capacitor with some inputs changed and all derived
        quantities recomputed.

        Raises:
            TypeError: If a derived field (capacitance, charge) is passed.
        """
        derived = {"capacitance", "charge"} & changes.keys()
        if derived:
            raise TypeError(f"Derived fields cannot be set directly: {sorted(derived)}")
        return replace(self, **changes)

    def with_area(self, area: float) -> Capacitor:
        return self.update(area=area)

    def with_distance(self, distance: float) -> Capacitor:
        return self.update(distance=distance)

    def with_dielectric(self, dielectric: float) -> Capacitor:
        return self.update(dielectric=dielectric)

    def with_voltage(self, voltage: float) -> Capacitor:
        return self.update(voltage=voltage)


# =============================================================================
# Plot data
# =============================================================================

@dataclass
class GraphData:
    """
    A sampled curve.

    Attributes:
        x: Abscissas (or x(t) for parametric curves), float64.
        y: Ordinates, float64, same length as x.
        label: Legend label.
        color: Optional color hint for the renderer.
    """
    x: np.ndarray
    y: np.ndarray
    label: str = "Data"
    color: str | None = None

    def __post_init__(self) -> None:
        self.x = f64(self.x)
        self.y = f64(self.y)
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y must have equal length, got {len(self.x)} and {len(self.y)}")

    def __len__(self) -> int:
        return len(self.x)
