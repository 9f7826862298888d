# MIT License (see LICENSE)
"""
Atom composition for the atom builder.

An Atom is just particle counts; charge and mass follow from them:

    Q = (protons - electrons) · e
    m = protons·m_p + neutrons·m_n + electrons·m_e
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from .constants import ELECTRON_MASS, ELEMENTARY_CHARGE, NEUTRON_MASS, PROTON_MASS

PARTICLES = ("proton", "neutron", "electron")


@dataclass(frozen=True)
class Atom:
    """
    Particle counts of an atom or ion.

    Attributes:
        protons: Number of protons (atomic number).
        neutrons: Number of neutrons.
        electrons: Number of electrons.
    """
    protons: int = 1
    neutrons: int = 0
    electrons: int = 1

    def __post_init__(self) -> None:
        for name in PARTICLES:
            count = getattr(self, name + "s")
            if count < 0:
                raise ValueError(f"{name} count must be non-negative, got {count}")

    @property
    def net_charge(self) -> float:
        """Net charge in Coulombs."""
        return (self.protons - self.electrons) * ELEMENTARY_CHARGE

    @property
    def is_neutral(self) -> bool:
        return self.protons == self.electrons

    @property
    def atomic_number(self) -> int:
        return self.protons

    @property
    def mass_number(self) -> int:
        return self.protons + self.neutrons

    @property
    def mass(self) -> float:
        """Rest mass of the constituents in kg (binding energy ignored)."""
        return (
            self.protons * PROTON_MASS
            + self.neutrons * NEUTRON_MASS
            + self.electrons * ELECTRON_MASS
        )

    def add(self, particle: str) -> Atom:
        """Return a new atom with one more `particle`."""
        field_name = _field_for(particle)
        return replace(self, **{field_name: getattr(self, field_name) + 1})

    def remove(self, particle: str) -> Atom:
        """Return a new atom with one fewer `particle`; counts stop at zero."""
        field_name = _field_for(particle)
        count = getattr(self, field_name)
        if count == 0:
            return self
        return replace(self, **{field_name: count - 1})


def _field_for(particle: str) -> str:
    if particle not in PARTICLES:
        raise ValueError(f"Unknown particle type: '{particle}'")
    return particle + "s"
