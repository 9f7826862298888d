# MIT License (see LICENSE)
"""
Unit conversion for the quantities shown in the UI.

Each quantity keeps a table mapping unit symbol -> multiplier to its SI base
unit, and conversion is value · to_base[from] / to_base[to]. An unknown
symbol raises UnknownUnitError; there is no silent NaN.
"""
from __future__ import annotations
from typing import Mapping

from ..constants import ELEMENTARY_CHARGE


class UnknownUnitError(ValueError):
    """Raised when a unit symbol is not in the conversion table."""

    def __init__(self, quantity: str, unit: str, known: Mapping[str, float]) -> None:
        self.quantity = quantity
        self.unit = unit
        super().__init__(
            f"Unknown {quantity} unit {unit!r}; expected one of {', '.join(known)}"
        )


CHARGE_UNITS: dict[str, float] = {
    "C": 1.0,
    "mC": 1e-3,
    "μC": 1e-6,
    "nC": 1e-9,
    "pC": 1e-12,
}

VOLTAGE_UNITS: dict[str, float] = {
    "V": 1.0,
    "kV": 1e3,
    "mV": 1e-3,
    "μV": 1e-6,
}

DISTANCE_UNITS: dict[str, float] = {
    "m": 1.0,
    "cm": 1e-2,
    "mm": 1e-3,
    "μm": 1e-6,
    "nm": 1e-9,
}

CAPACITANCE_UNITS: dict[str, float] = {
    "F": 1.0,
    "mF": 1e-3,
    "μF": 1e-6,
    "nF": 1e-9,
    "pF": 1e-12,
}

ENERGY_UNITS: dict[str, float] = {
    "J": 1.0,
    "eV": ELEMENTARY_CHARGE,
    "keV": ELEMENTARY_CHARGE * 1e3,
    "MeV": ELEMENTARY_CHARGE * 1e6,
}

# N/C and V/m are the same unit.
ELECTRIC_FIELD_UNITS: dict[str, float] = {
    "N/C": 1.0,
    "V/m": 1.0,
}


def convert(value: float, from_unit: str, to_unit: str, table: Mapping[str, float], quantity: str) -> float:
    """
    Convert value between two units of the same quantity.

    Args:
        value: Magnitude expressed in from_unit.
        from_unit: Source unit symbol.
        to_unit: Target unit symbol.
        table: Symbol -> multiplier to the SI base unit.
        quantity: Name used in error messages.

    Raises:
        UnknownUnitError: If either symbol is missing from table.
    """
    for unit in (from_unit, to_unit):
        if unit not in table:
            raise UnknownUnitError(quantity, unit, table)
    return value * table[from_unit] / table[to_unit]


def convert_charge(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, CHARGE_UNITS, "charge")


def convert_voltage(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, VOLTAGE_UNITS, "voltage")


def convert_distance(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, DISTANCE_UNITS, "distance")


def convert_capacitance(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, CAPACITANCE_UNITS, "capacitance")


def convert_energy(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, ENERGY_UNITS, "energy")


def convert_electric_field(value: float, from_unit: str, to_unit: str) -> float:
    return convert(value, from_unit, to_unit, ELECTRIC_FIELD_UNITS, "electric field")


def appropriate_charge_unit(charge: float) -> str:
    """Pick a readable charge unit for display: mC, μC, nC or pC."""
    q = abs(charge)
    if q >= 1e-3:
        return "mC"
    if q >= 1e-6:
        return "μC"
    if q >= 1e-9:
        return "nC"
    return "pC"


def appropriate_distance_unit(distance: float) -> str:
    """Pick a readable distance unit for display: m, cm, mm or μm."""
    d = abs(distance)
    if d >= 1:
        return "m"
    if d >= 1e-2:
        return "cm"
    if d >= 1e-3:
        return "mm"
    return "μm"
