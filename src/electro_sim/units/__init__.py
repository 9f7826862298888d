# MIT License (see LICENSE)
"""
Presentation helpers for physical values.

This subpackage provides:
    - conversion: Unit conversion tables for charge, voltage, distance,
      capacitance, energy and electric field, plus display-unit pickers.
    - formatting: SI-prefixed and fixed/scientific string formatting.

Typical usage:
    from electro_sim.units import format_with_unit, convert_charge

    format_with_unit(2.5e-6, "C")          # "2.50 μC"
    convert_charge(5.0, "μC", "nC")        # 5000.0
"""
from .conversion import (
    UnknownUnitError,
    convert_charge,
    convert_voltage,
    convert_distance,
    convert_capacitance,
    convert_energy,
    convert_electric_field,
    appropriate_charge_unit,
    appropriate_distance_unit,
)
from .formatting import (
    format_with_unit,
    format_number,
    format_scientific,
    format_vector,
    format_percentage,
    si_prefix,
)

__all__ = [
    # Conversion
    "UnknownUnitError",
    "convert_charge",
    "convert_voltage",
    "convert_distance",
    "convert_capacitance",
    "convert_energy",
    "convert_electric_field",
    "appropriate_charge_unit",
    "appropriate_distance_unit",
    # Formatting
    "format_with_unit",
    "format_number",
    "format_scientific",
    "format_vector",
    "format_percentage",
    "si_prefix",
]
