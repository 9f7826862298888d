# MIT License (see LICENSE)
"""
String formatting of physical values for display.

format_with_unit() picks one SI prefix from fixed, contiguous buckets:

    |v| >= 1e9   G        |v| >= 1e-3  m
    |v| >= 1e6   M        |v| >= 1e-6  μ
    |v| >= 1e3   k        |v| >= 1e-9  n
    |v| >= 1     (none)   otherwise    p

Zero is always rendered as "0 <unit>".
"""
from __future__ import annotations
import math
from decimal import ROUND_HALF_UP, Context, Decimal

# (threshold, power of ten, prefix), descending threshold. The last entry
# catches everything below 1e-9.
_SI_BUCKETS: tuple[tuple[float, int, str], ...] = (
    (1e9, 9, "G"),
    (1e6, 6, "M"),
    (1e3, 3, "k"),
    (1.0, 0, ""),
    (1e-3, -3, "m"),
    (1e-6, -6, "μ"),
    (1e-9, -9, "n"),
    (0.0, -12, "p"),
)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _fixed(value: float, decimals: int) -> str:
    """
    Fixed-point text with exact ties rounded away from zero (1.125 -> "1.13").

    Non-finite values render as "Infinity", "-Infinity" or "NaN".
    """
    if not math.isfinite(value):
        return _non_finite(value)
    d = Decimal(value)
    # Enough digits for the integer part plus the requested decimals.
    ctx = Context(prec=max(28, d.adjusted() + decimals + 2))
    q = d.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=ctx)
    return format(q, "f")


def format_number(value: float, decimals: int = 2) -> str:
    """Fixed-point with `decimals` places."""
    return _fixed(value, decimals)


def format_scientific(value: float, decimals: int = 2) -> str:
    """
    Scientific notation with an unpadded exponent, e.g. 1500 -> "1.50e+3".
    """
    if not math.isfinite(value):
        return _non_finite(value)
    mantissa, exponent = f"{value:.{decimals}e}".split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def si_prefix(value: float) -> tuple[str, float]:
    """
    Return (prefix, scaled value) for the bucket |value| falls in.

    Zero falls in the last bucket; format_with_unit() special-cases it.
    """
    mag = abs(value)
    for threshold, power, prefix in _SI_BUCKETS:
        if mag >= threshold:
            break
    # Multiply by an exact integer for sub-unit prefixes so 2.5e-6 scales to 2.5.
    if power >= 0:
        return prefix, value / 10**power
    return prefix, value * 10**-power


def format_with_unit(value: float, unit: str, decimals: int = 2) -> str:
    """
    Format value with an SI-prefixed unit, e.g. 2.5e-6, "C" -> "2.50 μC".
    """
    if value == 0:
        return f"0 {unit}"
    prefix, scaled = si_prefix(value)
    return f"{_fixed(scaled, decimals)} {prefix}{unit}"


def format_vector(x: float, y: float, z: float | None = None, decimals: int = 2) -> str:
    """Render "(x, y)" or "(x, y, z)" with fixed decimals."""
    comps = [x, y] if z is None else [x, y, z]
    return "(" + ", ".join(format_number(c, decimals) for c in comps) + ")"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Render a fraction as a percentage, 0.256 -> "25.6%"."""
    return f"{_fixed(value * 100, decimals)}%"
