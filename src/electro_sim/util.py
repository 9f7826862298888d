# MIT License (see LICENSE)
"""
Small numeric helpers shared across the package.

Includes array conversion, scalar interpolation/clamping used when mapping
physical values onto display ranges, and environment lookups for the
configurable presentation defaults.
"""
from __future__ import annotations
import math
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used for sampled sequences so lists, tuples and arrays are all accepted.
    """
    return np.array(x, dtype=np.float64)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return min(max(value, lo), hi)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation: start at t=0, end at t=1."""
    return start + (end - start) * t


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """
    Map value linearly from [in_min, in_max] onto [out_min, out_max].

    Raises:
        ValueError: If the input range is empty (in_min == in_max).
    """
    if in_max == in_min:
        raise ValueError(f"Input range must be non-empty, got [{in_min}, {in_max}]")
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def round_to_step(value: float, step: float) -> float:
    """Round value to the nearest multiple of step."""
    if step == 0:
        raise ValueError("step must be non-zero")
    # Halves round up, so 2.5 -> 3 rather than 2.
    return math.floor(value / step + 0.5) * step


def env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to default when unset."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from None


def env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to default when unset."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number, got {raw!r}") from None
