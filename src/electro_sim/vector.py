# MIT License (see LICENSE)
"""
Immutable 3D vector type and vector algebra.

Every operation returns a new Vector3; nothing is mutated in place. The free
functions are the primary API and the operator overloads on Vector3 delegate
to them, so `a + b` and `add(a, b)` are interchangeable.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """
    A point or displacement in 3D space.

    Attributes:
        x, y, z: Components in a consistent length unit (meters unless a
                 caller rescales for display).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats so numpy scalars don't leak out."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def of(cls, value: Vector3 | tuple | list | np.ndarray) -> Vector3:
        """
        Coerce a Vector3, 2- or 3-sequence, or array to a Vector3.

        A 2-sequence is taken as (x, y) with z = 0.
        """
        if isinstance(value, Vector3):
            return value
        comps = [float(c) for c in value]
        if len(comps) == 2:
            return cls(comps[0], comps[1], 0.0)
        if len(comps) == 3:
            return cls(*comps)
        raise ValueError(f"Expected 2 or 3 components, got {len(comps)}")

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        return cls.of(arr)

    def to_array(self) -> np.ndarray:
        """Return components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return add(self, other)

    def __sub__(self, other: Vector3) -> Vector3:
        return subtract(self, other)

    def __mul__(self, s: float) -> Vector3:
        return scale(self, s)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return scale(self, -1.0)

    @property
    def magnitude(self) -> float:
        return magnitude(self)


ZERO = Vector3(0.0, 0.0, 0.0)


def magnitude(v: Vector3) -> float:
    """Euclidean length sqrt(x² + y² + z²). Always >= 0."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vector3) -> Vector3:
    """
    Return a unit vector in the direction of v.

    Returns the zero vector when |v| == 0 instead of dividing 0/0.
    """
    mag = magnitude(v)
    if mag == 0:
        return ZERO
    return Vector3(v.x / mag, v.y / mag, v.z / mag)


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    """Componentwise a - b."""
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector3, s: float) -> Vector3:
    """Multiply every component by scalar s (may be zero or negative)."""
    return Vector3(v.x * s, v.y * s, v.z * s)


def distance(p1: Vector3, p2: Vector3) -> float:
    """Distance |p1 - p2|. Symmetric, non-negative, zero iff p1 == p2."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    dz = p2.z - p1.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def vector_sum(vectors) -> Vector3:
    """Componentwise sum of an iterable of vectors (ZERO for an empty one)."""
    total = ZERO
    for v in vectors:
        total = add(total, v)
    return total


def angle_degrees(v: Vector3) -> float:
    """Direction of v projected on the xy-plane, atan2(y, x) in degrees."""
    return math.degrees(math.atan2(v.y, v.x))
