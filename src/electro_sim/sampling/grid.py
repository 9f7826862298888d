# MIT License (see LICENSE)
"""
Field-vector sampling over a rectangular region.

The region is centred on the origin: x runs over [-width/2, width/2] and y
over [-height/2, height/2], with grid_size evenly spaced samples along each
axis (endpoints included). Samples closer than `exclusion_radius` to any
charge are dropped, since the field diverges there and an arrow would be
meaningless.

Complexity: O(grid_size² × N) for N charges.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from ..constants import DEFAULT_EXCLUSION_RADIUS, DEFAULT_GRID_SIZE
from ..core.fields import total_field
from ..types import Charge, ElectricField
from ..util import env_float, env_int
from ..vector import Vector3, distance

logger = logging.getLogger(__name__)

GRID_SIZE_ENV = "ELECTRO_SIM_GRID_SIZE"
EXCLUSION_RADIUS_ENV = "ELECTRO_SIM_EXCLUSION_RADIUS"


@dataclass(frozen=True)
class FieldGrid:
    """
    Sampling layout for field arrows.

    Attributes:
        width: Region width, in the same length unit as charge positions.
        height: Region height.
        grid_size: Samples per axis (grid_size² in total). Must be >= 2.
        exclusion_radius: Minimum distance from any charge for a sample to
                          be kept.
    """
    width: float
    height: float
    grid_size: int = DEFAULT_GRID_SIZE
    exclusion_radius: float = DEFAULT_EXCLUSION_RADIUS

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.exclusion_radius < 0:
            raise ValueError(f"exclusion_radius must be non-negative, got {self.exclusion_radius}")

    @classmethod
    def from_env(cls, width: float, height: float) -> FieldGrid:
        """
        Build a grid whose tuning constants may be overridden through
        ELECTRO_SIM_GRID_SIZE and ELECTRO_SIM_EXCLUSION_RADIUS.
        """
        return cls(
            width=width,
            height=height,
            grid_size=env_int(GRID_SIZE_ENV, DEFAULT_GRID_SIZE),
            exclusion_radius=env_float(EXCLUSION_RADIUS_ENV, DEFAULT_EXCLUSION_RADIUS),
        )

    def points(self) -> list[Vector3]:
        """All grid_size² sample positions, x-major (column by column)."""
        n = self.grid_size
        frac = np.arange(n, dtype=np.float64) / (n - 1)
        xs = frac * self.width - self.width / 2
        ys = frac * self.height - self.height / 2
        return [Vector3(x, y, 0.0) for x in xs for y in ys]

    def is_excluded(self, point: Vector3, charges: list[Charge]) -> bool:
        return any(distance(point, c.position) < self.exclusion_radius for c in charges)

    def sample(self, charges: list[Charge]) -> list[ElectricField]:
        """
        Total field at every sample point that is not too close to a charge.

        Returns:
            One ElectricField per kept point, in points() order.
        """
        samples = []
        skipped = 0
        for p in self.points():
            if self.is_excluded(p, charges):
                skipped += 1
                continue
            samples.append(total_field(charges, p))
        logger.debug(
            "Sampled %d field vectors on a %dx%d grid (%d excluded near %d charges)",
            len(samples), self.grid_size, self.grid_size, skipped, len(charges),
        )
        return samples


def field_vector_grid(
    charges: list[Charge],
    width: float,
    height: float,
    grid_size: int = DEFAULT_GRID_SIZE,
    exclusion_radius: float = DEFAULT_EXCLUSION_RADIUS,
) -> list[ElectricField]:
    """
    Functional form of FieldGrid(...).sample(charges).

    Args:
        charges: Source charges.
        width: Region width.
        height: Region height.
        grid_size: Samples per axis.
        exclusion_radius: Samples closer than this to any charge are dropped.
    """
    grid = FieldGrid(width=width, height=height, grid_size=grid_size, exclusion_radius=exclusion_radius)
    return grid.sample(charges)
