# MIT License (see LICENSE)
"""
Uniform sampling of real functions for plotting.

All samplers use the step (stop - start) / (points - 1), so both interval
endpoints are included, and return a fully materialised GraphData.
"""
from __future__ import annotations
from typing import Any, Callable, Mapping

import numpy as np

from ..types import GraphData


def _abscissas(start: float, stop: float, points: int) -> np.ndarray:
    """start + i·step for i in 0..points-1."""
    if points < 2:
        raise ValueError(f"points must be at least 2, got {points}")
    step = (stop - start) / (points - 1)
    return start + np.arange(points, dtype=np.float64) * step


def graph_data(
    x_min: float,
    x_max: float,
    points: int,
    func: Callable[[float], float],
    label: str = "Data",
    color: str | None = None,
) -> GraphData:
    """
    Sample y = func(x) at `points` evenly spaced x in [x_min, x_max].

    Raises:
        ValueError: If points < 2.
    """
    xs = _abscissas(x_min, x_max, points)
    ys = [func(float(x)) for x in xs]
    return GraphData(x=xs, y=ys, label=label, color=color)


def multiple_graph_data(options: list[Mapping[str, Any]]) -> list[GraphData]:
    """
    graph_data() for each option mapping in `options`.

    Each mapping takes the keyword arguments of graph_data(): x_min, x_max,
    points, func and optionally label, color.
    """
    return [graph_data(**opts) for opts in options]


def parametric_graph_data(
    t_min: float,
    t_max: float,
    points: int,
    func_x: Callable[[float], float],
    func_y: Callable[[float], float],
    label: str = "Parametric",
    color: str | None = None,
) -> GraphData:
    """
    Sample the curve (func_x(t), func_y(t)) at `points` evenly spaced t.

    Raises:
        ValueError: If points < 2.
    """
    ts = _abscissas(t_min, t_max, points)
    xs = [func_x(float(t)) for t in ts]
    ys = [func_y(float(t)) for t in ts]
    return GraphData(x=xs, y=ys, label=label, color=color)
