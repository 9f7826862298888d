# MIT License (see LICENSE)
"""
Numerical sampling that feeds the visualisations.

This subpackage provides:
    - grid: Field vectors on a 2D grid, skipping points near charges.
    - graph: Uniformly sampled function and parametric curves.

Typical usage:
    from electro_sim.sampling import field_vector_grid, graph_data

    arrows = field_vector_grid(charges, width=400, height=300)
    curve = graph_data(0.0, 10.0, 11, lambda x: x * x)
"""
from .grid import FieldGrid, field_vector_grid
from .graph import graph_data, multiple_graph_data, parametric_graph_data

__all__ = [
    "FieldGrid",
    "field_vector_grid",
    "graph_data",
    "multiple_graph_data",
    "parametric_graph_data",
]
