"""
Synthetic graph generators.

Used for demos, benchmarks and tests that need a graph larger than
anything worth writing out by hand.
"""

from __future__ import annotations

import logging

import numpy as np

from graphkit.config import GRID_WEIGHT_HIGH, GRID_WEIGHT_LOW
from graphkit.graph import Graph

logger = logging.getLogger(__name__)


def grid_name(x: int, y: int) -> str:
    """Node name for grid cell (x, y)."""
    return f"{x},{y}"


def grid_graph(
    width: int,
    height: int,
    low: float = GRID_WEIGHT_LOW,
    high: float = GRID_WEIGHT_HIGH,
    seed: int | None = None,
) -> Graph:
    """
    Undirected width x height grid with random edge weights.

    Each cell "x,y" is joined to its right and lower neighbours. Weights
    are drawn uniformly from [low, high), so grid_heuristic(scale=low)
    never overestimates the remaining cost.

    Args:
        width: Number of columns
        height: Number of rows
        low: Smallest possible edge weight (must be >= 0)
        high: Upper bound on edge weights
        seed: Seed for numpy's random generator, for reproducible grids
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if low < 0 or high < low:
        raise ValueError(f"Invalid weight range [{low}, {high})")

    rng = np.random.default_rng(seed)
    # one weight per right-hand edge and per downward edge
    right = rng.uniform(low, high, size=(height, max(width - 1, 0)))
    down = rng.uniform(low, high, size=(max(height - 1, 0), width))

    graph = Graph(directed=False)
    for y in range(height):
        for x in range(width):
            here = grid_name(x, y)
            graph.ensure_node(here)
            if x + 1 < width:
                graph.add_edge(here, grid_name(x + 1, y), float(right[y, x]))
            if y + 1 < height:
                graph.add_edge(here, grid_name(x, y + 1), float(down[y, x]))

    logger.info(f"Generated {width}x{height} grid graph with {graph.edge_count() // 2} edges")
    return graph
