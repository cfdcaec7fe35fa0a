"""
Heuristics module.

Provides heuristic functions for guiding A* pathfinding:
- zero_heuristic: Always 0, turns A* into Dijkstra
- grid_heuristic: Distance between "x,y" grid node names
- coordinate_heuristic: Distance between caller-supplied node coordinates

A heuristic is called as heuristic(node, goal) and must never overestimate
the true remaining cost if the search is to return an optimal path.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from graphkit.graph.node import Node

METRICS = ("manhattan", "euclidean")


def zero_heuristic(node: Node, goal: Node) -> float:
    """No estimate at all; always admissible."""
    return 0.0


def parse_grid_name(name: str) -> np.ndarray:
    """Parse an "x,y" node name into a float vector."""
    return np.array([float(part) for part in name.split(",")], dtype=np.float64)


def distance(a: np.ndarray, b: np.ndarray, metric: str = "manhattan") -> float:
    """Distance between two coordinate vectors under the given metric."""
    delta = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    if metric == "manhattan":
        return float(np.abs(delta).sum())
    if metric == "euclidean":
        return float(np.linalg.norm(delta))
    raise ValueError(f"Unknown metric '{metric}'. Available: {', '.join(METRICS)}")


def grid_heuristic(
    metric: str = "manhattan", scale: float = 1.0
) -> Callable[[Node, Node], float]:
    """
    Heuristic for graphs whose node names are grid coordinates ("x,y").

    Args:
        metric: "manhattan" or "euclidean"
        scale: Multiplier applied to the distance. Use the smallest edge
            weight per grid step to keep the estimate admissible.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric '{metric}'. Available: {', '.join(METRICS)}")

    def _heuristic(node: Node, goal: Node) -> float:
        return scale * distance(parse_grid_name(node.name), parse_grid_name(goal.name), metric)

    return _heuristic


def coordinate_heuristic(
    coordinates: Mapping[str, Sequence[float]],
    metric: str = "euclidean",
    scale: float = 1.0,
) -> Callable[[Node, Node], float]:
    """
    Heuristic from a mapping of node name to coordinates.

    Nodes without coordinates are estimated at 0, which keeps the
    heuristic admissible.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric '{metric}'. Available: {', '.join(METRICS)}")
    points = {name: np.asarray(point, dtype=np.float64) for name, point in coordinates.items()}

    def _heuristic(node: Node, goal: Node) -> float:
        a = points.get(node.name)
        b = points.get(goal.name)
        if a is None or b is None:
            return 0.0
        return scale * distance(a, b, metric)

    return _heuristic


__all__ = [
    "METRICS",
    "coordinate_heuristic",
    "distance",
    "grid_heuristic",
    "parse_grid_name",
    "zero_heuristic",
]
