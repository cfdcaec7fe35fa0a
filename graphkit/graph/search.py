"""
A* shortest path search.

With the default zero heuristic this is Dijkstra's algorithm. Search state
(scores, predecessors, open/closed membership) lives in tables local to each
call, so searches never leave marks on the graph's nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from graphkit.graph.node import Edge
from graphkit.heuristics import zero_heuristic
from graphkit.structures import PriorityQueue

if TYPE_CHECKING:
    from graphkit.graph.graph import Graph
    from graphkit.graph.node import Node

logger = logging.getLogger(__name__)

Heuristic = Callable[["Node", "Node"], float]


def a_star(
    graph: Graph,
    from_name: str,
    to_name: str,
    heuristic: Heuristic | None = None,
) -> list[str]:
    """
    Find the cheapest path between two named nodes.

    Args:
        graph: Graph to search (edge weights must be non-negative)
        from_name: Name of the start node
        to_name: Name of the goal node
        heuristic: heuristic(node, goal) estimating the remaining cost.
            It must never overestimate for the result to be optimal.

    Returns:
        Node names from start to goal inclusive, or an empty list when
        either node is missing or the goal cannot be reached.
    """
    heuristic = heuristic or zero_heuristic
    start = graph.nodes.get(from_name)
    goal = graph.nodes.get(to_name)
    if start is None or goal is None:
        logger.warning(f"No path: '{from_name}' or '{to_name}' not in graph")
        return []

    g_score: dict[str, float] = {start.name: 0.0}
    f_score: dict[str, float] = {start.name: heuristic(start, goal)}
    came_from: dict[str, str] = {}
    open_entries: dict[str, Edge] = {}
    closed: set[str] = set()

    frontier = PriorityQueue(
        lambda a, b: f_score[a.target.name] - f_score[b.target.name]
    )
    sentinel = Edge(source=start, target=start, weight=0.0)
    frontier.add(sentinel)
    open_entries[start.name] = sentinel

    expanded = 0
    while frontier:
        edge = frontier.pop()
        node = edge.target
        del open_entries[node.name]

        if node is goal:
            path = [goal.name]
            while path[-1] in came_from:
                path.append(came_from[path[-1]])
            path.reverse()
            logger.debug(
                f"Path {from_name} -> {to_name} found after expanding {expanded} nodes "
                f"(cost {g_score[goal.name]})"
            )
            return path

        closed.add(node.name)
        expanded += 1

        for next_edge in node.edges:
            successor = next_edge.target
            if successor.name in closed:
                continue
            tentative = g_score[node.name] + next_edge.weight
            if successor.name in g_score and tentative >= g_score[successor.name]:
                continue

            came_from[successor.name] = node.name
            g_score[successor.name] = tentative
            f_score[successor.name] = tentative + heuristic(successor, goal)

            if successor.name in open_entries:
                frontier.change(open_entries[successor.name])
            else:
                open_entries[successor.name] = next_edge
                frontier.add(next_edge)

    logger.warning(f"No path from '{from_name}' to '{to_name}'")
    return []
