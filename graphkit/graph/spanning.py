"""
Minimum spanning tree construction.

Kruskal's algorithm is the default: it handles disconnected graphs by
returning a minimum spanning forest. Prim's algorithm grows a single tree
from a start node and therefore only covers the start node's component.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphkit.structures import PriorityQueue

if TYPE_CHECKING:
    from graphkit.graph.graph import Graph
    from graphkit.graph.node import Edge

logger = logging.getLogger(__name__)


class SpanningSets:
    """
    Disjoint-set membership for Kruskal's algorithm, keyed by node name.

    Union by size with path halving, so the set id of every node stays
    correct however long the chain of merges gets.
    """

    def __init__(self, names) -> None:
        self._parent: dict[str, str] = {name: name for name in names}
        self._size: dict[str, int] = {name: 1 for name in self._parent}

    def find(self, name: str) -> str:
        """Return the representative (set id) of name's set."""
        parent = self._parent
        while parent[name] != name:
            parent[name] = parent[parent[name]]
            name = parent[name]
        return name

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b. Returns False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return True

    def same(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)


def _empty_copy(graph: Graph) -> Graph:
    """New graph with the same direction and node names but no edges."""
    from graphkit.graph.graph import Graph

    tree = Graph(directed=graph.directed)
    for name in graph.nodes:
        tree.ensure_node(name)
    return tree


def kruskal(graph: Graph) -> Graph:
    """
    Minimum spanning forest by Kruskal's algorithm.

    Edge records are sorted by weight with a stable sort, so ties keep
    their edge-list order and the result is deterministic.
    """
    tree = _empty_copy(graph)
    sets = SpanningSets(graph.nodes)
    ordered = sorted(graph.edges(), key=lambda edge: edge.weight)

    added = 0
    for edge in ordered:
        source = edge.source.name
        target = edge.target.name
        if sets.union(source, target):
            tree.add_edge(source, target, edge.weight)
            added += 1

    logger.debug(f"Kruskal kept {added} of {len(ordered)} edge records")
    return tree


def prim(graph: Graph, start: str | None = None) -> Graph:
    """
    Minimum spanning tree grown from start by Prim's algorithm.

    The tree only spans the component containing start: once no edge
    crosses from the tree to an outside node the search stops and the
    partial tree is returned as it is. On a connected graph this is a
    true minimum spanning tree.
    """
    tree = _empty_copy(graph)
    if not graph.nodes:
        return tree
    if start is None:
        start = next(iter(graph.nodes))
    root = graph.nodes.get(start)
    if root is None:
        logger.warning(f"Prim start node '{start}' not in graph")
        return tree

    in_tree = {root.name}
    crossing = PriorityQueue(lambda a, b: a.weight - b.weight)
    for edge in root.edges:
        crossing.add(edge)

    while crossing:
        edge: Edge = crossing.pop()
        target = edge.target
        if target.name in in_tree:
            continue
        in_tree.add(target.name)
        tree.add_edge(edge.source.name, target.name, edge.weight)
        for onward in target.edges:
            if onward.target.name not in in_tree:
                crossing.add(onward)

    if len(in_tree) < len(graph.nodes):
        logger.info(
            f"Prim reached {len(in_tree)} of {len(graph.nodes)} nodes from '{start}'; "
            "graph is disconnected, returning partial tree"
        )
    return tree
