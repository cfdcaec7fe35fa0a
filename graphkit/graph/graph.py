"""
Weighted graph built from named nodes.

Usage:
    from graphkit.graph import Graph

    graph = Graph("A B{0.5} C{2.0}\\nB C{0.5}")
    graph.shortest_path("A", "C")      # ['A', 'B', 'C']
    graph.minimum_spanning_tree()      # new Graph
    print(graph)                       # text that Graph() can read back
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator

from graphkit.config import DEFAULT_MST_ALGORITHM
from graphkit.exceptions import GraphError
from graphkit.graph import spanning, text_format
from graphkit.graph.node import Edge, Node, TraversalClock, Visitor
from graphkit.graph.search import Heuristic, a_star

logger = logging.getLogger(__name__)

EDGE_KINDS = ("tree", "back", "forward", "cross")


class Graph:
    """
    A directed or undirected weighted graph that owns its nodes.

    An undirected edge between A and B is stored as two edge records, one
    on each endpoint. Nodes are only ever added: add_edge() creates missing
    endpoints on demand and nothing is removed.

    Traversal stamps (entry/exit) are kept on the nodes, so a graph runs
    one traversal at a time; call reset() between traversals, or work on
    copy() to search the same topology independently.

    Attributes:
        directed: Whether edges are one-way (fixed at construction)
        nodes: Mapping of node name to Node, in insertion order
        clock: Clock that stamps entry/exit times during traversals
    """

    def __init__(self, text: str | None = None, directed: bool = False) -> None:
        """
        Create a graph, optionally from its text description.

        Args:
            text: Graph text (see graphkit.graph.text_format). A direction
                marker on its first line overrides `directed`.
            directed: Direction used when the text carries no marker
        """
        self.directed = directed
        self.nodes: dict[str, Node] = {}
        self.clock = TraversalClock()

        if text:
            marker, lines = text_format.parse_lines(text)
            if marker is not None:
                self.directed = marker
            for line in lines:
                self.ensure_node(line.source)
                for target, weight in line.targets:
                    self.add_edge(line.source, target, weight)
            logger.debug(
                f"Parsed {'directed' if self.directed else 'undirected'} graph: "
                f"{len(self.nodes)} nodes, {self.edge_count()} edge records"
            )

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, node: Node) -> Node:
        """
        Take ownership of a node.

        Raises:
            GraphError: If the name is taken or the node belongs to another graph
        """
        if node.graph is not None and node.graph is not self:
            raise GraphError(f"Node '{node.name}' already belongs to another graph")
        existing = self.nodes.get(node.name)
        if existing is not None and existing is not node:
            raise GraphError(f"Node '{node.name}' already exists")
        self.nodes[node.name] = node
        node.graph = self
        return node

    def ensure_node(self, name: str) -> Node:
        """Return the named node, creating it if needed."""
        node = self.nodes.get(name)
        if node is None:
            node = self.add_node(Node(name))
        return node

    def add_edge(self, source: str, target: str, weight: float | None = None) -> Edge:
        """
        Connect two nodes by name, creating either endpoint if missing.

        Undirected graphs also get the mirrored record on the target.

        Returns:
            The forward edge record (stored on the source node)
        """
        from_node = self.ensure_node(source)
        to_node = self.ensure_node(target)
        edge = from_node.add_neighbour(to_node, weight)
        if not self.directed:
            to_node.add_neighbour(from_node, edge.weight)
        return edge

    # =========================================================================
    # Accessors
    # =========================================================================

    def __getitem__(self, name: str) -> Node:
        return self.nodes[name]

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def edges(self) -> Iterator[Edge]:
        """Every edge record, node by node in insertion order."""
        for node in self.nodes.values():
            yield from node.edges

    def unique_edges(self) -> Iterator[Edge]:
        """Edge records with the mirror of each undirected edge left out."""
        if self.directed:
            yield from self.edges()
            return
        pending: Counter = Counter()
        for edge in self.edges():
            mirror = (edge.target.name, edge.source.name, edge.weight)
            if pending[mirror] > 0:
                pending[mirror] -= 1
                continue
            pending[(edge.source.name, edge.target.name, edge.weight)] += 1
            yield edge

    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes.values())

    def total_weight(self) -> float:
        """Sum of weights, counting each undirected edge once."""
        return sum(edge.weight for edge in self.unique_edges())

    def copy(self) -> Graph:
        """Independent graph with the same topology and no traversal state."""
        clone = Graph(directed=self.directed)
        for name in self.nodes:
            clone.ensure_node(name)
        for edge in self.edges():
            clone.nodes[edge.source.name].add_neighbour(
                clone.nodes[edge.target.name], edge.weight
            )
        return clone

    def _signature(self) -> tuple[bool, frozenset, Counter]:
        records = Counter(
            (edge.source.name, edge.target.name, edge.weight) for edge in self.edges()
        )
        return self.directed, frozenset(self.nodes), records

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._signature() == other._signature()

    __hash__ = None

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={len(self.nodes)}, edges={self.edge_count()})"

    # =========================================================================
    # Text Format
    # =========================================================================

    def to_text(self) -> str:
        """Text that Graph() parses back into an equal graph."""
        return text_format.to_text(self)

    def __str__(self) -> str:
        return self.to_text()

    # =========================================================================
    # Traversal
    # =========================================================================

    def reset(self) -> None:
        """Clear traversal stamps on every node and restart the clock."""
        self.clock.reset()
        for node in self.nodes.values():
            node.reset()

    def dfs(self, start: str, visit: Visitor) -> None:
        """Reset, then run a depth-first traversal from the named node."""
        self.reset()
        self.nodes[start].dfs(visit, self.clock)

    def bfs(self, start: str, visit: Visitor) -> None:
        """Reset, then run a breadth-first traversal from the named node."""
        self.reset()
        self.nodes[start].bfs(visit, self.clock)

    def _dfs_all(self, start: str | None = None) -> list[Node]:
        """Depth-first over the whole graph, returning nodes in post-order."""
        self.reset()
        finished: list[Node] = []
        roots = list(self.nodes.values())
        if start is not None:
            roots.insert(0, self.nodes[start])
        for root in roots:
            root.dfs(finished.append, self.clock)
        return finished

    def classify_edges(self, start: str | None = None) -> list[tuple[Edge, str]]:
        """
        Label every edge record relative to a depth-first traversal.

        The traversal starts at `start` (if given) and then restarts from
        each unvisited node in order. Labels are "tree", "back", "forward"
        and "cross", derived from the entry/exit stamps.

        In an undirected graph the mirror of a tree edge is reported as
        "back", since both records are present.
        """
        self._dfs_all(start)
        parents = self._tree_parents()

        labelled = []
        for edge in self.edges():
            u, v = edge.source, edge.target
            if parents.get(v.name) is edge:
                kind = "tree"
            elif v.entry <= u.entry and u.exit <= v.exit:
                kind = "back"
            elif u.entry < v.entry and v.exit < u.exit:
                kind = "forward"
            else:
                kind = "cross"
            labelled.append((edge, kind))
        return labelled

    def _tree_parents(self) -> dict[str, Edge]:
        """Edge that discovered each node in the last depth-first traversal."""
        parents: dict[str, Edge] = {}
        for node in self.nodes.values():
            for edge in node.edges:
                target = edge.target
                if target.name in parents or target is node:
                    continue
                if self._discovered_by(edge):
                    parents[target.name] = edge
        return parents

    def _discovered_by(self, edge: Edge) -> bool:
        u, v = edge.source, edge.target
        if not (u.entry < v.entry and v.exit < u.exit):
            return False
        # v descends from u; it is a direct child unless another child holds it
        for sibling_edge in u.edges:
            w = sibling_edge.target
            if w is v or w is u:
                continue
            if u.entry < w.entry < v.entry and v.exit < w.exit < u.exit:
                return False
        return True

    def topological_sort(self) -> list[str]:
        """
        Order the nodes of a directed acyclic graph so every edge points forward.

        Raises:
            GraphError: On an undirected graph or when there is a cycle
        """
        if not self.directed:
            raise GraphError("Topological sort needs a directed graph")
        finished = self._dfs_all()
        for edge in self.edges():
            if edge.target.exit >= edge.source.exit:
                raise GraphError(
                    f"Graph has a cycle through {edge.source.name!r} -> {edge.target.name!r}"
                )
        return [node.name for node in reversed(finished)]

    # =========================================================================
    # Spanning Trees and Paths
    # =========================================================================

    def minimum_spanning_tree(
        self, algorithm: str | None = None, start: str | None = None
    ) -> Graph:
        """
        Minimum spanning tree (or forest) as a new graph.

        Args:
            algorithm: "kruskal" (default) or "prim"
            start: Start node for Prim; ignored by Kruskal

        Kruskal covers every component and returns a spanning forest on
        disconnected input. Prim only spans the start node's component.
        """
        algorithm = algorithm or DEFAULT_MST_ALGORITHM
        if algorithm == "kruskal":
            tree = spanning.kruskal(self)
        elif algorithm == "prim":
            tree = spanning.prim(self, start)
        else:
            raise ValueError(f"Unknown spanning tree algorithm '{algorithm}'. Available: kruskal, prim")
        logger.info(
            f"{algorithm.capitalize()} spanning tree: {tree.edge_count()} edge records, "
            f"total weight {tree.total_weight()}"
        )
        return tree

    def shortest_path(
        self, from_name: str, to_name: str, heuristic: Heuristic | None = None
    ) -> list[str]:
        """
        Cheapest path between two nodes by A*.

        Returns an empty list when either name is unknown or no path exists.
        Without a heuristic the search is plain Dijkstra.
        """
        return a_star(self, from_name, to_name, heuristic)

    def path_cost(self, path: list[str]) -> float:
        """
        Total weight along a path of node names, using the cheapest edge per hop.

        Raises:
            GraphError: If two consecutive names are not connected
        """
        cost = 0.0
        for here, there in zip(path, path[1:]):
            node = self.nodes.get(here)
            edge = node.edge_to(there) if node is not None else None
            if edge is None:
                raise GraphError(f"No edge from '{here}' to '{there}'")
            cost += edge.weight
        return cost
