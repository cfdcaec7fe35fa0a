"""
Graph vertices, their outgoing edge records and the traversal clock.

A Node owns its outgoing edges. Depth-first and breadth-first traversals
stamp each node with entry/exit times taken from a TraversalClock, which
lets callers classify edges (tree/back/forward/cross) afterwards.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphkit.config import CLOCK_START, DEFAULT_EDGE_WEIGHT
from graphkit.exceptions import GraphError

if TYPE_CHECKING:
    from graphkit.graph.graph import Graph

Visitor = Callable[["Node"], None]


class TraversalClock:
    """Monotonic counter handing out entry/exit stamps for one traversal."""

    def __init__(self, start: int = CLOCK_START) -> None:
        self._start = start
        self.value = start

    def tick(self) -> int:
        """Return the current time and advance it."""
        now = self.value
        self.value += 1
        return now

    def reset(self) -> None:
        self.value = self._start

    def __repr__(self) -> str:
        return f"TraversalClock(value={self.value})"


@dataclass(eq=False)
class Edge:
    """
    One outgoing edge record, stored in its source node's edge list.

    Attributes:
        source: Node the edge leaves from
        target: Node the edge points to
        weight: Non-negative traversal cost
    """

    source: Node
    target: Node
    weight: float = DEFAULT_EDGE_WEIGHT

    def __repr__(self) -> str:
        return f"Edge({self.source.name!r} -> {self.target.name!r}, weight={self.weight!r})"


class Node:
    """
    A named vertex holding its outgoing edges.

    Attributes:
        name: Identifier, unique within the owning graph
        edges: Outgoing edge records in insertion order
        graph: Owning Graph, or None while detached
        entry: Clock stamp of the first visit in the current traversal
        exit: Clock stamp taken once the node's traversal completed
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.edges: list[Edge] = []
        self.graph: Graph | None = None
        self.entry: int | None = None
        self.exit: int | None = None

    def __repr__(self) -> str:
        return f"Node({self.name!r})"

    def __str__(self) -> str:
        return self.name

    @property
    def neighbours(self) -> list[Node]:
        """Targets of the outgoing edges (repeats kept)."""
        return [edge.target for edge in self.edges]

    def add_neighbour(self, neighbour: Node, weight: float | None = None) -> Edge:
        """Append an outgoing edge to neighbour and return it."""
        weight = DEFAULT_EDGE_WEIGHT if weight is None else float(weight)
        if not weight >= 0:
            raise GraphError(
                f"Invalid weight {weight} on edge {self.name!r} -> {neighbour.name!r}"
            )
        edge = Edge(source=self, target=neighbour, weight=weight)
        self.edges.append(edge)
        return edge

    def edge_to(self, name: str) -> Edge | None:
        """Cheapest outgoing edge to the named node, or None."""
        candidates = [edge for edge in self.edges if edge.target.name == name]
        if not candidates:
            return None
        return min(candidates, key=lambda edge: edge.weight)

    def reset(self) -> None:
        """Forget any traversal stamps. Safe to call repeatedly."""
        self.entry = None
        self.exit = None

    def _clock(self, clock: TraversalClock | None) -> TraversalClock:
        if clock is not None:
            return clock
        if self.graph is not None:
            return self.graph.clock
        return TraversalClock()

    def dfs(self, visit: Visitor, clock: TraversalClock | None = None) -> None:
        """
        Depth-first traversal calling visit in post-order.

        Each node gets its entry stamp when first reached and its exit stamp
        once every outgoing target has been explored; visit(node) fires right
        after the exit stamp. Nodes already stamped are skipped, so call
        reset() (or Graph.reset()) before traversing the same nodes again.

        Args:
            visit: Callback receiving each node as it completes
            clock: Clock for the stamps (defaults to the owning graph's)
        """
        if self.entry is not None:
            return
        clock = self._clock(clock)

        self.entry = clock.tick()
        stack = [(self, iter(self.edges))]
        while stack:
            node, pending = stack[-1]
            for edge in pending:
                target = edge.target
                if target.entry is None:
                    target.entry = clock.tick()
                    stack.append((target, iter(target.edges)))
                    break
            else:
                stack.pop()
                node.exit = clock.tick()
                visit(node)

    def bfs(self, visit: Visitor, clock: TraversalClock | None = None) -> None:
        """
        Breadth-first traversal calling visit as each node is dequeued.

        Targets are enqueued without checking whether they were seen; the
        entry guard on dequeue keeps each node to a single visit. The exit
        stamp is taken straight after a node's targets are enqueued.
        """
        clock = self._clock(clock)
        queue = deque([self])
        while queue:
            node = queue.popleft()
            if node.entry is not None:
                continue
            node.entry = clock.tick()
            visit(node)
            queue.extend(edge.target for edge in node.edges)
            node.exit = clock.tick()
