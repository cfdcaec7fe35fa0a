"""
Graph algorithms module.

Provides the weighted graph and the algorithms that run on it:
- Graph: Nodes and weighted edges, built from text or by add_edge()
- Node.dfs / Node.bfs: Traversals stamping entry/exit clock times
- Minimum spanning tree: Kruskal (forest-safe) or Prim
- Shortest path: A* with an optional heuristic, Dijkstra without one
"""

from graphkit.graph.graph import EDGE_KINDS, Graph
from graphkit.graph.node import Edge, Node, TraversalClock

__all__ = [
    "EDGE_KINDS",
    "Edge",
    "Graph",
    "Node",
    "TraversalClock",
]
