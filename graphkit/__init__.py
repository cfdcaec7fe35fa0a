"""
graphkit - an in-memory weighted graph toolkit.

Build a graph from a small text format, traverse it, compute minimum
spanning trees and find shortest paths with A*.
"""

from graphkit.exceptions import EmptyQueueError, GraphError, GraphFormatError, GraphkitError
from graphkit.graph import Edge, Graph, Node, TraversalClock
from graphkit.structures import PriorityQueue

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "EmptyQueueError",
    "Graph",
    "GraphError",
    "GraphFormatError",
    "GraphkitError",
    "Node",
    "PriorityQueue",
    "TraversalClock",
]
