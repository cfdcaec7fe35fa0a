"""
Data structures used by the graph algorithms.

- PriorityQueue: Sorted-list priority queue with a pluggable comparator
"""

from graphkit.structures.priority_queue import PriorityQueue, default_comparator

__all__ = ["PriorityQueue", "default_comparator"]
