"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from itertools import combinations

import pytest

from graphkit.graph import Graph


@pytest.fixture
def directed_text() -> str:
    """Small directed graph with a few diamonds."""
    return "A B C\nB C D\nC E F\nG A F\nE D"


@pytest.fixture
def directed_graph(directed_text: str) -> Graph:
    """The directed example graph."""
    return Graph(directed_text, directed=True)


@pytest.fixture
def weighted_text() -> str:
    """Undirected weighted graph with one cheap detour."""
    return "\n".join(
        [
            "Non-Directed",
            "A B{4.0} C{1.0}",
            "C B{2.0} D{5.0}",
            "B D{1.0}",
            "D E{3.0}",
        ]
    )


@pytest.fixture
def weighted_graph(weighted_text: str) -> Graph:
    """The undirected weighted example graph."""
    return Graph(weighted_text)


@pytest.fixture
def complete_four() -> Graph:
    """Complete undirected graph on 4 nodes with distinct weights."""
    graph = Graph()
    weights = iter([1.0, 6.0, 3.0, 5.0, 2.0, 4.0])
    for a, b in combinations("ABCD", 2):
        graph.add_edge(a, b, next(weights))
    return graph


@pytest.fixture
def small_graphs() -> list[Graph]:
    """Assorted small graphs for brute-force comparisons."""
    texts = [
        "a b{2} c{3}\nb c{1} d{4}\nc d{1}\nd e{2}\ne a{7}",
        "a b{1}\nb c{1}\nc a{1}\nd e{5}",
        "1 2{3} 3{1} 4{6}\n2 3{2} 5{2}\n3 4{4} 5{7}\n4 6{1}\n5 6{2}\n6 7{3}\n7 8{1}\n5 8{9}",
        "DIRECTED\nx y{2} z{5}\ny z{1} w{6}\nz w{2}\nw x{1}",
        "DIRECTED\np q{1}\nq r{1}\nr p{1}\ns p{0}",
    ]
    return [Graph(text) for text in texts]
