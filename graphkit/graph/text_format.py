"""
Reading and writing the plain-text graph format.

    [DIRECTED]
    <node> [<neighbour>[{weight}] ...]
    ...

The optional first line marks the graph as directed (or, with NON-DIRECTED,
explicitly undirected). Every other line names a source node followed by its
neighbours; a neighbour may carry a brace-enclosed weight such as b{2.5}.
Missing weights default to 1.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphkit.config import (
    DIRECTED_LABEL,
    DIRECTED_MARKERS,
    UNDIRECTED_LABEL,
    UNDIRECTED_MARKERS,
)
from graphkit.exceptions import GraphFormatError

if TYPE_CHECKING:
    from graphkit.graph.graph import Graph


# name, optionally followed by {weight}
TOKEN_PATTERN = re.compile(r"^(?P<name>[^{}]+)(?:\{(?P<weight>[^{}]*)\})?$")


@dataclass
class EdgeLine:
    """
    One parsed line of graph text.

    Attributes:
        source: Name of the node the line starts with
        targets: (name, weight) pairs; weight is None when omitted
    """

    source: str
    targets: list[tuple[str, float | None]]


def read_marker(line: str) -> bool | None:
    """
    Return True/False when the line holds a direction marker token, else None.

    Only whole tokens count, so a node called "directedness" is not a marker.
    """
    tokens = {token.upper() for token in line.split()}
    if tokens & DIRECTED_MARKERS:
        return True
    if tokens & UNDIRECTED_MARKERS:
        return False
    return None


def parse_token(token: str, line_number: int | None = None) -> tuple[str, float | None]:
    """
    Split a neighbour token into its name and optional weight.

    Raises:
        GraphFormatError: If the braces are unbalanced or misplaced
        ValueError: If the text inside the braces is not a number
    """
    match = TOKEN_PATTERN.match(token)
    if match is None:
        raise GraphFormatError(f"Malformed token {token!r}", line_number)
    weight = match.group("weight")
    return match.group("name"), None if weight is None else float(weight)


def parse_lines(text: str) -> tuple[bool | None, Iterator[EdgeLine]]:
    """
    Tokenize graph text.

    Returns:
        (directed, lines) where directed is None when the text carries no
        marker, and lines lazily yields one EdgeLine per non-blank line.
    """
    lines = text.split("\n")
    directed = read_marker(lines[0]) if lines else None
    first = 1 if directed is not None else 0

    def _edge_lines() -> Iterator[EdgeLine]:
        for offset, line in enumerate(lines[first:], start=first + 1):
            tokens = line.split()
            if not tokens:
                continue
            source, *rest = tokens
            if "{" in source or "}" in source:
                raise GraphFormatError(f"Source node {source!r} cannot carry a weight", offset)
            yield EdgeLine(
                source=source,
                targets=[parse_token(token, offset) for token in rest],
            )

    return directed, _edge_lines()


def format_weight(weight: float) -> str:
    return repr(float(weight))


def to_text(graph: Graph) -> str:
    """
    Serialize a graph so that Graph(text) rebuilds an equal graph.

    Undirected edges are written once, from whichever endpoint is reached
    first in node order. Nodes without any edge are written on a line of
    their own.
    """
    out = [DIRECTED_LABEL if graph.directed else UNDIRECTED_LABEL]
    # undirected records still waiting for their mirror to be skipped
    pending_mirrors: dict[tuple[str, str, float], int] = {}
    has_incoming = {edge.target.name for edge in graph.edges()}

    for name, node in graph.nodes.items():
        if not node.edges:
            if name not in has_incoming:
                out.append(name)
            continue

        tokens = []
        for edge in node.edges:
            target = edge.target.name
            if not graph.directed:
                mirror = (target, name, edge.weight)
                if pending_mirrors.get(mirror, 0) > 0:
                    pending_mirrors[mirror] -= 1
                    continue
                pending_mirrors[(name, target, edge.weight)] = (
                    pending_mirrors.get((name, target, edge.weight), 0) + 1
                )
            tokens.append(f"{target}{{{format_weight(edge.weight)}}}")

        if tokens:
            out.append(f"{name} {' '.join(tokens)}")

    return "\n".join(out) + "\n"
