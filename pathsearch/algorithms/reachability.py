"""Reachability collection and adjacency-list formatting.

``depth_first_preorder`` is the walk shared with depth-first search. It keeps
an explicit stack of neighbour iterators, so very deep graphs do not hit
Python's recursion limit, and it enters each vertex at most once.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple

from pathsearch.config import DISPLAY_CONFIG, PathDisplayConfig
from pathsearch.graph.base import neighbor_fn_of
from pathsearch.types import GraphLike, NeighborFn, Vertex

_EXHAUSTED = object()


def depth_first_preorder(
    neighbors: NeighborFn, start: Vertex, visited: Set[Vertex]
) -> Iterator[Tuple[Vertex, int]]:
    """Yield ``(vertex, depth)`` for every vertex reached from ``start``.

    Vertices come in pre-order of a spanning tree rooted at ``start``
    (depth 0), descending into neighbours in the source's iteration order.
    Each vertex is added to ``visited`` when it is reached and skipped
    afterwards. The neighbours of a vertex are requested only when the
    generator is resumed after yielding it, so a caller that stops early
    never expands the last vertex.

    Args:
        neighbors: Neighbour function.
        start: Root of the walk.
        visited: Set updated in place; vertices already in it are not entered.
    """
    visited.add(start)
    yield start, 0

    # stack[i] iterates the neighbours of the vertex entered at depth i
    stack: List[Iterator[Vertex]] = [iter(neighbors(start))]
    while stack:
        nxt = next(stack[-1], _EXHAUSTED)
        if nxt is _EXHAUSTED:
            stack.pop()
            continue
        if nxt in visited:
            continue
        visited.add(nxt)
        yield nxt, len(stack)
        stack.append(iter(neighbors(nxt)))


def get_all_vertices(graph: GraphLike, start: Optional[Vertex]) -> Set[Vertex]:
    """Return ``start`` plus every vertex reachable from it.

    For directed graphs only outgoing edges are followed. If the graph is
    connected, every vertex is returned.

    Args:
        graph: Neighbour source or neighbour function.
        start: Vertex to start from. ``None`` yields an empty set.

    Returns:
        The set of reachable vertices, including ``start``.
    """
    if start is None:
        return set()
    visited: Set[Vertex] = set()
    for _ in depth_first_preorder(neighbor_fn_of(graph), start, visited):
        pass
    return visited


def format_adjacency_list(
    graph: GraphLike,
    start: Optional[Vertex],
    config: Optional[PathDisplayConfig] = None,
) -> str:
    """Format the adjacency list of the sub-graph reachable from ``start``.

    Output is a header line followed by one ``vertex: [n1, n2, ...]`` line
    per vertex, in pre-order of a spanning tree rooted at ``start``.

    Args:
        graph: Neighbour source or neighbour function.
        start: Root vertex. ``None`` yields only the header.
        config: Rendering configuration (defaults to ``DISPLAY_CONFIG``).

    Returns:
        The formatted adjacency list, newline-terminated.
    """
    cfg = config or DISPLAY_CONFIG
    lines = [cfg.adjacency_header]
    if start is not None:
        neighbors = neighbor_fn_of(graph)
        # insertion order follows the walk, each vertex is expanded once
        listed: Dict[Vertex, List[Vertex]] = {}

        def expand(vertex: Vertex) -> List[Vertex]:
            listed[vertex] = list(neighbors(vertex))
            return listed[vertex]

        for _ in depth_first_preorder(expand, start, set()):
            pass
        for vertex, nbrs in listed.items():
            lines.append(f"{vertex}: [{', '.join(str(n) for n in nbrs)}]")
    return "\n".join(lines) + "\n"
