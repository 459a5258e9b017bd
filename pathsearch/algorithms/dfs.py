"""Depth-first search with backtracking.

The search behaves like the textbook recursive formulation (mark, append,
recurse into each neighbour, pop on failure) but runs on the iterative
pre-order walk from ``reachability``, so graph depth is not limited by the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import List, Optional, Set

from pathsearch.algorithms.reachability import depth_first_preorder
from pathsearch.graph.base import neighbor_fn_of
from pathsearch.logging import get_logger
from pathsearch.path import Path
from pathsearch.types import GraphLike, Vertex

logger = get_logger(__name__)


def depth_first_search(
    graph: GraphLike,
    start: Optional[Vertex],
    target: Optional[Vertex],
) -> Optional[Path]:
    """Find a path from ``start`` to ``target`` by depth-first exploration.

    Returns the first path found in the neighbour source's iteration order;
    it is not necessarily the shortest. Every vertex entered before the
    target was reached is recorded in ``Path.visited``, including vertices
    on branches that were abandoned.

    Args:
        graph: Neighbour source or neighbour function.
        start: Where to start the search.
        target: Where to end the search.

    Returns:
        The path, or None if either endpoint is None or ``target`` cannot be
        reached from ``start``.
    """
    if start is None or target is None:
        return None

    visited: Set[Vertex] = set()
    path: List[Vertex] = []
    for vertex, depth in depth_first_preorder(neighbor_fn_of(graph), start, visited):
        # Backtrack to the parent of the vertex just entered
        del path[depth:]
        path.append(vertex)
        if vertex == target:
            logger.debug(
                f"DFS {start!r} -> {target!r}: found {len(path)} vertices, "
                f"visited {len(visited)}"
            )
            return Path(vertices=tuple(path), visited=frozenset(visited))

    logger.debug(f"DFS {start!r} -> {target!r}: no path, visited {len(visited)}")
    return None
