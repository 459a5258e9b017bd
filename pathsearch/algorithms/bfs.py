"""Breadth-first search for a minimum-hop path."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Set

from pathsearch.graph.base import neighbor_fn_of
from pathsearch.logging import get_logger
from pathsearch.path import Path
from pathsearch.types import GraphLike, Vertex

logger = get_logger(__name__)


def breadth_first_search(
    graph: GraphLike,
    start: Optional[Vertex],
    target: Optional[Vertex],
) -> Optional[Path]:
    """Find a path with the fewest edges from ``start`` to ``target``.

    Level-order expansion from ``start``. Neighbours of the vertex being
    expanded are compared against ``target`` before anything else, and the
    search stops at the first match, so the result has minimum hop count.
    Each vertex taken from the queue is recorded in ``Path.visited``, as is
    the target itself.

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

    if start == target:
        return Path(vertices=(start,), visited=frozenset((start,)))

    neighbors = neighbor_fn_of(graph)
    queue: Deque[Vertex] = deque([start])
    # start is discovered without a preceding vertex
    parent: Dict[Vertex, Optional[Vertex]] = {start: None}
    visited: Set[Vertex] = set()

    while queue:
        current = queue.popleft()
        visited.add(current)

        for neighbor in neighbors(current):
            if neighbor == target:
                route: List[Vertex] = [target]
                node: Optional[Vertex] = current
                while node is not None:
                    route.append(node)
                    node = parent[node]
                route.reverse()
                visited.add(target)
                logger.debug(
                    f"BFS {start!r} -> {target!r}: found {len(route)} vertices, "
                    f"visited {len(visited)}"
                )
                return Path(vertices=tuple(route), visited=frozenset(visited))

            if neighbor not in parent:
                parent[neighbor] = current
                queue.append(neighbor)

    logger.debug(f"BFS {start!r} -> {target!r}: no path, visited {len(visited)}")
    return None
