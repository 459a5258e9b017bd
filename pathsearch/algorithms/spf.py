"""Shortest-path-first (SPF) search over caller-supplied edge weights.

Implements Dijkstra's algorithm with lazy deletion: instead of decreasing a
key in place, a cheaper route to a vertex inserts a fresh frontier node and
flags the previous one as stale; stale nodes are skipped when popped.

Notes:
    Edge weights must be non-negative. This is not checked; negative weights
    may produce a non-minimal path.

    Ties between equal cumulative weights are broken by insertion order: the
    frontier node pushed first is popped first. Combined with the neighbour
    source's iteration order this makes results reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from pathsearch.graph.base import neighbor_fn_of
from pathsearch.logging import get_logger
from pathsearch.path import Path
from pathsearch.types import GraphLike, Vertex, WeightFn

logger = get_logger(__name__)


@dataclass(eq=False)
class _FrontierNode:
    """A vertex on the frontier together with how it was reached.

    Parent links form a tree rooted at the start node (whose parent is None)
    and are only used to rebuild the route once the target is settled.
    """

    vertex: Vertex
    weight_sum: float
    parent: Optional[_FrontierNode] = field(default=None, repr=False)
    stale: bool = False

    def route(self) -> Tuple[Vertex, ...]:
        """Return the vertices from the root of the tree down to this node."""
        vertices: List[Vertex] = []
        node: Optional[_FrontierNode] = self
        while node is not None:
            vertices.append(node.vertex)
            node = node.parent
        vertices.reverse()
        return tuple(vertices)


def dijkstra_shortest_path(
    graph: GraphLike,
    start: Optional[Vertex],
    target: Optional[Vertex],
    weight_fn: Optional[WeightFn],
) -> Optional[Path]:
    """Find the minimum-weight path from ``start`` to ``target``.

    The search stops as soon as ``target`` is popped from the frontier; its
    cumulative weight at that point is minimal. ``Path.visited`` holds every
    vertex settled before and including the target.

    Args:
        graph: Neighbour source or neighbour function.
        start: Where to start the search.
        target: Where to end the search.
        weight_fn: ``weight_fn(a, b)`` returns the non-negative cost of edge
            ``(a, b)``. Only called for edges the search actually relaxes.

    Returns:
        The path with ``total_weight`` set, or None if any argument is None
        or ``target`` cannot be reached from ``start``.
    """
    if start is None or target is None or weight_fn is None:
        return None

    neighbors = neighbor_fn_of(graph)
    seq = count()

    start_node = _FrontierNode(start, 0.0)
    best: Dict[Vertex, _FrontierNode] = {start: start_node}
    frontier: List[Tuple[float, int, _FrontierNode]] = [(0.0, next(seq), start_node)]
    visited: Set[Vertex] = set()

    while frontier:
        _, _, node = heappop(frontier)
        if node.stale:
            continue

        visited.add(node.vertex)
        if node.vertex == target:
            logger.debug(
                f"SPF {start!r} -> {target!r}: weight {node.weight_sum}, "
                f"visited {len(visited)}"
            )
            return Path(
                vertices=node.route(),
                total_weight=node.weight_sum,
                visited=frozenset(visited),
            )

        for neighbor in neighbors(node.vertex):
            tentative = node.weight_sum + weight_fn(node.vertex, neighbor)
            known = best.get(neighbor)
            if known is None or tentative < known.weight_sum:
                if known is not None:
                    known.stale = True
                fresh = _FrontierNode(neighbor, tentative, node)
                best[neighbor] = fresh
                heappush(frontier, (tentative, next(seq), fresh))

    logger.debug(f"SPF {start!r} -> {target!r}: no path, visited {len(visited)}")
    return None
