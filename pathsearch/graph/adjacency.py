"""Read-only adjacency-mapping graph.

`AdjacencyGraph` is the simplest concrete neighbour source: a mapping from
each vertex to the set of vertices it points at, plus optional per-edge
weights. It never changes after construction, so repeated ``neighbors()``
calls are stable for the duration of any search.
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from pathsearch.types import Cost, Vertex

#: Weight assigned to edges declared without one.
DEFAULT_WEIGHT: float = 1.0


class AdjacencyGraph:
    """Directed or undirected graph backed by an adjacency mapping.

    Unknown vertices have no neighbours, so searches from or to them simply
    come back empty instead of raising.

    Args:
        adjacency: Mapping of vertex to the vertices it has edges to.
        weights: Optional mapping of ``(u, v)`` to edge weight. Edges missing
            from it weigh ``DEFAULT_WEIGHT``.
        directed: When False, every edge is mirrored (weights included).

    Raises:
        ValueError: If ``weights`` names a pair that is not an edge, or a
            vertex is ``None``.
    """

    def __init__(
        self,
        adjacency: Mapping[Vertex, Iterable[Vertex]],
        weights: Optional[Mapping[Tuple[Vertex, Vertex], Cost]] = None,
        directed: bool = True,
    ) -> None:
        self.directed = directed
        self._succ: Dict[Vertex, Dict[Vertex, float]] = {}

        for u, targets in adjacency.items():
            self._ensure_vertex(u)
            for v in targets:
                self._link(u, v, DEFAULT_WEIGHT)

        for (u, v), weight in (weights or {}).items():
            if u not in self._succ or v not in self._succ[u]:
                raise ValueError(f"Weight given for non-existent edge ({u!r}, {v!r})")
            self._link(u, v, float(weight))

        self._frozen: Dict[Vertex, FrozenSet[Vertex]] = {
            u: frozenset(nbrs) for u, nbrs in self._succ.items()
        }

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Sequence[Any]],
        directed: bool = True,
        vertices: Iterable[Vertex] = (),
    ) -> AdjacencyGraph:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Args:
            edges: Edge tuples.
            directed: Whether edges are one-way.
            vertices: Extra vertices to register even if they have no edges.

        Returns:
            The constructed graph.

        Raises:
            ValueError: If an edge tuple does not have two or three items.
        """
        adjacency: Dict[Vertex, List[Vertex]] = {v: [] for v in vertices}
        weights: Dict[Tuple[Vertex, Vertex], Cost] = {}
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
            elif len(edge) == 3:
                u, v, w = edge
                weights[(u, v)] = w
            else:
                raise ValueError(
                    f"Edge must be (source, target) or (source, target, weight), got {edge!r}"
                )
            adjacency.setdefault(u, []).append(v)
            adjacency.setdefault(v, [])
        return cls(adjacency, weights=weights, directed=directed)

    def _ensure_vertex(self, vertex: Vertex) -> None:
        if vertex is None:
            raise ValueError("None cannot be used as a vertex")
        self._succ.setdefault(vertex, {})

    def _link(self, u: Vertex, v: Vertex, weight: float) -> None:
        self._ensure_vertex(u)
        self._ensure_vertex(v)
        self._succ[u][v] = weight
        if not self.directed:
            self._succ[v][u] = weight

    def neighbors(self, vertex: Vertex) -> FrozenSet[Vertex]:
        """Return the outgoing neighbours of ``vertex`` (empty if unknown)."""
        return self._frozen.get(vertex, frozenset())

    def weight(self, u: Vertex, v: Vertex) -> float:
        """Return the weight of edge ``(u, v)``.

        Usable directly as the ``weight_fn`` of a weighted search.

        Raises:
            KeyError: If ``(u, v)`` is not an edge of this graph.
        """
        try:
            return self._succ[u][v]
        except KeyError:
            raise KeyError(f"No edge from {u!r} to {v!r}") from None

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._succ)

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, float]]:
        """Yield ``(u, v, weight)`` for every stored directed edge."""
        for u, nbrs in self._succ.items():
            for v, w in nbrs.items():
                yield u, v, w

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._succ

    def __len__(self) -> int:
        return len(self._succ)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjacencyGraph({kind}, vertices={len(self._succ)})"
