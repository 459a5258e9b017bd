"""Type aliases and protocols shared by the search algorithms."""

from __future__ import annotations

from typing import AbstractSet, Callable, Hashable, Protocol, Union, runtime_checkable

#: Opaque vertex identity. Anything hashable except ``None``.
Vertex = Hashable

#: Numeric cost of an edge or a path.
Cost = Union[int, float]

#: Returns the set of vertices directly reachable from a vertex.
NeighborFn = Callable[[Vertex], AbstractSet[Vertex]]

#: Returns the cost of the edge between two neighbouring vertices.
WeightFn = Callable[[Vertex, Vertex], Cost]


@runtime_checkable
class NeighborSource(Protocol):
    """Anything that can report the outgoing neighbours of a vertex.

    Directed graphs report only outgoing neighbours; undirected graphs report
    both directions. Repeated calls for the same vertex must return the same
    set while a search is running.
    """

    def neighbors(self, vertex: Vertex) -> AbstractSet[Vertex]: ...


#: Either a neighbour source object or a plain neighbour function.
GraphLike = Union[NeighborSource, NeighborFn]
