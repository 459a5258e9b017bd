"""Resolution of neighbour sources into plain neighbour functions."""

from __future__ import annotations

from pathsearch.types import GraphLike, NeighborFn, NeighborSource


def neighbor_fn_of(source: GraphLike) -> NeighborFn:
    """Return a callable ``vertex -> set of neighbours`` for ``source``.

    Args:
        source: An object implementing ``neighbors(vertex)`` or a callable
            with the same signature.

    Returns:
        The neighbour lookup function.

    Raises:
        TypeError: If ``source`` is neither a neighbour source nor callable.
    """
    if isinstance(source, NeighborSource):
        return source.neighbors
    if callable(source):
        return source
    raise TypeError(
        f"Expected an object with a neighbors() method or a callable, "
        f"got {type(source).__name__}"
    )
