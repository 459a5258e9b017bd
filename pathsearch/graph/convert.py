"""Conversion between NetworkX graphs and pathsearch neighbour sources.

`from_networkx` exposes any NetworkX graph as a neighbour function plus a
weight function so the search algorithms can run on it directly.
`to_networkx` goes the other way for an `AdjacencyGraph`, which is handy for
cross-checking results against NetworkX's own algorithms.
"""

from typing import FrozenSet, Tuple

import networkx as nx

from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.types import NeighborFn, Vertex, WeightFn


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default_weight: float = 1.0,
) -> Tuple[NeighborFn, WeightFn]:
    """Wrap a NetworkX graph as ``(neighbors, weight_fn)``.

    Directed graphs expose successors only. For multigraphs the weight of
    ``(u, v)`` is the smallest weight among the parallel edges.

    Args:
        nx_graph: Any NetworkX ``Graph``, ``DiGraph``, ``MultiGraph`` or
            ``MultiDiGraph``.
        weight: Edge attribute holding the weight.
        default_weight: Weight for edges without the attribute.

    Returns:
        A tuple of the neighbour function and the weight function.
    """
    adj = nx_graph.succ if nx_graph.is_directed() else nx_graph.adj

    def neighbors(vertex: Vertex) -> FrozenSet[Vertex]:
        if vertex not in adj:
            return frozenset()
        return frozenset(adj[vertex])

    def weight_fn(u: Vertex, v: Vertex) -> float:
        edge_data = adj[u][v]
        if nx_graph.is_multigraph():
            return min(
                float(attrs.get(weight, default_weight))
                for attrs in edge_data.values()
            )
        return float(edge_data.get(weight, default_weight))

    return neighbors, weight_fn


def to_networkx(graph: AdjacencyGraph, weight: str = "weight") -> nx.Graph:
    """Convert an `AdjacencyGraph` into a NetworkX ``DiGraph`` or ``Graph``.

    Args:
        graph: The graph to convert.
        weight: Edge attribute name to store weights under.

    Returns:
        ``nx.DiGraph`` for directed graphs, ``nx.Graph`` otherwise.
    """
    nx_graph = nx.DiGraph() if graph.directed else nx.Graph()
    nx_graph.add_nodes_from(graph.vertices())
    for u, v, w in graph.edges():
        nx_graph.add_edge(u, v, **{weight: w})
    return nx_graph
