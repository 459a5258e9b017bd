"""pathsearch: Graph traversal and shortest-path search over opaque vertices.

pathsearch searches any graph that can report the outgoing neighbours of a
vertex. A graph is either an object with a ``neighbors(vertex)`` method or a
plain function with the same signature; vertices only need to be hashable.

Primary API:
    depth_first_search() - First path found by backtracking exploration
    breadth_first_search() - Path with the fewest edges
    dijkstra_shortest_path() - Path with the smallest total weight
    get_all_vertices() - Everything reachable from a vertex
    format_adjacency_list() - Text view of the reachable sub-graph
    Path - Search result (vertices, total_weight, visited)
    AdjacencyGraph - Read-only mapping-backed graph
    from_networkx() - Search NetworkX graphs directly

Example:
    from pathsearch import AdjacencyGraph, dijkstra_shortest_path

    graph = AdjacencyGraph.from_edges(
        [("A", "B", 5), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)]
    )
    path = dijkstra_shortest_path(graph, "A", "D", graph.weight)
    # path.vertices == ("A", "C", "D"), path.total_weight == 2.0
"""

from __future__ import annotations

from pathsearch import cli, logging
from pathsearch._version import __version__
from pathsearch.algorithms import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    format_adjacency_list,
    get_all_vertices,
)
from pathsearch.config import DISPLAY_CONFIG, PathDisplayConfig
from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.graph.base import neighbor_fn_of
from pathsearch.graph.convert import from_networkx, to_networkx
from pathsearch.io import load_graph_file, load_graph_yaml
from pathsearch.path import Path
from pathsearch.types import Cost, NeighborFn, NeighborSource, Vertex, WeightFn

__all__ = [
    # Version
    "__version__",
    # Searches
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "get_all_vertices",
    "format_adjacency_list",
    # Model
    "Path",
    "AdjacencyGraph",
    "neighbor_fn_of",
    # Types
    "Vertex",
    "Cost",
    "NeighborFn",
    "NeighborSource",
    "WeightFn",
    # Configuration
    "PathDisplayConfig",
    "DISPLAY_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # I/O
    "load_graph_yaml",
    "load_graph_file",
    # Utilities
    "cli",
    "logging",
]
