"""Graph search algorithms.

- `reachability`: reachable-vertex collection and adjacency-list formatting.
- `dfs`: depth-first search with backtracking.
- `bfs`: breadth-first search for a minimum-hop path.
- `spf`: Dijkstra shortest path over a caller-supplied weight function.
"""

from pathsearch.algorithms.bfs import breadth_first_search
from pathsearch.algorithms.dfs import depth_first_search
from pathsearch.algorithms.reachability import format_adjacency_list, get_all_vertices
from pathsearch.algorithms.spf import dijkstra_shortest_path

__all__ = [
    "breadth_first_search",
    "depth_first_search",
    "dijkstra_shortest_path",
    "format_adjacency_list",
    "get_all_vertices",
]
