"""Result of a single search: an ordered vertex route plus diagnostics.

The ``Path`` dataclass stores the vertex sequence found by a search, its
accumulated weight and the set of vertices the search inspected on the way.
The sequence and the visited set are fixed once the search returns; only the
weight can be re-derived from a different weight function.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, Optional, Tuple

from pathsearch.config import DISPLAY_CONFIG, PathDisplayConfig
from pathsearch.types import Vertex, WeightFn


@dataclass
class Path:
    """A directed route of neighbouring vertices.

    Representation invariants:
      1. ``vertices[i]`` is a neighbour of ``vertices[i - 1]`` for every i >= 1.
      2. A one-vertex path has the same start and target.
      3. An empty path has neither start nor target.

    Attributes:
        vertices: Vertices from start (first) to target (last).
        total_weight: Accumulated cost; 0.0 for unweighted searches.
        visited: Every vertex the producing search inspected. Diagnostic only;
            always contains the vertices of the path itself.
    """

    vertices: Tuple[Vertex, ...] = ()
    total_weight: float = 0.0
    visited: FrozenSet[Vertex] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Normalize container types and fold path vertices into `visited`."""
        self.vertices = tuple(self.vertices)
        self.visited = frozenset(self.visited).union(self.vertices)

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]

    @property
    def start(self) -> Optional[Vertex]:
        """Return the first vertex, or None for an empty path."""
        return self.vertices[0] if self.vertices else None

    @property
    def target(self) -> Optional[Vertex]:
        """Return the last vertex, or None for an empty path."""
        return self.vertices[-1] if self.vertices else None

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.vertices) - 1, 0)

    def recalculate_total_weight(self, weight_fn: WeightFn) -> float:
        """Re-derive `total_weight` from a per-edge weight function.

        The first vertex has no predecessor and contributes nothing; every
        following vertex adds ``weight_fn(previous, vertex)``.

        Args:
            weight_fn: Cost of the segment between two neighbouring vertices.

        Returns:
            The new total weight, which is also stored on the path.
        """
        total = 0.0
        previous: Optional[Vertex] = None
        for index, vertex in enumerate(self.vertices):
            if index > 0:
                total += weight_fn(previous, vertex)
            previous = vertex
        self.total_weight = total
        return total

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation (vertices as strings)."""
        return {
            "vertices": [str(v) for v in self.vertices],
            "total_weight": self.total_weight,
            "length": len(self.vertices),
            "visited": sorted(str(v) for v in self.visited),
        }

    def format(self, config: Optional[PathDisplayConfig] = None) -> str:
        """Render the path, abbreviating the middle of long paths.

        Format: ``Weight=<w> Length=<n> visited=<k> (v1, v2, ...)``. When the
        path has more than ``2 * display_cut`` vertices, only the first and
        last ``display_cut`` vertices are listed around a single ``...``.
        """
        cfg = config or DISPLAY_CONFIG
        cut = cfg.display_cut
        count = len(self.vertices)

        if count > 2 * cut:
            shown = [str(v) for v in self.vertices[:cut]]
            shown.append("...")
            shown.extend(str(v) for v in self.vertices[count - cut :])
        else:
            shown = [str(v) for v in self.vertices]

        return (
            f"Weight={cfg.format_weight(self.total_weight)} "
            f"Length={count} visited={len(self.visited)} "
            f"({', '.join(shown)})"
        )

    def __str__(self) -> str:
        return self.format()
