"""YAML graph descriptions.

A graph file lists edges and, optionally, isolated vertices::

    directed: true
    edges:
      - [A, B]
      - [A, C, 2.5]
      - {source: C, target: D, weight: 1}
    vertices: [E]

Edges without a weight weigh ``1.0``. Loading is read-only: nothing in this
module writes graphs back out.
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Any, List, Tuple, Union

import yaml

from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.logging import get_logger
from pathsearch.types import Vertex

logger = get_logger(__name__)

_ALLOWED_KEYS = {"directed", "edges", "vertices"}


def _normalize_vertex(value: Any, where: str) -> Vertex:
    """Return a hashable vertex identifier parsed from YAML.

    YAML 1.1 turns bare ``yes``/``no``/``on``/``off`` into booleans; those
    are converted back to their string form so they stay usable as names.
    """
    if isinstance(value, bool):
        return str(value)
    if value is None:
        raise ValueError(f"{where}: vertex must not be empty")
    if isinstance(value, (list, dict)):
        raise ValueError(f"{where}: vertex must be a scalar, got {value!r}")
    return value


def _parse_edge(entry: Any, index: int) -> Tuple[Any, ...]:
    where = f"edges[{index}]"
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise ValueError(f"{where}: edge mapping must include 'source' and 'target'")
        unknown = set(entry) - {"source", "target", "weight"}
        if unknown:
            raise ValueError(f"{where}: unknown edge keys {sorted(unknown)}")
        items = [entry["source"], entry["target"]]
        if "weight" in entry:
            items.append(entry["weight"])
    elif isinstance(entry, list):
        if len(entry) not in (2, 3):
            raise ValueError(
                f"{where}: edge list must be [source, target] or [source, target, weight]"
            )
        items = list(entry)
    else:
        raise ValueError(f"{where}: edge must be a list or a mapping, got {entry!r}")

    u = _normalize_vertex(items[0], where)
    v = _normalize_vertex(items[1], where)
    if len(items) == 2:
        return (u, v)

    weight = items[2]
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError(f"{where}: weight must be a number, got {weight!r}")
    return (u, v, float(weight))


def load_graph_yaml(yaml_str: str) -> AdjacencyGraph:
    """Parse a YAML graph description into an `AdjacencyGraph`.

    Args:
        yaml_str: YAML document text.

    Returns:
        The constructed graph.

    Raises:
        ValueError: If the document does not describe a valid graph.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"Unknown top-level keys: {sorted(str(k) for k in unknown)}")

    directed = data.get("directed", True)
    if not isinstance(directed, bool):
        raise ValueError("'directed' must be a boolean")

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")
    raw_vertices = data.get("vertices") or []
    if not isinstance(raw_vertices, list):
        raise ValueError("'vertices' must be a list")

    edges: List[Tuple[Any, ...]] = [
        _parse_edge(entry, i) for i, entry in enumerate(raw_edges)
    ]
    vertices = [
        _normalize_vertex(v, f"vertices[{i}]") for i, v in enumerate(raw_vertices)
    ]

    graph = AdjacencyGraph.from_edges(edges, directed=directed, vertices=vertices)
    logger.debug(
        f"Loaded {'directed' if directed else 'undirected'} graph with "
        f"{len(graph)} vertices and {len(edges)} edges"
    )
    return graph


def load_graph_file(path: Union[str, FilePath]) -> AdjacencyGraph:
    """Read and parse a YAML graph description from ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document does not describe a valid graph.
    """
    file_path = FilePath(path)
    logger.debug(f"Reading graph from: {file_path}")
    return load_graph_yaml(file_path.read_text())
