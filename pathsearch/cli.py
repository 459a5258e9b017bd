"""Command-line interface for pathsearch."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from pathsearch.algorithms import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    format_adjacency_list,
    get_all_vertices,
)
from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.io import load_graph_file
from pathsearch.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)

ALGORITHMS = ("bfs", "dfs", "dijkstra")


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _resolve_vertex(graph: AdjacencyGraph, name: str) -> Any:
    """Map a command-line vertex name onto a vertex of ``graph``.

    YAML may have parsed numeric names as ints or floats, so a name that is
    not a vertex as-is is matched against the string form of each vertex.
    Unknown names are returned unchanged; searches then report no path.
    """
    if name in graph:
        return name
    for vertex in graph.vertices():
        if str(vertex) == name:
            return vertex
    logger.warning(f"Vertex '{name}' is not in the graph")
    return name


def _load(path: Path) -> AdjacencyGraph:
    try:
        return load_graph_file(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_search(
    path: Path, start: str, target: str, algorithm: str, as_json: bool
) -> None:
    """Run one search on the graph in ``path`` and print the outcome."""
    graph = _load(path)
    src = _resolve_vertex(graph, start)
    dst = _resolve_vertex(graph, target)

    logger.info(f"Running {algorithm} from {start} to {target}")
    started = perf_counter()
    if algorithm == "bfs":
        result = breadth_first_search(graph, src, dst)
    elif algorithm == "dfs":
        result = depth_first_search(graph, src, dst)
    else:
        result = dijkstra_shortest_path(graph, src, dst, graph.weight)
    logger.info(f"Search finished in {_format_duration(perf_counter() - started)}")

    if result is not None and algorithm != "dijkstra":
        result.recalculate_total_weight(graph.weight)

    if as_json:
        payload = {"found": result is not None, "algorithm": algorithm}
        if result is not None:
            payload.update(result.to_dict())
        print(json.dumps(payload, indent=2))
    elif result is None:
        print(f"No path from {start} to {target}")
    else:
        print(result)


def _run_reach(path: Path, start: str) -> None:
    graph = _load(path)
    reachable = get_all_vertices(graph, _resolve_vertex(graph, start))
    for vertex in sorted(reachable, key=str):
        print(vertex)


def _run_adjacency(path: Path, start: str) -> None:
    graph = _load(path)
    print(format_adjacency_list(graph, _resolve_vertex(graph, start)), end="")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathsearch`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathsearch",
        description="Search paths in graphs described by YAML files.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{search,reach,adjacency}",
        help="Available commands",
    )

    search_parser = subparsers.add_parser(
        "search", help="Find a path between two vertices"
    )
    search_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    search_parser.add_argument("start", help="Start vertex")
    search_parser.add_argument("target", help="Target vertex")
    search_parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHMS,
        default="bfs",
        help="Search algorithm (default: bfs)",
    )
    search_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    reach_parser = subparsers.add_parser(
        "reach", help="List every vertex reachable from a start vertex"
    )
    reach_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    reach_parser.add_argument("start", help="Start vertex")

    adjacency_parser = subparsers.add_parser(
        "adjacency", help="Print the adjacency list reachable from a start vertex"
    )
    adjacency_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    adjacency_parser.add_argument("start", help="Start vertex")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    if args.verbose:
        logger.debug("Debug logging enabled")

    if args.command == "search":
        _run_search(args.graph, args.start, args.target, args.algorithm, args.json)
    elif args.command == "reach":
        _run_reach(args.graph, args.start)
    elif args.command == "adjacency":
        _run_adjacency(args.graph, args.start)

