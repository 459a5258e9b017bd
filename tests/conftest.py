"""Shared sample graphs for the test suite.

Edge weights are shown in brackets. Grid and helper graphs are plain
neighbour functions so the algorithms are also exercised without
`AdjacencyGraph`.
"""

from __future__ import annotations

import pytest

from pathsearch.graph.adjacency import AdjacencyGraph


def make_grid(rows: int, cols: int):
    """Return a neighbour function for a rows x cols 4-connected grid."""

    def neighbors(cell):
        r, c = cell
        steps = ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
        return {(i, j) for i, j in steps if 0 <= i < rows and 0 <= j < cols}

    return neighbors


@pytest.fixture
def grid_factory():
    return make_grid


@pytest.fixture
def grid3():
    # (0,0)─(0,1)─(0,2)
    #   │     │     │
    # (1,0)─(1,1)─(1,2)
    #   │     │     │
    # (2,0)─(2,1)─(2,2)
    return make_grid(3, 3)


@pytest.fixture
def cycle4():
    #      [1]      [1]
    #  A───────►B───────►C
    #  ▲                 │
    #  │   [1]      [1]  │
    #  └────────D◄───────┘
    #
    #  E (isolated)
    return AdjacencyGraph.from_edges(
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1)],
        vertices=["E"],
    )


@pytest.fixture
def diamond():
    #       [5]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►C─────────┘
    return AdjacencyGraph.from_edges(
        [("A", "B", 5), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)]
    )


@pytest.fixture
def line4():
    #  A──►B──►C──►D   (all weights 1)
    return AdjacencyGraph.from_edges([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def decrease_key():
    # The first route found to D (via B) is later beaten by a longer-hop,
    # cheaper route via C and E, forcing a stale frontier entry.
    #
    #       [1]        [10]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D───►F  [1]
    #   │                   ▲
    #   │  [2]    [2]   [2] │
    #   └────►C──────►E─────┘
    return AdjacencyGraph.from_edges(
        [
            ("A", "B", 1),
            ("B", "D", 10),
            ("A", "C", 2),
            ("C", "E", 2),
            ("E", "D", 2),
            ("D", "F", 1),
        ]
    )


@pytest.fixture
def branchy():
    # Undirected graph with cycles, a self-loop at G and a detached pair X─Y.
    #
    #  A───B───C
    #  │   │   │
    #  D───E───F───G⟲
    #
    #  X───Y
    return AdjacencyGraph.from_edges(
        [
            ("A", "B", 2),
            ("B", "C", 2),
            ("A", "D", 1),
            ("B", "E", 1),
            ("C", "F", 3),
            ("D", "E", 1),
            ("E", "F", 4),
            ("F", "G", 1),
            ("G", "G", 1),
            ("X", "Y", 1),
        ],
        directed=False,
    )
