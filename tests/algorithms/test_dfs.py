from pathsearch.algorithms.dfs import depth_first_search
from pathsearch.graph.adjacency import AdjacencyGraph


def _is_walk(graph, vertices):
    return all(nxt in graph.neighbors(prev) for prev, nxt in zip(vertices, vertices[1:]))


def test_dfs_same_vertex(cycle4):
    path = depth_first_search(cycle4, "C", "C")
    assert path.vertices == ("C",)
    assert path.total_weight == 0.0
    assert path.visited == {"C"}


def test_dfs_follows_only_route_in_cycle(cycle4):
    path = depth_first_search(cycle4, "A", "D")
    assert path.vertices == ("A", "B", "C", "D")
    assert path.visited == {"A", "B", "C", "D"}


def test_dfs_path_is_valid_walk(branchy):
    path = depth_first_search(branchy, "A", "G")
    assert path is not None
    assert path.start == "A" and path.target == "G"
    assert _is_walk(branchy, path.vertices)
    # No vertex repeats on a DFS path
    assert len(set(path.vertices)) == len(path.vertices)


def test_dfs_backtracked_vertices_stay_visited():
    # From A, a dead-end branch (B -> C) and the real route (D -> T).
    neighbours = {
        "A": ["B", "D"],
        "B": ["C"],
        "C": [],
        "D": ["T"],
        "T": [],
    }
    path = depth_first_search(lambda v: neighbours[v], "A", "T")
    assert path.vertices == ("A", "D", "T")
    assert path.visited == {"A", "B", "C", "D", "T"}


def test_dfs_not_necessarily_shortest():
    neighbours = {"A": ["B", "T"], "B": ["T"], "T": []}
    path = depth_first_search(lambda v: neighbours[v], "A", "T")
    assert path.vertices == ("A", "B", "T")


def test_dfs_unreachable(cycle4, line4):
    assert depth_first_search(cycle4, "A", "E") is None
    assert depth_first_search(line4, "D", "A") is None
    assert depth_first_search(line4, "A", "nowhere") is None


def test_dfs_none_endpoints(line4):
    assert depth_first_search(line4, None, "A") is None
    assert depth_first_search(line4, "A", None) is None


def test_dfs_undirected_detached_component(branchy):
    assert depth_first_search(branchy, "A", "X") is None
    assert depth_first_search(branchy, "X", "Y").vertices == ("X", "Y")


def test_dfs_deep_chain_exceeds_recursion_limit():
    n = 20000
    graph = AdjacencyGraph({i: [i + 1] for i in range(n)})
    path = depth_first_search(graph, 0, n)
    assert len(path) == n + 1
    assert path.vertices[-1] == n


def test_dfs_does_not_expand_target():
    expanded = []
    neighbours = {"A": ["B"], "B": ["T"], "T": ["A"]}

    def tracking(v):
        expanded.append(v)
        return neighbours[v]

    path = depth_first_search(tracking, "A", "T")
    assert path.vertices == ("A", "B", "T")
    assert expanded == ["A", "B"]


def test_dfs_path_after_deep_backtrack():
    # A -> B -> C -> D is a dead end; the route continues from A via E.
    neighbours = {
        "A": ["B", "E"],
        "B": ["C"],
        "C": ["D"],
        "D": [],
        "E": ["T"],
        "T": [],
    }
    path = depth_first_search(lambda v: neighbours[v], "A", "T")
    assert path.vertices == ("A", "E", "T")
