"""Tests for the Path dataclass."""

import pytest

from pathsearch.config import PathDisplayConfig
from pathsearch.path import Path


def test_path_basic_creation():
    path = Path(("A", "B", "C"), total_weight=2.0, visited={"A", "B", "C", "X"})

    assert path.vertices == ("A", "B", "C")
    assert path.total_weight == 2.0
    assert path.visited == frozenset({"A", "B", "C", "X"})
    assert path.start == "A"
    assert path.target == "C"
    assert len(path) == 3
    assert path.hops == 2


def test_path_empty_has_no_endpoints():
    path = Path()
    assert path.start is None
    assert path.target is None
    assert len(path) == 0
    assert path.hops == 0
    assert path.total_weight == 0.0
    assert path.visited == frozenset()


def test_path_single_vertex():
    path = Path(("A",))
    assert path.start == path.target == "A"
    assert path.hops == 0


def test_path_normalizes_containers():
    path = Path(["A", "B"], visited=["A"])
    assert isinstance(path.vertices, tuple)
    assert isinstance(path.visited, frozenset)
    # visited always covers the path itself
    assert path.visited == {"A", "B"}


def test_path_sequence_protocol():
    path = Path(("A", "B", "C"))
    assert list(path) == ["A", "B", "C"]
    assert path[0] == "A"
    assert path[-1] == "C"
    assert "B" in path
    assert "Z" not in path


def test_recalculate_total_weight():
    weights = {("A", "B"): 1.5, ("B", "C"): 2.5}
    path = Path(("A", "B", "C"))

    result = path.recalculate_total_weight(lambda a, b: weights[(a, b)])

    assert result == 4.0
    assert path.total_weight == 4.0


def test_recalculate_total_weight_short_paths():
    def never(a, b):
        raise AssertionError("must not be called")

    single = Path(("A",), total_weight=3.0)
    assert single.recalculate_total_weight(never) == 0.0
    assert Path().recalculate_total_weight(never) == 0.0


def test_recalculate_total_weight_first_vertex_has_no_predecessor():
    calls = []

    def weight(a, b):
        calls.append((a, b))
        return 1

    Path(("A", "B", "C")).recalculate_total_weight(weight)
    assert calls == [("A", "B"), ("B", "C")]


def test_str_short_path():
    path = Path(("A", "B", "C"), total_weight=2.0, visited={"A", "B", "C", "D"})
    assert str(path) == "Weight=2.00 Length=3 visited=4 (A, B, C)"


def test_str_abbreviates_long_path():
    path = Path(tuple(range(25)))
    text = str(path)
    assert text.startswith("Weight=0.00 Length=25 visited=25 (0, 1, 2,")
    assert "9, ..., 15" in text
    assert text.endswith("23, 24)")


def test_str_boundary_not_abbreviated():
    # Exactly 2 * display_cut vertices are shown in full
    path = Path(tuple(range(20)))
    assert "..." not in str(path)


def test_format_with_custom_config():
    cfg = PathDisplayConfig(display_cut=1, weight_precision=1)
    path = Path(("A", "B", "C", "D"), total_weight=1.25)
    assert path.format(cfg) == "Weight=1.2 Length=4 visited=4 (A, ..., D)"


def test_to_dict():
    path = Path((1, 2), total_weight=3.0, visited={1, 2, 5})
    assert path.to_dict() == {
        "vertices": ["1", "2"],
        "total_weight": 3.0,
        "length": 2,
        "visited": ["1", "2", "5"],
    }


def test_equality():
    assert Path(("A", "B"), 1.0) == Path(("A", "B"), 1.0)
    assert Path(("A", "B"), 1.0) != Path(("A", "B"), 2.0)


def test_config_rejects_negative_cut():
    with pytest.raises(ValueError):
        PathDisplayConfig(display_cut=-1)
