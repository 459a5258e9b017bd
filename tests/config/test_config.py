"""Tests for `pathsearch.config` focusing on behavior and correctness."""

import pytest

from pathsearch.config import DISPLAY_CONFIG, PathDisplayConfig


def test_default_config_values() -> None:
    config = PathDisplayConfig()
    assert config.display_cut == 10
    assert config.weight_precision == 2
    assert config.adjacency_header == "Graph adjacency list:"


def test_global_instance_uses_defaults() -> None:
    assert DISPLAY_CONFIG == PathDisplayConfig()


def test_format_weight_precision() -> None:
    assert PathDisplayConfig().format_weight(2) == "2.00"
    assert PathDisplayConfig(weight_precision=0).format_weight(2.6) == "3"
    assert PathDisplayConfig(weight_precision=4).format_weight(1 / 3) == "0.3333"


@pytest.mark.parametrize(
    "kwargs", [{"display_cut": -1}, {"weight_precision": -2}]
)
def test_negative_values_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        PathDisplayConfig(**kwargs)


def test_zero_cut_allowed() -> None:
    assert PathDisplayConfig(display_cut=0).display_cut == 0
