"""Shared fixtures for cycle basis tests."""
from __future__ import annotations

import pytest

from cyclebasis.graph.generators import grid_graph
from cyclebasis.graph.multigraph import MultiGraph

SEED = 42


@pytest.fixture
def empty_graph() -> MultiGraph[int]:
    return MultiGraph()


@pytest.fixture
def square_graph() -> MultiGraph[int]:
    """
    1 - 2
    |   |
    4 - 3
    """
    return MultiGraph.from_edges([(1, 2), (2, 3), (3, 4), (1, 4)])


@pytest.fixture
def grid_2x2() -> MultiGraph[tuple[int, int]]:
    return grid_graph(2, 2)


@pytest.fixture
def star_tree() -> MultiGraph[str]:
    """Hub with 5 spokes, one of which continues for two more hops."""
    g: MultiGraph[str] = MultiGraph()
    for i in range(5):
        g.add_edge("hub", f"s{i}")
    g.add_edge("s0", "s0_a")
    g.add_edge("s0_a", "s0_b")
    return g


@pytest.fixture
def parallel_pair() -> MultiGraph[str]:
    """Two nodes joined by two parallel edges and nothing else."""
    return MultiGraph.from_edges([("a", "b"), ("a", "b")])


@pytest.fixture
def disconnected_graph() -> MultiGraph[str]:
    """Square A-B-C-D, triangle X-Y-Z, and isolated node Q."""
    g = MultiGraph.from_edges([
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"),
        ("X", "Y"), ("Y", "Z"), ("Z", "X"),
    ])
    g.add_node("Q")
    return g
