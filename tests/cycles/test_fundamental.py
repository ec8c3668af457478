"""Tests for fundamental cycle extraction."""
from __future__ import annotations

import random

import networkx as nx
import pytest

from cyclebasis.cycles.fundamental import CycleBasis, compute_fundamental_cycles
from cyclebasis.cycles.validate import cycle_rank, is_valid_cycle
from cyclebasis.graph.generators import cycle_graph, grid_graph, path_graph
from cyclebasis.graph.multigraph import MultiGraph
from cyclebasis.graph.nx_adapter import NetworkXGraph

SEED = 42


class TestScenarios:
    def test_empty_graph(self, empty_graph: MultiGraph[int]) -> None:
        basis = compute_fundamental_cycles(empty_graph)
        assert isinstance(basis, CycleBasis)
        assert len(basis) == 0
        assert basis.components == 0

    def test_square(self, square_graph: MultiGraph[int]) -> None:
        original = square_graph.copy()
        basis = compute_fundamental_cycles(square_graph)
        assert len(basis) == 1
        assert sorted(basis[0]) == [1, 2, 3, 4]
        assert is_valid_cycle(original, basis[0])

    def test_grid_2x2(self, grid_2x2: MultiGraph[tuple[int, int]]) -> None:
        original = grid_2x2.copy()
        basis = compute_fundamental_cycles(grid_2x2)
        assert len(basis) == 4
        for cycle in basis:
            assert is_valid_cycle(original, cycle)

    def test_tree_has_no_cycles(self, star_tree: MultiGraph[str]) -> None:
        basis = compute_fundamental_cycles(star_tree)
        assert len(basis) == 0
        assert len(basis.tree) == star_tree.node_count()

    def test_parallel_pair(self, parallel_pair: MultiGraph[str]) -> None:
        basis = compute_fundamental_cycles(parallel_pair)
        assert len(basis) == 1
        assert len(basis[0]) == 2
        assert set(basis[0]) == {"a", "b"}

    def test_triple_parallel_edges(self) -> None:
        g = MultiGraph.from_edges([(1, 2)] * 3)
        basis = compute_fundamental_cycles(g)
        assert len(basis) == 2
        assert all(len(c) == 2 for c in basis)

    def test_parallel_edge_between_tree_nodes(self) -> None:
        """Triangle plus a doubled side: rank 2."""
        g = MultiGraph.from_edges([(1, 2), (2, 3), (3, 1), (2, 3)])
        original = g.copy()
        basis = compute_fundamental_cycles(g)
        assert len(basis) == 2
        for cycle in basis:
            assert is_valid_cycle(original, cycle)

    def test_self_loop(self) -> None:
        g = MultiGraph.from_edges([(1, 2), (2, 2)])
        basis = compute_fundamental_cycles(g)
        assert basis.cycles == [(2,)]

    def test_single_node(self) -> None:
        g: MultiGraph[str] = MultiGraph()
        g.add_node("solo")
        basis = compute_fundamental_cycles(g)
        assert len(basis) == 0
        assert basis.roots == ["solo"]


class TestEdgeConsumption:
    def test_consumes_every_edge(self, grid_2x2: MultiGraph[tuple[int, int]]) -> None:
        compute_fundamental_cycles(grid_2x2)
        assert grid_2x2.edge_count == 0
        # nodes are never removed
        assert grid_2x2.node_count() == 9

    def test_rerun_on_exhausted_graph(self, square_graph: MultiGraph[int]) -> None:
        compute_fundamental_cycles(square_graph)
        again = compute_fundamental_cycles(square_graph)
        assert len(again) == 0

    def test_consume_false_leaves_graph_intact(
        self, grid_2x2: MultiGraph[tuple[int, int]]
    ) -> None:
        before = list(grid_2x2.edges())
        basis = compute_fundamental_cycles(grid_2x2, consume=False)
        assert len(basis) == 4
        assert list(grid_2x2.edges()) == before
        # and it can be run again with the same outcome
        assert len(compute_fundamental_cycles(grid_2x2, consume=False)) == 4

    def test_long_ring_without_recursion_limit(self) -> None:
        g = cycle_graph(20_000)
        basis = compute_fundamental_cycles(g)
        assert len(basis) == 1
        assert len(basis[0]) == 20_000

    def test_long_path(self) -> None:
        basis = compute_fundamental_cycles(path_graph(20_000))
        assert len(basis) == 0


class TestComponents:
    def test_all_components_by_default(self, disconnected_graph: MultiGraph[str]) -> None:
        original = disconnected_graph.copy()
        basis = compute_fundamental_cycles(disconnected_graph)
        assert len(basis) == 2
        assert basis.components == 3
        assert basis.roots == ["A", "X", "Q"]
        lengths = sorted(len(c) for c in basis)
        assert lengths == [3, 4]
        for cycle in basis:
            assert is_valid_cycle(original, cycle)

    def test_single_component(self, disconnected_graph: MultiGraph[str]) -> None:
        basis = compute_fundamental_cycles(disconnected_graph, all_components=False)
        assert len(basis) == 1
        assert basis.roots == ["A"]
        assert sorted(basis[0]) == ["A", "B", "C", "D"]
        assert "X" not in basis.tree
        # the other component is left unconsumed
        assert disconnected_graph.edge_count == 3

    def test_one_tree_per_component(self, disconnected_graph: MultiGraph[str]) -> None:
        basis = compute_fundamental_cycles(disconnected_graph)
        tree = basis.tree
        assert tree.roots() == ["A", "X", "Q"]
        assert tree.root("C") == "A"
        assert tree.root("Z") == "X"


class TestCycleProperties:
    def test_cycle_closes_over_a_back_edge(self, grid_2x2) -> None:
        """Each cycle is a tree path whose ends are joined by a non-tree edge."""
        original = grid_2x2.copy()
        basis = compute_fundamental_cycles(grid_2x2)
        tree_links = {frozenset(e) for e in basis.tree.tree_edges()}
        for cycle in basis:
            for u, v in zip(cycle, cycle[1:]):
                assert frozenset((u, v)) in tree_links
            assert frozenset((cycle[0], cycle[-1])) not in tree_links
            assert original.has_edge(cycle[0], cycle[-1])

    def test_levels_consistent(self, grid_2x2) -> None:
        basis = compute_fundamental_cycles(grid_2x2)
        tree = basis.tree
        for root in tree.roots():
            assert tree.level(root) == 0
        for parent, child in tree.tree_edges():
            assert tree.level(child) == tree.level(parent) + 1

    @pytest.mark.parametrize("cx,cy", [(1, 1), (3, 2), (5, 5), (12, 7)])
    def test_grid_rank(self, cx: int, cy: int) -> None:
        basis = compute_fundamental_cycles(grid_graph(cx, cy))
        assert len(basis) == cx * cy

    def test_count_matches_networkx_random(self) -> None:
        """Random simple graphs: same count as networkx.cycle_basis, all cycles valid."""
        rng = random.Random(SEED)
        for _ in range(30):
            n = rng.randint(1, 40)
            p = rng.uniform(0.02, 0.3)
            g = nx.gnp_random_graph(n, p, seed=rng.randint(0, 10_000))
            basis = compute_fundamental_cycles(NetworkXGraph(g))
            assert len(basis) == len(nx.cycle_basis(g))
            assert basis.components == nx.number_connected_components(g)
            for cycle in basis:
                assert len(cycle) >= 3
                for i, u in enumerate(cycle):
                    assert g.has_edge(u, cycle[(i + 1) % len(cycle)])

    def test_count_matches_rank_random_multigraph(self) -> None:
        """Random multigraphs with loops: E - V + C cycles."""
        rng = random.Random(SEED + 1)
        for _ in range(30):
            n = rng.randint(1, 25)
            g: MultiGraph[int] = MultiGraph()
            for i in range(n):
                g.add_node(i)
            for _ in range(rng.randint(0, 3 * n)):
                g.add_edge(rng.randrange(n), rng.randrange(n))
            expected = cycle_rank(g)
            original = g.copy()
            basis = compute_fundamental_cycles(g)
            assert len(basis) == expected
            for cycle in basis:
                assert is_valid_cycle(original, cycle)


class TestCycleBasisSequence:
    def test_index_and_slice(self, grid_2x2: MultiGraph[tuple[int, int]]) -> None:
        basis = compute_fundamental_cycles(grid_2x2)
        assert basis[0] == basis.cycles[0]
        assert basis[-1] == basis.cycles[-1]
        assert basis[1:3] == basis.cycles[1:3]
        assert list(basis) == basis.cycles
        assert basis[0] in basis
