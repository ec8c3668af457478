"""Tests for the non-destructive ConsumedEdgeView."""
from __future__ import annotations

import pytest

from cyclebasis.graph.multigraph import MultiGraph
from cyclebasis.graph.views import ConsumedEdgeView


class TestConsumedEdgeView:
    def test_passes_through_nodes(self, square_graph: MultiGraph[int]) -> None:
        view = ConsumedEdgeView(square_graph)
        assert view.node_count() == 4
        assert sorted(view.nodes()) == [1, 2, 3, 4]

    def test_removal_is_recorded_not_applied(self, square_graph: MultiGraph[int]) -> None:
        view = ConsumedEdgeView(square_graph)
        (eid,) = view.edges_connecting(1, 2)
        view.remove_edge(eid)
        assert view.consumed == {eid}
        assert square_graph.has_edge(1, 2)
        assert view.edges_connecting(2, 1) == []
        assert view.neighbors(1) == [4]

    def test_parallel_edges_counted_individually(self, parallel_pair: MultiGraph[str]) -> None:
        view = ConsumedEdgeView(parallel_pair)
        assert view.neighbors("a") == ["b", "b"]
        first, _ = view.edges_connecting("a", "b")
        view.remove_edge(first)
        assert view.neighbors("b") == ["a"]

    def test_double_removal_raises(self, square_graph: MultiGraph[int]) -> None:
        view = ConsumedEdgeView(square_graph)
        (eid,) = view.edges_connecting(3, 4)
        view.remove_edge(eid)
        with pytest.raises(ValueError, match="already consumed"):
            view.remove_edge(eid)
