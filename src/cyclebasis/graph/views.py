"""Non-destructive wrapper around a Graph Provider.

The traversal driver consumes every edge it processes by removing it.
ConsumedEdgeView turns those removals into entries in a marker set, so
the underlying graph is left exactly as it was.  Neighbor and edge
lookups skip anything already marked.
"""
from __future__ import annotations

from typing import Hashable, Iterable

from cyclebasis.graph.provider import GraphProvider


class ConsumedEdgeView:
    """Graph Provider that records removals instead of applying them."""

    __slots__ = ("_graph", "consumed")

    def __init__(self, graph: GraphProvider) -> None:
        self._graph = graph
        self.consumed: set[Hashable] = set()

    def node_count(self) -> int:
        return self._graph.node_count()

    def nodes(self) -> Iterable[Hashable]:
        return self._graph.nodes()

    def neighbors(self, node: Hashable) -> list[Hashable]:
        out: list[Hashable] = []
        seen: set[Hashable] = set()
        for nbr in self._graph.neighbors(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            out.extend([nbr] * len(self.edges_connecting(node, nbr)))
        return out

    def edges_connecting(self, a: Hashable, b: Hashable) -> list[Hashable]:
        return [
            eid for eid in self._graph.edges_connecting(a, b)
            if eid not in self.consumed
        ]

    def remove_edge(self, edge_id: Hashable) -> None:
        if edge_id in self.consumed:
            raise ValueError(f"Edge {edge_id!r} already consumed")
        self.consumed.add(edge_id)

    def __repr__(self) -> str:
        return f"ConsumedEdgeView({self._graph!r}, consumed={len(self.consumed)})"
