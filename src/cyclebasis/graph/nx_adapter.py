"""Graph Provider backed by a networkx.MultiGraph.

Lets callers feed graphs they already build with networkx (generators,
file readers, etc.) straight into compute_fundamental_cycles.  Edge ids
are (frozenset({u, v}), key) pairs, so the id is the same whichever
endpoint it is looked up from.

A MultiGraph passed in is wrapped as-is and therefore consumed by the
traversal.  A simple nx.Graph is copied into a new MultiGraph first,
since a simple graph has no edge keys to remove individually.
"""
from __future__ import annotations

from typing import Hashable

import networkx as nx

EdgeKey = tuple[frozenset, Hashable]


class NetworkXGraph:
    """Adapter exposing the Graph Provider interface over networkx."""

    __slots__ = ("nx_graph",)

    def __init__(self, graph: nx.Graph) -> None:
        if graph.is_directed():
            raise ValueError("Directed graphs are not supported")
        if not graph.is_multigraph():
            graph = nx.MultiGraph(graph)
        self.nx_graph: nx.MultiGraph = graph

    def node_count(self) -> int:
        return self.nx_graph.number_of_nodes()

    def nodes(self) -> list[Hashable]:
        return list(self.nx_graph.nodes)

    def neighbors(self, node: Hashable) -> list[Hashable]:
        out: list[Hashable] = []
        for nbr, keys in self.nx_graph.adj[node].items():
            out.extend([nbr] * len(keys))
        return out

    def edges_connecting(self, a: Hashable, b: Hashable) -> list[EdgeKey]:
        keys = self.nx_graph.adj[a].get(b, {}) if a in self.nx_graph else {}
        ends = frozenset((a, b))
        return [(ends, k) for k in keys]

    def remove_edge(self, edge_id: EdgeKey) -> None:
        ends, key = edge_id
        u, *rest = ends
        v = rest[0] if rest else u
        self.nx_graph.remove_edge(u, v, key=key)

    @property
    def edge_count(self) -> int:
        return self.nx_graph.number_of_edges()

    def __repr__(self) -> str:
        return f"NetworkXGraph(nodes={self.node_count()}, edges={self.edge_count})"
