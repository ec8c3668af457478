"""The graph interface the cycle basis driver consumes.

Anything with these five methods can be traversed: the built-in
MultiGraph, the NetworkX adapter, or the non-destructive
ConsumedEdgeView wrapped around either one.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Protocol, runtime_checkable


@runtime_checkable
class GraphProvider(Protocol):
    def node_count(self) -> int: ...

    def nodes(self) -> Iterable[Hashable]: ...

    def neighbors(self, node: Hashable) -> Iterable[Hashable]:
        """Adjacent nodes in the current graph.

        May repeat a node once per parallel edge.  Order is up to the
        provider and need not be stable after edges are removed.
        """
        ...

    def edges_connecting(self, a: Hashable, b: Hashable) -> list[Hashable]: ...

    def remove_edge(self, edge_id: Hashable) -> None: ...
