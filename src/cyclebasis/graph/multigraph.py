"""Undirected multigraph using adjacency maps keyed by edge id.

Nodes are any hashable type T.  Every edge instance gets its own integer
id, so two parallel edges between the same pair of nodes stay distinct
and can be removed one at a time.  Internally:

  _adj[u][v]  -> list of edge ids connecting u and v
  _ends[eid]  -> (u, v) endpoints of that edge

An edge u-v is listed under both _adj[u][v] and _adj[v][u]; a self-loop
u-u is listed once under _adj[u][u].

This is the default Graph Provider for the cycle basis driver.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class MultiGraph(Generic[T]):
    """Undirected multigraph with per-instance edge ids."""

    __slots__ = ("_adj", "_ends", "_next_id")

    def __init__(self) -> None:
        self._adj: dict[T, dict[T, list[int]]] = {}
        self._ends: dict[int, tuple[T, T]] = {}
        self._next_id = 0

    @classmethod
    def from_edges(cls, pairs: Iterable[tuple[T, T]]) -> MultiGraph[T]:
        """Build a graph from (u, v) pairs.  Repeated pairs become parallel edges."""
        g: MultiGraph[T] = cls()
        for u, v in pairs:
            g.add_edge(u, v)
        return g

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: T) -> None:
        """Add *node* if it does not already exist."""
        if node not in self._adj:
            self._adj[node] = {}

    def add_edge(self, u: T, v: T) -> int:
        """Add an undirected edge u-v and return its edge id.

        Creates both nodes if they are missing.  Adding the same pair
        twice creates a parallel edge with a fresh id.
        """
        self.add_node(u)
        self.add_node(v)
        eid = self._next_id
        self._next_id += 1
        self._ends[eid] = (u, v)
        self._adj[u].setdefault(v, []).append(eid)
        if u != v:
            self._adj[v].setdefault(u, []).append(eid)
        return eid

    def remove_edge(self, edge_id: int) -> None:
        """Remove the edge instance *edge_id*.

        Raises ValueError if the edge does not exist.
        """
        try:
            u, v = self._ends.pop(edge_id)
        except KeyError:
            raise ValueError(f"Edge {edge_id!r} not found") from None
        self._detach(u, v, edge_id)
        if u != v:
            self._detach(v, u, edge_id)

    def _detach(self, u: T, v: T, edge_id: int) -> None:
        ids = self._adj[u][v]
        ids.remove(edge_id)
        if not ids:
            del self._adj[u][v]

    # ---- queries ---------------------------------------------------------

    def has_node(self, node: T) -> bool:
        return node in self._adj

    def has_edge(self, u: T, v: T) -> bool:
        return u in self._adj and v in self._adj[u]

    def neighbors(self, node: T) -> list[T]:
        """Adjacent nodes, repeated once per parallel edge.

        A self-loop lists *node* itself once per loop.
        """
        out: list[T] = []
        for nbr, ids in self._adj.get(node, {}).items():
            out.extend([nbr] * len(ids))
        return out

    def edges_connecting(self, u: T, v: T) -> list[int]:
        """Ids of every edge instance between *u* and *v* (empty if none)."""
        return list(self._adj.get(u, {}).get(v, ()))

    def edge_endpoints(self, edge_id: int) -> tuple[T, T]:
        try:
            return self._ends[edge_id]
        except KeyError:
            raise ValueError(f"Edge {edge_id!r} not found") from None

    def degree(self, node: T) -> int:
        # a self-loop contributes 2 to the degree
        total = 0
        for nbr, ids in self._adj.get(node, {}).items():
            total += len(ids) * (2 if nbr == node else 1)
        return total

    def nodes(self) -> Iterator[T]:
        return iter(self._adj)

    def edges(self) -> Iterator[tuple[int, T, T]]:
        for eid, (u, v) in self._ends.items():
            yield eid, u, v

    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return len(self._ends)

    def copy(self) -> MultiGraph[T]:
        """Independent copy that keeps the same edge ids."""
        g: MultiGraph[T] = MultiGraph()
        g._adj = {u: {v: list(ids) for v, ids in nbrs.items()}
                  for u, nbrs in self._adj.items()}
        g._ends = dict(self._ends)
        g._next_id = self._next_id
        return g

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: T) -> bool:  # type: ignore[override]
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count()

    def __repr__(self) -> str:
        return f"MultiGraph(nodes={self.node_count()}, edges={self.edge_count})"
