"""Fundamental cycle basis by spanning-tree growth and LCA path extraction.

The driver grows a spanning tree with an explicit LIFO stack (no
recursion, so deep graphs do not hit the interpreter's recursion
limit).  For the node z popped off the stack, every edge still
connecting z to a neighbor w is examined exactly once:

  - w not yet in the tree  ->  tree edge.  Insert w under z, push it.
  - w already in the tree  ->  back edge.  The tree path z .. LCA .. w
    plus this edge is a cycle; record the path.

Either way the edge is removed from the graph afterwards, which is what
guarantees termination and keeps any edge from being seen twice.

Parallel edges are handled one edge at a time, never one neighbor at a
time: the first z-w edge may be a tree edge, every further z-w edge is
then a back edge closing the 2-cycle (z, w).  A self-loop on z closes
the one-node cycle (z,).

Each connected component contributes E_c - V_c + 1 cycles.  Which
cycles come out depends on the provider's neighbor order, so the node
sequences are not canonical; only the count is.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterator, Sequence, overload

from cyclebasis.cycles.ancestor_tree import AncestorTree
from cyclebasis.graph.provider import GraphProvider
from cyclebasis.graph.views import ConsumedEdgeView

log = logging.getLogger(__name__)

Cycle = tuple[Hashable, ...]


@dataclass(slots=True)
class CycleBasis(Sequence[Cycle]):
    """Cycles found by one run, in discovery order.

    Append-only: no deduplication, no validation beyond what the tree
    already guarantees.  *roots* lists the root picked for each
    component, *tree* is the spanning forest the cycles are relative to.
    """
    cycles: list[Cycle] = field(default_factory=list)
    roots: list[Hashable] = field(default_factory=list)
    tree: AncestorTree = field(default_factory=AncestorTree)

    def add(self, path: Sequence[Hashable]) -> Cycle:
        cycle = tuple(path)
        self.cycles.append(cycle)
        return cycle

    @property
    def components(self) -> int:
        return len(self.roots)

    @overload
    def __getitem__(self, index: int) -> Cycle: ...

    @overload
    def __getitem__(self, index: slice) -> list[Cycle]: ...

    def __getitem__(self, index: int | slice) -> Cycle | list[Cycle]:
        return self.cycles[index]

    def __len__(self) -> int:
        return len(self.cycles)

    def __iter__(self) -> Iterator[Cycle]:
        return iter(self.cycles)


def compute_fundamental_cycles(
    graph: GraphProvider,
    *,
    all_components: bool = True,
    consume: bool = True,
) -> CycleBasis:
    """Return one cycle per non-tree edge of a spanning forest of *graph*.

    By default every edge of *graph* is removed as it is processed.
    Pass consume=False to leave the graph untouched; removals are then
    tracked in a ConsumedEdgeView instead.

    With all_components=False only the component of the first node is
    traversed and nodes in other components are ignored.
    """
    if not consume:
        graph = ConsumedEdgeView(graph)

    basis = CycleBasis()
    if graph.node_count() == 0:
        return basis

    # dict keeps node order, so the next root is picked deterministically
    unvisited: dict[Hashable, None] = dict.fromkeys(graph.nodes())
    tree = basis.tree

    while unvisited:
        root = next(iter(unvisited))
        found = _expand_component(graph, tree, basis, root, unvisited)
        log.debug("component rooted at %r: %d cycle(s)", root, found)
        if not all_components:
            break

    log.debug(
        "fundamental cycles: %d over %d component(s), %d tree node(s)",
        len(basis), basis.components, len(tree),
    )
    return basis


def _expand_component(
    graph: GraphProvider,
    tree: AncestorTree,
    basis: CycleBasis,
    root: Hashable,
    unvisited: dict[Hashable, None],
) -> int:
    """Grow the tree over the component of *root*; return cycles found."""
    tree.insert(root)
    basis.roots.append(root)
    del unvisited[root]
    stack: list[Hashable] = [root]
    found = 0

    while stack:
        z = stack.pop()
        # snapshot: the neighbor list shrinks as edges are removed below
        for w in dict.fromkeys(graph.neighbors(z)):
            for edge_id in graph.edges_connecting(z, w):
                if w in tree:
                    cycle = basis.add(tree.get_path(z, w))
                    found += 1
                    log.debug("back edge %r-%r closes %r", z, w, cycle)
                else:
                    tree.insert(w, parent=z)
                    stack.append(w)
                    unvisited.pop(w, None)
                graph.remove_edge(edge_id)
    return found
