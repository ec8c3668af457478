"""Checks for cycles reported by compute_fundamental_cycles.

These run against an intact graph, so callers either keep a copy from
before the traversal or run it with consume=False.
"""
from __future__ import annotations

from typing import Hashable, Sequence

from cyclebasis.graph.provider import GraphProvider


def cycle_edges(cycle: Sequence[Hashable]) -> list[tuple[Hashable, Hashable]]:
    """Consecutive node pairs of *cycle*, including the closing pair.

    (a, b, c) -> [(a, b), (b, c), (c, a)].  A one-node cycle is a
    self-loop [(a, a)].
    """
    n = len(cycle)
    return [(cycle[i], cycle[(i + 1) % n]) for i in range(n)]


def is_valid_cycle(graph: GraphProvider, cycle: Sequence[Hashable]) -> bool:
    """True if *cycle* is a simple cycle of *graph*.

    Every consecutive pair (closing pair too) must be an edge and no
    node may repeat.  A two-node cycle needs two parallel edges between
    its nodes.
    """
    if not cycle or len(set(cycle)) != len(cycle):
        return False
    if len(cycle) == 2:
        return len(graph.edges_connecting(cycle[0], cycle[1])) >= 2
    return all(graph.edges_connecting(u, v) for u, v in cycle_edges(cycle))


def cycle_rank(graph: GraphProvider) -> int:
    """E - V + C: the number of cycles in any fundamental basis of *graph*."""
    nodes = list(graph.nodes())
    edges = 0
    seen: set[Hashable] = set()
    components = 0
    for start in nodes:
        if start in seen:
            continue
        components += 1
        seen.add(start)
        stack = [start]
        while stack:
            u = stack.pop()
            for v in graph.neighbors(u):
                # each edge is met from both ends, a self-loop from one
                edges += 2 if u == v else 1
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
    return edges // 2 - len(nodes) + components
