"""Graphviz DOT output for graphs and their spanning forests.

Edges carry no labels.  When a CycleBasis is passed, edges of its
spanning forest are drawn solid and every other edge (one per
fundamental cycle) dashed.  Edges outside the traversed forest, such as
those of components skipped by a single-component run, are left plain.
"""
from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable

from cyclebasis.cycles.fundamental import CycleBasis


def _quote(node: Hashable) -> str:
    text = str(node).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_dot(
    edges: Iterable[tuple[Hashable, Hashable]],
    nodes: Iterable[Hashable] = (),
    basis: CycleBasis | None = None,
    name: str = "G",
) -> str:
    """Render an undirected graph given as (u, v) pairs.

    *nodes* adds isolated nodes that appear in no edge.  Parallel edges
    are emitted once per instance.
    """
    # one tree edge per pair at most; the remaining instances are back edges
    tree_left: Counter = Counter()
    if basis is not None:
        for parent, child in basis.tree.tree_edges():
            tree_left[frozenset((parent, child))] += 1

    lines = [f"graph {name} {{"]
    for node in nodes:
        lines.append(f"    {_quote(node)};")
    for u, v in edges:
        attrs = ""
        # edges of components the run never traversed stay plain
        if basis is not None and u in basis.tree:
            key = frozenset((u, v))
            if tree_left[key] > 0:
                tree_left[key] -= 1
            else:
                attrs = " [style=dashed]"
        lines.append(f"    {_quote(u)} -- {_quote(v)}{attrs};")
    lines.append("}")
    return "\n".join(lines)
