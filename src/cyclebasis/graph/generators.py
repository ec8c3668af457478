"""Small graph builders for examples, the CLI, and tests."""
from __future__ import annotations

from cyclebasis.graph.multigraph import MultiGraph


def grid_graph(cells_x: int, cells_y: int) -> MultiGraph[tuple[int, int]]:
    """Rectangular grid of cells_x by cells_y unit cells.

    Nodes are lattice points (x, y) with 0 <= x <= cells_x and
    0 <= y <= cells_y, joined to their right and upper neighbors.
    A 2x2 grid has 9 nodes and 12 edges, hence 4 independent cycles.
    """
    if cells_x < 0 or cells_y < 0:
        raise ValueError(
            f"Grid dimensions must be non-negative, got {cells_x}x{cells_y}"
        )
    g: MultiGraph[tuple[int, int]] = MultiGraph()
    for y in range(cells_y + 1):
        for x in range(cells_x + 1):
            g.add_node((x, y))
            if x > 0:
                g.add_edge((x - 1, y), (x, y))
            if y > 0:
                g.add_edge((x, y - 1), (x, y))
    return g


def cycle_graph(n: int) -> MultiGraph[int]:
    """Ring 0 - 1 - ... - (n-1) - 0."""
    if n < 3:
        raise ValueError(f"A simple cycle needs at least 3 nodes, got {n}")
    return MultiGraph.from_edges((i, (i + 1) % n) for i in range(n))


def path_graph(n: int) -> MultiGraph[int]:
    """Chain 0 - 1 - ... - (n-1).  A tree, so it has no cycles."""
    g: MultiGraph[int] = MultiGraph()
    for i in range(n):
        g.add_node(i)
        if i > 0:
            g.add_edge(i - 1, i)
    return g
