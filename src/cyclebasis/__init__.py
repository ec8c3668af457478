"""Fundamental cycle bases of undirected graphs."""

from cyclebasis.cycles import (
    AncestorTree,
    CycleBasis,
    CycleBasisError,
    DisconnectedNodesError,
    DuplicateNodeError,
    UnknownNodeError,
    UnknownParentError,
    compute_fundamental_cycles,
)
from cyclebasis.graph import MultiGraph, NetworkXGraph, grid_graph

__all__ = [
    "AncestorTree",
    "CycleBasis",
    "CycleBasisError",
    "DisconnectedNodesError",
    "DuplicateNodeError",
    "MultiGraph",
    "NetworkXGraph",
    "UnknownNodeError",
    "UnknownParentError",
    "compute_fundamental_cycles",
    "grid_graph",
]
