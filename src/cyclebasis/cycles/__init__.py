"""Spanning-tree construction and fundamental cycle extraction."""

from cyclebasis.cycles.ancestor_tree import (
    AncestorTree,
    CycleBasisError,
    DisconnectedNodesError,
    DuplicateNodeError,
    TreeNode,
    UnknownNodeError,
    UnknownParentError,
)
from cyclebasis.cycles.fundamental import (
    Cycle,
    CycleBasis,
    compute_fundamental_cycles,
)
from cyclebasis.cycles.validate import cycle_edges, cycle_rank, is_valid_cycle

__all__ = [
    "AncestorTree",
    "Cycle",
    "CycleBasis",
    "CycleBasisError",
    "DisconnectedNodesError",
    "DuplicateNodeError",
    "TreeNode",
    "UnknownNodeError",
    "UnknownParentError",
    "compute_fundamental_cycles",
    "cycle_edges",
    "cycle_rank",
    "is_valid_cycle",
]
