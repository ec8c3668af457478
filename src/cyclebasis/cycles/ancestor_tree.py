"""Rooted spanning tree with level bookkeeping for path queries.

Each node stores its parent and its level (edge count from the root).
Levels are fixed at insertion: a root gets 0, every other node gets its
parent's level + 1.  Since a parent must already be in the tree when a
child is inserted, and no node is inserted twice, the structure is a
forest by construction.

get_path(a, b) finds the tree path through the least common ancestor
without materializing either ancestor chain:

  1.  Walk the deeper of the two nodes up until both are on the same
      level, recording each step.
  2.  Walk both up in lock-step until they meet.  The meeting point is
      the LCA.
  3.  Stitch the a-side, the LCA (once), and the reversed b-side.

If both sides reach level 0 without meeting, the nodes hang off
different roots, i.e. they are in different connected components.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class CycleBasisError(Exception):
    """Base class for precondition failures in cycle basis construction."""


class UnknownParentError(CycleBasisError):
    """Raised when a node is inserted under a parent that is not in the tree."""

    def __init__(self, node: Hashable, parent: Hashable) -> None:
        self.node = node
        self.parent = parent
        super().__init__(
            f"Cannot insert {node!r}: parent {parent!r} is not in the tree"
        )


class DuplicateNodeError(CycleBasisError):
    """Raised when a node is inserted a second time."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is already in the tree")


class UnknownNodeError(CycleBasisError):
    """Raised when a query names a node that was never inserted."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is not in the tree")


class DisconnectedNodesError(CycleBasisError):
    """Raised when two nodes have no tree path between them."""

    def __init__(self, a: Hashable, b: Hashable) -> None:
        self.a = a
        self.b = b
        super().__init__(
            f"No tree path between {a!r} and {b!r}: they hang off different roots"
        )


@dataclass(frozen=True, slots=True)
class TreeNode(Generic[T]):
    parent: T | None
    level: int


class AncestorTree(Generic[T]):
    """Mapping node -> (parent, level) that answers LCA path queries."""

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[T, TreeNode[T]] = {}

    def insert(self, node: T, parent: T | None = None) -> TreeNode[T]:
        """Register *node* as a root (no parent) or as a child of *parent*.

        Raises UnknownParentError if *parent* is not in the tree and
        DuplicateNodeError if *node* already is.
        """
        if node in self._nodes:
            raise DuplicateNodeError(node)
        if parent is None:
            entry: TreeNode[T] = TreeNode(parent=None, level=0)
        else:
            parent_entry = self._nodes.get(parent)
            if parent_entry is None:
                raise UnknownParentError(node, parent)
            entry = TreeNode(parent=parent, level=parent_entry.level + 1)
        self._nodes[node] = entry
        return entry

    def contains(self, node: T) -> bool:
        return node in self._nodes

    def _entry(self, node: T) -> TreeNode[T]:
        try:
            return self._nodes[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def level(self, node: T) -> int:
        return self._entry(node).level

    def parent(self, node: T) -> T | None:
        return self._entry(node).parent

    def root(self, node: T) -> T:
        """Walk parent pointers up to the root of *node*'s tree."""
        cur = node
        entry = self._entry(cur)
        while entry.parent is not None:
            cur = entry.parent
            entry = self._nodes[cur]
        return cur

    def get_path(self, a: T, b: T) -> list[T]:
        """Tree path from *a* to *b*, both ends included, LCA listed once.

        Raises DisconnectedNodesError if *a* and *b* are in different
        trees of the forest.
        """
        a_entry = self._entry(a)
        b_entry = self._entry(b)

        a_side: list[T] = []
        b_side: list[T] = []
        x, y = a, b
        while a_entry.level > b_entry.level:
            a_side.append(x)
            x = a_entry.parent  # type: ignore[assignment]
            a_entry = self._nodes[x]
        while b_entry.level > a_entry.level:
            b_side.append(y)
            y = b_entry.parent  # type: ignore[assignment]
            b_entry = self._nodes[y]

        # same level now; climb together until the sides meet
        while x != y:
            if a_entry.level == 0:
                raise DisconnectedNodesError(a, b)
            a_side.append(x)
            b_side.append(y)
            x = a_entry.parent  # type: ignore[assignment]
            y = b_entry.parent  # type: ignore[assignment]
            a_entry = self._nodes[x]
            b_entry = self._nodes[y]

        a_side.append(x)
        b_side.reverse()
        return a_side + b_side

    def tree_edges(self) -> Iterator[tuple[T, T]]:
        """(parent, child) pairs of every non-root node."""
        for node, entry in self._nodes.items():
            if entry.parent is not None:
                yield entry.parent, node

    def roots(self) -> list[T]:
        return [n for n, e in self._nodes.items() if e.parent is None]

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"AncestorTree(nodes={len(self._nodes)}, roots={len(self.roots())})"
