"""Node storage for linked complete binary trees.

A Node is a plain data container owning at most two children. Positional
logic (which slot is next, which node is last) lives in the traversers and
in the tree types, never in the node itself.
"""

from enum import Enum
from typing import Iterator, Optional


class ChildSide(Enum):
    """Names one of the two child slots of a node."""
    LEFT = "left"
    RIGHT = "right"


class Node:
    """A single tree node carrying an integer value.

    Each child slot is either another Node or None (absent). A node is
    owned by exactly one parent slot, or by the tree itself when it is the
    root. Nodes compare by identity: two nodes with equal values are still
    distinct members of the tree.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: int,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        self.value = value
        self.left = left
        self.right = right

    def get_child(self, side: ChildSide) -> Optional["Node"]:
        """Return the child held in the given slot."""
        return self.left if side is ChildSide.LEFT else self.right

    def set_child(self, side: ChildSide, child: Optional["Node"]) -> None:
        """Store ``child`` (or None to clear) in the given slot."""
        if side is ChildSide.LEFT:
            self.left = child
        else:
            self.right = child

    def children(self) -> Iterator["Node"]:
        """Yield present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
