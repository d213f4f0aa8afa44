"""Core building blocks for completetreelib.

This package contains the node store and the traversal engine that every
tree operation is built on.
"""

from .node import Node, ChildSide
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    deepest_rightmost_node,
    find_parent,
)

__all__ = [
    "Node",
    "ChildSide",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "deepest_rightmost_node",
    "find_parent",
]
