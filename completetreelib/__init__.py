"""completetreelib - Linked Complete Binary Trees.

completetreelib provides a complete binary tree and a heap built from
individually linked nodes. Every mutation keeps the level order gap free
by locating positions through breadth-first traversal.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from completetreelib import CompleteBinaryTree, Heap

    tree = CompleteBinaryTree([1, 2, 3, 4, 5])
    tree.remove(2)          # -> MutationResult(APPLIED)
    tree.values()           # -> [1, 5, 3, 4]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    Node,
    ChildSide,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TreeConfig, runtime_config, reset_runtime_config
from .results import MutationResult, Outcome, RejectReason
from .errors import (
    CompleteTreeError,
    IncompleteTreeError,
    MutationRejectedError,
    ValueNotFoundError,
)
from .tree import CompleteBinaryTree
from .heap import Heap
from .render import print_level_order, render_tree
from .api import (
    level_order_values,
    count_nodes,
    find_nodes,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "ChildSide",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TreeConfig",
    "runtime_config",
    "reset_runtime_config",
    # Results and errors
    "MutationResult",
    "Outcome",
    "RejectReason",
    "CompleteTreeError",
    "IncompleteTreeError",
    "MutationRejectedError",
    "ValueNotFoundError",
    # Trees
    "CompleteBinaryTree",
    "Heap",
    # Rendering
    "print_level_order",
    "render_tree",
    # API
    "level_order_values",
    "count_nodes",
    "find_nodes",
    "get_leaf_values",
    "get_tree_stats",
]
