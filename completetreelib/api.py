"""High-level API for completetreelib.

Simple functional helpers for inspecting a tree without touching its
nodes directly. All of them are read-only.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional

from .core.node import Node
from .core.traverser import create_traverser
from .tree import CompleteBinaryTree


def level_order_values(tree: CompleteBinaryTree) -> List[int]:
    """Return the tree's values in level order.

    Example:
        >>> level_order_values(CompleteBinaryTree([3, 1, 2]))
        [3, 1, 2]
    """
    return tree.values()


def count_nodes(
    tree: CompleteBinaryTree,
    strategy: str = "bfs",
    max_depth: Optional[int] = None,
) -> int:
    """Count nodes, optionally only down to ``max_depth`` (root = 0).

    Args:
        tree: Tree to inspect
        strategy: Traversal strategy name (bfs, dfs_pre, level)
        max_depth: Deepest depth to count (None = whole tree)

    Returns:
        Number of nodes visited
    """
    traverser = create_traverser(strategy)
    return sum(1 for _ in traverser.traverse(tree.root, max_depth=max_depth))


def find_nodes(
    tree: CompleteBinaryTree,
    predicate: Callable[[Node], bool],
    strategy: str = "bfs",
) -> Iterator[Node]:
    """Return an iterator over the nodes that match a predicate.

    An unknown strategy raises ValueError here, not on first iteration.

    Nodes are yielded for inspection only; relinking them bypasses the
    tree's bookkeeping.

    Example:
        >>> tree = CompleteBinaryTree([1, 2, 3, 4])
        >>> [n.value for n in find_nodes(tree, lambda n: n.value % 2 == 0)]
        [2, 4]
    """
    traverser = create_traverser(strategy)

    def matches() -> Iterator[Node]:
        for node, _ in traverser.traverse(tree.root):
            if predicate(node):
                yield node

    return matches()


def get_leaf_values(tree: CompleteBinaryTree) -> List[int]:
    """Values of the leaf nodes, in level order."""
    return [node.value for node in find_nodes(tree, lambda n: n.is_leaf())]


def get_tree_stats(tree: CompleteBinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with node counts, height, per-depth counts and the
        consistency of the cached counter
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
    }

    for node, depth in create_traverser("bfs").traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['cached_size'] = tree.cached_size
    stats['size_consistent'] = tree.cached_size == stats['total_nodes']
    stats['is_complete'] = tree.is_complete_tree()

    return stats
