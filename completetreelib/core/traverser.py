"""Tree traversal strategies for completetreelib.

Traversers walk a linked binary tree from a root node. They never mutate
the tree; the mutators in ``tree.py`` use them to *locate* positions
(the next free slot, the last node, the parent of a node) because the
linked representation offers no index arithmetic to do it directly.

All traversals are iterative so stack depth stays bounded for tall trees.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import ChildSide, Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses implement ``traverse`` and yield ``(node, depth)`` tuples
    where the root has depth 0.
    """

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1. This is the order every positional rule of a complete
    tree is expressed in.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a parent before its children, left subtree before right.
    Uses an explicit stack instead of recursion.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right pushed first so left is popped first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    ``traverse`` yields the same sequence as BreadthFirstTraverser;
    ``levels`` additionally exposes each level as a list, which is what
    the level/offset based insertion needs.
    """

    def levels(self,
               root: Optional[Node],
               max_depth: Optional[int] = None) -> Iterator[List[Node]]:
        """Yield one list of nodes per level, top level first."""
        current_level: List[Node] = [root] if root is not None else []
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            yield current_level
            next_level: List[Node] = []
            for node in current_level:
                next_level.extend(node.children())
            current_level = next_level
            current_depth += 1

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        for depth, level in enumerate(self.levels(root, max_depth)):
            if self._should_yield(depth, min_depth, max_depth):
                for node in level:
                    yield (node, depth)


def deepest_rightmost_node(root: Optional[Node]) -> Optional[Node]:
    """Return the last node of a level-order walk.

    The walk goes level by level; within each level the node dequeued
    last is kept, so after the final level the kept node is the deepest,
    rightmost one. A single-node tree returns its root, an absent root
    returns None.
    """
    if root is None:
        return None

    queue: Deque[Node] = deque([root])
    result = root

    while queue:
        level_size = len(queue)
        for i in range(level_size):
            node = queue.popleft()
            queue.extend(node.children())
            if i == level_size - 1:
                result = node
    return result


def find_parent(root: Optional[Node], target: Node) -> Optional[Tuple[Node, ChildSide]]:
    """Locate the slot that references ``target`` by identity.

    Returns:
        ``(parent, side)`` for the unique slot holding ``target``, or None
        when ``target`` is the root or is not reachable from ``root``.
    """
    if root is None:
        return None

    queue: Deque[Node] = deque([root])
    while queue:
        node = queue.popleft()
        for side in (ChildSide.LEFT, ChildSide.RIGHT):
            child = node.get_child(side)
            if child is None:
                continue
            if child is target:
                return (node, side)
            queue.append(child)
    return None


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
