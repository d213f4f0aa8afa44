"""Test fixtures for completetreelib consumers.

These helpers give test suites a stable view of a tree's shape, and a way
to knock its bookkeeping out of step, so tests never reach into the
tree's private attributes themselves.
"""

from collections import deque
from typing import Any, Dict, List

from ..core.traverser import LevelOrderTraverser


class TreeShapeHelper:
    """Public test fixture for shape verification.

    Positions are 0-indexed level-order slots: the root is 0 and the
    children of slot ``i`` are ``2i + 1`` and ``2i + 2``. A complete tree
    of ``n`` nodes occupies exactly the slots ``0 .. n - 1``.

    Example:
        helper = TreeShapeHelper(tree)
        assert helper.is_gap_free()
        assert helper.positions() == {0: 1, 1: 2, 2: 3}
    """

    def __init__(self, tree):
        """Initialize with a CompleteBinaryTree or Heap.

        Args:
            tree: The tree to inspect
        """
        self._tree = tree

    def positions(self) -> Dict[int, int]:
        """Map every occupied slot to the value stored there."""
        result: Dict[int, int] = {}
        if self._tree.root is None:
            return result
        queue = deque([(self._tree.root, 0)])
        while queue:
            node, index = queue.popleft()
            result[index] = node.value
            if node.left is not None:
                queue.append((node.left, 2 * index + 1))
            if node.right is not None:
                queue.append((node.right, 2 * index + 2))
        return result

    def level_values(self) -> List[List[int]]:
        """Values grouped by level, top level first."""
        return [[node.value for node in level]
                for level in LevelOrderTraverser().levels(self._tree.root)]

    def is_gap_free(self) -> bool:
        """True when the occupied slots are exactly ``0 .. n - 1``."""
        slots = self.positions()
        return sorted(slots) == list(range(len(slots)))

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level shape state for testing.

        Returns:
            Dictionary containing:
            - node_count: Nodes reached by traversal
            - cached_size: The tree's incrementally maintained counter
            - levels: Number of levels
            - gap_free: Whether the slots are contiguous
        """
        slots = self.positions()
        return {
            'node_count': len(slots),
            'cached_size': self._tree.cached_size,
            'levels': len(self.level_values()),
            'gap_free': self.is_gap_free(),
        }

    def assert_consistent(self) -> None:
        """Fail with a descriptive message unless the tree is complete and
        its cached counter matches the real node count."""
        summary = self.get_summary()
        if not summary['gap_free']:
            raise AssertionError(f"tree has gaps in its level order: {sorted(self.positions())}")
        if summary['node_count'] != summary['cached_size']:
            raise AssertionError(
                f"cached size {summary['cached_size']} != node count {summary['node_count']}"
            )
        if not self._tree.is_complete_tree():
            raise AssertionError("is_complete_tree() disagrees with the slot layout")

    def set_cached_size(self, count: int) -> None:
        """Overwrite the tree's node counter without touching its nodes.

        Simulates a counter that has drifted from the real shape.
        """
        self._tree._size = count

    def drop_root(self) -> None:
        """Detach the whole tree while leaving the counter as it was."""
        self._tree._root = None
