"""Linked complete binary tree.

CompleteBinaryTree keeps its nodes in the shape of a complete binary tree:
every level is full except possibly the last, which fills left to right.
There is no backing array, so every positional decision (the next free
slot, the last node, the node at a given level and offset) is found by a
breadth-first walk over the parent/child links.

The tree keeps a cached node counter that drives the append arithmetic in
``push_node`` and the completeness check. ``size()`` recounts by traversal;
``restore()`` rebuilds the tree and resynchronises the counter whenever the
two disagree or the shape is no longer complete.
"""

from typing import Iterable, Iterator, List, Optional, TextIO

from . import render
from .config import TreeConfig, runtime_config
from .core.node import ChildSide, Node
from .core.traverser import (
    BreadthFirstTraverser,
    LevelOrderTraverser,
    deepest_rightmost_node,
    find_parent,
)
from .errors import IncompleteTreeError, MutationRejectedError, ValueNotFoundError
from .logging import get_logger
from .results import MutationResult, RejectReason

LOGGER = get_logger("tree")


class CompleteBinaryTree:
    """Complete binary tree of integers backed by linked nodes.

    Args:
        values: Values to append in order, as if by repeated ``push_node``
        config: Behaviour switches; defaults to ``runtime_config()``

    Example:
        >>> tree = CompleteBinaryTree([1, 2, 3, 4, 5])
        >>> tree.remove(2).is_applied
        True
        >>> tree.values()
        [1, 5, 3, 4]
    """

    _logger = LOGGER

    def __init__(self, values: Iterable[int] = (), config: Optional[TreeConfig] = None):
        self.config = config if config is not None else runtime_config()
        self._bfs = BreadthFirstTraverser()
        self._levels = LevelOrderTraverser()
        self._root: Optional[Node] = None
        self._size = 0
        self._load(values)

    @classmethod
    def filled(cls, fill_value: int, count: int,
               config: Optional[TreeConfig] = None) -> "CompleteBinaryTree":
        """Create a tree holding ``count`` nodes that all carry ``fill_value``.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        tree = cls(config=config)
        for _ in range(count):
            tree.push_node(fill_value)
        return tree

    def _load(self, values: Iterable[int]) -> None:
        for value in values:
            self.push_node(value)

    # Node store

    @property
    def root(self) -> Optional[Node]:
        """The root node, for read-only inspection (None when empty)."""
        return self._root

    @property
    def cached_size(self) -> int:
        """The incrementally maintained node counter."""
        return self._size

    def _create_node(self, value: int) -> Node:
        node = Node(value)
        self._size += 1
        return node

    def _disconnect_node(self, target: Node) -> None:
        """Clear the single slot referencing ``target`` and decrement the counter.

        Callers pass a node obtained from this tree during the same
        operation; an unreachable target is silently ignored.
        """
        found = find_parent(self._root, target)
        if found is None:
            return
        parent, side = found
        parent.set_child(side, None)
        self._size -= 1

    def _report(self, result: MutationResult) -> MutationResult:
        """Log a refused mutation and apply the strict-mode policy."""
        if result.is_applied:
            return result
        self._logger.info("%s (value=%r)", result.message, result.value)
        if self.config.strict:
            if result.is_not_found:
                raise ValueNotFoundError(result)
            raise MutationRejectedError(result)
        return result

    # Queries

    def level_count(self) -> int:
        """Number of levels (0 for an empty tree)."""
        return sum(1 for _ in self._levels.levels(self._root))

    def tree_height(self) -> int:
        """Height in edges: -1 for an empty tree, 0 for a root-only tree."""
        return self.level_count() - 1

    def size(self) -> int:
        """Number of reachable nodes, recounted by traversal."""
        return sum(1 for _ in self._bfs.traverse(self._root))

    def values(self) -> List[int]:
        """All node values in level order."""
        return [node.value for node, _ in self._bfs.traverse(self._root)]

    def is_complete_tree(self) -> bool:
        """Check the completeness invariant against the cached counter.

        Each node gets a 0-indexed level-order position (children of ``i``
        sit at ``2i + 1`` and ``2i + 2``); the tree is complete when no
        position reaches the counter. An empty tree is complete.
        """
        stack = [(self._root, 0)] if self._root is not None else []
        while stack:
            node, index = stack.pop()
            if index >= self._size:
                return False
            if node.left is not None:
                stack.append((node.left, 2 * index + 1))
            if node.right is not None:
                stack.append((node.right, 2 * index + 2))
        return True

    def _level_nodes(self, level: int) -> List[Node]:
        """Nodes on a 1-indexed level, left to right (empty if absent)."""
        for number, nodes in enumerate(self._levels.levels(self._root, max_depth=level - 1), start=1):
            if number == level:
                return nodes
        return []

    # Mutators

    def push_node(self, value: int) -> MutationResult:
        """Append ``value`` at the next slot of the level order.

        The parent of the new node is the one at 1-indexed level-order
        position ``(size + 1) // 2``; the new node becomes its left child,
        or its right child when the left slot is taken.
        """
        if self._root is None:
            self._root = self._create_node(value)
            return MutationResult.applied(value)

        position = (self._size + 1) // 2

        for index, (node, _) in enumerate(self._bfs.traverse(self._root), start=1):
            if index == position:
                if node.left is None:
                    node.left = self._create_node(value)
                elif node.right is None:
                    node.right = self._create_node(value)
                else:
                    break
                return MutationResult.applied(value)

        return self._report(MutationResult.rejected(value, RejectReason.TREE_INCOMPLETE))

    def insert_node(self, value: int, level: int, offset: int) -> MutationResult:
        """Insert ``value`` at a 1-indexed level and offset within that level.

        Only the slot that keeps the tree complete is accepted: the next
        free slot of a level whose parent level is full, or the first slot
        of a new level directly below the deepest one.

        Args:
            value: Value of the new node
            level: Target level, the root level being 1
            offset: Position within the level, leftmost being 1

        Returns:
            MutationResult, rejected with the reason when the slot is invalid
        """
        height = self.tree_height()

        if self._root is None and level == 1 and offset == 1:
            return self.push_node(value)

        if level < 1 or level > height + 2:
            return self._report(MutationResult.rejected(value, RejectReason.LEVEL_OUT_OF_RANGE))

        if offset < 1 or offset > 2 ** (level - 1):
            return self._report(MutationResult.rejected(value, RejectReason.INDEX_OUT_OF_RANGE))

        if level == height + 2 and offset > 1:
            return self._report(MutationResult.rejected(value, RejectReason.COMPLETENESS_CONSTRAINT))

        if level == 1:
            return self._report(MutationResult.rejected(value, RejectReason.POSITION_TAKEN))

        parents = self._level_nodes(level - 1)
        if len(parents) < 2 ** (level - 2):
            # Children below a partial level always leave a gap
            return self._report(MutationResult.rejected(value, RejectReason.COMPLETENESS_CONSTRAINT))

        occupied = 0
        for node in parents:
            occupied += node.child_count()

            if offset <= occupied:
                return self._report(MutationResult.rejected(value, RejectReason.POSITION_TAKEN))

            if offset - occupied == 1:
                if node.left is None:
                    node.left = self._create_node(value)
                elif node.right is None:
                    node.right = self._create_node(value)
                else:
                    continue
                return MutationResult.applied(value)

        if offset - occupied > 1:
            return self._report(MutationResult.rejected(value, RejectReason.COMPLETENESS_CONSTRAINT))

        return self._report(MutationResult.rejected(value, RejectReason.NOT_INSERTED))

    def remove(self, value: int) -> MutationResult:
        """Delete the first node, in level order, that carries ``value``.

        Holes are patched with the deepest-rightmost node so the level
        order stays gap free. A matching root is always replaced that way,
        whatever its child count; a single-node tree becomes empty.

        Raises:
            IncompleteTreeError: If the tree is not complete and
                ``config.check_completeness_on_remove`` is set
        """
        if self._root is None:
            return self._report(MutationResult.rejected(value, RejectReason.TREE_EMPTY))

        if self.config.check_completeness_on_remove and not self.is_complete_tree():
            raise IncompleteTreeError(
                "cannot remove from an incomplete tree; call restore() first"
            )

        if self._root.value == value:
            self._replace_root()
            return MutationResult.applied(value)

        for node, _ in self._bfs.traverse(self._root):
            for side in (ChildSide.LEFT, ChildSide.RIGHT):
                child = node.get_child(side)
                if child is not None and child.value == value:
                    self._remove_child(node, side)
                    return MutationResult.applied(value)

        return self._report(MutationResult.not_found(value))

    def _replace_root(self) -> None:
        old_root = self._root
        donor = deepest_rightmost_node(old_root)

        if donor is old_root:
            self._root = None
            self._size -= 1
            return

        self._disconnect_node(donor)
        # Read the children after disconnecting: the donor may have been one
        donor.left = old_root.left
        donor.right = old_root.right
        self._root = donor
        self._logger.debug("replaced root %r with %r", old_root.value, donor.value)

    def _remove_child(self, parent: Node, side: ChildSide) -> None:
        target = parent.get_child(side)

        if target.is_leaf():
            donor = deepest_rightmost_node(self._root)
            if donor is target:
                parent.set_child(side, None)
                self._size -= 1
            else:
                self._relocate(donor, parent, side)
        elif target.child_count() == 1:
            parent.set_child(side, target.left if target.left is not None else target.right)
            self._size -= 1
        else:
            self._relocate(deepest_rightmost_node(self._root), parent, side)

    def _relocate(self, donor: Node, parent: Node, side: ChildSide) -> None:
        """Move ``donor`` into ``parent``'s slot, adopting the evicted node's children."""
        target = parent.get_child(side)
        self._disconnect_node(donor)
        donor.left = target.left
        donor.right = target.right
        parent.set_child(side, donor)

    # Repair

    def restore(self) -> None:
        """Rebuild the tree if it is incomplete or its counter has drifted."""
        if not self.is_complete_tree() or self.size() != self._size:
            self._restore_completeness()

    def _restore_completeness(self) -> None:
        values = self.values()
        rebuilt = self._rebuild(values)
        self._root = rebuilt._root
        self._size = rebuilt._size
        self._logger.debug("rebuilt %s from %d values", self.__class__.__name__, len(values))

    def _rebuild(self, values: List[int]) -> "CompleteBinaryTree":
        return CompleteBinaryTree(values, config=self.config)

    # Rendering

    def print_level_order(self, stream: Optional[TextIO] = None) -> None:
        render.print_level_order(self, stream)

    def render_tree(self, stream: Optional[TextIO] = None) -> None:
        render.render_tree(self, stream)

    # Python protocol

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values()!r})"
