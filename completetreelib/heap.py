"""Heap built on the linked complete binary tree.

A Heap is a CompleteBinaryTree whose bulk input is sorted ascending before
it is appended, so a freshly built heap is ordered level by level. The
order is not maintained by later mutations: ``push_node``, ``insert_node``
and ``remove`` behave exactly as on the base tree. ``restore()`` re-sorts
on every call by rebuilding through the heap constructor.
"""

from typing import Iterable, List

from .logging import get_logger
from .tree import CompleteBinaryTree

LOGGER = get_logger("heap")


class Heap(CompleteBinaryTree):
    """Complete binary tree loaded in ascending order.

    Example:
        >>> Heap([5, 3, 9, 1]).values()
        [1, 3, 5, 9]
    """

    _logger = LOGGER

    def _load(self, values: Iterable[int]) -> None:
        super()._load(sorted(values))

    def restore(self) -> None:
        """Rebuild from the sorted node values, whether or not the tree is complete."""
        if self._root is None:
            self._size = 0
            return
        self._restore_completeness()

    def _rebuild(self, values: List[int]) -> "Heap":
        return Heap(values, config=self.config)
