"""
Tests for the node store and the traversal engine.

The traversers never mutate a tree; these tests check visiting order,
depth limits and the two positional queries the mutators rely on.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from completetreelib import CompleteBinaryTree
from completetreelib.core import (
    Node,
    ChildSide,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    deepest_rightmost_node,
    find_parent,
)


def build_manual_tree() -> Node:
    """Build a small tree by hand.

    Structure:
          1
         / \\
        2   3
       / \\
      4   5
    """
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


class TestNode:
    """Test the Node data container."""

    def test_new_node_is_leaf(self):
        node = Node(7)
        assert node.value == 7
        assert node.left is None
        assert node.right is None
        assert node.is_leaf()
        assert node.child_count() == 0

    def test_get_and_set_child(self):
        node = Node(1)
        left, right = Node(2), Node(3)
        node.set_child(ChildSide.LEFT, left)
        node.set_child(ChildSide.RIGHT, right)

        assert node.get_child(ChildSide.LEFT) is left
        assert node.get_child(ChildSide.RIGHT) is right
        assert list(node.children()) == [left, right]
        assert node.child_count() == 2

        node.set_child(ChildSide.LEFT, None)
        assert list(node.children()) == [right]
        assert not node.is_leaf()

    def test_nodes_compare_by_identity(self):
        """Equal values do not make equal nodes."""
        assert Node(1) != Node(1)
        node = Node(1)
        assert node == node

    def test_repr(self):
        assert repr(Node(42)) == "Node(value=42)"


class TestTraversers:
    """Test visiting order of each traversal strategy."""

    def test_breadth_first_order(self):
        root = build_manual_tree()
        visited = [(node.value, depth) for node, depth in BreadthFirstTraverser().traverse(root)]
        assert visited == [(1, 0), (2, 1), (3, 1), (4, 2), (5, 2)]

    def test_depth_first_pre_order(self):
        root = build_manual_tree()
        visited = [node.value for node, _ in DepthFirstPreOrderTraverser().traverse(root)]
        assert visited == [1, 2, 4, 5, 3]

    def test_level_order_groups(self):
        root = build_manual_tree()
        levels = [[n.value for n in level] for level in LevelOrderTraverser().levels(root)]
        assert levels == [[1], [2, 3], [4, 5]]

    def test_level_order_traverse_matches_bfs(self):
        root = build_manual_tree()
        bfs = [(n.value, d) for n, d in BreadthFirstTraverser().traverse(root)]
        level = [(n.value, d) for n, d in LevelOrderTraverser().traverse(root)]
        assert bfs == level

    @pytest.mark.parametrize("traverser_class", [
        BreadthFirstTraverser,
        DepthFirstPreOrderTraverser,
        LevelOrderTraverser,
    ])
    def test_empty_root_yields_nothing(self, traverser_class):
        assert list(traverser_class().traverse(None)) == []

    def test_depth_limits(self):
        root = build_manual_tree()
        traverser = BreadthFirstTraverser()

        shallow = [n.value for n, _ in traverser.traverse(root, max_depth=1)]
        assert shallow == [1, 2, 3]

        deep_only = [n.value for n, _ in traverser.traverse(root, min_depth=2)]
        assert deep_only == [4, 5]

    def test_level_order_max_depth(self):
        root = build_manual_tree()
        levels = list(LevelOrderTraverser().levels(root, max_depth=0))
        assert len(levels) == 1
        assert levels[0][0] is root

    def test_deep_tree_does_not_recurse(self):
        """A long left spine is walked without hitting the recursion limit."""
        root = Node(0)
        current = root
        for value in range(1, 5000):
            current.left = Node(value)
            current = current.left

        assert sum(1 for _ in DepthFirstPreOrderTraverser().traverse(root)) == 5000
        assert deepest_rightmost_node(root) is current


class TestTraverserFactory:
    """Test create_traverser."""

    @pytest.mark.parametrize("name, expected", [
        ("bfs", BreadthFirstTraverser),
        ("breadth_first", BreadthFirstTraverser),
        ("dfs_pre", DepthFirstPreOrderTraverser),
        ("LEVEL", LevelOrderTraverser),
        ("level_order", LevelOrderTraverser),
    ])
    def test_known_strategies(self, name, expected):
        assert isinstance(create_traverser(name), expected)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_traverser("zigzag")


class TestPositionalQueries:
    """Test deepest_rightmost_node and find_parent."""

    def test_deepest_rightmost_of_absent_root(self):
        assert deepest_rightmost_node(None) is None

    def test_deepest_rightmost_of_single_node(self):
        root = Node(1)
        assert deepest_rightmost_node(root) is root

    @pytest.mark.parametrize("count", range(1, 16))
    def test_deepest_rightmost_is_last_pushed(self, count):
        tree = CompleteBinaryTree(range(count))
        assert deepest_rightmost_node(tree.root).value == count - 1

    def test_find_parent_uses_identity(self):
        """With duplicate values only the exact node matches."""
        tree = CompleteBinaryTree.filled(7, 3)
        target = tree.root.right

        parent, side = find_parent(tree.root, target)
        assert parent is tree.root
        assert side is ChildSide.RIGHT

    def test_find_parent_of_root_and_stranger(self):
        tree = CompleteBinaryTree([1, 2, 3])
        assert find_parent(tree.root, tree.root) is None
        assert find_parent(tree.root, Node(2)) is None
        assert find_parent(None, Node(2)) is None
