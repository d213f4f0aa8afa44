"""Console rendering of trees.

These helpers only read the structure. They write to ``stream`` (stdout
by default) so output can be captured.
"""

import sys
from typing import List, Optional, TextIO, Tuple

from .core.node import Node
from .core.traverser import LevelOrderTraverser


def print_level_order(tree, stream: Optional[TextIO] = None) -> None:
    """Print node values level by level.

    Output for the tree ``[1, 2, 3]``::

        level: 1
         1
        level: 2
         2 3
    """
    out = stream if stream is not None else sys.stdout
    for number, nodes in enumerate(LevelOrderTraverser().levels(tree.root), start=1):
        out.write(f"level: {number}\n")
        out.write("".join(f" {node.value}" for node in nodes))
        out.write("\n")


def render_tree(tree, stream: Optional[TextIO] = None) -> None:
    """Draw the tree sideways, one node per line, left subtree first."""
    out = stream if stream is not None else sys.stdout
    root = tree.root
    if root is None:
        out.write("The tree is empty\n")
        return

    out.write(f"root:{root.value} _\n")
    stack: List[Tuple[str, Node, bool]] = []
    _push_children(stack, "      ", root)

    while stack:
        prefix, node, is_left = stack.pop()
        out.write(f"{prefix}  ╰–– {'l:' if is_left else 'r:'}{node.value}\n")
        _push_children(stack, prefix + ("  |   " if is_left else "      "), node)


def _push_children(stack: List[Tuple[str, Node, bool]], prefix: str, node: Node) -> None:
    # Right goes on first so the left subtree is drawn first
    if node.right is not None:
        stack.append((prefix, node.right, False))
    if node.left is not None:
        stack.append((prefix, node.left, True))
