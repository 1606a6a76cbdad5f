"""Binary trees: building from level order and zigzag traversal."""

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: "TreeNode | None" = None
    right: "TreeNode | None" = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, with None marking missing children."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        values = [node.val for node in level]
        levels.append(values if len(levels) % 2 == 0 else values[::-1])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels