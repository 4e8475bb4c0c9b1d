"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def preorder(root):
    """Return node values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root):
    """Return node values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root):
    """Return node values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def levels(root):
    """Return node values grouped by depth, each level left to right."""
    result = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            queue.extend(child for child in (node.left, node.right) if child)
        result.append(level)
    return result


def level_order(root):
    """Return node values in breadth-first order."""
    return [value for level in levels(root) for value in level]


def zigzag(root):
    """Return levels alternating left-to-right and right-to-left, starting left-to-right."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(levels(root))
    ]


def _side_view(root, first, second):
    view = []

    def visit(node, depth):
        if node is None:
            return
        if len(view) == depth:
            view.append(node.data)
        visit(getattr(node, first), depth + 1)
        visit(getattr(node, second), depth + 1)

    visit(root, 0)
    return view


def left_view(root):
    """Return the leftmost value at each depth."""
    return _side_view(root, "left", "right")


def right_view(root):
    """Return the rightmost value at each depth."""
    return _side_view(root, "right", "left")


def top_view(root):
    """Return one value per horizontal distance, leftmost distance first.

    For each distance the node reached last in breadth-first order is kept.
    """
    seen = {}
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, distance = queue.popleft()
        seen[distance] = node.data
        if node.left:
            queue.append((node.left, distance - 1))
        if node.right:
            queue.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]