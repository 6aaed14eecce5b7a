"""Measurements and checks on binary trees: height, diameter, balance, symmetry, width."""

from __future__ import annotations

from collections import deque
from typing import Optional

from dsakit.tree import Node


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[Node]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def is_balanced(root: Optional[Node]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def checked_height(node: Optional[Node]) -> Optional[int]:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left is None:
            return None
        right = checked_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return checked_height(root) is not None


def identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and identical(first.left, second.left)
        and identical(first.right, second.right)
    )


def _mirrored(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and _mirrored(first.left, second.right)
        and _mirrored(first.right, second.left)
    )


def is_symmetric(root: Optional[Node]) -> bool:
    """Tell whether the tree is its own mirror image."""
    return root is None or _mirrored(root.left, root.right)


def max_path_sum(root: Optional[Node]) -> int:
    """Return the largest sum of values along any path of at least one node."""
    if root is None:
        raise ValueError("max_path_sum needs a non-empty tree")
    best = root.data

    def gain(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.data)
        return max(left, right) + node.data

    gain(root)
    return best


def max_width(root: Optional[Node]) -> int:
    """Return the widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    widest = 0
    level = deque([(root, 0)])
    while level:
        offset = level[0][1]
        first = level[0][1] - offset
        last = level[-1][1] - offset
        widest = max(widest, last - first + 1)
        for _ in range(len(level)):
            node, position = level.popleft()
            position -= offset
            if node.left is not None:
                level.append((node.left, 2 * position + 1))
            if node.right is not None:
                level.append((node.right, 2 * position + 2))
    return widest