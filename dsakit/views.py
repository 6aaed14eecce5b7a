"""Views of a binary tree from above, below, the sides, and along its boundary."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Optional

from dsakit.tree import Node


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def _by_vertical_line(root: Optional[Node]) -> Iterator[tuple[int, Any]]:
    """Yield (line, value) pairs in breadth-first order; the root stands on line 0."""
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, line = queue.popleft()
        yield line, node.data
        if node.left is not None:
            queue.append((node.left, line - 1))
        if node.right is not None:
            queue.append((node.right, line + 1))


def top_view(root: Optional[Node]) -> list[Any]:
    """Return the first node met on each vertical line, lines from left to right."""
    seen: dict[int, Any] = {}
    for line, value in _by_vertical_line(root):
        seen.setdefault(line, value)
    return [seen[line] for line in sorted(seen)]


def bottom_view(root: Optional[Node]) -> list[Any]:
    """Return the last node met on each vertical line, lines from left to right."""
    seen: dict[int, Any] = {}
    for line, value in _by_vertical_line(root):
        seen[line] = value
    return [seen[line] for line in sorted(seen)]


def _side_view(root: Optional[Node], *, right_first: bool) -> list[Any]:
    result: list[Any] = []
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, level = stack.pop()
        if level == len(result):
            result.append(node.data)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        if second is not None:
            stack.append((second, level + 1))
        if first is not None:
            stack.append((first, level + 1))
    return result


def left_view(root: Optional[Node]) -> list[Any]:
    """Return the leftmost value of every level, top to bottom."""
    return _side_view(root, right_first=False)


def right_view(root: Optional[Node]) -> list[Any]:
    """Return the rightmost value of every level, top to bottom."""
    return _side_view(root, right_first=True)


def _left_edge(node: Optional[Node]) -> Iterator[Any]:
    while node is not None:
        if not _is_leaf(node):
            yield node.data
        node = node.left if node.left is not None else node.right


def _right_edge(node: Optional[Node]) -> Iterator[Any]:
    while node is not None:
        if not _is_leaf(node):
            yield node.data
        node = node.right if node.right is not None else node.left


def _leaves(root: Node) -> Iterator[Any]:
    stack = [root]
    while stack:
        node = stack.pop()
        if _is_leaf(node):
            yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def boundary_traversal(root: Optional[Node]) -> list[Any]:
    """Return the boundary anticlockwise: root, left edge, leaves, right edge upwards."""
    if root is None:
        return []
    result = [] if _is_leaf(root) else [root.data]
    result.extend(_left_edge(root.left))
    result.extend(_leaves(root))
    result.extend(reversed(list(_right_edge(root.right))))
    return result