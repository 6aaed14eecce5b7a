"""Depth-first, breadth-first and zigzag traversals of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Optional

from dsakit.tree import Node


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: Optional[Node]) -> list[Any]:
    """Return the values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list[Any]:
    """Return the values in left, right, root order."""
    return list(_postorder(root))


def iterative_preorder(root: Optional[Node]) -> list[Any]:
    """Preorder traversal with an explicit stack."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: Optional[Node]) -> list[Any]:
    """Inorder traversal with an explicit stack."""
    result: list[Any] = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def postorder_two_stacks(root: Optional[Node]) -> list[Any]:
    """Postorder traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    collected: list[Node] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(collected)]


def postorder_one_stack(root: Optional[Node]) -> list[Any]:
    """Postorder traversal using a single stack."""
    result: list[Any] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        right = stack[-1].right
        if right is not None:
            current = right
            continue
        done = stack.pop()
        result.append(done.data)
        while stack and done is stack[-1].right:
            done = stack.pop()
            result.append(done.data)
    return result


def _morris(root: Optional[Node], *, inorder_visit: bool) -> list[Any]:
    result: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            if not inorder_visit:
                result.append(current.data)
            current = current.left
        else:
            predecessor.right = None
            if inorder_visit:
                result.append(current.data)
            current = current.right
    return result


def morris_inorder(root: Optional[Node]) -> list[Any]:
    """Inorder traversal in constant extra space; the tree is restored afterwards."""
    return _morris(root, inorder_visit=True)


def morris_preorder(root: Optional[Node]) -> list[Any]:
    """Preorder traversal in constant extra space; the tree is restored afterwards."""
    return _morris(root, inorder_visit=False)


def level_order(root: Optional[Node]) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[Any]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def level_order_flat(root: Optional[Node]) -> list[Any]:
    """Return all values in breadth-first order."""
    return [value for level in level_order(root) for value in level]


def zigzag_levels(root: Optional[Node]) -> list[list[Any]]:
    """Return the levels, alternating left-to-right and right-to-left, starting left-to-right."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]


def zigzag_order(root: Optional[Node]) -> list[Any]:
    """Return all values in zigzag level order as one list."""
    return [value for level in zigzag_levels(root) for value in level]


def all_traversals(root: Optional[Node]) -> list[list[Any]]:
    """Return [inorder, preorder, postorder]; an empty list for an empty tree."""
    if root is None:
        return []
    return [inorder(root), preorder(root), postorder(root)]