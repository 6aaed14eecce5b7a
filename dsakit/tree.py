"""Binary tree nodes and a builder from level-order values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and two optional children."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def build_tree(values: Iterable[Any]) -> Optional[Node]:
    """Build a tree from values listed level by level, None marking a missing child.

    Children are read only for nodes that exist, so the children of a missing
    node take no places in the listing. An empty listing, or one starting with
    None, gives None.
    """
    items = iter(values)
    root_value = next(items, None)
    if root_value is None:
        return None
    root = Node(root_value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = Node(value)
                setattr(node, side, child)
                pending.append(child)
    return root