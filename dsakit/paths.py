"""Grid and sequence path problems: unique paths, triangle sums, training schedules."""

from __future__ import annotations

from collections.abc import Sequence
from math import comb

ACTIVITIES = 3


def unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of a grid."""
    if rows < 1 or cols < 1:
        raise ValueError("grid must have at least one row and one column")
    return comb(rows + cols - 2, rows - 1)


def minimum_triangle_path_sum(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom sum, moving down or down-right each step."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    for depth, row in enumerate(triangle):
        if len(row) < depth + 1:
            raise ValueError(f"row {depth} needs at least {depth + 1} entries")
    size = len(triangle)
    best = list(triangle[-1][:size])
    for depth in range(size - 2, -1, -1):
        row = triangle[depth]
        best = [row[j] + min(best[j], best[j + 1]) for j in range(depth + 1)]
    return best[0]


def ninja_training(points: Sequence[Sequence[int]]) -> int:
    """Return the most merit points over the days, never repeating an activity two days running."""
    if not points:
        raise ValueError("at least one day is needed")
    if any(len(day) != ACTIVITIES for day in points):
        raise ValueError(f"each day must list {ACTIVITIES} activities")
    # best[last] is the best total so far when `last` may not be chosen next; index 3 forbids nothing.
    best = [
        max([0] + [points[0][task] for task in range(ACTIVITIES) if task != last])
        for last in range(ACTIVITIES + 1)
    ]
    for day in points[1:]:
        best = [
            max([0] + [day[task] + best[task] for task in range(ACTIVITIES) if task != last])
            for last in range(ACTIVITIES + 1)
        ]
    return best[ACTIVITIES]