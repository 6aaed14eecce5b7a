"""Classic array algorithms: rotations, searches, merges and counting."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

NO_SECOND_LARGEST = -1
NO_SECOND_SMALLEST = 2**31 - 1


def longest_run_of_ones(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive 1s."""
    return max(
        (sum(1 for _ in group) for key, group in itertools.groupby(values) if key == 1),
        default=0,
    )


def single_element(values: Iterable[int]) -> int:
    """Return the one value that appears once when every other appears twice."""
    return reduce(xor, values, 0)


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return the values rotated one place to the left."""
    return list(values[1:]) + list(values[:1])


def missing_number(values: Sequence[int], n: int) -> int:
    """Return the number from 1..n missing among the first n - 1 values."""
    return n * (n + 1) // 2 - sum(values[: max(n - 1, 0)])


def move_zeros(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, order kept."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def remove_duplicates(values: list[int]) -> int:
    """Drop repeated values from a sorted list in place; return the new length."""
    unique = [key for key, _ in itertools.groupby(values)]
    values[:] = unique
    return len(unique)


def _second_largest(values: Sequence[int]) -> int:
    largest = values[0]
    second = NO_SECOND_LARGEST
    for value in values:
        if value > largest:
            second, largest = largest, value
        elif second < value < largest:
            second = value
    return second


def _second_smallest(values: Sequence[int]) -> int:
    smallest = values[0]
    second = NO_SECOND_SMALLEST
    for value in values:
        if value < smallest:
            second, smallest = smallest, value
        elif smallest < value < second:
            second = value
    return second


def second_order_elements(values: Sequence[int]) -> list[int]:
    """Return [second largest, second smallest] of the values.

    Where no such element exists, -1 stands for the second largest and
    2**31 - 1 for the second smallest.
    """
    if not values:
        raise ValueError("second_order_elements needs at least one value")
    return [_second_largest(values), _second_smallest(values)]


def zero_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of the matrix with every row and column holding a zero set to zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, cell in enumerate(row) if cell == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else cell for j, cell in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def sorted_union(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the sorted union, without repeats, of two sorted sequences."""
    return [key for key, _ in itertools.groupby(heapq.merge(a, b))]


def alternate_numbers(values: Iterable[int]) -> list[int]:
    """Interleave positives and non-positives, starting with a positive.

    Both groups keep their order; they must be equally large.
    """
    items = list(values)
    positives = [value for value in items if value > 0]
    negatives = [value for value in items if value <= 0]
    if len(positives) != len(negatives):
        raise ValueError("values must hold as many positive as non-positive numbers")
    return [value for pair in zip(positives, negatives) for value in pair]


def count_subarrays_with_sum(values: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements sum to k."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in values:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def majority_element(values: Iterable[int]) -> int:
    """Return the majority candidate found by Boyer-Moore voting."""
    candidate = None
    count = 0
    for value in values:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("majority_element needs at least one value")
    return candidate


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Return the values rotated k places to the left; 0 <= k <= len(values)."""
    if not 0 <= k <= len(values):
        raise ValueError(f"rotation {k} out of range for {len(values)} values")
    return list(values[k:]) + list(values[:k])


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s with the Dutch national flag partition."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two distinct elements sum to target."""
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return True
        if total > target:
            right -= 1
        else:
            left += 1
    return False