"""Knapsack-family dynamic programmes: 0/1, unbounded, rod cutting, coin change, subset counts."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 10**9 + 7


def _check_pairs(first: Sequence[int], second: Sequence[int], capacity: int) -> None:
    if not first:
        raise ValueError("at least one item is needed")
    if len(first) != len(second):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(weights: Sequence[int], values: Sequence[int], max_weight: int) -> int:
    """Return the best total value of items, each taken at most once, within max_weight."""
    _check_pairs(weights, values, max_weight)
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (max_weight + 1)
    for weight, value in zip(weights, values):
        for capacity in range(max_weight, weight - 1, -1):
            best[capacity] = max(best[capacity], value + best[capacity - weight])
    return best[max_weight]


def unbounded_knapsack(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total profit when each item may be taken any number of times."""
    _check_pairs(profits, weights, capacity)
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], profit + best[room - weight])
    return best[capacity]


def cut_rod(prices: Sequence[int], length: int) -> int:
    """Return the best price for a rod of the given length.

    prices[i] is the price of a piece of length i + 1.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(prices) < length:
        raise ValueError("a price is needed for every piece length up to the rod length")
    if length == 0:
        return 0
    best = [n * prices[0] for n in range(length + 1)]
    for piece, price in enumerate(prices[1:length], start=2):
        for n in range(piece, length + 1):
            best[n] = max(best[n], price + best[n - piece])
    return best[length]


def count_ways_to_make_change(denominations: Sequence[int], value: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to value."""
    if value < 0:
        raise ValueError("value must not be negative")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("denominations must be positive")
    ways = [1] + [0] * value
    for coin in denominations:
        for total in range(coin, value + 1):
            ways[total] += ways[total - coin]
    return ways[value]


def count_subsets_with_sum(numbers: Sequence[int], target: int) -> int:
    """Count the subsets of numbers summing to target, modulo 10**9 + 7.

    Zeros count: each one doubles the number of subsets.
    """
    if any(number < 0 for number in numbers):
        raise ValueError("numbers must not be negative")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for number in numbers:
        for total in range(target, number - 1, -1):
            ways[total] = (ways[total] + ways[total - number]) % MOD
    return ways[target]


def count_partitions(numbers: Sequence[int], difference: int) -> int:
    """Count splits of numbers into two groups whose sums differ by difference."""
    remainder = sum(numbers) - difference
    if remainder < 0 or remainder % 2:
        return 0
    return count_subsets_with_sum(numbers, remainder // 2)