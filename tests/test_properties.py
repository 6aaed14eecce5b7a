import pytest

from dsakit.properties import (
    diameter,
    height,
    identical,
    is_balanced,
    is_symmetric,
    max_path_sum,
    max_width,
)
from dsakit.traversal import level_order, level_order_flat
from dsakit.tree import build_tree

TREES = [
    [1],
    [1, 2, 3, 4, 5, 6, 7],
    [1, 2, 3, 4, 5, None, 6, None, None, 7, 8, None, None, 9],
    [1, 2, None, 3, None, 4],
    [1, None, 2, None, 3, None, 4],
    [10, 20, 30, None, 40, 50, None, 60],
]


def _chain(length):
    values = [1]
    for value in range(2, length + 1):
        values.extend([value, None])
    return build_tree(values)


def test_empty_tree_measurements():
    assert height(None) == 0
    assert diameter(None) == 0
    assert max_width(None) == 0
    assert is_balanced(None) is True
    assert is_symmetric(None) is True


@pytest.mark.parametrize("values", TREES)
def test_height_matches_number_of_levels(values):
    root = build_tree(values)
    assert height(root) == len(level_order(root))


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_chain_height_diameter_width(length):
    root = _chain(length)
    assert height(root) == length
    assert diameter(root) == length - 1
    assert max_width(root) == 1


@pytest.mark.parametrize("values", TREES)
def test_diameter_bounded_by_height(values):
    root = build_tree(values)
    h = height(root)
    assert h - 1 <= diameter(root) <= 2 * (h - 1)


def test_perfect_tree_diameter():
    assert diameter(build_tree([1, 2, 3, 4, 5, 6, 7])) == 4


def test_balance():
    assert is_balanced(build_tree([1, 2, 3, 4, 5, 6, 7])) is True
    assert is_balanced(_chain(2)) is True
    assert is_balanced(_chain(3)) is False
    assert is_balanced(build_tree([1, 2, 3, 4, None, None, None, 5])) is False


@pytest.mark.parametrize("values", TREES)
def test_identical_to_rebuilt_copy(values):
    assert identical(build_tree(values), build_tree(values)) is True


def test_identical_detects_differences():
    root = build_tree([1, 2, 3])
    assert identical(root, build_tree([1, 2, 4])) is False
    assert identical(root, build_tree([1, 3, 2])) is False
    assert identical(root, build_tree([1, 2])) is False
    assert identical(root, None) is False
    assert identical(None, None) is True


def test_symmetry():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3])) is True
    assert is_symmetric(build_tree([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(build_tree([1, 2, 3])) is False
    assert is_symmetric(build_tree([1])) is True


def test_max_path_sum_worked_example():
    assert max_path_sum(build_tree([-10, 9, 20, None, None, 15, 7])) == 42


@pytest.mark.parametrize("values", [[-3], [-5, -2, -8], [-1, -2, -3, -4, -5]])
def test_max_path_sum_all_negative_picks_largest_value(values):
    root = build_tree(values)
    assert max_path_sum(root) == max(level_order_flat(root))


@pytest.mark.parametrize("values", TREES)
def test_max_path_sum_of_positive_chain_like_tree_at_least_any_value(values):
    root = build_tree(values)
    assert max_path_sum(root) >= max(level_order_flat(root))


def test_max_path_sum_of_chain_is_total():
    root = _chain(6)
    assert max_path_sum(root) == sum(level_order_flat(root))


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_max_width_counts_gaps():
    assert max_width(build_tree([1, 3, 2, 5, None, None, 9])) == 4


@pytest.mark.parametrize("values", TREES)
def test_max_width_at_least_largest_level(values):
    root = build_tree(values)
    assert max_width(root) >= max(len(level) for level in level_order(root))


def test_perfect_tree_width_is_bottom_level():
    root = build_tree(list(range(1, 16)))
    assert max_width(root) == len(level_order(root)[-1])