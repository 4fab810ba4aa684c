from collections import Counter
from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosteps.arrays_mid import (
    alternate_signs,
    count_subarrays_with_sum,
    leaders,
    longest_consecutive,
    majority_element,
    max_profit,
    max_subarray_sum,
    next_permutation,
    rotate_matrix,
    set_zeroes,
    sort_colors,
    spiral_order,
    two_sum,
)

small_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=12)
matrices = st.integers(min_value=1, max_value=5).flatmap(
    lambda cols: st.lists(
        st.lists(st.integers(min_value=-3, max_value=3), min_size=cols, max_size=cols),
        min_size=1,
        max_size=5,
    )
)


@given(small_ints, st.integers(min_value=-40, max_value=40))
def test_two_sum_pair_is_valid_and_first(nums, target):
    result = two_sum(nums, target)
    exists = any(
        i != j and nums[i] + nums[j] == target
        for i in range(len(nums))
        for j in range(len(nums))
    )
    if not exists:
        assert result == []
    else:
        i, j = result
        assert i != j and nums[i] + nums[j] == target
        assert all(
            nums[a] + nums[b] != target
            for a in range(i)
            for b in range(len(nums))
            if a != b
        )


def test_two_sum_uses_distinct_indices_for_equal_values():
    result = two_sum([1, 1, 22, 12, 3, 123, 13], 2)
    assert sorted(result) == [0, 1]


@given(small_ints)
def test_sort_colors_sorts(nums):
    assert sort_colors(nums) == sorted(nums)


@given(small_ints.filter(bool))
def test_majority_element_is_most_frequent_smallest(nums):
    counts = Counter(nums)
    result = majority_element(nums)
    assert counts[result] == max(counts.values())
    assert all(v >= result for v, c in counts.items() if c == counts[result])


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


def test_max_subarray_sum_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


@given(small_ints.filter(bool))
def test_max_subarray_sum_bounds(nums):
    result = max_subarray_sum(nums)
    assert result >= max(nums)
    if all(v >= 0 for v in nums):
        assert result == sum(nums)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=12))
def test_max_profit_is_best_pair(prices):
    result = max_profit(prices)
    assert result >= 0
    gains = [prices[j] - prices[i] for i in range(len(prices)) for j in range(i, len(prices))]
    assert all(g <= result for g in gains)
    assert result == 0 or result in gains


def test_max_profit_falling_prices():
    assert max_profit([5, 4, 3]) == 0


def test_alternate_signs_balanced():
    assert alternate_signs([1, 1, -1, -1]) == [1, -1, 1, -1]


@given(small_ints)
def test_alternate_signs_keeps_elements_and_group_order(nums):
    result = alternate_signs(nums)
    assert sorted(result) == sorted(nums)
    assert [v for v in result if v > 0] == [v for v in nums if v > 0]
    assert [v for v in result if v <= 0] == [v for v in nums if v <= 0]


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_next_permutation_walks_lexicographic_order(size):
    ordered = [list(p) for p in permutations(range(size))]
    for current, following in zip(ordered, ordered[1:] + ordered[:1]):
        assert next_permutation(current) == following


def test_next_permutation_does_not_mutate():
    nums = [1, 2, 3]
    next_permutation(nums)
    assert nums == [1, 2, 3]


def test_leaders_example():
    assert leaders([1, 2, 5, 3, 1, 2]) == [5, 3, 2]


@given(small_ints)
def test_leaders_invariant(nums):
    result = leaders(nums)
    expected_flags = [all(v > w for w in nums[i + 1:]) for i, v in enumerate(nums)]
    assert result == [v for v, flag in zip(nums, expected_flags) if flag]


def test_longest_consecutive_example():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4


def test_longest_consecutive_with_duplicates():
    assert longest_consecutive([1, 0, 1, 2]) == len({0, 1, 2})


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


@given(small_ints)
def test_longest_consecutive_run_exists(nums):
    result = longest_consecutive(nums)
    present = set(nums)
    if nums:
        assert any(all(s + d in present for d in range(result)) for s in present)
        assert not any(all(s + d in present for d in range(result + 1)) for s in present)


def test_set_zeroes_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert set_zeroes(matrix) == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]
    assert matrix[0] == [1, 1, 1]


@given(matrices)
def test_set_zeroes_invariant(matrix):
    result = set_zeroes(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            hit = 0 in row or any(r[j] == 0 for r in matrix)
            assert result[i][j] == (0 if hit else value)


@given(matrices)
def test_rotate_matrix_four_turns_is_identity(matrix):
    turned = matrix
    for _ in range(4):
        turned = rotate_matrix(turned)
    assert turned == matrix


@given(matrices)
def test_rotate_matrix_first_row_is_reversed_first_column(matrix):
    result = rotate_matrix(matrix)
    assert result[0] == [row[0] for row in reversed(matrix)]


def test_spiral_order_example():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    assert spiral_order(matrix) == [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]


@given(matrices)
def test_spiral_order_visits_everything_once(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[: len(matrix[0])] == matrix[0]


def test_spiral_order_empty():
    assert spiral_order([]) == []


def test_count_subarrays_example():
    assert count_subarrays_with_sum([1, 2, 1, 2, 1], 3) == 4


@given(st.lists(st.integers(min_value=1, max_value=9), min_size=1, max_size=12))
def test_count_subarrays_whole_sum_positive(nums):
    assert count_subarrays_with_sum(nums, sum(nums)) == 1
    assert count_subarrays_with_sum(nums, 0) == 0