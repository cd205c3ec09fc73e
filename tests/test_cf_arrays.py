import math

import pytest

from contestkit.cf_arrays import (
    dominated_subarray,
    equal_rectangles,
    gravity_flip,
    ilya_matrix,
    little_girl_sum,
    nice_matrix,
    phoenix_beauty,
    rock_lever,
    twins,
    two_arrays_swaps,
    two_cakes,
    vus_rounding,
)


def test_dominated_subarray_none():
    assert dominated_subarray([1, 2, 3]) is None
    assert dominated_subarray([]) is None


def test_dominated_subarray_adjacent():
    values = [4, 4]
    assert dominated_subarray(values) == len(values)
    assert dominated_subarray([5, 1, 5, 5]) == 2


def test_dominated_subarray_lower_bound():
    result = dominated_subarray([3, 1, 4, 1, 5, 9, 2, 6, 5, 3])
    assert 2 <= result <= 10


def test_equal_rectangles():
    assert equal_rectangles(1, [1, 1, 10, 10]) is True
    assert equal_rectangles(1, [10, 5, 2, 10]) is False
    assert equal_rectangles(2, [1, 1, 4, 4, 2, 2, 2, 2]) is True
    assert equal_rectangles(2, [1, 1, 4, 4, 2, 2, 3, 3]) is False


def test_equal_rectangles_wrong_count():
    with pytest.raises(ValueError):
        equal_rectangles(2, [1, 1, 1, 1])


def test_gravity_flip():
    columns = [3, 2, 1, 2]
    assert gravity_flip(columns) == sorted(columns)


def test_ilya_matrix():
    assert ilya_matrix([13]) == 13
    assert ilya_matrix([1, 2, 3, 4]) == 14


def test_little_girl_sum_example():
    assert little_girl_sum([5, 3, 2], [(1, 2), (2, 3), (1, 3)]) == 25


def test_little_girl_sum_simple():
    values = [5, 3, 2, 7]
    assert little_girl_sum(values, []) == 0
    assert little_girl_sum(values, [(1, len(values))]) == sum(values)


def test_little_girl_sum_bad_query():
    with pytest.raises(ValueError):
        little_girl_sum([1, 2], [(1, 3)])


def test_nice_matrix_palindromic():
    assert nice_matrix([[1, 2, 1], [3, 4, 3], [1, 2, 1]]) == 0
    assert nice_matrix([]) == 0


def test_nice_matrix_shift_invariant():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 1, 2, 3]]
    shifted = [[v + 10 for v in row] for row in matrix]
    assert nice_matrix(shifted) == nice_matrix(matrix) >= 0


def test_nice_matrix_single_row():
    row = [1, 3]
    assert nice_matrix([row]) == abs(row[0] - row[1])


def test_phoenix_beauty_impossible():
    assert phoenix_beauty(2, [1, 2, 3]) is None
    assert phoenix_beauty(3, [1, 5]) is None


def test_phoenix_beauty_windows():
    k, values = 3, [1, 2, 2, 1]
    result = phoenix_beauty(k, values)
    assert len(result) == k * len(values)
    sums = {sum(result[i : i + k]) for i in range(len(result) - k + 1)}
    assert len(sums) == 1


def test_rock_lever():
    values = [4, 5, 6, 7]
    assert rock_lever(values) == math.comb(len(values), 2)
    assert rock_lever([1, 2, 4, 8]) == 0
    assert rock_lever([]) == 0


def test_twins_properties():
    for coins in ([3, 3], [2, 1, 2], [5, 1, 1, 1, 1, 1], [1] * 7):
        count = twins(coins)
        ordered = sorted(coins, reverse=True)
        assert sum(ordered[:count]) > sum(ordered[count:])
        assert sum(ordered[: count - 1]) <= sum(ordered[count - 1 :])


def test_twins_empty():
    with pytest.raises(ValueError):
        twins([])


def test_two_arrays_swaps():
    a, b = [1, 2, 5, 4, 3], [5, 5, 6, 6, 5]
    assert two_arrays_swaps(0, a, b) == sum(a)
    results = [two_arrays_swaps(k, a, b) for k in range(len(a) + 1)]
    assert results == sorted(results)
    assert results[-1] <= sum(b) + max(a)


def test_two_arrays_swaps_length_mismatch():
    with pytest.raises(ValueError):
        two_arrays_swaps(1, [1], [1, 2])


def test_two_cakes_example():
    assert two_cakes([1, 1, 2, 2, 3, 3]) == 9


def test_two_cakes_invalid():
    with pytest.raises(ValueError):
        two_cakes([1, 2, 2, 2])


def test_vus_rounding_invariants():
    for values in ([1.5, 1.5, -3.0], [4.58413, 1.22491, -2.10517, -3.70387], [-1.5, -1.5, 3.0]):
        result = vus_rounding(values)
        assert sum(result) == 0
        assert all(abs(r - v) < 1 for r, v in zip(result, values))


def test_vus_rounding_unbalanced():
    with pytest.raises(ValueError):
        vus_rounding([2.0])