import itertools
import math
import random

import pytest

from contestkit.cses import (
    apartments,
    beautiful_permutation,
    collecting_numbers,
    collecting_numbers_after_swaps,
    increasing_array,
    maximum_subarray_sum,
    missing_coin_sum,
    missing_number,
    nested_ranges,
    number_spiral,
    permutation_from_rank,
    rank_of_permutation,
    reading_books,
    repetition,
    restaurant_customers,
    room_allocation,
    tasks_and_deadlines,
    traffic_lights,
    weird_algorithm,
)


def test_apartments_wide_tolerance_matches_smaller_side():
    sizes = [30, 60, 75]
    assert apartments([60, 45, 80, 60], sizes, 1000) == len(sizes)


def test_apartments_exact_sizes_all_match():
    wishes = [10, 20, 30, 40]
    assert apartments(wishes, list(reversed(wishes)), 0) == len(wishes)


def test_apartments_bounded_by_both_sides():
    rng = random.Random(3)
    for _ in range(50):
        a = [rng.randint(1, 50) for _ in range(rng.randint(0, 8))]
        b = [rng.randint(1, 50) for _ in range(rng.randint(0, 8))]
        result = apartments(a, b, rng.randint(0, 5))
        assert 0 <= result <= min(len(a), len(b))


def test_collecting_numbers_reversed_needs_one_round_each():
    values = list(range(6, 0, -1))
    assert collecting_numbers(values) == len(values)


def test_collecting_numbers_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_numbers([1, 1, 3])


def test_collecting_after_swaps_matches_recount():
    rng = random.Random(7)
    arr = list(range(1, 9))
    rng.shuffle(arr)
    swaps = [(rng.randint(1, 8), rng.randint(1, 8)) for _ in range(25)]
    results = collecting_numbers_after_swaps(arr, swaps)
    current = list(arr)
    for (x, y), result in zip(swaps, results):
        current[x - 1], current[y - 1] = current[y - 1], current[x - 1]
        assert result == collecting_numbers(current)
    assert len(results) == len(swaps)


def test_collecting_after_swaps_index_out_of_range():
    with pytest.raises(IndexError):
        collecting_numbers_after_swaps([1, 2, 3], [(1, 4)])


def test_increasing_array():
    assert increasing_array([5, 1]) == 5 - 1
    assert increasing_array(range(10)) == 0


def test_maximum_subarray_sum():
    positives = [3, 1, 4, 1, 5]
    assert maximum_subarray_sum(positives) == sum(positives)
    negatives = [-8, -3, -5]
    assert maximum_subarray_sum(negatives) == max(negatives)
    with pytest.raises(ValueError):
        maximum_subarray_sum([])


def _subset_sums(coins):
    sums = {0}
    for coin in coins:
        sums |= {s + coin for s in sums}
    return sums


def test_missing_coin_sum_is_first_unreachable():
    rng = random.Random(11)
    for _ in range(30):
        coins = [rng.randint(1, 12) for _ in range(rng.randint(0, 7))]
        result = missing_coin_sum(coins)
        sums = _subset_sums(coins)
        assert result not in sums
        assert all(v in sums for v in range(1, result))


def test_missing_number():
    numbers = [n for n in range(1, 11) if n != 7]
    random.Random(1).shuffle(numbers)
    assert missing_number(10, numbers) == 7
    with pytest.raises(ValueError):
        missing_number(5, [1, 2])


def test_reading_books():
    assert reading_books([10, 1, 1]) == 2 * 10
    assert reading_books([3, 3, 3]) == 3 + 3 + 3


def test_restaurant_customers_nested_all_present():
    intervals = [(1, 100), (2, 90), (3, 80), (4, 70)]
    assert restaurant_customers(intervals) == len(intervals)


def test_tasks_and_deadlines_single_task():
    assert tasks_and_deadlines([(6, 10)]) == 10 - 6


def test_traffic_lights_invariants():
    positions = [3, 6, 2, 9, 13]
    result = traffic_lights(20, positions)
    assert len(result) == len(positions)
    assert result == sorted(result, reverse=True)
    assert result[0] == max(3, 20 - 3)


def test_traffic_lights_rejects_bad_positions():
    with pytest.raises(ValueError):
        traffic_lights(10, [3, 3])
    with pytest.raises(ValueError):
        traffic_lights(10, [10])


def test_nested_ranges_simple():
    contains, contained = nested_ranges([(1, 10), (2, 3)])
    assert contains == [True, False]
    assert contained == [False, True]


def test_nested_ranges_disjoint_none():
    contains, contained = nested_ranges([(1, 2), (3, 4), (5, 6)])
    assert list(contains) == [False, False, False]
    assert list(contained) == [False, False, False]


def test_repetition():
    assert repetition("GT" + "A" * 7 + "CG") == 7
    with pytest.raises(ValueError):
        repetition("")


def test_weird_algorithm_follows_rule():
    sequence = weird_algorithm(27)
    assert sequence[0] == 27 and sequence[-1] == 1
    for a, b in zip(sequence, sequence[1:]):
        assert b == (a // 2 if a % 2 == 0 else 3 * a + 1)
    with pytest.raises(ValueError):
        weird_algorithm(0)


def test_number_spiral_fills_square():
    n = 6
    values = {number_spiral(r, c) for r in range(1, n + 1) for c in range(1, n + 1)}
    assert values == set(range(1, n * n + 1))
    assert number_spiral(1, 1) == 1


def test_beautiful_permutation():
    assert beautiful_permutation(4) == [3, 1, 4, 2]
    assert beautiful_permutation(2) is None
    assert beautiful_permutation(3) is None
    for n in range(5, 30):
        perm = beautiful_permutation(n)
        assert sorted(perm) == list(range(1, n + 1))
        assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_permutation_rank_matches_lexicographic_order():
    ordered = list(itertools.permutations(range(1, 5)))
    for k, perm in enumerate(ordered, start=1):
        assert permutation_from_rank(4, k) == list(perm)
        assert rank_of_permutation(perm) == k


def test_permutation_rank_round_trip_large():
    n = 15
    for k in (1, 12345678, math.factorial(n)):
        assert rank_of_permutation(permutation_from_rank(n, k)) == k


def test_permutation_from_rank_out_of_range():
    with pytest.raises(ValueError):
        permutation_from_rank(3, math.factorial(3) + 1)
    with pytest.raises(ValueError):
        rank_of_permutation([1, 3])