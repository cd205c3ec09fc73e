"""Array, matrix and sorting contest problems."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby, islice, pairwise


def dominated_subarray(values: Iterable[int]) -> int | None:
    """Length of the shortest subarray whose ends are equal, or None if none exists."""
    last: dict[int, int] = {}
    best: int | None = None
    for index, value in enumerate(values):
        if value in last:
            length = index - last[value] + 1
            best = length if best is None else min(best, length)
        last[value] = index
    return best


def equal_rectangles(n: int, sticks: Iterable[int]) -> bool:
    """Whether ``4n`` sticks form ``n`` rectangles that all have the same area."""
    ordered = sorted(sticks)
    if n < 1 or len(ordered) != 4 * n:
        raise ValueError("need exactly 4n sticks with n positive")
    if any(x != y for x, y in zip(ordered[::2], ordered[1::2])):
        return False
    area = ordered[0] * ordered[-1]
    return all(x * y == area for x, y in islice(zip(ordered, reversed(ordered)), 2 * n))


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def ilya_matrix(values: Iterable[int]) -> int:
    """Greatest beauty of a 2^n x 2^n matrix filled with the given 4^n numbers."""
    total = 0
    beauty = 0
    next_power = 1
    for count, value in enumerate(sorted(values, reverse=True), 1):
        total += value
        if count == next_power:
            beauty += total
            next_power *= 4
    return beauty


def little_girl_sum(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> int:
    """Largest total of the 1-based range-sum queries after reordering the values."""
    n = len(values)
    diff = [0] * (n + 1)
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query ({left}, {right}) is outside 1..{n}")
        diff[left - 1] += 1
        diff[right] -= 1
    usage = sorted(accumulate(diff[:n]), reverse=True)
    total = 0
    for uses, value in zip(usage, sorted(values, reverse=True)):
        if uses == 0 or value == 0:
            break
        total += uses * value
    return total


def nice_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Fewest unit changes that make every row and column a palindrome."""
    rows = [list(row) for row in matrix]
    n = len(rows)
    m = len(rows[0]) if rows else 0
    if any(len(row) != m for row in rows):
        raise ValueError("all rows must have the same length")
    total = 0
    for i in range(n // 2):
        top, bottom = rows[i], rows[n - 1 - i]
        for j in range(m // 2):
            low, mid_low, mid_high, high = sorted(
                (top[j], top[m - 1 - j], bottom[j], bottom[m - 1 - j])
            )
            total += high - low + mid_high - mid_low
        if m % 2:
            total += abs(top[m // 2] - bottom[m // 2])
    if n % 2:
        middle = rows[n // 2]
        total += sum(abs(middle[j] - middle[m - 1 - j]) for j in range(m // 2))
    return total


def phoenix_beauty(k: int, values: Sequence[int]) -> list[int] | None:
    """An array containing ``values`` as a subsequence whose every k-window has the same sum."""
    values = list(values)
    if k < 1 or not values:
        raise ValueError("k must be positive and values non-empty")
    n = len(values)
    distinct = sorted(set(values))
    if any(v > n for v in values) or len(distinct) > k:
        return None
    block = distinct + [distinct[0]] * (k - len(distinct))
    return block * n


def rock_lever(values: Iterable[int]) -> int:
    """Pairs i < j with a_i & a_j >= a_i ^ a_j, i.e. sharing the highest set bit."""

    def highest(value: int) -> int:
        return 1 << max(0, value.bit_length() - 1)

    ordered = sorted(values)
    return sum(math.comb(sum(1 for _ in group), 2) for _, group in groupby(ordered, key=highest))


def twins(coins: Iterable[int]) -> int:
    """Fewest coins to take so that they are worth strictly more than the rest."""
    ordered = sorted(coins, reverse=True)
    remaining = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, 1):
        taken += coin
        remaining -= coin
        if taken > remaining:
            return count
    raise ValueError("coins must include a positive value")


def two_arrays_swaps(k: int, a: Sequence[int], b: Sequence[int]) -> int:
    """Largest sum of ``a`` after at most ``k`` swaps of elements between ``a`` and ``b``."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    if k < 0:
        raise ValueError("k must be non-negative")
    total = sum(a)
    for mine, theirs in islice(zip(sorted(a), sorted(b, reverse=True)), k):
        if mine >= theirs:
            break
        total += theirs - mine
    return total


def two_cakes(tiers: Sequence[int]) -> int:
    """Least total walking for two people each collecting tiers 1..n in order from house 0."""
    places: defaultdict[int, list[int]] = defaultdict(list)
    for house, size in enumerate(tiers):
        places[size].append(house)
    n = len(tiers) // 2
    if n < 1 or len(tiers) != 2 * n or any(len(places[t]) != 2 for t in range(1, n + 1)):
        raise ValueError("each tier 1..n must appear exactly twice")
    ordered = [places[t] for t in range(1, n + 1)]
    total = sum(ordered[0])
    for (a0, a1), (b0, b1) in pairwise(ordered):
        total += min(abs(a0 - b0) + abs(a1 - b1), abs(a1 - b0) + abs(a0 - b1))
    return total


def vus_rounding(values: Iterable[float]) -> list[int]:
    """Round each value up or down so that the rounded values sum to zero."""
    numbers = [float(v) for v in values]
    result = [math.trunc(v) for v in numbers]
    balance = sum(result)
    step = -1 if balance > 0 else 1
    for index, value in enumerate(numbers):
        if balance == 0:
            break
        if value * step > 0 and value != math.trunc(value):
            result[index] += step
            balance += step
    if balance:
        raise ValueError("values cannot be rounded to a zero sum")
    return result