"""Arithmetic and bit-manipulation contest problems."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Iterable, Sequence
from fractions import Fraction
from functools import reduce


def arena_of_greed(n: int) -> int:
    """Coins the first player collects when both play the halving game optimally."""
    if n < 0:
        raise ValueError("n must be non-negative")
    taken = 0
    while n > 0:
        if n == 4:
            taken += 3
            break
        if n % 2 or (n // 2) % 2 == 0:
            taken += 1
            n -= 1
        else:
            taken += n // 2
            n //= 2
        if n == 4:
            taken += 1
            break
        if n % 2 or (n // 2) % 2 == 0:
            n -= 1
        else:
            n //= 2
    return taken


def beautiful_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Adjacent row/column swaps needed to move the single 1 of a 5x5 matrix to its centre."""
    rows = [list(row) for row in matrix]
    if len(rows) != 5 or any(len(row) != 5 for row in rows):
        raise ValueError("matrix must be 5x5")
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value == 1:
                return abs(r - 2) + abs(c - 2)
    raise ValueError("matrix holds no 1")


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Final value of x after running statements such as ``X++`` or ``--X`` from zero."""
    return sum(1 if statement[1] == "+" else -1 for statement in statements)


def domino_piling(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m by n board."""
    if m < 0 or n < 0:
        raise ValueError("board sides must be non-negative")
    return m * n // 2


def fedor_friends(n: int, k: int, armies: Iterable[int], fedor: int) -> int:
    """Players whose army differs from Fedor's in at most ``k`` of the low ``n`` bits."""
    mask = (1 << n) - 1
    return sum(1 for army in armies if bin((army ^ fedor) & mask).count("1") <= k)


def mocha_and_math(values: Iterable[int]) -> int:
    """Smallest reachable maximum, which is the bitwise AND of all values."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    return reduce(operator.and_, values)


def ordinary_numbers(n: int) -> int:
    """Count of numbers in 1..n whose decimal digits are all equal."""
    count = 0
    repunit = 1
    while n // repunit:
        count += min(9, n // repunit)
        repunit = repunit * 10 + 1
    return count


def raising_bacteria(x: int) -> int:
    """Fewest bacteria to add so the box eventually holds exactly ``x``."""
    if x < 0:
        raise ValueError("x must be non-negative")
    return bin(x).count("1")


def random_teams(n: int, m: int) -> tuple[int, int]:
    """Least and greatest number of friend pairs when ``n`` people form ``m`` teams."""
    if not 1 <= m <= n:
        raise ValueError("need 1 <= m <= n")
    most = (n - m + 1) * (n - m) // 2
    size, bigger = divmod(n, m)
    least = size * (size - 1) // 2 * (m - bigger) + size * (size + 1) // 2 * bigger
    return least, most


def routine_problem(a: int, b: int, c: int, d: int) -> Fraction:
    """Empty share of an a:b screen showing a c:d film as large as possible."""
    if min(a, b, c, d) <= 0:
        raise ValueError("all sides must be positive")
    bc, ad = b * c, a * d
    if bc == ad:
        return Fraction(0, 1)
    return Fraction(abs(bc - ad), max(bc, ad))


def sumdamental_decomposition(n: int, x: int) -> int | None:
    """Smallest sum of ``n`` positive integers whose XOR is ``x``, or None if impossible."""
    if n < 1 or x < 0:
        raise ValueError("n must be positive and x non-negative")
    if n == 1:
        return None if x == 0 else x
    if x == 0:
        return n if n % 2 == 0 else n + 3
    ones = bin(x).count("1")
    if n <= ones:
        return x
    extra = n - ones
    if extra % 2 == 0:
        return x + extra
    if ones == 1 and x % 2:
        return x + extra + 3
    return x + extra + 1


def serval_formula(x: int, y: int) -> int | None:
    """Smallest k with (x+k) + (y+k) == (x+k) ^ (y+k), or None when none exists."""
    if x == y:
        return None
    high = max(x, y)
    power = 1
    while power < high:
        power *= 2
    return power - high


def xor_triangle(x: int) -> int | None:
    """A y < x such that x, y and x^y form a non-degenerate triangle, or None."""
    set_bit = next((1 << i for i in range(30) if x >> i & 1), 0)
    clear_bit = next((1 << i for i in range(30) if not x >> i & 1), 0)
    y = set_bit | clear_bit
    z = x ^ y
    if x > y and x + z > y and y + z > x and x + y > z:
        return y
    return None


def zero_remainder_moves(k: int, values: Iterable[int]) -> int:
    """Moves needed to make every value divisible by ``k`` with an increasing counter."""
    if k <= 0:
        raise ValueError("k must be positive")
    counts = Counter(r for r in (v % k for v in values) if r)
    if not counts:
        return 0
    most = max(counts.values())
    remainder = min(r for r, c in counts.items() if c == most)
    return k * (most - 1) + k - remainder + 1


def powered_addition(values: Iterable[int]) -> int:
    """Additions of growing powers of two spent making the sequence non-decreasing."""
    iterator = iter(values)
    try:
        current = next(iterator)
    except StopIteration:
        return 0
    step = 1
    operations = 0
    for value in iterator:
        while value < current:
            value += step
            operations += 1
            step *= 2
        current = value
    return operations


def team(problems: Iterable[Sequence[int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for votes in problems if sum(v == 1 for v in votes) >= 2)


def next_round(k: int, scores: Sequence[int]) -> int:
    """Participants advancing: positive scores at least equal to the ``k``-th place."""
    scores = list(scores)
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must lie in 1..{len(scores)}")
    threshold = scores[k - 1]
    advancing = sum(score > 0 for score in scores[:k])
    if threshold > 0:
        advancing += sum(score == threshold for score in scores[k:])
    return advancing