"""Counting and optimisation by dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    return values


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count fillings of the zeros in ``values`` with 1..upper so neighbours differ by at most 1."""
    values = list(values)
    if not values or upper < 1:
        raise ValueError("need at least one value and a positive upper bound")
    if any(v < 0 or v > upper for v in values):
        raise ValueError(f"values must lie in 0..{upper}")
    ways = [0] * (upper + 2)
    first = values[0]
    if first == 0:
        ways[1 : upper + 1] = [1] * upper
    else:
        ways[first] = 1
    for value in values[1:]:
        following = [0] * (upper + 2)
        targets = range(1, upper + 1) if value == 0 else (value,)
        for j in targets:
            following[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = following
    return sum(ways) % MOD


def book_shop(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Maximum number of pages buyable with ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must be non-negative")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for j in range(budget, price - 1, -1):
            best[j] = max(best[j], best[j - price] + count)
    return best[budget]


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target`` modulo 10**9+7."""
    values = _positive_coins(coins)
    if target < 0:
        raise ValueError("target must be non-negative")
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in values if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target`` modulo 10**9+7."""
    values = _positive_coins(coins)
    if target < 0:
        raise ValueError("target must be non-negative")
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Count ways to reach sum ``n`` by throwing a die one or more times."""
    return coin_combinations_ordered(range(1, 7), n)


def grid_paths(grid: Iterable[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right avoiding ``*`` cells."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    above = [0] * width
    for r, row in enumerate(rows):
        current = [0] * width
        for c, cell in enumerate(row):
            if cell == "*":
                continue
            if r == 0 and c == 0:
                current[c] = 1
            else:
                left = current[c - 1] if c else 0
                current[c] = (above[c] + left) % MOD
        above = current
    return above[-1]


def minimizing_coins(coins: Iterable[int], target: int) -> int:
    """Fewest coins summing to ``target``, or -1 when the sum cannot be formed."""
    values = _positive_coins(coins)
    if target < 0:
        raise ValueError("target must be non-negative")
    fewest = [0] + [math.inf] * target
    for amount in range(1, target + 1):
        fewest[amount] = min(
            (fewest[amount - c] + 1 for c in values if c <= amount), default=math.inf
        )
    return -1 if fewest[target] == math.inf else int(fewest[target])


def removing_digits(n: int) -> int:
    """Fewest steps to reach zero by subtracting one of the current number's digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    steps = [0] * (n + 1)
    for i in range(1, n + 1):
        steps[i] = min(steps[i - int(d)] for d in str(i) if d != "0") + 1
    return steps[n]