"""Modular arithmetic, combinatorics and prime utilities."""

from __future__ import annotations

import math
import random
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import lru_cache

MOD = 10**9 + 7


def gcd(u: int, v: int) -> int:
    """Greatest common divisor of ``u`` and ``v``; never negative."""
    a, b = max(u, v), min(u, v)
    while b:
        a, b = b, a % b
    return abs(a)


def modpow(x: int, n: int, m: int) -> int:
    """Return ``x ** n % m``; an exponent of zero always yields 1."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 1
    return pow(x, n, m)


class Factorials:
    """Table of factorials and inverse factorials below ``size`` modulo a prime."""

    def __init__(self, size: int, modulus: int = MOD) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self.modulus = modulus
        fact = [1] * size
        for i in range(1, size):
            fact[i] = fact[i - 1] * i % modulus
        inverse = [1] * size
        inverse[-1] = pow(fact[-1], modulus - 2, modulus)
        for i in range(size - 1, 1, -1):
            inverse[i - 1] = inverse[i] * i % modulus
        self._fact = fact
        self._inverse = inverse

    def _check(self, n: int) -> None:
        if not 0 <= n < self.size:
            raise IndexError(f"{n} is outside the table of size {self.size}")

    def factorial(self, n: int) -> int:
        """Return ``n!`` modulo the table's modulus."""
        self._check(n)
        return self._fact[n]

    def inverse_factorial(self, n: int) -> int:
        """Return the modular inverse of ``n!``."""
        self._check(n)
        return self._inverse[n]

    def binomial(self, a: int, b: int) -> int:
        """Return ``C(a, b)`` modulo the modulus, or 0 when ``b`` is out of range."""
        if b < 0 or b > a:
            return 0
        self._check(a)
        m = self.modulus
        return self._fact[a] * self._inverse[b] % m * self._inverse[a - b] % m


@lru_cache(maxsize=None)
def _table(size: int) -> Factorials:
    return Factorials(size, MOD)


def _factorials_for(n: int) -> Factorials:
    """A shared table large enough to hold index ``n``."""
    return _table(max(1024, 1 << n.bit_length()))


def sieve(limit: int) -> list[int]:
    """Return every prime strictly below ``limit``."""
    if limit < 2:
        return []
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return [n for n, is_prime in enumerate(flags) if is_prime]


def quick_select(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based)."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k={k} is out of range for {len(items)} values")
    while True:
        pivot = random.choice(items)
        left = [v for v in items if v < pivot]
        right = [v for v in items if v > pivot]
        equal = len(items) - len(left) - len(right)
        if k <= len(left):
            items = left
        elif k <= len(left) + equal:
            return pivot
        else:
            k -= len(left) + equal
            items = right


def binomial_mod(a: int, b: int) -> int:
    """Return ``C(a, b)`` modulo 10**9+7."""
    if b < 0 or b > a:
        return 0
    return _factorials_for(a).binomial(a, b)


def bracket_sequences(n: int) -> int:
    """Count balanced bracket sequences of length ``n`` modulo 10**9+7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    if n % 2:
        return 0
    half = n // 2
    return _factorials_for(n).binomial(n, half) * pow(half + 1, MOD - 2, MOD) % MOD


def derangements(n: int, modulus: int = MOD) -> int:
    """Count permutations of ``n`` items with no fixed point, modulo ``modulus``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    previous, current = 1, 0
    for i in range(1, n):
        previous, current = current, i * ((current + previous) % modulus) % modulus
    return current


def count_divisors(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    rest = n
    p = 2
    while p * p <= rest:
        exponent = 0
        while rest % p == 0:
            rest //= p
            exponent += 1
        total *= exponent + 1
        p += 1 if p == 2 else 2
    if rest > 1:
        total *= 2
    return total


def distinct_arrangements(text: str) -> int:
    """Count distinct orderings of the characters of ``text`` modulo 10**9+7."""
    table = _factorials_for(len(text))
    result = table.factorial(len(text))
    for count in Counter(text).values():
        result = result * table.inverse_factorial(count) % MOD
    return result


def distribute_apples(children: int, apples: int) -> int:
    """Count ways to hand ``apples`` identical apples to ``children`` children."""
    if children < 1 or apples < 0:
        raise ValueError("need at least one child and a non-negative number of apples")
    return binomial_mod(children + apples - 1, apples)


def divisor_count_and_sum(factors: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Return (number, sum) of divisors, modulo 10**9+7, of a number given as (prime, exponent) pairs."""
    count = 1
    total = 1
    for prime, exponent in factors:
        if prime < 2 or exponent < 0:
            raise ValueError(f"invalid factor {prime}^{exponent}")
        count = count * (exponent + 1) % MOD
        if prime % MOD == 1:
            geometric = (exponent + 1) % MOD
        else:
            numerator = (pow(prime, exponent + 1, MOD) - 1) % MOD
            geometric = numerator * pow(prime - 1, MOD - 2, MOD) % MOD
        total = total * geometric % MOD
    return count, total


def power_tower(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo 10**9+7."""
    exponent = modpow(b, c, MOD - 1)
    return modpow(a, exponent, MOD)


def sum_of_divisors_of_power(a: int, b: int) -> int:
    """Return the sum of the divisors of ``a ** b`` modulo 10**9+7."""
    if a < 1 or b < 0:
        raise ValueError("a must be positive and b non-negative")
    factors: Counter[int] = Counter()
    i = 2
    while i * i <= a:
        while a % i == 0:
            factors[i] += 1
            a //= i
        i += 1
    if a != 1:
        factors[a] = 1
    numerator = 1
    denominator = 1
    for prime, exponent in sorted(factors.items()):
        term = modpow(prime, (exponent * b + 1) % (MOD - 1), MOD) - 1 + MOD
        numerator = numerator * term % MOD
        denominator = denominator * (prime - 1) % MOD
    return numerator * modpow(denominator, MOD - 2, MOD) % MOD


def permutation_rounds(permutation: Sequence[int]) -> int:
    """Rounds until a 1-based permutation returns to the identity, modulo 10**9+7."""
    targets = [p - 1 for p in permutation]
    n = len(targets)
    if sorted(targets) != list(range(n)):
        raise ValueError("not a permutation of 1..n")
    seen = [False] * n
    result = 1
    for start in range(n):
        if seen[start]:
            continue
        length = 0
        node = start
        while not seen[node]:
            seen[node] = True
            node = targets[node]
            length += 1
        result = math.lcm(result, length)
    return result % MOD