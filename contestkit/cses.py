"""Sorting, searching and introductory problems."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby, pairwise


def _check_permutation(values: Sequence[int]) -> None:
    if sorted(values) != list(range(1, len(values) + 1)):
        raise ValueError("values must be a permutation of 1..n")


def apartments(applicants: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Greatest number of applicants that get an apartment within ``tolerance`` of their wish."""
    wanted = sorted(applicants)
    available = sorted(sizes)
    i = j = matched = 0
    while i < len(wanted) and j < len(available):
        wish, size = wanted[i], available[j]
        if wish - tolerance <= size <= wish + tolerance:
            matched += 1
            i += 1
            j += 1
        elif wish - tolerance > size:
            j += 1
        else:
            i += 1
    return matched


def collecting_numbers(values: Sequence[int]) -> int:
    """Rounds needed to collect 1..n in order when each round scans left to right."""
    values = list(values)
    _check_permutation(values)
    if not values:
        return 0
    position = {value: index for index, value in enumerate(values)}
    return 1 + sum(position[v] > position[v + 1] for v in range(1, len(values)))


def collecting_numbers_after_swaps(
    values: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of collecting rounds after each swap of two 1-based positions."""
    arr = list(values)
    _check_permutation(arr)
    n = len(arr)
    position = [0] * (n + 1)
    for index, value in enumerate(arr):
        position[value] = index

    def breaks(pairs: set[int]) -> int:
        return sum(position[v] > position[v + 1] for v in pairs)

    rounds = collecting_numbers(arr)
    results = []
    for x, y in swaps:
        if not (1 <= x <= n and 1 <= y <= n):
            raise IndexError(f"swap ({x}, {y}) is outside 1..{n}")
        a, b = x - 1, y - 1
        affected = {v for u in (arr[a], arr[b]) for v in (u - 1, u) if 1 <= v < n}
        rounds -= breaks(affected)
        arr[a], arr[b] = arr[b], arr[a]
        position[arr[a]], position[arr[b]] = a, b
        rounds += breaks(affected)
        results.append(rounds)
    return results


def increasing_array(values: Iterable[int]) -> int:
    """Fewest unit increments that make the sequence non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Smallest positive sum that no subset of the coins makes."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """The one number of 1..n absent from ``numbers``."""
    numbers = list(numbers)
    if n < 1 or len(numbers) != n - 1:
        raise ValueError("expected exactly n - 1 numbers")
    return n * (n + 1) // 2 - sum(numbers)


def reading_books(times: Iterable[int]) -> int:
    """Least time for two readers to each read every book."""
    times = list(times)
    return max(sum(times), 2 * max(times, default=0))


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Most customers present at once, given (arrival, departure) times."""
    events = sorted(
        event for arrival, departure in intervals for event in ((arrival, 1), (departure, -1))
    )
    return max(accumulate(delta for _, delta in events), default=0)


def tasks_and_deadlines(tasks: Iterable[tuple[int, int]]) -> int:
    """Best total reward for (duration, deadline) tasks, reward being deadline minus finish time."""
    tasks = list(tasks)
    finishes = accumulate(sorted(duration for duration, _ in tasks))
    return sum(deadline for _, deadline in tasks) - sum(finishes)


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Longest unlit stretch of a street of ``length`` after each light is added."""
    lights = list(positions)
    if length < 1:
        raise ValueError("length must be positive")
    if len(set(lights)) != len(lights):
        raise ValueError("light positions must be distinct")
    if any(not 0 < p < length for p in lights):
        raise ValueError(f"light positions must lie strictly between 0 and {length}")
    points = sorted([0, *lights, length])
    previous = {b: a for a, b in pairwise(points)}
    following = {a: b for a, b in pairwise(points)}
    longest = max(b - a for a, b in pairwise(points))
    answers = []
    for light in reversed(lights):
        answers.append(longest)
        left, right = previous.pop(light), following.pop(light)
        following[left] = right
        previous[right] = left
        longest = max(longest, right - left)
    answers.reverse()
    return answers


def nested_ranges(ranges: Sequence[tuple[int, int]]) -> tuple[list[bool], list[bool]]:
    """For each range, whether it contains another range and whether another contains it."""
    ranges = list(ranges)
    n = len(ranges)
    order = sorted(range(n), key=lambda i: (ranges[i][0], -ranges[i][1]))
    contains = [False] * n
    contained = [False] * n
    lowest_end = math.inf
    for i in reversed(order):
        end = ranges[i][1]
        if end >= lowest_end:
            contains[i] = True
        lowest_end = min(lowest_end, end)
    highest_end = -math.inf
    for i in order:
        end = ranges[i][1]
        if end <= highest_end:
            contained[i] = True
        highest_end = max(highest_end, end)
    return contains, contained


def room_allocation(intervals: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Fewest rooms for the stays, and the 1-based room given to each customer."""
    intervals = list(intervals)
    order = sorted(range(len(intervals)), key=lambda i: intervals[i])
    rooms = [0] * len(intervals)
    busy: list[tuple[int, int]] = []
    count = 0
    for i in order:
        arrival, departure = intervals[i]
        if busy and busy[0][0] < arrival:
            _, room = heapq.heappop(busy)
        else:
            count += 1
            room = count
        heapq.heappush(busy, (departure, room))
        rooms[i] = room
    return count, rooms


def repetition(dna: str) -> int:
    """Length of the longest run of one repeated character."""
    if not dna:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(dna))


def weird_algorithm(n: int) -> list[int]:
    """The values taken by ``n`` under halving and 3n+1 until it reaches 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def number_spiral(row: int, col: int) -> int:
    """The number at (row, col), both 1-based, of the infinite number spiral."""
    if row < 1 or col < 1:
        raise ValueError("row and column must be positive")
    if row >= col:
        return row * row - col + 1 if row % 2 == 0 else (row - 1) ** 2 + col
    return col * col - row + 1 if col % 2 == 1 else (col - 1) ** 2 + row


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no adjacent values differing by one, or None if none exists."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [1]
    if n in (2, 3):
        return None
    if n == 4:
        return [3, 1, 4, 2]
    return [*range(n, 0, -2), *range(n - 1, 0, -2)]


def permutation_from_rank(n: int, k: int) -> list[int]:
    """The ``k``-th (1-based) permutation of 1..n in lexicographic order."""
    if n < 0 or not 1 <= k <= math.factorial(n):
        raise ValueError(f"k={k} is out of range for n={n}")
    remaining = list(range(1, n + 1))
    k -= 1
    result = []
    for size in range(n, 0, -1):
        index, k = divmod(k, math.factorial(size - 1))
        result.append(remaining.pop(index))
    return result


def rank_of_permutation(permutation: Sequence[int]) -> int:
    """The 1-based lexicographic rank of a permutation of 1..n."""
    permutation = list(permutation)
    _check_permutation(permutation)
    n = len(permutation)
    remaining = list(range(1, n + 1))
    rank = 1
    for placed, value in enumerate(permutation):
        index = remaining.index(value)
        rank += index * math.factorial(n - 1 - placed)
        remaining.pop(index)
    return rank