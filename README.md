# contestkit

Plain Python functions for well-known competitive-programming problems. Each
function takes ordinary Python values, such as integers, strings, lists and
tuples, and returns its answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.numtheory` holds the general helpers `gcd`, `modpow`, `sieve`
  (primes below a limit) and `quick_select` (k-th smallest value, 1-based).
  `Factorials(size, modulus)` is a table of factorials and inverse factorials
  modulo a prime, with the methods `factorial`, `inverse_factorial` and
  `binomial`. The module also answers counting problems: `binomial_mod`,
  `bracket_sequences`, `derangements`, `count_divisors`,
  `distinct_arrangements`, `distribute_apples`, `divisor_count_and_sum`,
  `power_tower`, `sum_of_divisors_of_power` and `permutation_rounds`.
- `contestkit.dynamic` covers dynamic-programming counts and optima:
  `array_descriptions`, `book_shop`, `coin_combinations_ordered`,
  `coin_combinations_unordered`, `dice_combinations`, `grid_paths`,
  `minimizing_coins` and `removing_digits`.
- `contestkit.cses` covers sorting, searching and introductory problems:
  `apartments`, `collecting_numbers`, `collecting_numbers_after_swaps`,
  `increasing_array`, `maximum_subarray_sum`, `missing_coin_sum`,
  `missing_number`, `reading_books`, `restaurant_customers`,
  `tasks_and_deadlines`, `traffic_lights`, `nested_ranges`,
  `room_allocation`, `repetition`, `weird_algorithm`, `number_spiral`,
  `beautiful_permutation`, `permutation_from_rank` and `rank_of_permutation`.
- `contestkit.structures` provides `build_adjacency` and `depth_first` for
  graphs, `xor_tree`, and `QueueComposite`. That class is a FIFO queue of
  linear maps `x -> a*x + b` with `push`, `pop`, `evaluate` and `len()`.
- `contestkit.cf_math` holds short arithmetic and bit problems, for example
  `arena_of_greed`, `random_teams`, `routine_problem` (which returns a
  `fractions.Fraction`), `sumdamental_decomposition`, `serval_formula`,
  `xor_triangle` and `zero_remainder_moves`.
- `contestkit.cf_arrays` holds array and matrix problems, for example
  `dominated_subarray`, `equal_rectangles`, `little_girl_sum`, `nice_matrix`,
  `phoenix_beauty`, `rock_lever`, `two_arrays_swaps`, `two_cakes` and
  `vus_rounding`.

## Conventions

- Results that a problem defines modulo 10^9 + 7 come back already reduced.
  `QueueComposite` works modulo 998244353 by default.
- Some problems may have no answer. Examples are `beautiful_permutation`,
  `dominated_subarray`, `serval_formula`, `xor_triangle`,
  `sumdamental_decomposition` and `phoenix_beauty`. These functions return
  `None` in that case. `minimizing_coins` returns `-1` when the target cannot
  be formed.
- Input that breaks a problem's constraints raises `ValueError`. Examples are
  a list that is not a permutation, a negative size, or mismatched lengths.
  Out-of-range table lookups and swap positions raise `IndexError`.

## Examples

```python
from contestkit.numtheory import Factorials, modpow, sieve
from contestkit.dynamic import dice_combinations
from contestkit.cses import weird_algorithm
from contestkit.structures import QueueComposite

table = Factorials(10, 10**9 + 7)
table.binomial(5, 2)          # 10
modpow(3, 4, 1000)            # 81
sieve(20)                     # [2, 3, 5, 7, 11, 13, 17, 19]
dice_combinations(3)          # 4
weird_algorithm(3)            # [3, 10, 5, 16, 8, 4, 2, 1]

queue = QueueComposite()
queue.push(2, 1)              # x -> 2x + 1
queue.push(3, 0)              # then x -> 3x
queue.evaluate(5)             # 33
```

## What it does not do

contestkit is a library only. It has no command-line program, and none of its
functions reads standard input or parses a problem's input format. The caller
parses the input and formats the output.