# drillbook

Small, well-known programming drills as plain Python functions and classes:
array routines, number puzzles, printed text patterns, a four-operation
calculator with a banknote counter, and fixed-capacity queues and a stack.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]`, then run `pytest`.

## Modules

### `drillbook.arrays`

Functions that take sequences of integers and return new values; inputs are
never changed in place.

- `swap_alternate(values)`: swaps each neighbouring pair; a trailing odd item stays put.
- `delete_at(values, index)` and `insert_at(values, index, value)`: return a
  copy with an item removed or inserted; an out-of-range index raises `IndexError`.
- `linear_search(values, key)`, `max_min(values)` (returns `(maximum, minimum)`,
  raises `ValueError` when empty), `reverse(values)`, `array_sum(values)`.
- `format_values(values)`: the items joined by single spaces.
- `find_unique(values)`: the one item that is not paired.
- `find_duplicate(values)`: the repeated item of a list holding `1..n-1` plus one duplicate.
- `sorted_intersection(first, second)`: common items of two ascending sequences,
  duplicates matched pairwise.

### `drillbook.numbers`

`binary_to_decimal`, `decimal_to_binary`, `is_even`, `fibonacci` (terms
`0, 1, 1, 2, ...` counted from 1), `is_prime`, `power`, `factorial`,
`n_choose_r`, `digit_product_minus_sum`, `hamming_weight` (set bits of the
number taken as an unsigned 32-bit value) and `is_power_of_two` (powers
`2**0` to `2**30`).

### `drillbook.cashier`

- `calculate(a, b, operation)` applies `+`, `-`, `*` or `/`. Division truncates
  toward zero and raises `ZeroDivisionError` for a zero divisor; any other
  operator raises `InvalidOperatorError`.
- `count_notes(amount)` returns a dict mapping note values 100, 50, 20 and 1
  to the fewest notes that make up the amount, leaving out zero counts.

### `drillbook.patterns`

Twenty-seven numbered patterns of stars, numbers and letters.
`available_patterns()` lists their numbers, `pattern_lines(number, rows)`
returns the lines and `render(number, rows)` returns them as text with a
newline after each line. An unknown pattern number raises `ValueError`.

### `drillbook.containers`

`LinearQueue`, `CircularQueue` and `Stack`, each with a `capacity` (default 5),
`len()`, iteration and an `items()` tuple. Adding to a full container raises
`ContainerFullError`; removing from or peeking into an empty one raises
`ContainerEmptyError`. A `LinearQueue` does not reuse the slots freed by
`dequeue` until it has emptied completely. A `CircularQueue` reuses them at once.
`Stack.items()` lists values from top to bottom.

## Example

```python
from drillbook.arrays import sorted_intersection
from drillbook.numbers import n_choose_r
from drillbook.patterns import render

sorted_intersection([1, 2, 2, 3], [2, 2, 4])   # [2, 2]
n_choose_r(5, 2)                               # 10
print(render(25, 4))                           # a number pyramid
```

## Commands

Draw a pattern, here pattern 25 with 4 rows, or list the pattern numbers:

```
drillbook-patterns 25 4
drillbook-patterns --list
```

Run the calculator or the banknote counter:

```
drillbook-cashier calc 7 2 /
drillbook-cashier notes 380
```

Pass `--help` to either command to see the options it accepts.