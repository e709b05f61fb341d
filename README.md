# contestkit

Small algorithmic solutions to programming-contest exercises. Each exercise
is a plain function. It takes Python values and returns Python values, so the
functions are easy to combine and test.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `contestkit.patterns`

These functions draw ASCII pictures. Each returns a list of strings, one
string per row: `square`, `left_triangle`, `inverted_triangle`,
`right_triangle`, `alternating_right_triangle`, `striped_triangle`,
`concentric_squares`, `spiral_squares`, `ruler`, `banner` and
`christmas_tree`.

### `contestkit.text`

- `is_anagram(first, second)`: same characters with the same counts.
- `dreamer_score(line)`:
  - upper-case letters add their alphabet index;
  - lower-case letters subtract theirs;
  - digits add their value;
  - everything else is ignored.
- `is_palindrome(word)`
- `max_char_frequency(word)`: count of the most frequent character, `0` for
  an empty word.
- `subsequence_numbers(digits)`: every distinct number formed by a
  subsequence of the digits, with `0` included, largest first. Raises
  `ValueError` for a string that is not all digits.

### `contestkit.sorting`

- `sorted_ranges(values, queries)`: the sorted values of each inclusive
  0-based range `(l, r)`.
- `sort_values(values, descending)`
- `evens_then_odds(values)`: even values ascending, then odd values
  descending.
- `sort_words(words)`

### `contestkit.numbers`

- `chocolate_breaks(rows, cols)`
- `is_prime_magnitude(n)`: trial-division primality of `|n|`. It rejects `1`
  and accepts `0`.
- `alternating_range_sums(values, queries)`: for each 1-based inclusive range,
  the sum with alternating signs, starting positive.
- `snack_counts(prices, budgets)`: how many of the cheapest items each budget
  buys.
- `danger_counts(powers, queries)`: a position's danger is its power plus the
  powers of its two neighbours. For each inclusive range, the function counts
  the positions whose danger lies in it.

### `contestkit.graphs`

Edges are `(u, v, weight)` tuples.

- `cctv_cost(n, edges, halvings)`: weight of the minimum spanning tree grown
  from node 0. Before the total is taken, the heaviest edge is halved
  `halvings` times.
- `trap_distances(n, edges, start, target, queries)`: for each queried node,
  the length of the shortest directed walk from start to target that passes
  through it. Nodes are numbered 1 to n. The result is `None` when no such
  walk exists.
- `cheapest_portal(n, edges, portals)`: the cheapest cost of walking from
  node 0 to a `(node, fee)` portal and paying its fee. The result is `None`
  when no portal can be reached.

### `contestkit.grids`

- `project_sum(grid, moves)`: applies each `(row, col, direction)` move with
  direction `U`, `D`, `L` or `R`. Returns `(sum, bugs)`:
  - `sum` is the total of the cells landed on;
  - `bugs` is the number of moves that left the grid.
- `count_secret_paths(maze, limit)`: counts right/down paths through a maze
  given as a list of strings. Paths avoid `#` cells and pass at most `limit`
  `X` cells. The count is taken modulo `SECRET_MODULUS` (10000009).
- `dream_tode(grid, bombs, radius, queries)`: each queried cell's value less
  the number of bombs within Manhattan distance `radius`, never below zero.

### `contestkit.sequences`

- `bread_order(first, second)`: interleaves two orderings of `0..n-1`. New
  values go alternately to the front and to the back of the result.
- `max_danger(word, values, window)`: the best window score over an
  upper-case word, given a mapping of letter values.
- `run_stack(commands)`: runs `("push", value)` and pop commands. Returns the
  popped values. A pop from an empty stack gives `None`.

## Example

```python
from contestkit.text import is_anagram, is_palindrome
from contestkit.sorting import evens_then_odds
from contestkit.numbers import chocolate_breaks
from contestkit.patterns import left_triangle

is_anagram("listen", "silent")   # True
is_palindrome("racecar")         # True
evens_then_odds([3, 2, 1, 4])    # [2, 4, 3, 1]
chocolate_breaks(2, 3)           # 5
print("\n".join(left_triangle(3)))
```

## What it does not do

The package is a library only. It has no command-line program. It does not
read exercise input from standard input or print answers. Parsing input and
formatting output are left to the caller.