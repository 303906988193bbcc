# algonotes

A compact collection of classic algorithms and data structures, with a few
small console games besides. Everything is plain Python with no third-party
dependencies.

## Installation

```
pip install .
```

## What is inside

| Module                   | Contents |
|--------------------------|----------|
| `algonotes.numbers`      | `fibonacci_series`, `fib`, memoised `fibonacci`, `factorial`, `power`, `is_leap_year`, `is_prime`, `armstrong_numbers`, `reverse_digits`, `karatsuba`, `ComplexNumber` (supports `+`), and a four-function `calculate` |
| `algonotes.conversions`  | `binary_to_decimal`, `binary_to_octal`, `decimal_to_binary`, `decimal_to_octal`, `octal_to_decimal`, `octal_to_binary`, `number_to_words` (up to four digits), `roman_to_int`, `invert_color` |
| `algonotes.strings`      | `remove_vowels`, `count_vowels`, `sum_of_integers`, `frequency_sort`, `infix_to_postfix`, `is_scramble`, `lcs_length`, `shortest_common_supersequence_length` |
| `algonotes.searching`    | `binary_search`, `binary_search_recursive`, `linear_search`, `randomized_select`, `deterministic_select` |
| `algonotes.sorting`      | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `radix_sort` (non-negative integers) |
| `algonotes.arrays`       | `kadane`, `max_subarray_sum_or_zero`, `max_subarray_naive` and `max_subarray_divide_conquer` (returning a `Subarray`), `max_profit`, `push_zeroes_to_end`, `rotate`, `furthest_building`, `three_sum_closest`, `find_celebrity` |
| `algonotes.optimization` | `min_path_cost`, `rod_cutting`, `solve_n_queens` |
| `algonotes.matrices`     | `determinant`, `is_identity`, `saddle_point`, `spiral_order`, `transpose`, `floyd_warshall` and `format_distances` |
| `algonotes.strassen`     | `add_matrices`, `subtract_matrices`, `divide_and_conquer_multiply`, `strassen_multiply` (square sizes that are powers of two) |
| `algonotes.sparse`       | `SparseMatrix` with `from_dense`, `to_dense`, `transpose`, `+` and `@` |
| `algonotes.trees`        | `TreeNode`, `has_path_sum`, `is_balanced`, `BinarySearchTree`, `ThreadedBST`, `NaryNode`, `parse_level_order`, `are_identical` |
| `algonotes.linked`       | `LinkedQueue` and `CircularLinkedList` |
| `algonotes.automata`     | `DFA` over the alphabet `0`/`1`, with `run` and `accepts` |
| `algonotes.games`        | `SevenUpGame`, `Question` and `Quiz`, `NumberGuess`, and the `main` entry point |
| `algonotes.patterns`     | `butterfly` star pattern |

Functions raise `ValueError` for input they cannot handle (a negative
factorial, a non-binary string, an unknown operator, an empty matrix, and so
on); the containers in `algonotes.linked` raise `IndexError` when removing
from an empty list or queue.

## Examples

```python
from algonotes.conversions import binary_to_decimal, roman_to_int
from algonotes.numbers import is_leap_year
from algonotes.arrays import kadane
from algonotes.sorting import merge_sort

binary_to_decimal("1011")              # 11
roman_to_int("MCMXCIV")                # 1994
is_leap_year(1996)                     # True
kadane([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
merge_sort([5, 2, 9, 1])               # [1, 2, 5, 9]
```

Sparse matrices are built from dense rows and combine with the usual
operators:

```python
from algonotes.sparse import SparseMatrix

a = SparseMatrix.from_dense([[1, 0], [0, 2]])
b = SparseMatrix.from_dense([[0, 3], [4, 0]])

(a + b).to_dense()         # [[1, 3], [4, 2]]
(a @ b).to_dense()         # [[0, 3], [8, 0]]
a.transpose().to_dense()   # [[1, 0], [0, 2]]
```

A DFA is given its states, initial state, final states and a table of the
next state on `0` and on `1`:

```python
from algonotes.automata import DFA

dfa = DFA(["A", "B"], "A", ["B"], {"A": ("A", "B"), "B": ("A", "B")})
dfa.accepts("0101")   # True
```

## Games

The console games start from the command line; name the game to play:

```
algonotes-games sevenup
algonotes-games guess
algonotes-games quiz
```

`sevenup` and `guess` take `--seed N` to make the random numbers repeatable.

## Running the tests

```
pip install ".[test]"
pytest
```