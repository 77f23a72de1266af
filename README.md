# algoteca

Classic algorithms in plain Python, with no third-party dependencies. Each
module gathers one family of problems and exposes plain functions that take
ordinary Python values (ints, strings, lists, nested lists) and return new ones.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algoteca.combinatorics` | `factorial`, `catalan`, `derangements`, `binomial`, `bell_number`, `nth_term`, `arithmetic_sum` |
| `algoteca.number_theory` | `sieve`, `primes_up_to`, `mod_pow`, `mod_inverse`, `gcd`, `lcm` |
| `algoteca.backtracking` | `permutations`, `knapsack`, `solve_n_queens`, `has_subset_sum`, `solve_sudoku`, `format_grid`, `NoSolutionError` |
| `algoteca.sorting` | `binary_search`, `counting_sort`, `quickselect`, `merge_sort`, `quicksort` |
| `algoteca.strings` | `edit_distance`, `prefix_function`, `kmp_search`, `rabin_karp`, `suffix_array` |
| `algoteca.exercises` | `flip_bits`, `justify`, `longest_valid_parentheses`, `look_and_say`, `look_and_say_sequence`, `max_evolutions`, `odd_divisor_sum`, `odd_divisor_sum_range`, `check_winner`, `is_valid_board`, `board_status`, `BoardStatus` |
| `algoteca.geometry` | `Point`, `Orientation`, `orientation`, `squared_distance`, `convex_hull`, `cross_product`, `dot_product`, `are_collinear`, `triangle_area` |
| `algoteca.graphs` | `bfs`, `dfs`, `dijkstra`, `floyd_warshall`, `kruskal`, `Edge`, `SpanningTree`, `INF` |
| `algoteca.games` | `tree_height`, `alpha_beta`, `evaluate`, `has_moves`, `minimax`, `best_move`, `format_board`, `PLAYER`, `OPPONENT`, `EMPTY` |
| `algoteca.dynamic` | `fibonacci`, `lcs_length`, `longest_palindrome`, `matrix_chain_order`, `knapsack`, `subset_sum` |

## Examples

### Counting and number theory

```python
from algoteca.combinatorics import catalan, derangements, bell_number
from algoteca.number_theory import gcd, lcm, mod_pow, mod_inverse, primes_up_to

catalan(5)            # 42
derangements(3)       # 2
bell_number(3)        # 5
gcd(48, 18)           # 6
lcm(15, 20)           # 60
mod_pow(2, 10, 1000)  # 24
mod_inverse(3, 11)    # 4  (m must be prime; ValueError if gcd(a, m) != 1)
primes_up_to(20)      # [2, 3, 5, 7, 11, 13, 17, 19]
```

Functions that need a non-negative `n` (`factorial`, `catalan`,
`derangements`, `bell_number`, `sieve`) raise `ValueError` otherwise.

### Backtracking

```python
from algoteca.backtracking import (
    NoSolutionError, format_grid, has_subset_sum, knapsack, permutations, solve_sudoku,
)

list(permutations("ABC"))   # ['ABC', 'ACB', 'BAC', 'BCA', 'CBA', 'CAB']
knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
has_subset_sum([3, 34, 4, 12, 5, 2], 9)     # True

puzzle = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]
try:
    print(format_grid(solve_sudoku(puzzle)))
except NoSolutionError:
    print("No solution exists")
```

`solve_n_queens(n)` returns an `n` x `n` board of 0s and 1s, and
`solve_sudoku` returns a solved copy of the grid; both raise
`NoSolutionError` when the search finds nothing.

### Searching, sorting and strings

```python
from algoteca.sorting import binary_search, quickselect, merge_sort
from algoteca.strings import edit_distance, kmp_search, rabin_karp, suffix_array

binary_search([1, 3, 5, 7, 9, 11], 7)       # 3  (-1 when absent)
quickselect([12, 3, 5, 7, 4, 19, 26], 1)    # 4  (k counts from 0)
merge_sort([38, 27, 43, 3, 9, 82, 10])      # [3, 9, 10, 27, 38, 43, 82]

edit_distance("kitten", "sitting")          # 3
kmp_search("abcaby", "abxabcabcaby")        # [6]
rabin_karp("GEEK", "GEEKS FOR GEEKS")       # [0, 10]
suffix_array("banana")                      # [5, 3, 1, 0, 4, 2]
```

`counting_sort` accepts only non-negative integers (`ValueError` otherwise);
`quickselect` raises `IndexError` when `k` is out of range; the pattern
searches raise `ValueError` for an empty pattern.

### Exercises

```python
from algoteca.exercises import (
    board_status, flip_bits, longest_valid_parentheses, look_and_say,
)

flip_bits(10, 6)                      # 8
longest_valid_parentheses(")()())")   # 4  (-1 when there is none)
look_and_say("1211")                  # '111221'
board_status([[1, 2, 1], [0, 1, 2], [0, 0, 1]])  # BoardStatus.X_WINS
```

`BoardStatus.code` gives the numeric answer for a state: -1 invalid, 0 draw,
1 for an X win or a game still in play, 2 for an O win.

### Geometry

```python
from algoteca.geometry import Point, convex_hull, triangle_area

triangle_area(Point(0, 0), Point(4, 0), Point(0, 3))  # 6.0
convex_hull([(0, 0), (2, 0), (1, 1), (2, 2), (0, 2)])
```

`convex_hull` uses Graham's scan, starts from the lowest point and needs at
least three points (`ValueError` otherwise).

### Graphs

```python
from algoteca.graphs import bfs, dijkstra, kruskal

ring = [[0] * 5 for _ in range(5)]
for u, v in [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]:
    ring[u][v] = 1
bfs(ring, 0)            # [0, 1, 2, 3, 4]

weights = [[0] * 5 for _ in range(5)]
weights[0][1], weights[1][2], weights[2][3], weights[3][4] = 10, 20, 30, 40
dijkstra(weights, 0)    # [0, 10, 30, 60, 100]

tree = kruskal(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
tree.total_weight       # 19
```

Graphs are adjacency matrices. In `dijkstra` a weight of 0 means no edge and
unreachable nodes get `math.inf`; `floyd_warshall` expects `math.inf` where
there is no edge and 0 on the diagonal, and returns a new matrix.

### Games

```python
from algoteca.games import alpha_beta, best_move

alpha_beta([3, 5, 6, 9, 1, 2, 0, -1])   # 5
best_move([[1, -1, 0], [0, 1, -1], [0, 0, 0]])   # (2, 2)
```

Tic-tac-toe boards use `PLAYER` (1), `OPPONENT` (-1) and `EMPTY` (0);
`best_move` returns `None` on a full board.

### Dynamic programming

```python
from algoteca.dynamic import (
    fibonacci, knapsack, lcs_length, longest_palindrome, matrix_chain_order, subset_sum,
)

fibonacci(10)                              # 55
lcs_length("ABCBDAB", "BDCAB")             # 4
longest_palindrome("babad")                # 'bab'
matrix_chain_order([1, 2, 3, 4])           # 18
knapsack(7, [1, 3, 4, 5], [1, 4, 5, 7])    # 9
subset_sum([3, 34, 4, 12, 5, 2], 9)        # True
```

## What it does not do

algoteca is a library only: it has no command-line programs and reads nothing
from standard input. Call its functions from your own Python code.