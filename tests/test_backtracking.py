import itertools

import pytest

from algoteca.backtracking import (
    NoSolutionError,
    format_grid,
    has_subset_sum,
    knapsack,
    permutations,
    solve_n_queens,
    solve_sudoku,
)

PUZZLE = [
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


def _queens_do_not_attack(board):
    queens = [(r, c) for r, row in enumerate(board) for c, v in enumerate(row) if v]
    for (r1, c1), (r2, c2) in itertools.combinations(queens, 2):
        if r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_permutations_swap_order():
    assert list(permutations("ABC")) == ["ABC", "ACB", "BAC", "BCA", "CBA", "CAB"]


@pytest.mark.parametrize("text", ["A", "AB", "ABCD", "XYZWV"])
def test_permutations_cover_all_arrangements(text):
    result = list(permutations(text))
    expected = sorted("".join(p) for p in itertools.permutations(text))
    assert sorted(result) == expected


def test_permutations_of_empty_string_yield_nothing():
    assert list(permutations("")) == []


def test_knapsack_source_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


@pytest.mark.parametrize(
    "capacity,weights,values",
    [(7, [1, 3, 4, 5], [1, 4, 5, 7]), (10, [5, 4, 6, 3], [10, 40, 30, 50]), (0, [1], [5])],
)
def test_knapsack_matches_exhaustive_choice(capacity, weights, values):
    best = max(
        sum(values[i] for i in chosen)
        for size in range(len(weights) + 1)
        for chosen in itertools.combinations(range(len(weights)), size)
        if sum(weights[i] for i in chosen) <= capacity
    )
    assert knapsack(capacity, weights, values) == best


def test_knapsack_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solution_is_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    assert all(sum(row) == 1 for row in board)
    assert all(sum(board[r][c] for r in range(n)) == 1 for c in range(n))
    assert _queens_do_not_attack(board)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_without_solution(n):
    with pytest.raises(NoSolutionError):
        solve_n_queens(n)


def test_subset_sum_source_example():
    assert has_subset_sum([3, 34, 4, 12, 5, 2], 9) is True


def test_subset_sum_unreachable_target():
    assert has_subset_sum([3, 34, 4, 12, 5, 2], 30) is False


def test_subset_sum_zero_target_is_reachable():
    assert has_subset_sum([], 0) is True


def test_sudoku_solution_is_valid_and_keeps_givens():
    solved = solve_sudoku(PUZZLE)
    digits = list(range(1, 10))
    assert all(sorted(row) == digits for row in solved)
    assert all(sorted(col) == digits for col in zip(*solved))
    for top in (0, 3, 6):
        for left in (0, 3, 6):
            box = [solved[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
            assert sorted(box) == digits
    for row, solved_row in zip(PUZZLE, solved):
        for given, value in zip(row, solved_row):
            assert given == 0 or given == value


def test_sudoku_does_not_modify_input():
    original = [row[:] for row in PUZZLE]
    solve_sudoku(PUZZLE)
    assert PUZZLE == original


def test_sudoku_unsolvable_raises():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    with pytest.raises(NoSolutionError):
        solve_sudoku(grid)


def test_sudoku_rejects_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_format_grid_layout():
    assert format_grid([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_grid_round_trip():
    solved = solve_sudoku(PUZZLE)
    parsed = [[int(v) for v in line.split()] for line in format_grid(solved).splitlines()]
    assert parsed == solved