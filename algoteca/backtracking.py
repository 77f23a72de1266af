"""Backtracking searches: permutations, knapsack, N queens, subset sum and sudoku."""

from collections.abc import Iterable, Iterator, Sequence

_SUDOKU_SIZE = 9
_BOX = 3


class NoSolutionError(Exception):
    """Raised when a backtracking search exhausts every candidate."""


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of text, in swap order."""
    chars = list(text)
    last = len(chars) - 1

    def permute(left: int) -> Iterator[str]:
        if left == last:
            yield "".join(chars)
            return
        for i in range(left, len(chars)):
            chars[left], chars[i] = chars[i], chars[left]
            yield from permute(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if chars:
        yield from permute(0)


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total value that fits in capacity, trying every choice."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    def best(remaining: int, count: int) -> int:
        if count == 0 or remaining == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        if weight > remaining:
            return best(remaining, count - 1)
        return max(value + best(remaining - weight, count - 1), best(remaining, count - 1))

    return best(capacity, len(weights))


def solve_n_queens(n: int) -> list[list[int]]:
    """Place n non-attacking queens column by column; return the 0/1 board."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    board = [[0] * n for _ in range(n)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[row][:col]):
            return False
        upper = zip(range(row, -1, -1), range(col, -1, -1))
        if any(board[i][j] for i, j in upper):
            return False
        lower = zip(range(row, n), range(col, -1, -1))
        return not any(board[i][j] for i, j in lower)

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if is_safe(row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    if not place(0):
        raise NoSolutionError(f"no way to place {n} queens")
    return board


def has_subset_sum(numbers: Sequence[int], target: int) -> bool:
    """Tell whether some subset of numbers adds up to target."""
    numbers = list(numbers)

    def search(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0:
            return False
        last = numbers[count - 1]
        if last > remaining:
            return search(count - 1, remaining)
        return search(count - 1, remaining) or search(count - 1, remaining - last)

    return search(len(numbers), target)


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 sudoku grid where 0 marks an empty cell."""
    board = [list(row) for row in grid]
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("sudoku grid must be 9x9")

    def is_safe(row: int, col: int, num: int) -> bool:
        if num in board[row] or any(line[col] == num for line in board):
            return False
        top, left = row - row % _BOX, col - col % _BOX
        return all(
            board[r][c] != num
            for r in range(top, top + _BOX)
            for c in range(left, left + _BOX)
        )

    def fill(position: int) -> bool:
        if position == _SUDOKU_SIZE * _SUDOKU_SIZE:
            return True
        row, col = divmod(position, _SUDOKU_SIZE)
        if board[row][col] != 0:
            return fill(position + 1)
        for num in range(1, _SUDOKU_SIZE + 1):
            if is_safe(row, col, num):
                board[row][col] = num
                if fill(position + 1):
                    return True
        board[row][col] = 0
        return False

    if not fill(0):
        raise NoSolutionError("sudoku has no solution")
    return board


def format_grid(grid: Iterable[Iterable[int]]) -> str:
    """Render a grid one row per line, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)