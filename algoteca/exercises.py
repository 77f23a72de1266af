"""Assorted exercises: bit flipping, text justification, parentheses, look-and-say, and more."""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from itertools import groupby

_EMPTY, _X, _O = 0, 1, 2


def flip_bits(x: int, y: int) -> int:
    """Clear in x every bit that is set in both x and y."""
    return x ^ (x & y)


def _spread(words: list[str], total_spaces: int) -> str:
    gaps = len(words) - 1
    if gaps < 0:
        return ""
    if gaps == 0:
        return words[0]
    per_gap, extra = divmod(total_spaces, gaps)
    parts: list[str] = []
    for position, word in enumerate(words):
        parts.append(word)
        if position < gaps:
            parts.append(" " * per_gap)
            if extra > 0:
                parts.append(" ")
                extra -= 1
    return "".join(parts)


def justify(words: Iterable[str], width: int) -> list[str]:
    """Break words into lines of at most width characters, spreading spaces to the left.

    The last line is left aligned with single spaces.
    """
    lines: list[str] = []
    current = ""
    line_words: list[str] = []
    for word in words:
        if len(current) + len(line_words) + len(word) > width:
            lines.append(_spread(line_words, width - len(current)))
            current = word
            line_words = [word]
        else:
            if current:
                current += " "
            current += word
            line_words.append(word)
    if current:
        lines.append(current)
    return lines


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-parenthesised substring, or -1 if there is none.

    Any character other than '(' counts as a closing parenthesis.
    """
    stack = [-1]
    longest = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if not stack:
            stack.append(index)
        else:
            longest = max(longest, index - stack[-1])
    return longest if longest > 0 else -1


def look_and_say(term: str) -> str:
    """Return the term that describes term: each run as its length followed by its digit."""
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))


def look_and_say_sequence(count: int) -> Iterator[str]:
    """Yield the look-and-say sequence from "1"; the first term is always yielded."""
    current = "1"
    yield current
    for _ in range(1, count):
        current = look_and_say(current)
        yield current


def max_evolutions(pokemon: int, candies: int, evolve_cost: int, sell_price: int) -> int:
    """Return how many pokemon can evolve, selling unevolved ones for candies when short."""
    if evolve_cost <= 0:
        raise ValueError(f"evolve_cost must be positive, got {evolve_cost}")
    evolutions = 0
    while pokemon > 0:
        if candies >= evolve_cost:
            evolvable = min(pokemon, candies // evolve_cost)
            evolutions += evolvable
            candies -= evolvable * evolve_cost
            pokemon -= evolvable
        elif sell_price == 0:
            break
        else:
            candies += sell_price
            pokemon -= 1
    return evolutions


def odd_divisor_sum(n: int) -> int:
    """Return the sum of the odd divisors of n."""
    return sum(i for i in range(1, n + 1, 2) if n % i == 0)


def odd_divisor_sum_range(start: int, end: int) -> int:
    """Return the sum of odd_divisor_sum(i) for every i from start to end inclusive."""
    return sum(odd_divisor_sum(i) for i in range(start, end + 1))


class BoardStatus(Enum):
    """State of a tic-tac-toe board."""

    INVALID = "invalid"
    DRAW = "draw"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    IN_PROGRESS = "in_progress"

    @property
    def code(self) -> int:
        """The numeric answer for this state: -1 invalid, 0 draw, 1 X or in play, 2 O."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    BoardStatus.INVALID: -1,
    BoardStatus.DRAW: 0,
    BoardStatus.X_WINS: 1,
    BoardStatus.O_WINS: 2,
    BoardStatus.IN_PROGRESS: 1,
}


def _rows(board: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in board]
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("tic-tac-toe board must be 3x3")
    return rows


def _lines(rows: list[list[int]]) -> Iterator[list[int]]:
    for i in range(3):
        yield rows[i]
        yield [row[i] for row in rows]
    yield [rows[i][i] for i in range(3)]
    yield [rows[i][2 - i] for i in range(3)]


def check_winner(board: Sequence[Sequence[int]]) -> int:
    """Return 1 if X (1) has three in a line, 2 if O (2) has, otherwise 0."""
    rows = _rows(board)
    for line in _lines(rows):
        first = line[0]
        if first in (_X, _O) and line.count(first) == 3:
            return first
    return 0


def is_valid_board(board: Sequence[Sequence[int]]) -> bool:
    """Tell whether X has made as many moves as O or exactly one more."""
    cells = [cell for row in _rows(board) for cell in row]
    x_count, o_count = cells.count(_X), cells.count(_O)
    return o_count <= x_count <= o_count + 1


def board_status(board: Sequence[Sequence[int]]) -> BoardStatus:
    """Classify a board of 0 (empty), 1 (X) and 2 (O) cells."""
    if not is_valid_board(board):
        return BoardStatus.INVALID
    winner = check_winner(board)
    if winner == _X:
        return BoardStatus.X_WINS
    if winner == _O:
        return BoardStatus.O_WINS
    if any(cell == _EMPTY for row in board for cell in row):
        return BoardStatus.IN_PROGRESS
    return BoardStatus.DRAW