"""Game-tree search: alpha-beta over a leaf array and minimax for tic-tac-toe."""

from collections.abc import Sequence

PLAYER = 1
OPPONENT = -1
EMPTY = 0

_SIZE = 3
_TREE_LOW = -10000
_TREE_HIGH = 10000
_EVAL_MIN = -1000
_EVAL_MAX = 1000


def tree_height(n: int) -> int:
    """Return floor(log2(n)) for n >= 1, and 0 for smaller n."""
    height = 0
    while n > 1:
        n //= 2
        height += 1
    return height


def alpha_beta(values: Sequence[int]) -> int:
    """Return the optimal value of a binary game tree whose leaves are values.

    The root maximises and levels alternate; branches that cannot change the
    result are pruned.
    """
    leaves = list(values)
    if not leaves:
        raise ValueError("the game tree needs at least one leaf")
    height = tree_height(len(leaves))

    def search(depth: int, node: int, maximizing: bool, alpha: int, beta: int) -> int:
        if depth == height:
            return leaves[node]
        if maximizing:
            best = _TREE_LOW
            for child in (node * 2, node * 2 + 1):
                best = max(best, search(depth + 1, child, False, alpha, beta))
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
            return best
        best = _TREE_HIGH
        for child in (node * 2, node * 2 + 1):
            best = min(best, search(depth + 1, child, True, alpha, beta))
            beta = min(beta, best)
            if beta <= alpha:
                break
        return best

    return search(0, 0, True, _TREE_LOW, _TREE_HIGH)


def _copy_board(board: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in board]
    if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
        raise ValueError("tic-tac-toe board must be 3x3")
    return rows


def _winner(rows: list[list[int]]) -> int:
    lines = []
    for i in range(_SIZE):
        lines.append(rows[i])
        lines.append([row[i] for row in rows])
    lines.append([rows[i][i] for i in range(_SIZE)])
    lines.append([rows[i][_SIZE - 1 - i] for i in range(_SIZE)])
    for line in lines:
        if line[0] != EMPTY and line.count(line[0]) == _SIZE:
            return line[0]
    return 0


def evaluate(board: Sequence[Sequence[int]]) -> int:
    """Return 1 if the player (1) has three in a line, -1 if the opponent (-1) has, else 0."""
    return _winner(_copy_board(board))


def has_moves(board: Sequence[Sequence[int]]) -> bool:
    """Tell whether any cell is still empty."""
    return any(cell == EMPTY for row in _copy_board(board) for cell in row)


def _search(rows: list[list[int]], depth: int, maximizing: bool, alpha: int, beta: int) -> int:
    score = _winner(rows)
    if score == PLAYER:
        return score - depth
    if score == OPPONENT:
        return score + depth
    if not any(cell == EMPTY for row in rows for cell in row):
        return 0

    mark = PLAYER if maximizing else OPPONENT
    best = _EVAL_MIN if maximizing else _EVAL_MAX
    for row in rows:
        for col, cell in enumerate(row):
            if cell != EMPTY:
                continue
            row[col] = mark
            value = _search(rows, depth + 1, not maximizing, alpha, beta)
            row[col] = EMPTY
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)
            if beta <= alpha:
                return best
    return best


def minimax(
    board: Sequence[Sequence[int]], depth: int, maximizing: bool, alpha: int, beta: int
) -> int:
    """Score a tic-tac-toe position by minimax with alpha-beta pruning.

    The board is not modified.
    """
    return _search(_copy_board(board), depth, maximizing, alpha, beta)


def best_move(board: Sequence[Sequence[int]]) -> tuple[int, int] | None:
    """Return the (row, col) the player should take, or None when the board is full."""
    rows = _copy_board(board)
    best_value = _EVAL_MIN
    move: tuple[int, int] | None = None
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != EMPTY:
                continue
            row[j] = PLAYER
            value = _search(rows, 0, False, _EVAL_MIN, _EVAL_MAX)
            row[j] = EMPTY
            if value > best_value:
                move = (i, j)
                best_value = value
    return move


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render the board with X for the player, O for the opponent and . for empty cells."""
    symbols = {PLAYER: "X ", OPPONENT: "O "}
    return "".join(
        "".join(symbols.get(cell, ". ") for cell in row) + "\n" for row in _copy_board(board)
    )