"""Dynamic programming: Fibonacci, LCS, Manacher, matrix chains, knapsack and subset sum."""

from collections.abc import Iterable, Sequence

_START = object()
_END = object()
_GAP = object()


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def lcs_length(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common subsequence of x and y."""
    previous = [0] * (len(y) + 1)
    for item_x in x:
        current = [0]
        for j, item_y in enumerate(y, start=1):
            if item_x == item_y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of s, by Manacher's algorithm.

    An empty string gives an empty result.
    """
    if not s:
        return ""
    transformed: list[object] = [_START]
    for char in s:
        transformed.append(_GAP)
        transformed.append(char)
    transformed.append(_GAP)
    transformed.append(_END)

    size = len(transformed)
    radius = [0] * size
    center = right = 0
    for i in range(1, size - 1):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while transformed[i + 1 + radius[i]] == transformed[i - 1 - radius[i]]:
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]

    best_length = 0
    best_center = 0
    for i in range(1, size - 1):
        if radius[i] > best_length:
            best_length, best_center = radius[i], i
    start = (best_center - best_length) // 2
    return s[start : start + best_length]


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply the chain.

    Matrix i has dims[i] rows and dims[i + 1] columns.
    """
    dims = list(dims)
    count = len(dims)
    if count == 0:
        raise ValueError("dims must not be empty")
    cost = [[0] * count for _ in range(count)]
    for span in range(2, count):
        for i in range(count - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k][j] + dims[i] * dims[k] * dims[j]
                for k in range(i + 1, j)
            )
    return cost[0][count - 1]


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total value of items whose weights fit within capacity."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        previous = best
        best = [
            max(previous[w], previous[w - weight] + value) if weight <= w else previous[w]
            for w in range(capacity + 1)
        ]
    return best[capacity]


def subset_sum(numbers: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the non-negative numbers adds up to target."""
    numbers = list(numbers)
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if any(number < 0 for number in numbers):
        raise ValueError("numbers must be non-negative")
    reachable = [True] + [False] * target
    for number in numbers:
        previous = reachable
        reachable = [
            previous[j] or (number <= j and previous[j - number]) for j in range(target + 1)
        ]
        reachable[0] = True
    return reachable[target]