"""Counting sequences: factorials, Catalan, derangements, Bell numbers and arithmetic progressions."""

from math import prod


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    _require_non_negative(n)
    return prod(range(2, n + 1))


def catalan(n: int) -> int:
    """Return the n-th Catalan number, (2n)! / ((n + 1)! n!)."""
    _require_non_negative(n)
    return factorial(2 * n) // (factorial(n + 1) * factorial(n))


def derangements(n: int) -> int:
    """Return the number of permutations of n elements with no fixed point."""
    _require_non_negative(n)
    if n == 0:
        return 1
    previous, current = 1, 0  # D(0), D(1)
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (previous + current)
    return current


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k); zero when k lies outside 0..n."""
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def bell_number(n: int) -> int:
    """Return the n-th Bell number: the number of partitions of an n-element set."""
    _require_non_negative(n)
    bell = [1]
    for i in range(1, n + 1):
        bell.append(sum(binomial(i - 1, j) * value for j, value in enumerate(bell)))
    return bell[n]


def nth_term(a1: int, d: int, n: int) -> int:
    """Return the n-th term of the arithmetic progression starting at a1 with step d."""
    return a1 + (n - 1) * d


def arithmetic_sum(a1: int, d: int, n: int) -> int:
    """Return the sum of the first n terms of an arithmetic progression."""
    return n * (2 * a1 + (n - 1) * d) // 2