"""Primes, modular arithmetic, greatest common divisors and least common multiples."""


def sieve(n: int) -> list[bool]:
    """Return a list whose i-th entry tells whether i is prime, for 0 <= i <= n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    is_prime = [True] * (n + 1)
    is_prime[0] = False
    if n >= 1:
        is_prime[1] = False
    p = 2
    while p * p <= n:
        if is_prime[p]:
            multiples = range(p * p, n + 1, p)
            is_prime[p * p :: p] = [False] * len(multiples)
        p += 1
    return is_prime


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than n, in increasing order."""
    return [number for number, prime in enumerate(sieve(n)) if prime]


def mod_pow(base: int, exponent: int, mod: int) -> int:
    """Return base**exponent modulo mod by repeated squaring."""
    result = 1
    base %= mod
    while exponent > 0:
        if exponent % 2 == 1:
            result = result * base % mod
        exponent //= 2
        base = base * base % mod
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of a and b by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of a and b."""
    return a * b // gcd(a, b)


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of a modulo a prime m, using Fermat's little theorem."""
    if abs(gcd(a, m)) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return mod_pow(a, m - 2, m)