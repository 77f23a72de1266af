import math

import pytest

from algoteca.number_theory import gcd, lcm, mod_inverse, mod_pow, primes_up_to, sieve


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_primes_up_to_ten():
    assert primes_up_to(10) == [2, 3, 5, 7]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 50, 97, 1000])
def test_sieve_agrees_with_trial_division(n):
    flags = sieve(n)
    assert len(flags) == n + 1
    assert flags == [_is_prime(i) for i in range(n + 1)]


def test_primes_up_to_contains_only_primes_in_order():
    primes = primes_up_to(500)
    assert primes == sorted(primes)
    assert all(_is_prime(p) for p in primes)
    assert set(primes) == {i for i in range(501) if _is_prime(i)}


def test_sieve_rejects_negative():
    with pytest.raises(ValueError):
        sieve(-1)


@pytest.mark.parametrize(
    "base,exponent,mod",
    [(2, 10, 1000), (3, 200, 13), (7, 0, 11), (123456, 789, 1000003), (5, 1, 2), (10, 5, 1)],
)
def test_mod_pow_matches_builtin(base, exponent, mod):
    assert mod_pow(base, exponent, mod) == pow(base, exponent, mod)


def test_mod_pow_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        mod_pow(2, 3, 0)


@pytest.mark.parametrize("m", [2, 3, 5, 11, 13, 101, 1009])
def test_mod_inverse_property(m):
    for a in range(1, m):
        assert a * mod_inverse(a, m) % m == 1


def test_mod_inverse_without_inverse_raises():
    with pytest.raises(ValueError):
        mod_inverse(22, 11)


@pytest.mark.parametrize("a,b", [(48, 18), (18, 48), (17, 5), (0, 9), (9, 0), (100, 75), (1, 1)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(15, 20), (4, 6), (7, 13), (12, 12), (1, 99)])
def test_lcm_matches_math(a, b):
    assert lcm(a, b) == math.lcm(a, b)


def test_lcm_is_multiple_of_both():
    result = lcm(15, 20)
    assert result % 15 == 0 and result % 20 == 0


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)