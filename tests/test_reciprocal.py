"""Tests for the multiplicative inverse."""

import math

import pytest

from primefield import field
from primefield.config import KNOWN_MODULI, PRIME

P = 47


def test_reciprocal_of_five_mod_47():
    assert field.reciprocal(47, 5) == 19


def test_reciprocal_one():
    assert field.reciprocal(P, 1) == 1


def test_reciprocal_minus_one():
    assert field.reciprocal(P, P - 1) == P - 1


def test_reciprocal_needs_deeper_descent():
    # 7 * 27 = 189 = 4 * 47 + 1
    assert field.reciprocal(P, 7) == 27


@pytest.mark.parametrize("a", range(1, P))
def test_inverse_law(a):
    inv = field.reciprocal(P, a)
    assert 0 <= inv < P
    assert field.multiply(P, a, inv) == 1


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 101, 65537])
def test_inverse_law_small_primes(p):
    for a in range(1, min(p, 500)):
        assert field.multiply(p, a, field.reciprocal(p, a)) == 1


@pytest.mark.parametrize("name", sorted(KNOWN_MODULI))
def test_large_moduli_match_builtin(name):
    p = KNOWN_MODULI[name]
    for a in (2, 3, 12345, p // 3, p - 2):
        assert field.reciprocal(p, a) == pow(a, -1, p)


def test_non_canonical_operand():
    assert field.reciprocal(P, 5 + 3 * P) == 19
    assert field.reciprocal(P, -5) == P - 19


def test_inv_large_prime():
    a = 12345
    assert field.multiply(PRIME, a, field.reciprocal(PRIME, a)) == 1


def test_reciprocal_of_zero():
    with pytest.raises(field.InvalidInverseError, match="Cannot invert 0"):
        field.reciprocal(P, 0)


def test_reciprocal_of_multiple_of_p():
    with pytest.raises(field.InvalidInverseError):
        field.reciprocal(P, 2 * P)


def test_zero_is_zero_division():
    with pytest.raises(ZeroDivisionError):
        field.reciprocal(P, 0)


@pytest.mark.parametrize("p, a", [(9, 3), (10, 4), (12, 8), (15, 6), (21, 14)])
def test_non_coprime_composite(p, a):
    with pytest.raises(field.InvalidInverseError, match="no inverse"):
        field.reciprocal(p, a)


@pytest.mark.parametrize("p", [10, 12, 15, 91])
def test_composite_modulus_follows_gcd(p):
    for a in range(1, p):
        if math.gcd(a, p) == 1:
            assert (a * field.reciprocal(p, a)) % p == 1
        else:
            with pytest.raises(field.InvalidInverseError):
                field.reciprocal(p, a)


def test_error_names_caller_operand():
    with pytest.raises(field.InvalidInverseError, match="^-6 has no inverse mod 10$"):
        field.reciprocal(10, -6)
    with pytest.raises(field.InvalidInverseError, match="^Cannot invert 94 mod 47"):
        field.reciprocal(P, 2 * P)
