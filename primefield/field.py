"""Prime-field arithmetic F_p.

Stateless functions parameterised by the modulus *p*.  Field elements are
plain Python ints; inputs need not be reduced, results are returned in
[0, p) except for ``additive_inverse`` (see its docstring).

*p* is assumed to be prime and is never checked.
"""

from __future__ import annotations

import logging
from typing import List, NoReturn, Tuple

logger = logging.getLogger(__name__)


class FieldError(ValueError):
    """Base class for precondition violations in field arithmetic."""


class InvalidInverseError(FieldError, ZeroDivisionError):
    """Raised when an operand has no multiplicative inverse mod p."""


class InvalidExponentError(FieldError):
    """Raised when ``power`` is given a negative exponent."""


def add(p: int, a: int, b: int) -> int:
    """Field addition."""
    return (a + b) % p


def subtract(p: int, a: int, b: int) -> int:
    """Field subtraction, expressed as addition of the additive inverse."""
    return add(p, a, additive_inverse(p, b))


def multiply(p: int, a: int, b: int) -> int:
    """Field multiplication."""
    return (a * b) % p


def additive_inverse(p: int, a: int) -> int:
    """Additive inverse ``p - a``, left unreduced.

    ``additive_inverse(p, 0)`` is ``p`` rather than 0.  ``add`` and
    ``subtract`` reduce the result, so the non-canonical value is only
    visible to direct callers.
    """
    return p - a


def reciprocal(p: int, a: int) -> int:
    """Multiplicative inverse of *a* mod *p*.

    Solves ``a * x = p * passes + 1`` directly instead of tracking Bézout
    coefficients.  With ``rate = p mod a``, an inverse *k* of *a* modulo
    *rate* makes ``passes = (k*a - 1) / rate`` exact, and then
    ``x = (p*passes + 1) / a`` is exact too.  *k* is found the same way one
    level down, on ``(rate, a mod rate)``, until ``a == 1`` or
    ``(a - 1) mod rate == 0`` (where ``k = 1`` works).

    The descent is unrolled into a loop so the depth is not bounded by the
    interpreter's recursion limit.  Every division is checked; an operand
    that is zero or shares a factor with *p* raises ``InvalidInverseError``.
    """
    reduced = a % p
    if reduced == 0:
        logger.debug("reciprocal: %d is zero mod %d", a, p)
        raise InvalidInverseError(f"Cannot invert {a} mod {p}: it is 0 in F_{p}")

    # (modulus, a, rate) for every level that still needs a k from below
    frames: List[Tuple[int, int, int]] = []
    modulus, value = p, reduced
    while value != 1:
        if value == 0:
            _reject_inverse(p, a)
        rate = modulus % value
        if rate == 0:
            _reject_inverse(p, a)
        frames.append((modulus, value, rate))
        if (value - 1) % rate == 0:
            break
        modulus, value = rate, value % rate

    k = 1
    for modulus, value, rate in reversed(frames):
        passes, rem = divmod(k * value - 1, rate)
        if rem:
            _reject_inverse(p, a)
        k, rem = divmod(modulus * passes + 1, value)
        if rem:
            _reject_inverse(p, a)
    return k


def _reject_inverse(p: int, a: int) -> NoReturn:
    logger.debug("reciprocal: %d is not invertible mod %d", a, p)
    raise InvalidInverseError(f"{a} has no inverse mod {p}")


def divide(p: int, a: int, b: int) -> int:
    """Field division ``a * b^-1``."""
    return multiply(p, a, reciprocal(p, b))


def power(p: int, b: int, e: int) -> int:
    """Compute ``b^e mod p`` by square-and-multiply."""
    if e < 0:
        logger.debug("power: negative exponent %d (p=%d)", e, p)
        raise InvalidExponentError(f"Exponent must be non-negative, got {e}")
    result = 1
    base = b % p
    while e > 0:
        if e & 1:
            result = (result * base) % p
        base = (base * base) % p
        e >>= 1
    return result % p


def qr(p: int, a: int) -> bool:
    """Euler's criterion: True iff *a* is a quadratic residue mod odd prime *p*."""
    return power(p, a, (p - 1) // 2) == 1
