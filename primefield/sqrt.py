"""Square-root providers for prime fields.

A provider is any callable ``provider(power, p, a) -> int`` where
``power(base, exponent)`` is exponentiation already bound to the modulus
*p*.  ``PrimeField`` binds a provider once at construction, so a different
modulus class only needs a new provider, not a change to the field.
"""

from __future__ import annotations

from typing import Callable, Dict, Protocol

PowerFn = Callable[[int, int], int]


class SqrtProvider(Protocol):
    def __call__(self, power: PowerFn, p: int, a: int) -> int: ...


class UnknownSqrtProviderError(KeyError):
    """Raised when a provider name is not registered."""


def sqrt_p3mod4(power: PowerFn, p: int, a: int) -> int:
    """Square root of *a* for p ≡ 3 (mod 4): ``a^((p+1)/4)``.

    Assumes p ≡ 3 (mod 4) and that *a* is a quadratic residue.  Neither is
    checked; on a non-residue the result is not a square root of *a*.
    """
    return power(a, (p + 1) >> 2)


SQRT_PROVIDERS: Dict[str, SqrtProvider] = {
    "p3mod4": sqrt_p3mod4,
}


def get_sqrt_provider(name: str) -> SqrtProvider:
    """Look up a registered provider by *name*."""
    try:
        return SQRT_PROVIDERS[name]
    except KeyError:
        raise UnknownSqrtProviderError(
            f"Unknown sqrt provider {name!r} (known: {sorted(SQRT_PROVIDERS)})"
        ) from None
