"""Field handle: a modulus bound to the arithmetic in ``primefield.field``.

Usage::

    F = p3mod4(47)
    F.reciprocal(5)     # 19
    F.sqrt(2)           # 7 or 40
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Optional

from primefield import field
from primefield.sqrt import SqrtProvider, sqrt_p3mod4

logger = logging.getLogger(__name__)


class PrimeField:
    """F_p with a fixed modulus and an optional square-root provider.

    Every method forwards to the free function of the same name in
    ``primefield.field`` with ``p`` filled in.  The handle holds no other
    state and never changes after construction.
    """

    __slots__ = ("_p", "_sqrt_provider", "_sqrt")

    def __init__(self, p: int, sqrt_provider: Optional[SqrtProvider] = None) -> None:
        self._p = p
        self._sqrt_provider = sqrt_provider
        # provider closes over this field's power and modulus
        self._sqrt: Optional[Callable[[int], int]] = (
            partial(sqrt_provider, self.power, p) if sqrt_provider is not None else None
        )
        logger.debug(
            "PrimeField(p=%d) sqrt provider=%s",
            p,
            getattr(sqrt_provider, "__name__", sqrt_provider),
        )

    @property
    def p(self) -> int:
        return self._p

    @property
    def has_sqrt(self) -> bool:
        return self._sqrt is not None

    # ---- arithmetic ----

    def add(self, a: int, b: int) -> int:
        return field.add(self._p, a, b)

    def subtract(self, a: int, b: int) -> int:
        return field.subtract(self._p, a, b)

    def multiply(self, a: int, b: int) -> int:
        return field.multiply(self._p, a, b)

    def additive_inverse(self, a: int) -> int:
        return field.additive_inverse(self._p, a)

    def reciprocal(self, a: int) -> int:
        return field.reciprocal(self._p, a)

    def divide(self, a: int, b: int) -> int:
        return field.divide(self._p, a, b)

    def power(self, b: int, e: int) -> int:
        return field.power(self._p, b, e)

    def qr(self, a: int) -> bool:
        return field.qr(self._p, a)

    @property
    def sqrt(self) -> Callable[[int], int]:
        """Square root via the bound provider, as ``F.sqrt(a)``.

        Only present when a provider was given: without one, attribute
        access raises ``AttributeError`` and ``hasattr(F, "sqrt")`` is False.
        The provider's own preconditions apply (for ``sqrt_p3mod4``:
        p ≡ 3 mod 4 and *a* a residue); they are not checked here.
        """
        if self._sqrt is None:
            raise AttributeError(f"No sqrt provider bound to F_{self._p}")
        return self._sqrt

    # ---- value semantics ----

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_sqrt"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self._p == other._p and self._sqrt_provider is other._sqrt_provider

    def __hash__(self) -> int:
        return hash((self._p, id(self._sqrt_provider)))

    def __repr__(self) -> str:
        name = getattr(self._sqrt_provider, "__name__", None)
        return f"PrimeField(p={self._p}, sqrt_provider={name})"


def p3mod4(p: int) -> PrimeField:
    """F_p with the p ≡ 3 (mod 4) square root bound.

    *p* is expected to be ≡ 3 (mod 4) and ``sqrt`` to be called on
    quadratic residues only; the output is unspecified otherwise.
    """
    return PrimeField(p, sqrt_p3mod4)
